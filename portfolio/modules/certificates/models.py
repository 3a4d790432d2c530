# Certificates are files under documents/certificates/ in the storage bucket.
# Title and description are kept in the object's user metadata; when absent the
# file name (without extension) is the title.

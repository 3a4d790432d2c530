# Supabase Storage bucket: Images (settings.storage_bucket)
# No tables. Folders are key prefixes; an empty folder is kept visible by a
# zero-byte ".folder-placeholder" object.

"""
Key layout:
- profile-images/<user_id>/<ts>-<rand>.<ext>  - profile pictures
- gallery/<category>/<ts>-<rand>.<ext>         - gallery images, one folder per category
- documents/<category>/<ts>_<filename>         - documents; documents/certificates/ holds certificates
- rootdocs/<folder>/...                        - public document browser; any folder named
                                                 "private" requires a signed-in user

Listing entries returned by storage.from_(bucket).list():
- files:   {name, id, metadata: {size, mimetype, ...}, user_metadata, created_at, updated_at}
- folders: {name, id: None, metadata: None}
"""

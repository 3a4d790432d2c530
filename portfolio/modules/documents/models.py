# Supabase table: documents
# Storage prefixes: documents/<category>/ and rootdocs/<folder>/ (see modules/storage/models.py)

"""
Expected Supabase table structure:
- id: serial (primary key)
- title: varchar(255) (not null)
- file: varchar(255) (not null) - bucket key or public URL
- description: text (nullable)
- order_index: integer (default: 0)
- created_at: timestamp (default: now())
- updated_at: timestamp (default: now())

Storage-backed documents are grouped into albums: files directly under
documents/ form the "Documents" album, every subfolder forms an album named
after the capitalized folder name.
"""

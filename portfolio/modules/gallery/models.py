# Gallery images live in the storage bucket under gallery/<category>/
# A category is a folder; files directly under gallery/ belong to "General".

"""
Expected Supabase table structure (gallery_items, kept for display metadata):
- id: serial (primary key)
- src: varchar(255) (not null)
- alt: varchar(255) (nullable)
- category: varchar(100) (nullable)
- order_index: integer (default: 0)
- created_at: timestamp (default: now())
- updated_at: timestamp (default: now())
"""

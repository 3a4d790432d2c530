# Supabase table: projects
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:
- id: serial (primary key)
- title: varchar(255) (not null)
- description: text (not null)
- image: varchar(255) (nullable) - bucket key or external URL
- link: varchar(255) (nullable)
- github: varchar(255) (nullable)
- stack: jsonb (nullable) - array of technologies; legacy rows may hold a JSON or comma separated string
- category: varchar(100) (nullable)
- order_index: integer (default: 0) - reassigned on every bulk save
- created_at: timestamp (default: now())
- updated_at: timestamp (default: now())
"""

# Supabase table: user_profiles
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:
- id: serial (primary key)
- user_id: integer (foreign key to users.id, on delete cascade, not null)
- name: varchar(255) (nullable) - display name, wins over users.name
- title: varchar(255) (nullable)
- about: text (nullable)
- location: varchar(100) (nullable)
- phone: varchar(20) (nullable)
- career_focus: varchar(255) (nullable)
- image: varchar(255) (nullable) - bucket key (profile-images/...) or external URL
- skills: jsonb (nullable) - array of strings; legacy rows may hold a JSON string
- created_at: timestamp (default: now())
- updated_at: timestamp (default: now())
"""

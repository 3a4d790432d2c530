# Supabase tables: skill_categories, skills, additional_skills
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

skill_categories
- id: serial (primary key)
- title: varchar(255) (not null)
- order_index: integer (default: 0)
- created_at, updated_at: timestamp (default: now())

skills
- id: serial (primary key)
- name: varchar(100) (not null)
- level: integer (not null) - 0..100
- category_id: integer (foreign key to skill_categories.id, on delete cascade)
- order_index: integer (default: 0) - position within the category
- created_at, updated_at: timestamp (default: now())

additional_skills
- id: serial (primary key)
- name: varchar(100) (not null)
- order_index: integer (default: 0)
- created_at, updated_at: timestamp (default: now())
"""

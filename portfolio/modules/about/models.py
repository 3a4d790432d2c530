# Supabase tables: education, experience, certifications
# The about page also reads user_profiles (see modules/home/models.py)

"""
Expected Supabase table structure:

education
- id: serial (primary key)
- school: varchar(255) (not null)
- degree: varchar(255) (not null)
- period: varchar(50) (nullable)
- description: text (nullable)
- order_index: integer (default: 0)
- created_at, updated_at: timestamp (default: now())

experience
- id: serial (primary key)
- title: varchar(255) (not null)
- company: varchar(255) (nullable)
- period: varchar(50) (nullable)
- description: text (nullable)
- order_index: integer (default: 0)
- created_at, updated_at: timestamp (default: now())

certifications
- id: serial (primary key)
- title: varchar(255) (not null)
- description: text (nullable)
- order_index: integer (default: 0)
- created_at, updated_at: timestamp (default: now())
"""

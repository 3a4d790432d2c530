# Supabase table: users
# Documented in modules/auth/models.py; this module manages the rows for admins.

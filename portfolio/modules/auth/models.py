# Supabase Auth
# Credentials, sessions and JWT issuing are owned by Supabase Auth (auth.users).
# The site-level account (name, role) lives in the public users table,
# linked to the auth user by email and auth_id.

"""
Supabase Auth provides:
- auth.sign_in_with_password() - Authenticate users
- auth.get_user() - Resolve the current user from a JWT
- auth.sign_out() - Logout
- auth.admin.update_user_by_id() - Change email/password/metadata (service role key)
- auth.admin.create_user() - Used by the create_admin_user script

Expected Supabase table structure (public.users):
- id: serial (primary key)
- auth_id: uuid (nullable) - auth.users.id
- name: text (nullable)
- email: text (unique, not null)
- role: text (admin | manager | user | viewer, default: 'user')
- email_verified: timestamp (nullable)
- image: text (nullable)
- created_at: timestamp (default: now())
- updated_at: timestamp (default: now())
"""

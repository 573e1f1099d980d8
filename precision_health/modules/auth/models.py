"""
Accounts live in Supabase Auth (auth.users); this module owns no table.

Calls used by AuthService:
- auth.sign_up() on register, with full_name / species_type / pet_species
  copied into user_metadata
- auth.sign_in_with_password() on login, returning the session access token
- auth.get_user(jwt=...) to resolve bearer tokens
- auth.sign_out() on logout
- auth.admin.update_user_by_id() to set app_metadata (service-role key)

Registration also writes public.profiles with the same id as the auth user
(see modules/profiles/models.py). app_metadata.type == "super_user" marks a
catalog administrator; users cannot edit app_metadata themselves.
"""

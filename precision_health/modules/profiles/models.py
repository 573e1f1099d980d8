# Supabase tables: profiles, auth.users
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py
# Authentication is handled by Supabase Auth (auth.users table)

"""
Expected Supabase table structure:

profiles:
- id: uuid (primary key, references auth.users.id ON DELETE CASCADE)
- full_name: text (not null)
- date_of_birth: date (nullable)
- species_type: text (not null, default: 'human') - values: human, pet
- pet_species: text (nullable) - dog, cat
- pet_breed: text (nullable)
- weight_kg: decimal (nullable)
- height_cm: decimal (nullable)
- biological_sex: text (nullable)
- created_at: timestamptz (default: now())
- updated_at: timestamptz (default: now())

RLS: users can select/insert/update only the row where auth.uid() = id.
"""

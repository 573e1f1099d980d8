# Supabase table: food_lookup_history
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

food_lookup_history:
- id: uuid (primary key)
- profile_id: uuid (foreign key to profiles.id, not null)
- food_name: text (not null) - what the user typed
- lookup_date: timestamptz (default: now())
- safety_classification: text (not null) - values: safe, caution, avoid
- rationale: text (nullable)
- ingredients_identified: jsonb (default: []) - names of matched catalog ingredients
"""

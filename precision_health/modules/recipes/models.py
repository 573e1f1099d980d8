# Supabase tables: recipes, user_recipes
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

recipes (global catalog):
- id: uuid (primary key)
- name: text (not null)
- description: text (nullable)
- species_type: text (not null) - values: human, dog, cat
- ingredients: jsonb (not null) - [{"ingredient": "Salmon", "quantity": 6, "unit": "oz"}]
- instructions: text (not null)
- prep_time_minutes: integer
- cook_time_minutes: integer
- servings: integer (default: 1)
- difficulty_level: text - values: easy, medium, hard
- nutritional_breakdown: jsonb
- condition_tags: jsonb (default: [])
- cultural_tags: jsonb (default: [])
- dietary_tags: jsonb (default: [])
- created_at: timestamptz (default: now())

user_recipes:
- id: uuid (primary key)
- profile_id: uuid (foreign key to profiles.id)
- recipe_id: uuid (foreign key to recipes.id)
- is_favorite: boolean (default: false)
- adherence_score: decimal (nullable)
- tried: boolean (default: false)
- rating: integer (nullable, 1-5)
- notes: text (nullable)
- created_at: timestamptz (default: now())
- UNIQUE(profile_id, recipe_id)
"""

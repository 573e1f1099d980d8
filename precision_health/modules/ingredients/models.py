# Supabase tables: ingredients, ingredient_contraindications, ingredient_substitutions
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

ingredients (global catalog, readable by any authenticated user):
- id: uuid (primary key)
- name: text (unique, not null)
- category: text (not null)
- nutritional_data: jsonb (default: {})
- species_safe: jsonb (default: {}) - e.g. {"human": true, "dog": false, "cat": false}
- toxicity_warnings: jsonb (default: []) - e.g. [{"species": ["dog", "cat"], "compound": "thiosulfate", "effect": "..."}]
- created_at: timestamptz (default: now())

ingredient_contraindications:
- id: uuid (primary key)
- ingredient_id: uuid (foreign key to ingredients.id)
- condition_name: text (not null)
- contraindication_type: text (not null) - values: avoid, caution, limit
- rationale: text (nullable)
- max_daily_amount: decimal (nullable)
- species_type: text (not null) - human, dog, cat

ingredient_substitutions:
- id: uuid (primary key)
- original_ingredient_id: uuid (foreign key to ingredients.id)
- substitute_ingredient_id: uuid (foreign key to ingredients.id)
- substitution_ratio: decimal (default: 1.0)
- notes: text (nullable)
"""

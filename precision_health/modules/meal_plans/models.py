# Supabase table: weekly_meal_plans
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

weekly_meal_plans:
- id: uuid (primary key)
- profile_id: uuid (foreign key to profiles.id)
- plan_name: text (not null)
- start_date: date (not null)
- end_date: date (not null)
- meals_by_day: jsonb (not null) - {"monday": [{"recipe_id": "...", "meal": "breakfast"}], ...}
- nutritional_targets: jsonb (default: {})
- adherence_optimization_enabled: boolean (default: true)
- status: text (default: 'active') - values: active, completed, archived
- created_at: timestamptz (default: now())
"""

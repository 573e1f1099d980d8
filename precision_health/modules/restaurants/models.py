# Supabase tables: restaurants, dishes, dish_risk_assessments, restaurant_orders
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

restaurants (global catalog):
- id: uuid (primary key)
- name: text (not null)
- cuisine_type: text (nullable)
- delivery_platform: text (not null) - e.g. deliveroo, uber_eats, just_eat
- location: text
- rating: decimal (default: 0)
- delivery_time_minutes: integer
- minimum_order: decimal
- delivery_fee: decimal
- is_clinical_partner: boolean (default: false)
- metadata: jsonb (default: {})
- created_at: timestamptz

dishes (global catalog):
- id: uuid (primary key)
- restaurant_id: uuid (foreign key to restaurants.id)
- name: text (not null)
- description: text
- ingredients: jsonb (default: []) - ingredient names, e.g. ["Salmon", "Quinoa"]
- allergens: jsonb (default: [])
- nutritional_info: jsonb
- price: decimal (not null)
- category: text
- cuisine_tags: jsonb
- image_url: text
- available: boolean (default: true)
- created_at: timestamptz

dish_risk_assessments:
- id: uuid (primary key)
- profile_id: uuid (foreign key to profiles.id)
- dish_id: uuid (foreign key to dishes.id)
- risk_classification: text (not null) - values: safe, beneficial, neutral, caution, avoid
- risk_score: decimal (0-100)
- rationale: text
- contraindications: jsonb - [{"ingredient", "reason", "severity"}]
- recommended_substitutions: jsonb - substitute ingredient names
- assessed_at: timestamptz
- UNIQUE(profile_id, dish_id)

restaurant_orders:
- id: uuid (primary key)
- profile_id: uuid (foreign key to profiles.id)
- restaurant_id: uuid (foreign key to restaurants.id)
- dishes: jsonb (not null) - [{"dish_id", "name", "price"}]
- total_cost: decimal
- delivery_platform: text
- order_status: text (default: 'pending') - values: pending, confirmed, preparing, delivered, cancelled
- delivery_time: timestamptz
- special_instructions: text
- safety_verified: boolean (default: false)
- created_at: timestamptz
"""

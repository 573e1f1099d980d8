# Supabase tables: grocery_stores, grocery_products, smart_shopping_lists
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

grocery_stores (global catalog):
- id: uuid (primary key)
- name: text (unique, not null)
- region: text (default: 'UK')
- delivery_available: boolean (default: true)
- api_available: boolean (default: false)
- checkout_integration_type: text - values: api, deeplink, manual
- logo_url: text
- created_at: timestamptz

grocery_products (global catalog):
- id: uuid (primary key)
- store_id: uuid (foreign key to grocery_stores.id)
- sku: text (not null) - UNIQUE(store_id, sku)
- name: text (not null)
- brand: text
- category: text
- ingredients: jsonb
- nutritional_info: jsonb
- price: decimal (not null)
- unit: text
- in_stock: boolean (default: true)
- image_url: text
- product_url: text
- last_updated: timestamptz

smart_shopping_lists:
- id: uuid (primary key)
- profile_id: uuid (foreign key to profiles.id)
- name: text (not null)
- store_id: uuid (nullable, foreign key to grocery_stores.id)
- source_meal_plan_id: uuid (nullable, foreign key to weekly_meal_plans.id)
- items: jsonb (not null) - [{"product_id", "product_name", "quantity", "unit", "price", "store_id", "checked"}]
- total_cost: decimal (default: 0)
- list_type: text (default: 'weekly') - values: weekly, monthly, budget, organic, quick
- status: text (default: 'draft') - values: draft, ready, ordered, delivered
- checkout_url: text
- created_at: timestamptz
- ordered_at: timestamptz
"""

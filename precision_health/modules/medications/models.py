# Supabase tables: medications, user_medications, medication_doses,
# medication_interactions, user_interaction_alerts
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

medications (global catalog):
- id: uuid (primary key)
- name: text (not null)
- generic_name: text
- brand_names: jsonb (default: [])
- medication_class: text
- species: text (default: 'human') - values: human, dog, cat, all
- common_dosages: jsonb
- administration_routes: jsonb
- contraindications: jsonb
- side_effects: jsonb
- toxicity_warnings: jsonb
- requires_prescription: boolean (default: true)
- created_at: timestamptz

user_medications:
- id: uuid (primary key)
- profile_id: uuid (foreign key to profiles.id)
- medication_id: uuid (nullable, foreign key to medications.id)
- medication_name: text (not null)
- dosage: text (not null) - e.g. "50mcg"
- dosage_amount: decimal
- dosage_unit: text
- frequency: text (not null) - e.g. "once daily"
- schedule_times: jsonb (default: []) - ["08:00", "20:00"]
- start_date: date (not null)
- end_date: date (nullable)
- prescribing_provider: text
- reason: text
- special_instructions: text
- active: boolean (default: true)
- recognition_data: jsonb
- created_at: timestamptz

medication_doses:
- id: uuid (primary key)
- user_medication_id: uuid (foreign key to user_medications.id)
- profile_id: uuid (foreign key to profiles.id)
- scheduled_time: timestamptz (not null)
- taken_time: timestamptz (nullable)
- status: text (default: 'scheduled') - values: scheduled, taken, missed, skipped
- missed_reason: text
- reminder_sent: boolean (default: false)
- created_at: timestamptz

medication_interactions (global catalog):
- id: uuid (primary key)
- interaction_type: text (not null) - values: drug_drug, drug_food, drug_supplement
- medication_id_1: uuid (foreign key to medications.id)
- medication_id_2: uuid (nullable, foreign key to medications.id) - drug_drug only
- interacting_substance: text (nullable) - food or supplement name
- severity: text (not null) - values: minor, moderate, major, severe
- effect: text (not null)
- mechanism: text
- recommendation: text (not null)
- species_specific: jsonb
- source_references: jsonb

user_interaction_alerts:
- id: uuid (primary key)
- profile_id: uuid (foreign key to profiles.id)
- interaction_id: uuid (foreign key to medication_interactions.id)
- user_medication_ids: jsonb (not null)
- alert_type: text (not null) - the interaction_type
- severity: text (not null)
- message: text (not null)
- recommendation: text (not null)
- acknowledged: boolean (default: false)
- dismissed: boolean (default: false)
- created_at: timestamptz
- acknowledged_at: timestamptz
"""

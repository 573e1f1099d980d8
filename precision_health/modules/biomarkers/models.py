# Supabase tables: biomarker_records, health_conditions
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

biomarker_records:
- id: uuid (primary key)
- profile_id: uuid (foreign key to profiles.id, not null)
- test_date: date (not null)
- source_type: text (not null, default: 'manual') - values: pdf, photo, manual, integration
- raw_data: jsonb (nullable) - original parsed data
- processed_data: jsonb (nullable) - structured biomarkers
- risk_level: text (default: 'normal') - values: normal, caution, urgent
- flagged_markers: jsonb (default: []) - concerning markers
- created_at: timestamptz (default: now())

health_conditions:
- id: uuid (primary key)
- profile_id: uuid (foreign key to profiles.id, not null)
- condition_name: text (not null)
- condition_type: text (not null, default: 'risk') - values: diagnosed, suspected, risk
- probability_score: decimal (nullable)
- identified_from: text (not null) - values: biomarkers, symptoms, user_reported
- active: boolean (default: true)
- notes: text (nullable)
- created_at: timestamptz (default: now())

RLS on both: rows visible/writable only when profile_id = auth.uid().
"""

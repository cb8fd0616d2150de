# Supabase table: user_settings
# This file documents the expected database schema

"""
Expected Supabase table structure:

user_settings:
- id: uuid (primary key, default: gen_random_uuid())
- user_id: uuid (not null, references profiles.id)
- name: text (not null)
- value: text (not null)
- created_at: timestamp (default: now())
- updated_at: timestamp (default: now())

Unique constraint on (user_id, name); writes upsert on that pair so the
latest value wins.
"""

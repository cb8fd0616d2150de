# Supabase table: chat_ids

"""
Expected Supabase table structure:

chat_ids:
- id: uuid (primary key, default: gen_random_uuid())
- user_id: uuid (not null, references profiles.id)
- chat_id: text (not null)
- created_at: timestamp (default: now())

Append-only links; (user_id, chat_id) is not unique, so linking the same
chat twice stores two rows.
"""

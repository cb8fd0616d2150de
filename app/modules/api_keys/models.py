# Supabase table: api_keys

"""
Expected Supabase table structure:

api_keys:
- id: uuid (primary key, default: gen_random_uuid())
- user_id: uuid (not null, references profiles.id)
- provider: text (not null) - e.g. "openai", "anthropic", "github"
- key_ciphertext: text (not null) - Fernet token, never plaintext
- created_at: timestamp (default: now())
- updated_at: timestamp (default: now())

Unique constraint on (user_id, provider); writes upsert on that pair.
"""

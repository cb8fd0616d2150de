# Supabase Auth
# This module uses Supabase's built-in authentication system
# No custom tables are required - Supabase Auth handles:
# - User registration (auth.users table)
# - Email/password login and session issuance
# - JWT token generation and validation

"""
Supabase Auth provides:
- auth.sign_up() - Register new users (user_metadata via options.data)
- auth.sign_in_with_password() - Authenticate users
- auth.get_user() - Get current user from JWT token

The application-side profile row lives in the profiles table
(app/modules/profiles) and is created right after a successful sign up.
"""

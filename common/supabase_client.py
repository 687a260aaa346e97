from supabase import Client, create_client

from common.config import SUPABASE_KEY, SUPABASE_URL


def get_client() -> Client:
    supabase: Client = create_client(SUPABASE_URL, SUPABASE_KEY)
    return supabase


def is_configured() -> bool:
    return bool(SUPABASE_URL and SUPABASE_KEY)

import os

from dotenv import load_dotenv

load_dotenv()

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

OXFORD_APP_ID = os.getenv("OXFORD_APP_ID")
OXFORD_APP_KEY = os.getenv("OXFORD_APP_KEY")
WORDS_API_KEY = os.getenv("WORDS_API_KEY")
WORDNIK_API_KEY = os.getenv("WORDNIK_API_KEY")

DEEPL_AUTH_KEY = os.getenv("DEEPL_AUTH_KEY")

SUPABASE_URL = os.getenv("SUPABASE_URL")
SUPABASE_KEY = os.getenv("SUPABASE_KEY")

# Values shipped in .env.example; treated as "not configured".
PLACEHOLDER_CREDENTIALS = {
    "your-oxford-app-id",
    "your-oxford-app-key",
    "your-words-api-key",
    "your-wordnik-api-key",
}


def is_credential_set(value: str | None) -> bool:
    """
    A credential counts only if it is non-empty and not a placeholder.
    """
    if not value or not value.strip():
        return False
    return value.strip() not in PLACEHOLDER_CREDENTIALS

# Supabase Tables
TABLE_EXAMPLE_CACHE = "example_cache"

# Cache
CACHE_KEY_PREFIX = "sentence_cache"
CACHE_TTL_SECONDS = 24 * 60 * 60
CACHE_MAX_RAW_RESULTS = 10

# Rate limiting
RATE_LIMIT_BACKOFF_SECONDS = 60 * 60
WORDS_API_MONTHLY_LIMIT = 2500

# Provider timeouts (seconds)
FREE_PROVIDER_TIMEOUT = 5.0
PAID_PROVIDER_TIMEOUT = 8.0

# Provider ids
PROVIDER_OXFORD = "Oxford"
PROVIDER_WORDS_API = "WordsAPI"
PROVIDER_TATOEBA = "Tatoeba"
PROVIDER_FREE_DICTIONARY = "FreeDictionary"
PROVIDER_WORDNIK = "Wordnik"

# Paid/curated first, community next, dictionary-derived last
SOURCE_WEIGHTS = {
    PROVIDER_OXFORD: 20,
    PROVIDER_WORDS_API: 18,
    PROVIDER_TATOEBA: 15,
    PROVIDER_FREE_DICTIONARY: 12,
    PROVIDER_WORDNIK: 8,
}

# Result sources that are not providers
SOURCE_TEMPLATE_PREFIX = "template"

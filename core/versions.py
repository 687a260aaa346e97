APP_VERSION = "0.1.0"
FILTER_VERSION = "2025-06.f1"
TEMPLATE_VERSION = "0.1.0"
CACHE_VERSION = "v1"
TRANSLATION_ENGINE_VERSION = "DEEPL:2025-09"


# =============================================================================
# Version Catalog
# =============================================================================
# Name                       | Meaning                               | Changes when…                                  | Used to invalidate / where it matters
# -------------------------- | ------------------------------------- | ---------------------------------------------- | --------------------------------------
# APP_VERSION                | overall app/package version           | you ship a release                             | /health endpoint, logs (visibility only)
# FILTER_VERSION             | filter thresholds + scoring weights   | any quality stage or source weight changes     | logs, /health (explains different picks)
# TEMPLATE_VERSION           | fallback template pools               | templates are added/removed/reworded           | /health
# CACHE_VERSION              | raw provider payload parsing          | an adapter extracts sentences differently      | part of every cache key; forces refetch
# TRANSLATION_ENGINE_VERSION | external MT engine config             | provider/model/settings change                 | logs
# =============================================================================
# Bumping heuristics:
#   - Change a filter stage, cue list or source weight  → bump FILTER_VERSION
#   - Change a template pool                            → bump TEMPLATE_VERSION
#   - Change what an adapter stores in the cache        → bump CACHE_VERSION
# =============================================================================

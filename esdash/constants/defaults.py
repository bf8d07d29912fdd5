"""Default values for settings.

All default values used in the AppSettings model.
"""

from typing import Final

# ============================================================================
# Cluster defaults
# ============================================================================

BASE_URL_DEFAULT: Final = "http://localhost:9200"
BASE_URL_ENV_VAR: Final = "ES_URL"

# ============================================================================
# Refresh defaults
# ============================================================================

REFRESH_INTERVAL_DEFAULT: Final = 10.0
PAGE_SIZE_DEFAULT: Final = 5
AUTO_LOAD_ON_SELECT_DEFAULT: Final = True
FETCH_WORKERS_DEFAULT: Final = 4

__all__ = [
    "AUTO_LOAD_ON_SELECT_DEFAULT",
    "BASE_URL_DEFAULT",
    "BASE_URL_ENV_VAR",
    "FETCH_WORKERS_DEFAULT",
    "PAGE_SIZE_DEFAULT",
    "REFRESH_INTERVAL_DEFAULT",
]

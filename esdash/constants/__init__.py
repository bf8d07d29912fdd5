"""Constants module for esdash.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants (strings with Final)
- timeouts.py: Timeout values (seconds)
- limits.py: Limit values (max/min)
- defaults.py: Default values for settings

Note: Keyboard mappings are defined in esdash.keyboard.
"""

from esdash.constants.defaults import (
    AUTO_LOAD_ON_SELECT_DEFAULT,
    BASE_URL_DEFAULT,
    BASE_URL_ENV_VAR,
    FETCH_WORKERS_DEFAULT,
    PAGE_SIZE_DEFAULT,
    REFRESH_INTERVAL_DEFAULT,
)
from esdash.constants.enums import (
    ClusterStatus,
    DocViewMode,
    FetchErrorKind,
    Focus,
    InputMode,
    ResourceKind,
)
from esdash.constants.limits import (
    DOC_PREVIEW_MAX_CHARS,
    PAGE_SIZE_MAX,
    PAGE_SIZE_MIN,
    REFRESH_INTERVAL_MIN,
)
from esdash.constants.timeouts import (
    REQUEST_TIMEOUT,
    STATUS_REDRAW_INTERVAL,
)
from esdash.constants.values import (
    APP_TITLE,
    PLACEHOLDER_EMPTY,
    STATUS_NEVER,
    STATUS_STYLES,
)

__all__ = [
    # Application
    "APP_TITLE",
    # Defaults
    "AUTO_LOAD_ON_SELECT_DEFAULT",
    "BASE_URL_DEFAULT",
    "BASE_URL_ENV_VAR",
    # Limits
    "DOC_PREVIEW_MAX_CHARS",
    "FETCH_WORKERS_DEFAULT",
    "PAGE_SIZE_DEFAULT",
    "PAGE_SIZE_MAX",
    "PAGE_SIZE_MIN",
    "PLACEHOLDER_EMPTY",
    "REFRESH_INTERVAL_DEFAULT",
    "REFRESH_INTERVAL_MIN",
    # Timeouts
    "REQUEST_TIMEOUT",
    "STATUS_NEVER",
    "STATUS_REDRAW_INTERVAL",
    "STATUS_STYLES",
    # Enums
    "ClusterStatus",
    "DocViewMode",
    "FetchErrorKind",
    "Focus",
    "InputMode",
    "ResourceKind",
]

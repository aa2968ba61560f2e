"""Settings for the WCIF codecs.

Parsing and results table behaviour is controlled by the module-level
constants below. Toggles keep their defaults unless an environment
variable overrides them; a `.env` file found from the working directory
upwards is loaded into the environment first.
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off"})


def _env_int(key: str, default: int) -> int:
    raw = os.getenv(key)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_bool(key: str, default: bool) -> bool:
    raw = os.getenv(key)
    if raw is None:
        return default
    flag = raw.strip().lower()
    if flag in _TRUTHY:
        return True
    if flag in _FALSY:
        return False
    return default


load_dotenv()

# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------
# Log a warning whenever an unknown unofficial activity keyword or staff role
# is accepted through the deprecated passthrough variants.
WARN_ON_PASSTHROUGH = _env_bool("WCIF_WARN_ON_PASSTHROUGH", True)


# ---------------------------------------------------------------------------
# Results table
# ---------------------------------------------------------------------------
# Number of attempt columns always present in the results table, even when
# every result has fewer attempts. 0 sizes the table from the data only.
RESULTS_TABLE_MIN_ATTEMPT_COLUMNS = _env_int("WCIF_RESULTS_MIN_ATTEMPT_COLUMNS", 0)

# Keep results tables in a fixed column order.
RESULTS_TABLE_ENFORCE_COLUMN_ORDER = True
RESULTS_TABLE_COLUMN_ORDER = [
    "Rank",
    "Person ID",
    "Best",
    "Average",
]

"""Environment-backed settings for Caltime.

Values are read once at import time. Override them by setting the
environment variable before importing caltime, or by assigning the module
attribute directly in tests.
"""

from __future__ import annotations

import os

# IANA name used by measure_spans when no timezone is passed.
# Unset means the process's local zone.
DEFAULT_TIMEZONE: str | None = os.environ.get("CALTIME_DEFAULT_TZ") or None

__all__ = ["DEFAULT_TIMEZONE"]

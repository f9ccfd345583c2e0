"""Internal implementation details for Caltime.

This package contains helpers that are not part of the public API:
    - constants: Millisecond conversion factors and instant limits
    - validation: Argument validation helpers
    - calendar: Nth-weekday-of-month arithmetic
"""

from __future__ import annotations

"""
models/setting.py
-----------------
Domain model for a bot-wide key/value setting.
"""

import re
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

_LEADING_INT = re.compile(r"\s*([+-]?\d+)", re.ASCII)


@dataclass
class Setting:
    """A single row of bot_settings. The value is always stored as text."""
    key: str
    value: str
    updated_at: Optional[datetime] = None

    def as_int(self, default: int = 0) -> int:
        """
        Interpret the value as an integer counter.

        Only the leading integer counts ("5abc" -> 5, "3.7" -> 3);
        a value with no leading digits gives `default`.
        """
        match = _LEADING_INT.match(self.value or "")
        return int(match.group(1)) if match else default

    def __str__(self) -> str:
        return f"{self.key} = {self.value}"

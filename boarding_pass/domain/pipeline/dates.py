from __future__ import annotations

import re
from datetime import date, datetime
from typing import Any, Optional

from boarding_pass.domain.pipeline.constants import MONTH_ABBREVIATIONS, NUMERIC_DATE_FORMATS

_DAY_MON_YEAR = re.compile(r"(\d{1,2})\s+([A-Za-z]{3})\s+(\d{4})")


def _parse_day_mon_year(s: str) -> Optional[date]:
    m = _DAY_MON_YEAR.fullmatch(s)
    if not m:
        return None
    day, mon, year = m.groups()
    try:
        month = MONTH_ABBREVIATIONS.index(mon.lower()) + 1
        return date(int(year), month, int(day))
    except ValueError:
        return None


def normalize_date(s: Any) -> Optional[date]:
    """Parse "15 Jan 2025", "2025-01-15" or "01/15/2025"; None otherwise.

    Month abbreviations are English whatever the process locale, so "%b"
    is not used.
    """
    if not isinstance(s, str):
        return None
    s2 = s.strip()
    parsed = _parse_day_mon_year(s2)
    if parsed is not None:
        return parsed
    for fmt in NUMERIC_DATE_FORMATS:
        try:
            return datetime.strptime(s2, fmt).date()
        except ValueError:
            continue
    return None

from __future__ import annotations

from boarding_pass.domain.pipeline.constants import ABSENT_TOKEN, MARKUP_TOKENS


def sanitize_field(raw: str | None) -> str | None:
    """Strip markup and the literal absent marker from one response value.

    Removal is exact and case-sensitive ("null" only). Returns None when
    nothing is left.
    """
    if raw is None:
        return None
    value = raw.strip()
    for token in MARKUP_TOKENS:
        value = value.replace(token, "")
    value = value.replace(ABSENT_TOKEN, "").strip()
    return value or None

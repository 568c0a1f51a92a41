"""Parse freeform ``Label: value`` model output into a CandidateRecord.

Strategy per line:
  1) Skip lines without a colon.
  2) Lower-case the label (text before the first colon, markup removed) and
     find the longest known key phrase it contains. Generic phrases
     ("flight", "name", "date") must equal the whole label.
  3) Sanitize everything after the first colon of the original line.

Unknown labels are ignored, so the parser never fails; an unrecognizable
response yields an all-empty record.
"""

from __future__ import annotations

from boarding_pass.domain.pipeline.constants import EXACT_ONLY_PHRASES, FIELD_KEYS, MARKUP_TOKENS
from boarding_pass.domain.pipeline.models import CandidateRecord
from boarding_pass.domain.pipeline.sanitize import sanitize_field


def _ordered_keys() -> list[tuple[str, str]]:
    pairs = [(phrase, field) for field, phrases in FIELD_KEYS.items() for phrase in phrases]
    # stable sort: equal lengths keep table order
    return sorted(pairs, key=lambda p: len(p[0]), reverse=True)


_KEYS_BY_SPECIFICITY = _ordered_keys()


def _normalize_label(label: str) -> str:
    low = label.lower()
    for token in MARKUP_TOKENS:
        low = low.replace(token, "")
    return " ".join(low.split())


def match_field(label: str) -> str | None:
    """Return the CandidateRecord field for a response label, most specific phrase first."""
    low = _normalize_label(label)
    for phrase, field in _KEYS_BY_SPECIFICITY:
        if phrase in EXACT_ONLY_PHRASES:
            if low == phrase:
                return field
        elif phrase in low:
            return field
    return None


def parse_response(text: str) -> CandidateRecord:
    """Build a CandidateRecord from the lines of a model response.

    The first present value for a field wins and later lines for that field
    are ignored. A line whose value sanitizes to None (``Gate: null``) does
    not claim the field, so a later line may still fill it.
    """
    values: dict[str, str] = {}
    for line in text.splitlines():
        label, sep, rest = line.partition(":")
        if not sep:
            continue
        field = match_field(label)
        if field is None or field in values:
            continue
        value = sanitize_field(rest)
        if value is not None:
            values[field] = value
    return CandidateRecord(**values)

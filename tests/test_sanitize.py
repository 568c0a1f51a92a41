from __future__ import annotations

from boarding_pass.domain.pipeline.sanitize import sanitize_field


def test_sanitize_strips_bold_markers() -> None:
    assert sanitize_field("**6E6252**") == "6E6252"


def test_sanitize_absent_values() -> None:
    assert sanitize_field("null") is None
    assert sanitize_field("   ") is None
    assert sanitize_field("") is None
    assert sanitize_field(None) is None
    assert sanitize_field(" **null** ") is None


def test_sanitize_removes_markup_anywhere() -> None:
    assert sanitize_field(" `HYD` ") == "HYD"
    assert sanitize_field("Indi*Go_") == "IndiGo"
    assert sanitize_field("_24D_") == "24D"


def test_sanitize_null_removal_is_case_sensitive() -> None:
    assert sanitize_field("NULL") == "NULL"
    assert sanitize_field("Null") == "Null"

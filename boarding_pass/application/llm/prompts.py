from __future__ import annotations

from boarding_pass.domain.pipeline.constants import ABSENT_TOKEN, PROMPT_FIELDS


def build_extract_prompt(text: str) -> str:
    field_lines = "\n".join(
        f"{label}: [extract {hint}, or {ABSENT_TOKEN} if not found]" for label, hint in PROMPT_FIELDS
    )
    return (
        "You are an expert at extracting structured information from boarding pass documents. "
        "Analyze the following boarding pass text and extract flight information.\n\n"
        "Text from boarding pass:\n" + text + "\n\n"
        "Please extract the following information and format your response exactly as shown below, "
        "one 'Label: value' line per field.\n\n"
        "IMPORTANT: Use plain text only - no markdown formatting, no bold (**), no asterisks (*), "
        "no underscores (_), no backticks (`).\n\n"
        + field_lines
        + "\n\nBe precise and only extract information that is clearly identifiable in the text. "
        f'Use "{ABSENT_TOKEN}" for any field not found. Use plain text values only - no formatting.'
    )

import re
from typing import List, Tuple

HEADING_MARKUP = '<strong style="color: #2563eb; font-size: 1.1em;">\\2</strong>'

# Line bodies stop before "\r" so CRLF text keeps its line endings
_LINE = r"([^\r\n]+)"

# Headings must stay ahead of the numbered-list rule
_RULES: List[Tuple[re.Pattern, str]] = [
    (re.compile(r"^(#{1,3})\s*" + _LINE, re.MULTILINE), HEADING_MARKUP),
    (re.compile(r"^\* " + _LINE, re.MULTILINE), "• \\1"),
    (re.compile(r"^- " + _LINE, re.MULTILINE), "• \\1"),
    (re.compile(r"\n\n"), "\n\n"),
    (re.compile(r"^([0-9]+)\.\s+" + _LINE, re.MULTILINE), "<strong>\\1.</strong> \\2"),
]


def format_educational_response(text: str) -> str:
    """Turn the model's markdown-ish output into light HTML markup for display.

    Lines that match none of the rules are returned untouched.
    """
    formatted = text
    for pattern, replacement in _RULES:
        formatted = pattern.sub(replacement, formatted)
    return formatted

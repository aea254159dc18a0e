import re

# Three or more newlines in a row; collapsed to a single blank line.
_EXCESS_NEWLINES = re.compile(r"\n{3,}")


def normalize_newlines(text: str) -> str:
    """Collapse every run of 3+ newlines to exactly two."""
    return _EXCESS_NEWLINES.sub("\n\n", text)

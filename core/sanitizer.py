from typing import Optional

_HTML_ESCAPES = str.maketrans({
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#039;",
})


def escape(text: Optional[str]) -> str:
    """Escape `& < > " '` so user text can be embedded in card markup."""
    if not text:
        return ""
    return str(text).translate(_HTML_ESCAPES)

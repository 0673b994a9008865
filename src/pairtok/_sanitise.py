"""
Utilities for rendering token bytes in log messages.
"""

import unicodedata


def _escape_ctrl_chars(s: str) -> str:
    """Replace Unicode control and format characters with ``\\uXXXX`` escapes."""
    # category codes Cc, Cf, Cn etc. all start with "C"
    return "".join(
        f"\\u{ord(c):04x}" if unicodedata.category(c).startswith("C") else c
        for c in s
    )


def render_bytes(b: bytes) -> str:
    """
    Decode token bytes as UTF-8 for display.

    Learned tokens can end in the middle of a multi-byte character, so invalid
    sequences become the Unicode replacement character. Control characters are
    escaped to keep every token on one log line.
    """
    return _escape_ctrl_chars(b.decode("utf-8", errors="replace"))

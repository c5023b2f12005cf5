"""
Helper functions for formatting data into human-readable strings.
"""

import json
import re

# Characters that force a YAML scalar to be quoted
_YAML_SPECIAL = re.compile(r"""[:#\[\]{},&*!|>'"%@`]""")

# Plain scalars that YAML resolves to null, booleans or numbers
_YAML_RESERVED = {"", "~", "null", "true", "false", "yes", "no", "on", "off", "y", "n"}
_YAML_NUMBER = re.compile(
    r"""^[-+]?(
        (\d[\d_]*(\.[\d_]*)?|\.\d[\d_]*)([eE][-+]?\d+)?
        |0x[0-9a-fA-F_]+|0o[0-7_]+|0b[01_]+
        |\.(inf|Inf|INF)|\.(nan|NaN|NAN)
    )$""",
    re.VERBOSE,
)
_YAML_DATE = re.compile(r"^\d{4}-\d\d?-\d\d?")
# Leading characters that start a YAML indicator
_YAML_INDICATOR_START = ("-", "?", "!", "&", "*", "@", "`", "%", "|", ">", "#")


def format_duration(seconds: float) -> str:
    """
    Formats a duration in seconds into a human-readable string (e.g., '2m 12s').
    """
    s = int(seconds)
    hours, remainder = divmod(s, 3600)
    minutes, secs = divmod(remainder, 60)
    parts = []
    if hours > 0:
        parts.append(f"{hours}h")
    if minutes > 0:
        parts.append(f"{minutes}m")
    if secs > 0 or not parts:
        parts.append(f"{secs}s")
    return " ".join(parts)


def yaml_scalar(value: str) -> str:
    """
    Returns `value` as a front-matter scalar, double-quoting it only when
    plain YAML would read it back as something other than the same string.
    """
    if (
        value != value.strip()
        or value.lower() in _YAML_RESERVED
        or value.startswith(_YAML_INDICATOR_START)
        or _YAML_SPECIAL.search(value)
        or _YAML_NUMBER.match(value)
        or _YAML_DATE.match(value)
    ):
        return json.dumps(value, ensure_ascii=False)
    return value


def first_sentence(text: str, max_length: int = 160) -> str:
    """Returns the first sentence of `text`, cut to `max_length` characters."""
    text = " ".join(text.split())
    match = re.search(r"[.!?](?=\s)|[。！？]", text)
    if match:
        text = text[: match.end()]
    if len(text) > max_length:
        text = text[: max_length - 1].rstrip() + "…"
    return text

"""
Normalization for LLM prayer output before it is cached or returned.
- Strip Markdown code fences and a leading "기도문:" style label.
- Strip quotes wrapping the whole text.
- Collapse 3+ newlines to one blank line; trim trailing spaces per line.
"""
import re

_FENCE = re.compile(r"^```[\w-]*\s*\n?|\n?```\s*$")
_LABEL = re.compile(r"^\s*(?:기도문|prayer)\s*[:：]\s*", re.I)
_BLANK_RUNS = re.compile(r"\n{3,}")
_QUOTE_PAIRS = (('"', '"'), ("“", "”"), ("'", "'"), ("「", "」"))


def normalize_prayer_text(text: str | None) -> str:
    if not text:
        return ""
    out = _FENCE.sub("", text.strip()).strip()
    out = _LABEL.sub("", out)
    for left, right in _QUOTE_PAIRS:
        if len(out) >= 2 and out.startswith(left) and out.endswith(right):
            out = out[len(left):-len(right)].strip()
            break
    out = "\n".join(line.rstrip() for line in out.split("\n"))
    return _BLANK_RUNS.sub("\n\n", out).strip()

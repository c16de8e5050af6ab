"""
Redact personal data from user text before it is sent to Gemini.
Prayer situations often carry names of hospitals, phone numbers or emails; only the obvious ones are masked.
"""
import re


# Patterns and replacement for personal data (redact, do not send)
PERSONAL_DATA_PATTERNS = [
    (re.compile(r"\b\d{6}\s*-\s*[1-4]\d{6}\b"), "******-*******"),  # resident registration number
    (re.compile(r"[\w.+-]+@[\w-]+\.[\w.-]+"), "***@***"),
    (re.compile(r"\b01[016789][-\s.]?\d{3,4}[-\s.]?\d{4}\b"), "***-****-****"),  # mobile
    (re.compile(r"\b0\d{1,2}[-\s.]\d{3,4}[-\s.]\d{4}\b"), "***-****-****"),  # landline
]


def filter_personal_data(text: str | None) -> str:
    """Mask obvious personal data in a string. Returns safe text for AI."""
    if not text or not isinstance(text, str):
        return ""
    out = text
    for pattern, repl in PERSONAL_DATA_PATTERNS:
        out = pattern.sub(repl, out)
    return out

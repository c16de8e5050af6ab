"""Stable cache key for a prayer request: sha256 over the normalized request."""
import hashlib
import json

from prayer_companion.schemas.prayer import DEFAULT_LENGTH, DEFAULT_TONE, GenerationRequest


def _norm(value: str | None, default: str = "") -> str:
    return (value or "").strip().lower() or default


def normalize_request(request: GenerationRequest) -> dict:
    """Field order is part of the key; do not reorder."""
    return {
        "title": _norm(request.title),
        "category": _norm(request.category),
        "situation": _norm(request.situation),
        "tone": _norm(request.tone, DEFAULT_TONE),
        "length": _norm(request.length, DEFAULT_LENGTH),
    }


def derive_cache_key(request: GenerationRequest) -> str:
    data = json.dumps(normalize_request(request), ensure_ascii=False, separators=(",", ":"))
    return hashlib.sha256(data.encode("utf-8")).hexdigest()

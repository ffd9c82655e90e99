"""Content digests for drift detection."""

from __future__ import annotations

import hashlib


def content_hash(contents: str | bytes) -> str:
    """SHA-256 hex digest of ``contents`` (text is hashed as UTF-8)."""
    if isinstance(contents, str):
        contents = contents.encode("utf-8")
    return hashlib.sha256(contents).hexdigest()

"""Stable identifier derivation from canonical text."""

from __future__ import annotations

import base64
import hashlib
from typing import Protocol

__all__ = [
    "IdentifierDeriver",
    "make_unique_id",
]


class IdentifierDeriver(Protocol):
    """Protocol for deterministic, one-way identifier derivation.

    Implementations must return the same identifier for the same
    ``(prefix, content)`` pair across processes and runs.
    """

    def __call__(self, prefix: str, content: str) -> str: ...


def make_unique_id(prefix: str, content: str) -> str:
    """Derive a short identifier for ``content`` within namespace ``prefix``.

    The content is hashed with SHA-224 and encoded as URL-safe Base64 with the
    padding removed. The resulting 38-character digest is prefixed with the
    namespace tag and a colon, e.g. ``"s:<digest>"``.

    Args:
        prefix: Namespace tag distinguishing identifier kinds.
        content: Text to identify (UTF-8 encoded before hashing).

    Returns:
        Identifier string of the form ``f"{prefix}:{digest}"``.
    """
    digest = hashlib.sha224(content.encode("utf-8")).digest()
    encoded = base64.urlsafe_b64encode(digest).rstrip(b"=").decode("ascii")
    return f"{prefix}:{encoded}"

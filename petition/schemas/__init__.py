"""Schematy Pydantic dla walidacji danych."""

from .signature import (
    SignatureCreate,
    SignatureResponse,
    Link,
    PageLinks,
    PageResult,
)

__all__ = [
    # Signature
    "SignatureCreate",
    "SignatureResponse",
    # Page
    "Link",
    "PageLinks",
    "PageResult",
]

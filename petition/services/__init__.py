"""Serwisy biznesowe."""

from .auth import AuthService, hash_password, verify_password
from .deletion import DeletionGate, DeletionOutcome
from .pagination import PaginatedLister
from .signatures import SignatureRepository

__all__ = [
    "AuthService",
    "hash_password",
    "verify_password",
    "DeletionGate",
    "DeletionOutcome",
    "PaginatedLister",
    "SignatureRepository",
]

"""Modele bazy danych dla listy podpisów."""

from .signature import Signature
from .user import User

__all__ = [
    "Signature",
    "User",
]

"""Wyjątki aplikacji."""

from typing import Optional


class PetitionError(Exception):
    """Bazowy wyjątek aplikacji."""
    pass


class RepositoryError(PetitionError):
    """Błąd zewnętrznego magazynu danych.

    Treść komunikatu trafia tylko do logów, nigdy do klienta.
    """

    def __init__(self, message: str, operation: Optional[str] = None):
        self.operation = operation
        super().__init__(message)


class RepositoryTimeout(RepositoryError):
    """Operacja na magazynie przekroczyła limit czasu - można ponowić."""

    def __init__(self, operation: str, timeout: float):
        self.timeout = timeout
        super().__init__(f"{operation} przekroczyło {timeout}s", operation=operation)


class DuplicateSignatureError(PetitionError):
    """Ten numer identyfikacyjny już podpisał petycję."""
    pass

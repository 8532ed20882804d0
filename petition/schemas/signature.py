"""Schematy dla podpisów i stronicowanej listy."""

import re
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# === Signature Schemas ===

class SignatureBase(BaseModel):
    """Bazowy schemat podpisu."""

    name: str = Field(..., min_length=1, max_length=128)
    national_id: str
    comment: Optional[str] = Field(None, max_length=400)
    anonymous: bool = False


class SignatureCreate(SignatureBase):
    """Schemat formularza podpisu."""

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Imię i nazwisko jest wymagane")
        return v

    @field_validator("national_id")
    @classmethod
    def validate_national_id(cls, v: str) -> str:
        """Numer to dokładnie 10 cyfr; myślniki i spacje są pomijane."""
        cleaned = re.sub(r"[\s-]", "", v or "")
        if not re.fullmatch(r"\d{10}", cleaned):
            raise ValueError("Numer identyfikacyjny musi mieć 10 cyfr")
        return cleaned

    @field_validator("comment")
    @classmethod
    def empty_comment_is_none(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        v = v.strip()
        return v or None


class SignatureResponse(SignatureBase):
    """Schemat odpowiedzi dla podpisu."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: datetime


# === Page Schemas ===

class Link(BaseModel):
    """Pojedynczy link nawigacyjny."""

    href: str


class PageLinks(BaseModel):
    """Linki self/prev/next strony wyników."""

    model_config = ConfigDict(populate_by_name=True)

    self_: Link = Field(..., alias="self")
    prev: Optional[Link] = None
    next: Optional[Link] = None


class PageResult(BaseModel):
    """Strona wyników listy podpisów.

    Budowana na każde żądanie, nigdy nie zapisywana.
    """

    model_config = ConfigDict(populate_by_name=True)

    links: PageLinks = Field(..., alias="_links")
    items: list[SignatureResponse]
    offset: int
    limit: int
    total: int

    def to_json(self) -> dict:
        """Postać JSON z kluczem ``_links``; brakujące linki są pomijane."""
        data = self.model_dump(mode="json", by_alias=True)
        data["_links"] = self.links.model_dump(mode="json", by_alias=True, exclude_none=True)
        return data

"""Model podpisu pod petycją."""

from datetime import datetime
from typing import Optional

from sqlalchemy import String, Boolean, DateTime, Text
from sqlalchemy.orm import Mapped, mapped_column

from ..database import Base


class Signature(Base):
    """Jeden podpis pod petycją.

    Kolejność wstawiania (rosnące ``id``) jest kolejnością listowania w panelu.
    """

    __tablename__ = "signatures"

    id: Mapped[int] = mapped_column(primary_key=True)

    name: Mapped[str] = mapped_column(String(128))
    # Numer identyfikacyjny - jeden podpis na osobę
    national_id: Mapped[str] = mapped_column(String(10), unique=True, index=True)
    comment: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    anonymous: Mapped[bool] = mapped_column(Boolean, default=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow
    )

    def __repr__(self) -> str:
        return f"<Signature {self.id} {self.national_id}>"

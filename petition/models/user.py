"""Model uzytkownika (admina) systemu."""

from datetime import datetime

from sqlalchemy import String, Boolean, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from ..database import Base


class User(Base):
    """Model uzytkownika - konto, które może się zalogować do panelu."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True)

    # Dane logowania
    username: Mapped[str] = mapped_column(String(64), unique=True, index=True)
    hashed_password: Mapped[str] = mapped_column(String(255))

    # Status
    is_admin: Mapped[bool] = mapped_column(Boolean, default=False)

    # Metadata
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow
    )

    def __repr__(self) -> str:
        return f"<User {self.username}>"

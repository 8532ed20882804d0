"""Szablony Jinja2 wspólne dla routerów."""

from datetime import datetime
from pathlib import Path
from typing import Optional

from fastapi.templating import Jinja2Templates

BASE_DIR = Path(__file__).resolve().parent

templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))


def format_date(value: Optional[datetime]) -> str:
    """Data w formacie dd.mm.rrrr; pusty napis gdy brak daty."""
    if not isinstance(value, datetime):
        return ""
    return value.strftime("%d.%m.%Y")


templates.env.filters["format_date"] = format_date

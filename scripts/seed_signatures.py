"""Skrypt do zasilenia bazy przykladowymi podpisami.

Usuwa tabele podpisow, tworzy ja od nowa i wstawia losowe podpisy.

Uzycie:
    python scripts/seed_signatures.py [liczba]   (domyslnie 510)
"""

import random
import sys
from pathlib import Path

# Dodaj katalog projektu do sciezki
sys.path.insert(0, str(Path(__file__).parent.parent))

from petition.config import get_settings
from petition.database import build_engine, build_session_factory, init_db
from petition.models import Signature

FIRST_NAMES = ["Anna", "Jan", "Katarzyna", "Piotr", "Maria", "Tomasz", "Ewa", "Paweł", "Agnieszka", "Marek"]
LAST_NAMES = ["Nowak", "Kowalski", "Wiśniewska", "Wójcik", "Kamińska", "Lewandowski", "Zielińska", "Szymański"]
COMMENTS = [
    "Popieram w całości.",
    "Najwyższy czas coś z tym zrobić.",
    "Podpisuję w imieniu całej rodziny.",
    "Mam nadzieję, że to coś zmieni.",
]


def random_signature(used_ids: set) -> Signature:
    national_id = str(random.randint(1_000_000_000, 9_999_999_999))
    while national_id in used_ids:
        national_id = str(random.randint(1_000_000_000, 9_999_999_999))
    used_ids.add(national_id)

    return Signature(
        name=f"{random.choice(FIRST_NAMES)} {random.choice(LAST_NAMES)}",
        national_id=national_id,
        comment=random.choice(COMMENTS) if random.random() > 0.4 else None,
        anonymous=random.random() > 0.6,
    )


def seed(count: int = 510):
    """Odtworz tabele podpisow i wstaw ``count`` losowych wierszy."""
    settings = get_settings()
    engine = build_engine(settings.database_url)

    Signature.__table__.drop(bind=engine, checkfirst=True)
    init_db(engine)
    print("Tabela podpisow utworzona")

    used_ids: set = set()
    session_factory = build_session_factory(engine)
    with session_factory() as db:
        db.add_all(random_signature(used_ids) for _ in range(count))
        db.commit()

    print(f"Dodano {count} podpisow")


if __name__ == "__main__":
    if len(sys.argv) > 2:
        print(__doc__)
        sys.exit(1)
    seed(int(sys.argv[1]) if len(sys.argv) == 2 else 510)

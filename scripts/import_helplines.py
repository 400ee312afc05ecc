#!/usr/bin/env python3
"""Load helpline documents from JSON into the helplines table

Usage:
    python scripts/import_helplines.py [path/to/helplines.json]
"""

import json
import sys
from pathlib import Path

# Add project root to the path
sys.path.insert(0, str(Path(__file__).parent.parent))

from support_api.database import SessionLocal, init_db
from support_api.models import Helpline
from support_api.schemas import HelplineIn

DEFAULT_SOURCE = Path(__file__).parent.parent / "data" / "helplines.json"


def load_documents(path: Path) -> list:
    """Read and validate the JSON array; raises on the first invalid document"""
    with open(path, encoding="utf-8") as f:
        raw = json.load(f)
    return [HelplineIn.model_validate(doc) for doc in raw]


def import_helplines(session, helplines: list) -> int:
    """Replace the table contents with the given helplines"""
    session.query(Helpline).delete()
    for h in helplines:
        session.add(Helpline(
            name=h.name,
            description=h.description,
            contact=h.contact.model_dump(exclude_none=True),
        ))
    session.commit()
    return len(helplines)


def main():
    source = Path(sys.argv[1]) if len(sys.argv) > 1 else DEFAULT_SOURCE

    print("Creating tables...")
    init_db()

    helplines = load_documents(source)

    session = SessionLocal()
    try:
        n = import_helplines(session, helplines)
        print(f"Imported {n:,} helplines from {source}")
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


if __name__ == "__main__":
    main()

"""Shared fixtures: in-memory DB, fixed clock, API client"""
import os
import sys
from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Add project root to Python path (scripts/ is not installed)
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from support_api.database import Base, get_db, init_db, make_engine
from support_api.main import app
from support_api.models import Helpline
from support_api.routes.helplines import get_now

# 2025-01-15 is a Wednesday, 2025-01-18 a Saturday
WEDNESDAY_10AM = datetime(2025, 1, 15, 10, 0)
SATURDAY_2330 = datetime(2025, 1, 18, 23, 30)

SAMPLE_HELPLINES = [
    {
        "name": "Always On",
        "description": "Round the clock listening line",
        "contact": {
            "voice": {"type": "voice", "value": "116 123", "instruction": "Free to call"},
        },
    },
    {
        "name": "Office Hours",
        "description": "Advice line staffed during the working week",
        "contact": {
            "voice": {
                "type": "voice",
                "value": "0300 123 3393",
                "availability": [{"day": "weekday", "opensAt": "09:00", "closesAt": "17:00"}],
            },
            "email": {"type": "email", "value": "info@example.org", "availability": []},
        },
    },
    {
        "name": "Night Owl",
        "description": "Weekend overnight text support",
        "contact": {
            "text": {
                "type": "text",
                "value": "85258",
                "instruction": "Text NIGHT",
                "availability": [{"day": "weekend", "opensAt": "22:00", "closesAt": "06:00"}],
            },
        },
    },
]


@pytest.fixture
def engine():
    eng = make_engine("sqlite://", poolclass=StaticPool)
    init_db(eng)
    yield eng
    Base.metadata.drop_all(eng)
    eng.dispose()


@pytest.fixture
def db_session(engine):
    session = sessionmaker(bind=engine, autocommit=False, autoflush=False)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def seeded(db_session):
    for doc in SAMPLE_HELPLINES:
        db_session.add(Helpline(**doc))
    db_session.commit()
    return db_session


@pytest.fixture
def clock():
    """Mutable clock read by the get_now override"""
    return {"now": WEDNESDAY_10AM}


@pytest.fixture
def client(db_session, clock):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_now] = lambda: clock["now"]
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()

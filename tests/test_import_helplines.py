"""Seed import script"""
import json

import pytest
from pydantic import ValidationError

from scripts.import_helplines import DEFAULT_SOURCE, import_helplines, load_documents
from support_api.models import Helpline


class TestLoadDocuments:
    def test_bundled_seed_file_is_valid(self):
        helplines = load_documents(DEFAULT_SOURCE)
        assert len(helplines) > 0
        assert all(h.name and h.description for h in helplines)

    def test_rejects_missing_description(self, tmp_path):
        path = tmp_path / "helplines.json"
        path.write_text(json.dumps([{"name": "No description", "contact": {}}]))
        with pytest.raises(ValidationError):
            load_documents(path)

    def test_rejects_bad_day_type(self, tmp_path):
        path = tmp_path / "helplines.json"
        path.write_text(json.dumps([{
            "name": "Bad",
            "description": "Unknown day type",
            "contact": {"voice": {"value": "111", "availability": [
                {"day": "holiday", "opensAt": "09:00", "closesAt": "17:00"},
            ]}},
        }]))
        with pytest.raises(ValidationError):
            load_documents(path)


class TestImportHelplines:
    def test_replaces_table_contents(self, db_session, tmp_path):
        path = tmp_path / "helplines.json"
        path.write_text(json.dumps([
            {
                "name": "Listening Line",
                "description": "Talk to someone",
                "contact": {"voice": {"value": "116 123", "instruction": "Free"}},
            },
        ]))
        db_session.add(Helpline(name="Old", description="Stale", contact={}))
        db_session.commit()

        n = import_helplines(db_session, load_documents(path))

        assert n == 1
        rows = db_session.query(Helpline).all()
        assert [r.name for r in rows] == ["Listening Line"]
        assert rows[0].contact == {
            "voice": {"value": "116 123", "instruction": "Free", "availability": []},
        }

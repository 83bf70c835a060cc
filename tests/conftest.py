"""Shared test fixtures."""

import json
from pathlib import Path

import pytest

from klingon_lookup.glossary import Glossary


RECORDS = [
    {"id": 1, "entry_name": "Qong", "part_of_speech": "v:is", "definition": "sleep"},
    {"id": 2, "entry_name": "loD", "part_of_speech": "n:being", "definition": "man, male"},
    {"id": 3, "entry_name": "ghaH", "part_of_speech": "n:pro", "definition": "he, she"},
    {"id": 4, "entry_name": "QIH", "part_of_speech": "n:1", "definition": "damage"},
    {"id": 5, "entry_name": "QIH", "part_of_speech": "v:t,2", "definition": "cause damage"},
    {"id": 6, "entry_name": "Hegh", "part_of_speech": "v:i", "definition": "die"},
    {"id": 7, "entry_name": "jagh", "part_of_speech": "n:slang", "definition": "enemy"},
]


@pytest.fixture
def records() -> list[dict]:
    return [dict(r) for r in RECORDS]


@pytest.fixture
def glossary(records) -> Glossary:
    return Glossary.from_records(records)


@pytest.fixture
def glossary_file(tmp_path, records) -> Path:
    """The fixture records written as a JSON glossary file."""
    path = tmp_path / "glossary.json"
    path.write_text(json.dumps({"entries": records}), encoding="utf-8")
    return path

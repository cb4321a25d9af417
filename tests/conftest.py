"""Shared fixtures: upstream payloads, fake HTTP responses, clean cache per test."""

import json
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from api import cache


class FakeResponse:
    def __init__(self, payload=None, status_code=200, body_error=None, text=None):
        self._payload = payload
        self.status_code = status_code
        self._body_error = body_error
        self.text = text

    def json(self):
        if self._body_error is not None:
            raise self._body_error
        if self.text is not None:
            return json.loads(self.text)
        return self._payload


@pytest.fixture(autouse=True)
def _clean_env_and_cache(monkeypatch):
    for name in ("NYT_CONNECTIONS_URL", "CONNECTIONS_ARCHIVE_URL", "PUZZLE_HTTP_TIMEOUT", "PUZZLE_CACHE_TTL"):
        monkeypatch.delenv(name, raising=False)
    cache.clear()
    yield
    cache.clear()


def make_nyt_document(print_date="2024-03-01", picture=False):
    """Four categories of four cards; positions scrambled across categories."""
    positions = [
        [15, 0, 7, 9],
        [3, 12, 1, 6],
        [10, 4, 14, 2],
        [5, 11, 8, 13],
    ]
    categories = []
    for c, row in enumerate(positions):
        cards = []
        for pos in row:
            if picture:
                cards.append({
                    "image_url": f"https://img.example/{pos}.png",
                    "image_alt_text": f"pic {pos}",
                    "position": pos,
                })
            else:
                cards.append({"content": f"word{pos}", "position": pos})
        categories.append({"title": f"Category {c}", "cards": cards})
    return {"id": 321, "print_date": print_date, "categories": categories}


def make_archive_entry(date, prefix=""):
    return {
        "id": 1,
        "date": date,
        "answers": [
            {"level": 2, "group": "B", "members": [f"{prefix}b1", f"{prefix}b2", f"{prefix}b3", f"{prefix}b4"]},
            {"level": 0, "group": "A", "members": [f"{prefix}a1", f"{prefix}a2", f"{prefix}a3", f"{prefix}a4"]},
            {"level": 3, "group": "D", "members": [f"{prefix}d1", f"{prefix}d2", f"{prefix}d3", f"{prefix}d4"]},
            {"level": 1, "group": "C", "members": [f"{prefix}c1", f"{prefix}c2", f"{prefix}c3", f"{prefix}c4"]},
        ],
    }


@pytest.fixture
def nyt_document():
    return make_nyt_document()


@pytest.fixture
def archive_payload():
    return [
        make_archive_entry("2023-06-12", "x"),
        make_archive_entry("2023-06-25", "z"),
        make_archive_entry("2023-06-20", "y"),
    ]

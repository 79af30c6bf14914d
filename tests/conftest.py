"""Shared fixtures: sample RandomUser records and a stub fetch."""
import sys
from pathlib import Path

import pytest

# Make the project root importable without installing it
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from address_book.models import UserRecord

FIRST_NAMES = ["Jane", "Omar", "Léa", "Kenji", "Ana", "Tom", "Ingrid", "Ravi"]


def make_user(i, first=None):
    first = first if first is not None else FIRST_NAMES[i % len(FIRST_NAMES)]
    return {
        "gender": "female" if i % 2 == 0 else "male",
        "name": {"title": "Ms", "first": first, "last": f"Last{i}"},
        "email": f"user{i}@example.com",
        "login": {"uuid": f"uuid-{i}", "username": f"user{i}"},
        "location": {"city": "Oslo", "street": {"number": i, "name": "Main"}},
        "picture": {
            "large": f"https://randomuser.me/api/portraits/women/{i}.jpg",
            "thumbnail": f"https://randomuser.me/api/portraits/thumb/women/{i}.jpg",
        },
    }


@pytest.fixture
def raw_users():
    return [make_user(i) for i in range(8)]


@pytest.fixture
def batch(raw_users):
    return tuple(UserRecord.from_json(u) for u in raw_users)


@pytest.fixture
def stub_fetch(batch):
    calls = []

    def fetch(count):
        calls.append(count)
        return batch[:count]

    fetch.calls = calls
    return fetch

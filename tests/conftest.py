import sys
from pathlib import Path

import pytest

# Ensure repository root is importable for tests that import top-level packages
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture(autouse=True)
def _clear_api_url_override(monkeypatch):
    monkeypatch.delenv("RANDOMUSER_API_URL", raising=False)


@pytest.fixture
def raw_user():
    return {
        "gender": "female",
        "id": {"name": "TFN", "value": "36 384 529"},
        "name": {"title": "Ms", "first": "Lily", "last": "Ross"},
        "email": "lily.ross@example.com",
        "phone": "07-5519-4477",
        "location": {"city": "Hobart", "state": "Tasmania", "country": "Australia"},
        "registered": {"date": "2015-06-13T08:41:24.871Z", "age": 9},
        "picture": {"thumbnail": "https://randomuser.me/api/portraits/thumb/women/12.jpg"},
    }

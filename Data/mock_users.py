"""Synthetic user records used when the live fetch fails."""
from datetime import datetime, timedelta, timezone
import random
import string
from typing import Any, Dict, List

from Data.normalize_user import normalize_user


MOCK_USER_COUNT = 50
MOCK_THUMBNAIL_URL = "https://via.placeholder.com/150/0000FF/FFFFFF?text=Mock"
REGISTRATION_WINDOW_DAYS = 365

FIRST_NAMES = ("John", "Jane", "Peter", "Alice", "Bob", "Eve", "Mike", "Sarah", "Chris", "Laura")
LAST_NAMES = ("Doe", "Smith", "Johnson", "Williams", "Brown", "Jones", "White", "Black", "Green", "King")
# Drawn independently of COUNTRIES; pairs need not match geographically.
COUNTRIES = ("USA", "Canada", "UK", "Australia", "Germany", "France")
CITIES = ("New York", "Toronto", "London", "Sydney", "Berlin", "Paris")

_ID_ALPHABET = string.ascii_lowercase + string.digits


def _id_suffix(length: int = 6) -> str:
    return "".join(random.choices(_ID_ALPHABET, k=length))


def _digits(count: int) -> str:
    return "".join(random.choices(string.digits, k=count))


def _random_phone() -> str:
    return f"+1-{_digits(3)}-{_digits(3)}-{_digits(4)}"


def _random_registration(now: datetime) -> str:
    offset = random.random() * REGISTRATION_WINDOW_DAYS
    return (now - timedelta(days=offset)).isoformat()


def _mock_user(index: int, now: datetime) -> Dict[str, Any]:
    first = random.choice(FIRST_NAMES)
    last = random.choice(LAST_NAMES)
    return {
        "id": {"value": f"mock-{index + 1}-{_id_suffix()}"},
        "name": {"first": first, "last": last},
        "email": f"{first}.{last}{index}@example.com".lower(),
        "phone": _random_phone(),
        "location": {"country": random.choice(COUNTRIES), "city": random.choice(CITIES)},
        "registered": {"date": _random_registration(now)},
        "picture": {"thumbnail": MOCK_THUMBNAIL_URL},
    }


def fallback_users() -> List[Dict[str, Any]]:
    """Return 50 normalized mock users registered within the last year."""
    now = datetime.now(timezone.utc)
    return [normalize_user(_mock_user(i, now)) for i in range(MOCK_USER_COUNT)]

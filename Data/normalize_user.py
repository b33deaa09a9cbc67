"""Normalization of raw randomuser records into the shared record shape."""
from typing import Any, Dict, Optional


def _section(raw: Dict[str, Any], key: str) -> Dict[str, Any]:
    value = raw.get(key)
    return value if isinstance(value, dict) else {}


def _text(value: Any) -> str:
    if not value:
        return ""
    return value if isinstance(value, str) else str(value)


def _optional_text(value: Any) -> Optional[str]:
    if not value:
        return None
    return value if isinstance(value, str) else str(value)


def normalize_user(raw: Any) -> Dict[str, Any]:
    """Map one upstream record to the normalized shape.

    Every key is always present. Missing or empty upstream values become ``""``,
    except ``id.value`` which becomes ``None``. Live and mock records both pass
    through here.
    """
    if not isinstance(raw, dict):
        raw = {}
    id_section = _section(raw, "id")
    name = _section(raw, "name")
    location = _section(raw, "location")
    registered = _section(raw, "registered")
    picture = _section(raw, "picture")
    return {
        "id": {"value": _optional_text(id_section.get("value"))},
        "name": {"first": _text(name.get("first")), "last": _text(name.get("last"))},
        "email": _text(raw.get("email")),
        "phone": _text(raw.get("phone")),
        "location": {
            "country": _text(location.get("country")),
            "city": _text(location.get("city")),
        },
        "registered": {"date": _text(registered.get("date"))},
        "picture": {"thumbnail": _text(picture.get("thumbnail"))},
    }

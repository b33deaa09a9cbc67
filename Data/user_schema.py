"""Schema helpers for normalized user records and fetch results."""
from typing import Any, Dict, Set


USER_RECORD_FIELDS: Dict[str, Set[str]] = {
    "id": {"value"},
    "name": {"first", "last"},
    "email": set(),
    "phone": set(),
    "location": {"country", "city"},
    "registered": {"date"},
    "picture": {"thumbnail"},
}

FETCH_RESULT_FIELDS = {"users", "status", "fallback_used", "source_url", "fetched_at", "error"}


def _ensure_dict(name: str, value: object) -> dict:
    if not isinstance(value, dict):
        raise ValueError(f"{name} must be a dict")
    return value


def validate_user_record(record: object) -> None:
    data = _ensure_dict("user record", record)
    keys = set(data.keys())
    if keys != set(USER_RECORD_FIELDS):
        raise ValueError(f"user record keys must be {sorted(USER_RECORD_FIELDS)}, got {sorted(keys)}")
    for field, nested in USER_RECORD_FIELDS.items():
        if not nested:
            if not isinstance(data[field], str):
                raise ValueError(f"{field} must be a string")
            continue
        section = _ensure_dict(field, data[field])
        if set(section.keys()) != nested:
            raise ValueError(f"{field} keys must be {sorted(nested)}")
        for key in nested:
            value = section[key]
            if field == "id" and value is None:
                continue
            if not isinstance(value, str):
                raise ValueError(f"{field}.{key} must be a string")


def validate_fetch_result(result: Any) -> None:
    data = _ensure_dict("fetch result", result)
    missing = FETCH_RESULT_FIELDS - set(data.keys())
    if missing:
        raise ValueError(f"missing fetch result fields: {sorted(missing)}")
    if data["status"] not in {"OK", "FALLBACK"}:
        raise ValueError(f"invalid status: {data['status']}")
    if data["fallback_used"] != (data["status"] == "FALLBACK"):
        raise ValueError("fallback_used does not match status")
    if not isinstance(data["users"], list):
        raise ValueError("users must be a list")
    for user in data["users"]:
        validate_user_record(user)

"""User metrics: totals, per-country counts and average registration age."""
from datetime import datetime, timezone
import math
from typing import Any, Dict, Iterable, Optional

import pandas as pd


UNKNOWN_COUNTRY = "Unknown"


def _now_utc() -> datetime:
    return datetime.now(timezone.utc)


def _section(user: Any, key: str) -> Dict[str, Any]:
    if not isinstance(user, dict):
        return {}
    value = user.get(key)
    return value if isinstance(value, dict) else {}


def _country(user: Any) -> str:
    country = _section(user, "location").get("country")
    return country if isinstance(country, str) and country else UNKNOWN_COUNTRY


def _registered_date(user: Any) -> Optional[str]:
    value = _section(user, "registered").get("date")
    return value if isinstance(value, str) and value else None


def _as_utc_timestamp(value: datetime) -> pd.Timestamp:
    ts = pd.Timestamp(value)
    if ts.tzinfo is None:
        return ts.tz_localize("UTC")
    return ts.tz_convert("UTC")


def _users_by_country(users: list) -> Dict[str, int]:
    counts = pd.Series([_country(user) for user in users], dtype="object").value_counts(sort=False)
    return {str(country): int(count) for country, count in counts.items()}


def _average_age_days(users: list, now: datetime) -> float:
    raw_dates = pd.Series([_registered_date(user) for user in users], dtype="object")
    parsed = pd.to_datetime(raw_dates, utc=True, errors="coerce", format="ISO8601").dropna()
    if parsed.empty:
        return 0
    # Whole days, partial days round up.
    ages = ((_as_utc_timestamp(now) - parsed).abs() / pd.Timedelta(days=1)).map(math.ceil)
    return round(float(ages.sum()) / len(ages), 2)


def build_metrics(users: Iterable[Dict[str, Any]], now: Optional[datetime] = None) -> Dict[str, Any]:
    """Summarize normalized users.

    Records without a parseable ``registered.date`` still count toward the
    totals; they are only left out of the average age.
    """
    users = list(users)
    if now is None:
        now = _now_utc()
    if not users:
        return {
            "total_users": 0,
            "users_by_country": {},
            "average_registration_age_in_days": 0,
        }
    return {
        "total_users": len(users),
        "users_by_country": _users_by_country(users),
        "average_registration_age_in_days": _average_age_days(users, now),
    }

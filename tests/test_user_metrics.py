from datetime import datetime, timedelta, timezone

import pytest

from Analytics.user_metrics import build_metrics
from Data.mock_users import fallback_users
from Data.normalize_user import normalize_user


NOW = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)


def _user(country="USA", registered=""):
    return normalize_user({"location": {"country": country}, "registered": {"date": registered}})


def test_empty_list():
    assert build_metrics([]) == {
        "total_users": 0,
        "users_by_country": {},
        "average_registration_age_in_days": 0,
    }


def test_single_user_ten_days_old():
    user = _user(registered=(NOW - timedelta(days=10)).isoformat())
    out = build_metrics([user], now=NOW)
    assert out["average_registration_age_in_days"] == pytest.approx(10.0)


def test_invalid_date_is_skipped_for_average_only():
    users = [
        _user(country="Canada", registered=""),
        _user(country="Canada", registered="not a date"),
        _user(country="UK", registered=(NOW - timedelta(days=30)).isoformat()),
    ]
    out = build_metrics(users, now=NOW)
    assert out["total_users"] == 3
    assert out["users_by_country"] == {"Canada": 2, "UK": 1}
    assert out["average_registration_age_in_days"] == pytest.approx(30.0)


def test_partial_days_round_up():
    users = [
        _user(registered=(NOW - timedelta(days=2, hours=1)).isoformat()),
        _user(registered=(NOW - timedelta(days=4)).isoformat()),
    ]
    out = build_metrics(users, now=NOW)
    assert out["average_registration_age_in_days"] == pytest.approx(3.5)


def test_average_rounded_to_two_decimals():
    users = [
        _user(registered=(NOW - timedelta(days=1)).isoformat()),
        _user(registered=(NOW - timedelta(days=1)).isoformat()),
        _user(registered=(NOW - timedelta(days=2)).isoformat()),
    ]
    out = build_metrics(users, now=NOW)
    assert out["average_registration_age_in_days"] == 1.33


def test_future_dates_use_absolute_difference():
    user = _user(registered=(NOW + timedelta(days=5)).isoformat())
    out = build_metrics([user], now=NOW)
    assert out["average_registration_age_in_days"] == pytest.approx(5.0)


def test_zulu_and_naive_timestamps():
    users = [
        _user(registered="2025-02-19T12:00:00.000Z"),
        _user(registered="2025-02-19T12:00:00"),
    ]
    out = build_metrics(users, now=NOW)
    assert out["average_registration_age_in_days"] == pytest.approx(10.0)


def test_missing_country_counts_as_unknown():
    users = [_user(country=""), {"email": "raw@example.com"}, _user(country="France")]
    out = build_metrics(users, now=NOW)
    assert out["users_by_country"] == {"Unknown": 2, "France": 1}
    assert out["average_registration_age_in_days"] == 0


def test_country_counts_sum_to_total():
    users = fallback_users()
    out = build_metrics(users)
    assert out["total_users"] == 50
    assert sum(out["users_by_country"].values()) == out["total_users"]
    assert 0 < out["average_registration_age_in_days"] <= 366

"""User fetcher (randomuser.me) with mock fallback."""
from datetime import datetime, timezone
import logging
from typing import Any, Dict, List, Optional, Union

from Data.base_fetcher import BaseFetcher
from Data.mock_users import fallback_users
from Data.normalize_user import normalize_user
from Data.providers.randomuser_http import fetch_randomuser_results, resolve_api_url


logger = logging.getLogger(__name__)


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _fetch_result(
    users: List[Dict[str, Any]],
    source_url: str,
    fallback_used: bool,
    error: Optional[str] = None,
) -> Dict[str, Any]:
    return {
        "users": users,
        "status": "FALLBACK" if fallback_used else "OK",
        "fallback_used": fallback_used,
        "source_url": source_url,
        "fetched_at": _now_iso(),
        "error": error,
    }


class RandomUserFetcher(BaseFetcher):
    """Single-attempt fetcher for one randomuser.me URL."""

    def __init__(self, url: str):
        self.url = url

    def fetch(self) -> List[Any]:
        return fetch_randomuser_results(self.url)

    def normalize(self, raw: List[Any]) -> List[Dict[str, Any]]:
        return [normalize_user(item) for item in raw]


def load_users(with_meta: bool = False) -> Union[List[Dict[str, Any]], Dict[str, Any]]:
    """Load users from the API, substituting mock users on any failure.

    Returns the list of normalized users, or when ``with_meta`` is true a dict
    with ``users``, ``fallback_used``, ``source_url`` and ``fetched_at``.
    """
    source_url = resolve_api_url()
    fetcher = RandomUserFetcher(source_url)
    try:
        users = fetcher.normalize(fetcher.fetch())
        result = _fetch_result(users, source_url, fallback_used=False)
        logger.debug("loaded %d users from %s", len(users), source_url)
    except Exception as exc:
        logger.warning("user fetch from %s failed, using mock users: %s", source_url, exc)
        result = _fetch_result(fallback_users(), source_url, fallback_used=True, error=str(exc))

    if with_meta:
        return result
    return result["users"]

"""Direct randomuser.me HTTP client (JSON results)."""
from __future__ import annotations

from typing import Any, Dict, List, Optional
import logging
import os

import requests


logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://randomuser.me/api/?results=500"
API_URL_ENV = "RANDOMUSER_API_URL"


def resolve_api_url(env: Optional[Dict[str, str]] = None) -> str:
    """Return the override from RANDOMUSER_API_URL, else the default URL."""
    if env is None:
        env = os.environ
    return env.get(API_URL_ENV) or DEFAULT_API_URL


def fetch_randomuser_results(url: str) -> List[Dict[str, Any]]:
    """Fetch the raw ``results`` list from the API at ``url``."""
    logger.debug("requesting users from %s", url)
    resp = requests.get(url)
    if not 200 <= resp.status_code < 300:
        raise RuntimeError(f"randomuser HTTP {resp.status_code}: {resp.text[:200]}")
    payload = resp.json()
    if not isinstance(payload, dict):
        raise ValueError("randomuser response is not a JSON object")
    results = payload.get("results")
    if not isinstance(results, list):
        raise ValueError("missing results in randomuser response")
    return results

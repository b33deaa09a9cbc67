"""Data package for user ingestion modules."""
from . import fetch_users, mock_users, normalize_user, user_schema
from .fetch_users import load_users
from .mock_users import fallback_users

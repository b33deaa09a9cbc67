"""Analytics package for user metrics."""
from .user_metrics import build_metrics

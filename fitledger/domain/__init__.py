"""Pure ledger domain logic."""

from .identity import normalize_email
from .paths import Category
from .progress import build_daily_progress, compute_progress

__all__ = ["normalize_email", "Category", "build_daily_progress", "compute_progress"]

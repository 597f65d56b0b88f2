"""
Runtime defaults, read from the environment (and a ``.env`` file when present).
Command line flags override these values.
"""

import os

from dotenv import load_dotenv

load_dotenv()


# ── Trend ─────────────────────────────────────────────────
TREND_WINDOW: int = int(os.getenv("STUDIO_TREND_WINDOW", "6"))

# ── Breakdown ─────────────────────────────────────────────
TOP_COST_LIMIT: int = int(os.getenv("STUDIO_TOP_COST_LIMIT", "5"))

# ── Memoization ───────────────────────────────────────────
CACHE_SIZE: int = int(os.getenv("STUDIO_CACHE_SIZE", "32"))

# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("STUDIO_LOG_LEVEL", "WARNING")

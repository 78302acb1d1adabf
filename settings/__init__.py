"""Application settings."""

import os
from pathlib import Path

# Database
DB_PATH = os.getenv("VISITS_DB_PATH", "visits.duckdb")

# Logging
LOG_DIR = Path("logs")

# Unique visitors are expensive to archive for long periods
UNIQUE_VISITORS_PERIODS = os.getenv("VISITS_UNIQUE_VISITORS_PERIODS", "day,week,month")
UNIQUE_VISITORS_FAQ_URL = "https://matomo.org/faq/how-to/faq_113/"

# Profilable traffic
PROFILABLE_RATIO_THRESHOLD = 0.01

# Access
ANONYMOUS_LOGIN = "anonymous"

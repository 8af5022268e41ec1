"""Load the demo data set (Gyeonggi cities, 4 instructors, 6 schools, January 2025)."""

from __future__ import annotations

import importlib
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module
from src.dispatch_settlement.dispatch_settlement.database.bootstrap import apply_seed_sql
from src.dispatch_settlement.dispatch_settlement.main import configure_logging

logger = logging.getLogger("seed_db")


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    count = apply_seed_sql(dict(settings.DB_CONFIG), seed_path=REPO_ROOT / "database" / "seed.sql")
    logger.info("demo data loaded (%d statements)", count)


if __name__ == "__main__":
    main()

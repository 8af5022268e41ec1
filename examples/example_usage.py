"""Example: run the settlement service directly (without Flask).

Usage: python examples/example_usage.py 2025-01
"""

import importlib
import json
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module
from src.dispatch_settlement.dispatch_settlement.container import build_container
from src.dispatch_settlement.dispatch_settlement.main import configure_logging


def main():
    month = sys.argv[1] if len(sys.argv) > 1 else "2025-01"

    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    container = build_container(
        db_config=settings.DB_CONFIG,
        equipment_transport_cap=getattr(settings, "EQUIPMENT_TRANSPORT_MONTHLY_CAP", None),
    )
    for monthly in container.settlement_service.monthly_settlements(month=month):
        print(json.dumps(monthly.to_dict(include_daily=False), ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()

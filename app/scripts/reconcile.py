"""
Run a single reservation reconciliation pass.

Intended for an external cron when the in-process scheduler is disabled:

    python -m app.scripts.reconcile
"""
import sys

from app.core.config import settings
from app.utils.tasks import reconcile_reservations_job


def main() -> int:
    print(f"Target Database: {settings.DATABASE_URL}")
    return 0 if reconcile_reservations_job() else 1


if __name__ == "__main__":
    sys.exit(main())

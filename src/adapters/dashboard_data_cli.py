"""CLI adapter printing the dashboard payload as JSON.

The reporting period is read from ``DASHBOARD_FROM`` and ``DASHBOARD_TO``
(``YYYY-MM-DD``); both default to the current month.
"""

import json
import os

import dotenv

from src.domain.errors import AuthenticationRequiredError
from src.infrastructure.container import build_get_dashboard_data_use_case
from src.infrastructure.logging.logger import get_app_logger


def main() -> int:
    """Compose the dashboard and print it.

    Returns:
        int: Process exit code, 1 when nobody is signed in.
    """
    dotenv.load_dotenv()
    logger = get_app_logger()
    use_case = build_get_dashboard_data_use_case()

    from_date = os.getenv("DASHBOARD_FROM")
    to_date = os.getenv("DASHBOARD_TO")
    try:
        data = use_case.execute(from_date=from_date, to_date=to_date)
    except AuthenticationRequiredError as exc:
        logger.error(f"Authentication required: {exc}")
        print("Authentication required: set NUMERA_USER_ID.")
        return 1

    print(json.dumps(data.to_dict(), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

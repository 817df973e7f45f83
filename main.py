from config import SEED_MENU
from data import MENU
from logger import configure_logging, get_logger
from menu import MenuCatalog
from shell import operate

logger = get_logger(__name__)


def main():
    configure_logging()
    catalog = MenuCatalog.from_records(MENU) if SEED_MENU else MenuCatalog()

    logger.info("Coffee shop menu starting with %d items", len(catalog))

    try:
        operate(catalog)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    except Exception as exc:  # pragma: no cover - safety net for the interactive session
        logger.exception("Menu shell stopped because of an unexpected error: %s", exc)
        raise
    finally:
        logger.info("Coffee shop menu stopped.")


if __name__ == "__main__":
    main()

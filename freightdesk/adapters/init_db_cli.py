"""CLI adapter creating the ledger tables and the standard chart of accounts."""

from freightdesk.infrastructure.container import build_database_adapter
from freightdesk.infrastructure.logging.logger import get_app_logger
from freightdesk.infrastructure.schema import (
    create_schema,
    seed_standard_accounts,
)


def main() -> None:
    """Create the schema and seed the standard accounts."""
    logger = get_app_logger()
    adapter = build_database_adapter()
    try:
        engine = adapter.get_ledger_engine()
    except RuntimeError as exc:
        logger.error(str(exc))
        return

    create_schema(engine)
    inserted = seed_standard_accounts(engine)
    logger.info(f"Ledger schema ready; seeded {inserted} accounts.")
    print(f"Ledger schema ready. Seeded {inserted} standard accounts.")


if __name__ == "__main__":  # pragma: no cover
    main()

"""CLI adapter printing one page of recorded transactions."""

import os

from src.domain.services.ledger import SORTABLE_FIELDS
from src.infrastructure.container import build_transaction_ledger_use_case
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import ReportSettings


def _parse_page(value: str | None, logger) -> int:
    """Parse the requested page number, defaulting to the first page."""
    if not value:
        return 1
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Invalid page '{value}'. Showing page 1.")
        return 1


def _parse_sort(value: str | None, logger) -> tuple[str, bool]:
    """Parse ``field`` or ``-field`` into a sort field and direction."""
    if not value:
        return "created_at", True
    descending = value.startswith("-")
    field = value.lstrip("-")
    if field not in SORTABLE_FIELDS:
        logger.warning(f"Unsupported sort field '{field}'. Using created_at.")
        return "created_at", True
    return field, descending


def main() -> None:
    """Run the ledger use case and print the requested page."""
    logger = get_app_logger()
    settings = ReportSettings.from_env()
    sort_field, descending = _parse_sort(os.getenv("LEDGER_SORT"), logger)
    use_case = build_transaction_ledger_use_case(settings)

    view = use_case.execute(
        branch_id=settings.branch_id,
        search=os.getenv("LEDGER_SEARCH") or None,
        currency=os.getenv("LEDGER_CURRENCY") or None,
        sort_field=sort_field,
        descending=descending,
        page=_parse_page(os.getenv("LEDGER_PAGE"), logger),
    )

    page = view.page
    print(
        f"Page {page.page} of {page.total_pages} "
        f"({page.total_items} transactions, total={view.total_base:,.2f} THB)"
    )
    for tx in page.items:
        created = tx.created_at.isoformat() if tx.created_at else "N/A"
        print(
            f"{tx.id or '-':>6} {created:<32} {tx.branch_id:<12} "
            f"{tx.transaction_type.value:<8} {tx.currency_code:<6} "
            f"{tx.amount:>14,.2f} @ {tx.rate:<10} = {tx.total_base:>14,.2f}"
        )
    print(f"Currencies: {', '.join(view.currency_codes)}")


if __name__ == "__main__":  # pragma: no cover
    main()

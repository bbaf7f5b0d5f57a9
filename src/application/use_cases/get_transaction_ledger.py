"""Use case to browse recorded transactions page by page."""

from src.application.ports.transactions_repository import (
    TransactionsRepositoryPort,
)
from src.domain.constants import DEFAULT_PAGE_SIZE
from src.domain.models import LedgerView
from src.domain.services.ledger import (
    list_currency_codes,
    paginate,
    search_transactions,
    sort_transactions,
    sum_total_base,
)
from src.infrastructure.logging.logger import get_app_logger


class GetTransactionLedgerUseCase:
    """Search, sort and paginate transactions for list screens."""

    def __init__(
        self,
        transactions_repository: TransactionsRepositoryPort,
        logger=None,
        per_page: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        self._transactions_repository = transactions_repository
        self._logger = logger or get_app_logger()
        self._per_page = per_page

    def execute(
        self,
        branch_id: str | None = None,
        search: str | None = None,
        currency: str | None = None,
        sort_field: str = "created_at",
        descending: bool = True,
        page: int = 1,
    ) -> LedgerView:
        """Return one ledger page with the currency choices and total.

        The currency choices come from the unfiltered records; the total
        covers every record matching the search, not just the page.
        """
        transactions = self._transactions_repository.fetch_transactions(
            branch_id=branch_id
        )
        matches = search_transactions(transactions, search, currency)
        ordered = sort_transactions(matches, sort_field, descending)
        ledger_page = paginate(ordered, page, self._per_page)
        self._logger.info(
            f"Ledger page {ledger_page.page}/{ledger_page.total_pages} "
            f"with {ledger_page.total_items} matching transactions"
        )
        return LedgerView(
            page=ledger_page,
            currency_codes=list_currency_codes(transactions),
            total_base=sum_total_base(matches),
        )


__all__ = ["GetTransactionLedgerUseCase"]

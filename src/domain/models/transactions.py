"""Domain models for exchange transactions."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum


class TransactionType(str, Enum):
    """Direction of an exchange transaction.

    Buying means the business buys foreign currency from a customer,
    Selling means it sells foreign currency to a customer.
    """

    BUYING = "Buying"
    SELLING = "Selling"


@dataclass(frozen=True)
class TransactionRecord:
    """Transaction parsed from the source collection.

    Attributes:
        id: Source identifier, None for records not yet persisted.
        created_at: Creation timestamp, None when the source has none.
        currency_code: Short currency code used as a grouping key.
        currency_name: Display name of the currency.
        rate: Exchange rate to the base currency.
        amount: Foreign currency quantity.
        total_base: Base currency value of the transaction.
        branch_id: Originating branch key.
        transaction_type: Direction bucket of the transaction.
        raw_amount: Amount as stored in the source, kept for text search.
        raw_rate: Rate as stored in the source.
        raw_total_base: Base total as stored in the source.
    """

    id: int | None
    created_at: datetime | None
    currency_code: str
    currency_name: str
    rate: Decimal
    amount: Decimal
    total_base: Decimal
    branch_id: str
    transaction_type: TransactionType
    raw_amount: str = ""
    raw_rate: str = ""
    raw_total_base: str = ""
    customer_name: str | None = None
    customer_passport_no: str | None = None
    customer_nationality: str | None = None

    @property
    def is_buying(self) -> bool:
        """Return True when the record belongs to the buying bucket."""
        return self.transaction_type is TransactionType.BUYING


__all__ = ["TransactionType", "TransactionRecord"]

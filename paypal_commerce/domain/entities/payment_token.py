"""Stored payment token (vaulted payment method) entity."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True, kw_only=True)
class PaymentToken:
    """Payment method a customer saved in the provider's vault.

    Attributes:
        id: Local identifier.
        customer_id: Owner of the token.
        vault_id: Token identifier in the provider's vault.
        vault_customer_id: Customer identifier in the provider's vault.
        title: Display title (e.g., "Visa *1111").
        is_primary: Default payment method for the customer.
        expiration_date: Card expiration, when applicable.
    """

    id: int
    customer_id: int
    vault_id: str
    vault_customer_id: str
    title: str
    is_primary: bool = False
    expiration_date: date | None = None

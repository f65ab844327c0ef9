"""
Shared domain types for the payment demo.

Enums inherit from (str, Enum) so each member compares equal to its plain
label (e.g. ProcessorName.PAYPAL == "PayPal"), which is exactly what
`get_processor_name()` hands back to callers.
"""

from enum import Enum


class ProcessorName(str, Enum):
    """Fixed display labels of the available payment processors."""

    CREDIT_CARD = "Credit Card"
    PAYPAL = "PayPal"
    CRYPTO = "Cryptocurrency"


class PaymentProcessorNotSetError(RuntimeError):
    """Raised when an order is checked out or refunded with no processor bound."""

    def __init__(self, message: str = "Payment processor not set") -> None:
        super().__init__(message)

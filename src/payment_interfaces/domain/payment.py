"""
Payment processors (Strategy pattern).

`PaymentProcessor` is the contract an `Order` talks to. The order holds a
reference to the abstract type and never to a concrete class, so a new
payment method is added by writing one more subclass; `Order` does not
change.

Processors are stateless. One instance can be shared by any number of
orders (see `ProcessorFactory`).
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from decimal import Decimal

from payment_interfaces.domain.models import ProcessorName

Amount = Decimal | float | int


class PaymentProcessor(ABC):
    """Interface every payment method must implement.

    Subclasses that leave any of the three methods unimplemented cannot be
    instantiated.
    """

    @abstractmethod
    def process_payment(self, amount: Amount) -> bool:
        """Charge `amount`. Returns True when the charge went through."""

    @abstractmethod
    def refund_payment(self, transaction_id: str, amount: Amount) -> None:
        """Refund `amount` for the given transaction."""

    @abstractmethod
    def get_processor_name(self) -> str:
        """Human-readable label, e.g. "PayPal"."""


class CreditCardProcessor(PaymentProcessor):
    def process_payment(self, amount: Amount) -> bool:
        print(f"Processing ${amount} via Credit Card")
        return True

    def refund_payment(self, transaction_id: str, amount: Amount) -> None:
        print(f"Refunding ${amount} to Credit Card for transaction: {transaction_id}")

    def get_processor_name(self) -> str:
        return ProcessorName.CREDIT_CARD.value


class PayPalProcessor(PaymentProcessor):
    def process_payment(self, amount: Amount) -> bool:
        print(f"Processing ${amount} via PayPal")
        return True

    def refund_payment(self, transaction_id: str, amount: Amount) -> None:
        print(f"Refunding ${amount} to PayPal account for transaction: {transaction_id}")

    def get_processor_name(self) -> str:
        return ProcessorName.PAYPAL.value


class CryptoCurrencyProcessor(PaymentProcessor):
    """Settles payments to a crypto wallet."""

    def process_payment(self, amount: Amount) -> bool:
        print(f"Processing ${amount} via Cryptocurrency")
        return True

    def refund_payment(self, transaction_id: str, amount: Amount) -> None:
        print(f"Refunding ${amount} to Crypto wallet for transaction: {transaction_id}")

    def get_processor_name(self) -> str:
        return ProcessorName.CRYPTO.value


def process_payments(processors: Iterable[PaymentProcessor], amount: Amount) -> list[bool]:
    """Charge the same amount through each processor in turn.

    Only the abstract interface is used here, so any mix of processors
    works. Returns one result per processor, in input order.
    """
    results = []
    for processor in processors:
        print(f"Using {processor.get_processor_name()}:")
        results.append(processor.process_payment(amount))
    return results

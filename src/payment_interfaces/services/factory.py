"""
Shared payment processor instances, looked up by label.

Processors carry no per-order data, so every order can bind the same
instance. The factory creates each variant on first request and keeps it
in a class-level cache keyed by `ProcessorName`; `reset()` empties it.
"""

from payment_interfaces.domain.models import ProcessorName
from payment_interfaces.domain.payment import (
    CreditCardProcessor,
    CryptoCurrencyProcessor,
    PaymentProcessor,
    PayPalProcessor,
)


class ProcessorFactory:
    """Lazily creates one processor per `ProcessorName` and hands out that instance."""

    # Iteration order is the order used by all_processors()
    _classes: dict[ProcessorName, type[PaymentProcessor]] = {
        ProcessorName.CREDIT_CARD: CreditCardProcessor,
        ProcessorName.PAYPAL: PayPalProcessor,
        ProcessorName.CRYPTO: CryptoCurrencyProcessor,
    }
    _cache: dict[ProcessorName, PaymentProcessor] = {}

    @classmethod
    def get_processor(cls, name: ProcessorName | str) -> PaymentProcessor:
        """Look a processor up by its label (accepts the enum or the plain string).

        Raises:
            ValueError: the label is not a known processor.
        """
        key = ProcessorName(name)
        if key not in cls._cache:
            cls._cache[key] = cls._classes[key]()
        return cls._cache[key]

    @classmethod
    def get_credit_card_processor(cls) -> PaymentProcessor:
        return cls.get_processor(ProcessorName.CREDIT_CARD)

    @classmethod
    def get_paypal_processor(cls) -> PaymentProcessor:
        return cls.get_processor(ProcessorName.PAYPAL)

    @classmethod
    def get_crypto_processor(cls) -> PaymentProcessor:
        return cls.get_processor(ProcessorName.CRYPTO)

    @classmethod
    def all_processors(cls) -> list[PaymentProcessor]:
        return [cls.get_processor(name) for name in cls._classes]

    @classmethod
    def reset(cls) -> None:
        """Drop the cached instances."""
        cls._cache.clear()

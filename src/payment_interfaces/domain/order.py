"""
Order — the context object of the Strategy pattern.

An order knows its id and amount and holds a reference to *some*
`PaymentProcessor`. It never checks which concrete processor it has: the
processor can be swapped at runtime with `set_payment_processor()` and
`checkout()` / `refund()` simply delegate to whatever is bound.

The model is a Pydantic v2 BaseModel with `validate_assignment=True`, so
rebinding the processor is type-checked on every assignment and the
transaction id (frozen) cannot be changed after construction.
"""

import logging
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from payment_interfaces.domain.models import PaymentProcessorNotSetError
from payment_interfaces.domain.payment import Amount, PaymentProcessor

logger = logging.getLogger(__name__)

# Transaction ids are derived from the order id, e.g. "ORD-1" -> "TXN-ORD-1"
TRANSACTION_PREFIX = "TXN-"


class Order(BaseModel):
    """A single order paid through a pluggable payment processor."""

    model_config = ConfigDict(arbitrary_types_allowed=True, validate_assignment=True)

    order_id: str = Field(..., min_length=1)
    amount: Decimal
    transaction_id: str = Field(..., frozen=True)
    payment_processor: PaymentProcessor | None = None  # Strategy slot, rebindable

    def __init__(self, order_id: str, amount: Amount, **data: Any) -> None:
        super().__init__(
            order_id=order_id,
            amount=amount,
            transaction_id=f"{TRANSACTION_PREFIX}{order_id}",
            **data,
        )

    def set_payment_processor(self, payment_processor: PaymentProcessor | None) -> None:
        """Bind (or rebind) the processor used by checkout and refund.

        Passing None unbinds it; checkout and refund then raise
        PaymentProcessorNotSetError.
        """
        self.payment_processor = payment_processor
        if payment_processor is None:
            logger.debug("Order %s unbound from its payment processor", self.order_id)
        else:
            logger.debug(
                "Order %s bound to %s processor",
                self.order_id,
                payment_processor.get_processor_name(),
            )

    def _require_processor(self) -> PaymentProcessor:
        if self.payment_processor is None:
            raise PaymentProcessorNotSetError()
        return self.payment_processor

    def checkout(self) -> bool:
        """Charge the order amount through the bound processor.

        Raises:
            PaymentProcessorNotSetError: no processor has been bound yet.
        """
        processor = self._require_processor()

        print(f"Processing order {self.order_id} for ${self.amount}")
        success = processor.process_payment(self.amount)

        if success:
            print(f"Order {self.order_id} successfully processed with {processor.get_processor_name()}")
        else:
            logger.warning("Order %s was declined by %s", self.order_id, processor.get_processor_name())

        return success

    def refund(self) -> None:
        """Refund the full amount against this order's transaction id.

        Raises:
            PaymentProcessorNotSetError: no processor has been bound yet.
        """
        processor = self._require_processor()

        print(f"Refunding order {self.order_id}")
        logger.debug("Refunding transaction %s via %s", self.transaction_id, processor.get_processor_name())
        processor.refund_payment(self.transaction_id, self.amount)

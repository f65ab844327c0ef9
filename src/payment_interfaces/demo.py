"""
Demo driver — walks through every interface example in sequence.

1. One order, three payment processors swapped in at runtime (Strategy).
2. One object implementing two interfaces (SecureLogger).
3. A list of processors used only through the common interface.
4. A default method and a static method on the Vehicle contract.

Usage:
    # Run with the default order:
    python -m payment_interfaces.demo

    # Custom order id / amounts, with debug logging:
    python -m payment_interfaces.demo --order-id ORD-1 --amount 10.00 --verbose
"""

import argparse
import logging
from decimal import Decimal, InvalidOperation

from payment_interfaces.domain.order import Order
from payment_interfaces.domain.payment import Amount, process_payments
from payment_interfaces.domain.vehicles import Car, Vehicle
from payment_interfaces.services.factory import ProcessorFactory
from payment_interfaces.services.secure_logger import SecureLogger

logger = logging.getLogger(__name__)

DEFAULT_ORDER_ID = "ORD-12345"
DEFAULT_AMOUNT = Decimal("99.99")
DEFAULT_BATCH_AMOUNT = Decimal("50.0")


def run_demo(
    order_id: str = DEFAULT_ORDER_ID,
    amount: Amount = DEFAULT_AMOUNT,
    batch_amount: Amount = DEFAULT_BATCH_AMOUNT,
) -> None:
    # ── Example 1: one order, processors swapped at runtime ──────────
    order = Order(order_id, amount)

    order.set_payment_processor(ProcessorFactory.get_credit_card_processor())
    order.checkout()

    order.set_payment_processor(ProcessorFactory.get_paypal_processor())
    order.checkout()
    order.refund()

    # A new payment method plugs in without touching Order
    order.set_payment_processor(ProcessorFactory.get_crypto_processor())
    order.checkout()

    print("\n=== Strategy Pattern Example ===")

    # ── Example 2: multiple interfaces on one object ─────────────────
    secure_logger = SecureLogger()
    secure_logger.secure_log("Sensitive payment information")

    encrypted = secure_logger.encrypt("Confidential data")
    print(f"Encrypted: {encrypted}")
    print(f"Decrypted: {secure_logger.decrypt(encrypted)}")

    print("\n=== Interface as API Contract ===")
    process_payments(ProcessorFactory.all_processors(), batch_amount)

    # ── Example 3: default and static methods ────────────────────────
    print("\n=== Default Method Example ===")
    car = Car()
    car.start()
    car.honk()  # inherited from Vehicle
    car.stop()

    Vehicle.print_vehicle_info()
    logger.debug("Demo finished for order %s", order_id)


def _decimal(value: str) -> Decimal:
    try:
        return Decimal(value)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"invalid amount: {value!r}") from None


def main() -> None:
    parser = argparse.ArgumentParser(description="Walk through the payment interface examples")
    parser.add_argument("--order-id", default=DEFAULT_ORDER_ID, help="Order identifier")
    parser.add_argument("--amount", type=_decimal, default=DEFAULT_AMOUNT, help="Order total")
    parser.add_argument(
        "--batch-amount",
        type=_decimal,
        default=DEFAULT_BATCH_AMOUNT,
        help="Amount charged through every processor in the API contract example",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    run_demo(args.order_id, args.amount, args.batch_amount)


if __name__ == "__main__":
    main()

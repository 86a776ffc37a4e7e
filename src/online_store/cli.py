"""
CLI driver: runs the demo scenarios or an ad-hoc order.

Narration (payments, deliveries, notifications) goes to stdout through the
console collaborators; log records go to stderr.

Usage:
    # Run both demo scenarios:
    python -m online_store.cli

    # Run one scenario and print its result as JSON:
    python -m online_store.cli --scenario tickets --json

    # Build an order from the command line:
    python -m online_store.cli --item Laptop:1000:1 --item Mouse:50:2 \\
        --payment paypal --delivery courier --notification email --discount percent:0.1
"""

import argparse
import logging
import sys

from pydantic import ValidationError

from online_store.domain.discounts import DiscountCalculator, DiscountStrategy
from online_store.domain.models import Product
from online_store.domain.order import Order
from online_store.errors import InvalidInputError, OrderProcessingError
from online_store.processor import OrderProcessor
from online_store.scenarios import SCENARIOS, Scenario
from online_store.services.factory import DELIVERY_METHODS, NOTIFICATIONS, PAYMENT_METHODS, ServiceFactory

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
CUSTOM_TITLE = "Custom Order"

EXIT_OK = 0
EXIT_ORDER_ERROR = 1


def parse_item(text: str) -> tuple[Product, int]:
    """argparse type for ``NAME:PRICE[:QTY]`` (quantity defaults to 1).

    NAME must not contain ":"; fields are split from the right, so a colon in
    the name shifts the price and quantity and the item is rejected.
    """
    parts = text.rsplit(":", 2)
    if len(parts) == 2:
        parts.append("1")
    if len(parts) != 3:
        raise argparse.ArgumentTypeError(f"expected NAME:PRICE[:QTY], got {text!r}")
    name, price, quantity = parts
    try:
        product = Product(name=name, price=float(price))
        return product, int(quantity)
    except (ValueError, ValidationError) as exc:
        raise argparse.ArgumentTypeError(f"invalid item {text!r}: {exc}") from None


def parse_discount(text: str) -> DiscountStrategy:
    try:
        return ServiceFactory.create_discount_strategy(text)
    except InvalidInputError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="online-store", description="Process orders in the online store demo")
    parser.add_argument(
        "--scenario",
        choices=["all", *SCENARIOS],
        default="all",
        help="Demo scenario to run (ignored when --item is given)",
    )
    parser.add_argument(
        "--item",
        action="append",
        type=parse_item,
        default=[],
        metavar="NAME:PRICE[:QTY]",
        help="Add an item to a custom order (NAME must not contain ':'); repeat for more items",
    )
    parser.add_argument("--payment", choices=sorted(PAYMENT_METHODS), default="credit-card", help="Payment method")
    parser.add_argument("--delivery", choices=sorted(DELIVERY_METHODS), default="courier", help="Delivery method")
    parser.add_argument("--notification", choices=sorted(NOTIFICATIONS), default="email", help="Notification channel")
    parser.add_argument(
        "--discount",
        type=parse_discount,
        default="none",
        metavar="none|percent:P|fixed:A",
        help="Discount strategy, e.g. percent:0.1 or fixed:50",
    )
    parser.add_argument("--json", action="store_true", help="Print each processing result as JSON")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level for stderr output",
    )
    return parser


def custom_scenario(args: argparse.Namespace) -> Scenario:
    order = Order(
        payment_method=ServiceFactory.create_payment_method(args.payment),
        delivery_method=ServiceFactory.create_delivery_method(args.delivery),
    )
    for product, quantity in args.item:
        order.add_item(product, quantity)
    return Scenario(
        title=CUSTOM_TITLE,
        order=order,
        calculator=DiscountCalculator(args.discount),
        processor=OrderProcessor(ServiceFactory.create_notification(args.notification)),
    )


def select_scenarios(args: argparse.Namespace) -> list[Scenario]:
    if args.item:
        return [custom_scenario(args)]
    if args.scenario == "all":
        return [build() for build in SCENARIOS.values()]
    return [SCENARIOS[args.scenario]()]


def run(args: argparse.Namespace) -> int:
    try:
        scenarios = select_scenarios(args)
        for index, scenario in enumerate(scenarios):
            # Blank line between scenarios
            prefix = "\n" if index else ""
            print(f"{prefix}=== {scenario.title} ===")
            result = scenario.run()
            if args.json:
                print(result.model_dump_json(indent=2))
    except OrderProcessingError as exc:
        logger.error("Order processing failed: %s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_ORDER_ERROR
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())

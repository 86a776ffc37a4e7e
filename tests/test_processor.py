import pytest
from conftest import (
    CallLog,
    RecordingDeliveryMethod,
    RecordingGateway,
    RecordingLogistics,
    RecordingMessaging,
    RecordingNotification,
    RecordingPaymentMethod,
)
from online_store.domain.discounts import (
    DiscountCalculator,
    FixedAmountDiscount,
    NoDiscount,
    PercentageDiscount,
)
from online_store.domain.models import Product, ProcessingStep
from online_store.domain.order import Order
from online_store.errors import (
    CollaboratorError,
    ConfigurationError,
    DeliveryError,
    NotificationError,
    PaymentError,
)
from online_store.processor import OrderProcessor
from online_store.services.delivery import CourierDelivery, PickUpPointDelivery, PostDelivery
from online_store.services.notify import EmailNotification, SmsNotification
from online_store.services.payment import BankTransferPayment, CreditCardPayment, PayPalPayment

# ----------------------------
# Helpers
# ----------------------------


def recorded_order(log: CallLog, *items: tuple[Product, int]) -> Order:
    order = Order(
        payment_method=RecordingPaymentMethod(log),
        delivery_method=RecordingDeliveryMethod(log),
        order_id="test-order",
    )
    for product, quantity in items:
        order.add_item(product, quantity)
    return order


# ----------------------------
# Sequencing
# ----------------------------


def test_steps_run_once_in_fixed_order(call_log: CallLog, laptop: Product):
    order = recorded_order(call_log, (laptop, 1))
    OrderProcessor(RecordingNotification(call_log)).process(order, DiscountCalculator(NoDiscount()))

    assert call_log.kinds() == ["payment", "delivery", "notification"]


def test_payment_receives_discounted_total(call_log: CallLog, laptop: Product, mouse: Product):
    order = recorded_order(call_log, (laptop, 1), (mouse, 2))
    calculator = DiscountCalculator(PercentageDiscount(0.1))

    OrderProcessor(RecordingNotification(call_log)).process(order, calculator)

    _, charged = call_log[0]
    assert charged == pytest.approx(calculator.calculate(order.subtotal()))


def test_delivery_receives_the_order_itself(call_log: CallLog, ticket: Product):
    order = recorded_order(call_log, (ticket, 2))
    OrderProcessor(RecordingNotification(call_log)).process(order)

    _, delivered = call_log[1]
    assert delivered is order


def test_notification_message_contains_total(call_log: CallLog, ticket: Product):
    order = recorded_order(call_log, (ticket, 2))
    OrderProcessor(RecordingNotification(call_log)).process(order, DiscountCalculator(FixedAmountDiscount(50)))

    assert call_log[2] == ("notification", "Your order has been processed. Total = 350")


def test_missing_calculator_means_no_discount(call_log: CallLog, ticket: Product):
    order = recorded_order(call_log, (ticket, 2))
    result = OrderProcessor(RecordingNotification(call_log)).process(order)
    assert result.total == pytest.approx(400)


def test_result_snapshot(call_log: CallLog, laptop: Product, mouse: Product):
    order = recorded_order(call_log, (laptop, 1), (mouse, 2))
    result = OrderProcessor(RecordingNotification(call_log)).process(
        order, DiscountCalculator(PercentageDiscount(0.1))
    )

    assert result.order_id == "test-order"
    assert result.subtotal == pytest.approx(1100)
    assert result.total == pytest.approx(990)
    assert result.completed_steps == [
        ProcessingStep.PAYMENT,
        ProcessingStep.DELIVERY,
        ProcessingStep.NOTIFICATION,
    ]
    assert result.message == "Your order has been processed. Total = 990"


def test_empty_order_is_processed_with_zero_total(call_log: CallLog):
    order = recorded_order(call_log)
    result = OrderProcessor(RecordingNotification(call_log)).process(order)
    assert result.total == 0
    assert call_log[0] == ("payment", 0)


def test_negative_percentage_total_is_passed_through(call_log: CallLog, mouse: Product):
    order = recorded_order(call_log, (mouse, 2))
    OrderProcessor(RecordingNotification(call_log)).process(order, DiscountCalculator(PercentageDiscount(1.5)))
    assert call_log[0] == ("payment", pytest.approx(-50))


# ----------------------------
# Demo scenarios with real variants
# ----------------------------


def test_scenario_a_laptop_and_mouse(call_log: CallLog, laptop: Product, mouse: Product):
    order = Order()
    order.add_item(laptop, 1)
    order.add_item(mouse, 2)
    order.payment_method = PayPalPayment(RecordingGateway(call_log))
    order.delivery_method = CourierDelivery(RecordingLogistics(call_log))

    processor = OrderProcessor(EmailNotification(RecordingMessaging(call_log)))
    processor.process(order, DiscountCalculator(PercentageDiscount(0.1)))

    assert order.subtotal() == pytest.approx(1100)
    assert call_log == [
        ("payment", (pytest.approx(990), "via PayPal")),
        ("delivery", (order, "will be delivered by courier")),
        ("notification", ("Email", "Your order has been processed. Total = 990")),
    ]


def test_scenario_b_concert_tickets(call_log: CallLog, ticket: Product):
    order = Order()
    order.add_item(ticket, 2)
    order.payment_method = CreditCardPayment(RecordingGateway(call_log))
    order.delivery_method = PickUpPointDelivery(RecordingLogistics(call_log))

    processor = OrderProcessor(SmsNotification(RecordingMessaging(call_log)))
    processor.process(order, DiscountCalculator(FixedAmountDiscount(50)))

    assert order.subtotal() == pytest.approx(400)
    assert call_log == [
        ("payment", (350, "with Credit Card")),
        ("delivery", (order, "can be picked up from collection point")),
        ("notification", ("SMS", "Your order has been processed. Total = 350")),
    ]


@pytest.mark.parametrize("payment_cls", [CreditCardPayment, PayPalPayment, BankTransferPayment])
@pytest.mark.parametrize("delivery_cls", [CourierDelivery, PostDelivery, PickUpPointDelivery])
@pytest.mark.parametrize("notification_cls", [EmailNotification, SmsNotification])
@pytest.mark.parametrize(
    "strategy, expected_total",
    [(NoDiscount(), 400), (PercentageDiscount(0.25), 300), (FixedAmountDiscount(50), 350)],
)
def test_variants_are_substitutable(
    call_log: CallLog,
    ticket: Product,
    payment_cls,
    delivery_cls,
    notification_cls,
    strategy,
    expected_total: float,
):
    order = Order(
        payment_method=payment_cls(RecordingGateway(call_log)),
        delivery_method=delivery_cls(RecordingLogistics(call_log)),
    )
    order.add_item(ticket, 2)

    result = OrderProcessor(notification_cls(RecordingMessaging(call_log))).process(
        order, DiscountCalculator(strategy)
    )

    assert call_log.kinds() == ["payment", "delivery", "notification"]
    assert result.subtotal == pytest.approx(400)
    assert result.total == pytest.approx(expected_total)
    assert call_log[0][1][0] == pytest.approx(expected_total)


# ----------------------------
# Configuration errors
# ----------------------------


def test_missing_payment_method_fails_before_side_effects(call_log: CallLog, laptop: Product):
    order = Order(delivery_method=RecordingDeliveryMethod(call_log), order_id="no-pay")
    order.add_item(laptop, 1)

    with pytest.raises(ConfigurationError) as excinfo:
        OrderProcessor(RecordingNotification(call_log)).process(order)

    assert excinfo.value.missing == ["payment_method"]
    assert excinfo.value.order_id == "no-pay"
    assert call_log == []


def test_missing_delivery_method_fails_before_side_effects(call_log: CallLog, laptop: Product):
    order = Order(payment_method=RecordingPaymentMethod(call_log))
    order.add_item(laptop, 1)

    with pytest.raises(ConfigurationError, match="delivery_method"):
        OrderProcessor(RecordingNotification(call_log)).process(order)
    assert call_log == []


def test_configuration_error_lists_every_missing_slot(call_log: CallLog):
    with pytest.raises(ConfigurationError) as excinfo:
        OrderProcessor(RecordingNotification(call_log)).process(Order())
    assert excinfo.value.missing == ["payment_method", "delivery_method"]


# ----------------------------
# Collaborator failures
# ----------------------------


def test_payment_failure_skips_delivery_and_notification(call_log: CallLog, ticket: Product):
    order = Order(
        payment_method=CreditCardPayment(RecordingGateway(call_log, fail_with=RuntimeError("card declined"))),
        delivery_method=PickUpPointDelivery(RecordingLogistics(call_log)),
        order_id="declined",
    )
    order.add_item(ticket, 1)

    with pytest.raises(PaymentError) as excinfo:
        OrderProcessor(SmsNotification(RecordingMessaging(call_log))).process(order)

    assert excinfo.value.step is ProcessingStep.PAYMENT
    assert excinfo.value.order_id == "declined"
    assert isinstance(excinfo.value.__cause__, RuntimeError)
    assert call_log == []


def test_delivery_failure_skips_notification(call_log: CallLog, ticket: Product):
    order = Order(
        payment_method=RecordingPaymentMethod(call_log),
        delivery_method=PostDelivery(RecordingLogistics(call_log, fail_with=ConnectionError("no route"))),
    )
    order.add_item(ticket, 1)

    with pytest.raises(DeliveryError):
        OrderProcessor(RecordingNotification(call_log)).process(order)

    assert call_log.kinds() == ["payment"]


def test_notification_failure_is_reported(call_log: CallLog, ticket: Product):
    order = recorded_order(call_log, (ticket, 1))
    notification = EmailNotification(RecordingMessaging(call_log, fail_with=TimeoutError("smtp")))

    with pytest.raises(NotificationError) as excinfo:
        OrderProcessor(notification).process(order)

    assert isinstance(excinfo.value, CollaboratorError)
    assert call_log.kinds() == ["payment", "delivery"]


def test_collaborator_error_of_the_step_kind_passes_through(call_log: CallLog, ticket: Product):
    declined = PaymentError("insufficient funds")
    order = Order(
        payment_method=BankTransferPayment(RecordingGateway(call_log, fail_with=declined)),
        delivery_method=RecordingDeliveryMethod(call_log),
        order_id="poor",
    )
    order.add_item(ticket, 1)

    with pytest.raises(PaymentError) as excinfo:
        OrderProcessor(RecordingNotification(call_log)).process(order)

    assert excinfo.value is declined
    assert excinfo.value.order_id == "poor"
    assert str(excinfo.value) == "insufficient funds"

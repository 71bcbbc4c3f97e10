"""Tests for the strategy examples."""
from unittest.mock import Mock

import pytest
from pydantic import ValidationError as PydanticValidationError

from pattern_gallery.domain.base.exceptions import ValidationError
from pattern_gallery.patterns._encoding import timestamp_millis, to_base36
from pattern_gallery.patterns.strategy.payment_processor.refactored import (
    BankTransferStrategy,
    CreditCardStrategy,
    PaymentProcessor,
    PayPalStrategy,
)
from pattern_gallery.patterns.strategy.shopping_cart.refactored import (
    BankTransferPayment,
    BuyXGetYFreeDiscount,
    CartItem,
    CreditCardPayment,
    CryptocurrencyPayment,
    FixedDiscount,
    PaymentMethodNotSupportedError,
    PaymentStrategyFactory,
    PercentDiscount,
    ShoppingCart,
)

VALID_CARD = {"card_number": "4111 1111 1111 1111", "expiry_date": "12/25", "cvv": "123"}


def test_payment_processor_swaps_strategies(console):
    processor = PaymentProcessor(CreditCardStrategy("1234-5678-9012-3456", "123", "12/24", console))

    assert processor.process_payment(100) is True
    processor.set_payment_strategy(PayPalStrategy("user@example.com", "password", console))
    processor.process_payment(200)
    processor.set_payment_strategy(BankTransferStrategy("FR761234567890", "ABCDEFGH", console))
    processor.process_payment(300)

    assert console.lines == [
        "Payment of 100€ processed by credit card 1234-5678-9012-3456",
        "Payment of 200€ processed via PayPal (user@example.com)",
        "Payment of 300€ processed by bank transfer (FR761234567890)",
    ]


class TestShoppingCartTotals:
    """Test subtotal and discount arithmetic."""

    def setup_method(self):
        self.cart = ShoppingCart(Mock())

    def test_percent_and_fixed_discounts(self):
        self.cart.add_item(CartItem(id=1, name="Book", price=40, type="book"))
        self.cart.add_item(CartItem(id=2, name="Mouse", price=60, type="electronics"))
        self.cart.add_discount(PercentDiscount(name="Sale", value=10))
        self.cart.add_discount(FixedDiscount(name="Voucher", value=5))

        assert self.cart.calculate_subtotal() == 100
        assert self.cart.calculate_discounts() == pytest.approx(15)
        assert self.cart.calculate_total() == pytest.approx(85)

    def test_buy_x_get_y_free_discounts_cheapest_items(self):
        for item_id, price in enumerate((30, 10, 20, 25), start=1):
            self.cart.add_item(CartItem(id=item_id, name=f"Case {item_id}", price=price, type="accessory"))
        self.cart.add_item(CartItem(id=9, name="Laptop", price=5, type="electronics"))
        self.cart.add_discount(BuyXGetYFreeDiscount(name="3 for 2", buy_quantity=2, free_quantity=1,
                                                    item_type="accessory"))

        assert self.cart.calculate_discounts() == 10

    def test_remove_item(self):
        self.cart.add_item(CartItem(id=1, name="Book", price=40, type="book"))

        assert self.cart.remove_item(1) is True
        assert self.cart.remove_item(1) is False
        assert self.cart.items == []

    def test_percent_discount_is_bounded(self):
        with pytest.raises(PydanticValidationError, match="less than or equal to 100"):
            PercentDiscount(name="Too generous", value=150)


class TestCheckout:
    """Test checkout through each payment strategy."""

    @pytest.fixture(autouse=True)
    def _cart(self, console, fixed_clock):
        self.console = console
        self.clock = fixed_clock
        self.rng = Mock()
        self.rng.random.return_value = 0.5
        self.cart = ShoppingCart(console)
        self.cart.add_item(CartItem(id=1, name="Headphones", price=149.99, type="electronics"))

    def _use(self, method):
        self.cart.set_payment_strategy(
            PaymentStrategyFactory.create_payment_strategy(method, self.cart, self.rng, self.clock))

    def test_no_payment_method(self):
        assert self.cart.checkout({}) is False
        assert self.console.errors == ["Error: no payment method selected"]

    def test_credit_card_clears_cart(self):
        self._use("credit_card")

        assert self.cart.checkout(VALID_CARD) is True
        assert self.cart.items == []
        assert "Processing credit card payment: **** **** **** 1111" in self.console.lines
        assert self.console.lines[-1] == "Confirmation email sent"

    def test_credit_card_declined(self):
        self.rng.random.return_value = 0.1
        self._use("credit_card")

        assert self.cart.checkout(VALID_CARD) is False
        assert len(self.cart.items) == 1

    def test_invalid_card(self):
        self._use("credit_card")

        assert self.cart.checkout({**VALID_CARD, "cvv": "12"}) is False

    def test_paypal(self):
        self._use("paypal")

        assert self.cart.checkout({"email": "client@example.com"}) is True
        assert self.cart.checkout({"email": "not-an-email"}) is False

    def test_bank_transfer_keeps_items_until_paid(self):
        self._use("bank_transfer")
        reference = f"CMD-{to_base36(timestamp_millis(self.clock()))}"

        assert self.cart.checkout({"account_number": "1234567890", "bank_code": "98765"}) is True
        assert len(self.cart.items) == 1
        assert f"Reference: {reference}" in self.console.lines
        assert self.console.lines[-1] == f"Email sent with payment instructions (ref: {reference})"

    def test_cryptocurrency(self):
        self._use("cryptocurrency")

        assert self.cart.checkout({"wallet_address": "0x742d35Cc6634C0532925a3b844Bc454e4438f44e",
                                   "coin_type": "ETH"}) is True
        assert "Amount: 0.077995 ETH" in self.console.lines
        assert len(self.cart.items) == 1

    def test_unsupported_method(self):
        with pytest.raises(PaymentMethodNotSupportedError, match="Unsupported payment method: cheque") as exc_info:
            self._use("cheque")

        assert isinstance(exc_info.value, ValidationError)
        assert exc_info.value.method == "cheque"


@pytest.mark.parametrize("number, expiry, cvv, expected", [
    ("4111 1111 1111 1111", "12/25", "123", True),
    ("4111111111111111", "12/25", "1234", True),
    ("4111 1111 1111", "12/25", "123", False),
    ("4111 1111 1111 1111", "1225", "123", False),
])
def test_card_validation(number, expiry, cvv, expected):
    assert CreditCardPayment.validate(number, expiry, cvv) is expected


@pytest.mark.parametrize("address, coin, expected", [
    ("1BoatSLRHtKNngkdXEeobR76b53LETtpyT", "BTC", True),
    ("bc1qar0srrr7xfkvy5l643lydnw9re59gtzzwf5mdq", "BTC", True),
    ("0x742d35Cc6634C0532925a3b844Bc454e4438f44e", "ETH", True),
    ("0x742d35", "ETH", False),
    ("0x742d35Cc6634C0532925a3b844Bc454e4438f44e", "DOGE", False),
])
def test_wallet_validation(address, coin, expected):
    assert CryptocurrencyPayment.validate_wallet(address, coin) is expected


def test_bank_reference_uses_clock(fixed_clock):
    strategy = BankTransferPayment(ShoppingCart(Mock()), Mock(), fixed_clock)

    assert strategy.generate_reference().startswith("CMD-")

"""
Shopping cart checkout with payment strategies.

The cart computes totals and discounts; how the money moves is the job of a
:class:`PaymentStrategy` picked through :class:`PaymentStrategyFactory`.
A strategy returns a :class:`PaymentResult` saying whether the payment
succeeded, whether it was immediate and which notification to send.
"""
import random
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, ClassVar, Dict, List, Optional, Type

from pydantic import BaseModel, Field

from pattern_gallery.domain.base.exceptions import ValidationError
from pattern_gallery.domain.base.ports import ConsolePort
from pattern_gallery.domain.catalog import DemoContext
from pattern_gallery.patterns._encoding import timestamp_millis, to_base36

Clock = Callable[[], datetime]

CARD_NUMBER_PATTERN = re.compile(r"\d{16}")
CVV_PATTERN = re.compile(r"\d{3,4}")
EXPIRY_PATTERN = re.compile(r"\d{2}/\d{2}")
EMAIL_PATTERN = re.compile(r"[\w.-]+@[\w.-]+\.\w+")
ACCOUNT_NUMBER_PATTERN = re.compile(r"\d{10,}")
BANK_CODE_PATTERN = re.compile(r"\d{5,}")

CARD_FAILURE_RATE = 0.1
PAYPAL_FAILURE_RATE = 0.05


class PaymentMethodNotSupportedError(ValidationError):
    """Raised when no strategy is registered for a payment method key."""

    def __init__(self, method: str):
        super().__init__(f"Unsupported payment method: {method}", field="payment_method",
                         details={"method": method})
        self.method = method


class CartItem(BaseModel):
    id: int
    name: str
    price: float = Field(ge=0)
    type: str


class Discount(BaseModel, ABC):
    name: str

    @abstractmethod
    def amount(self, items: List[CartItem], subtotal: float) -> float: ...


class PercentDiscount(Discount):
    value: float = Field(ge=0, le=100)

    def amount(self, items: List[CartItem], subtotal: float) -> float:
        return subtotal * self.value / 100


class FixedDiscount(Discount):
    value: float = Field(ge=0)

    def amount(self, items: List[CartItem], subtotal: float) -> float:
        return self.value


class BuyXGetYFreeDiscount(Discount):
    """For each full set of ``buy + free`` matching items, the cheapest ``free`` ones cost nothing."""

    buy_quantity: int = Field(gt=0)
    free_quantity: int = Field(gt=0)
    item_type: str

    def amount(self, items: List[CartItem], subtotal: float) -> float:
        applicable = sorted((item for item in items if item.type == self.item_type),
                            key=lambda item: item.price)
        sets = len(applicable) // (self.buy_quantity + self.free_quantity)
        return sum(item.price for item in applicable[:sets * self.free_quantity])


@dataclass
class PaymentResult:
    success: bool
    immediate: bool = False
    notification: Optional[Callable[[], None]] = None
    details: Dict[str, Any] = field(default_factory=dict)


class ShoppingCart:
    def __init__(self, console: ConsolePort):
        self.console = console
        self.items: List[CartItem] = []
        self.discounts: List[Discount] = []
        self.payment_strategy: Optional["PaymentStrategy"] = None

    def add_item(self, item: CartItem) -> None:
        self.items.append(item)
        self.console.print(f"Item added to cart: {item.name} - {item.price}€")

    def remove_item(self, item_id: int) -> bool:
        for item in self.items:
            if item.id == item_id:
                self.items.remove(item)
                self.console.print(f"Item removed from cart: {item.name}")
                return True
        return False

    def add_discount(self, discount: Discount) -> None:
        self.discounts.append(discount)
        self.console.print(f"Discount added: {discount.name}")

    def calculate_subtotal(self) -> float:
        return sum(item.price for item in self.items)

    def calculate_discounts(self) -> float:
        subtotal = self.calculate_subtotal()
        return sum(discount.amount(self.items, subtotal) for discount in self.discounts)

    def calculate_total(self) -> float:
        return self.calculate_subtotal() - self.calculate_discounts()

    def set_payment_strategy(self, strategy: "PaymentStrategy") -> None:
        self.payment_strategy = strategy

    def checkout(self, details: Dict[str, Any]) -> bool:
        if self.payment_strategy is None:
            self.console.error("Error: no payment method selected")
            return False

        total = self.calculate_total()
        self.console.print(f"Cart total: {total:.2f}€")
        result = self.payment_strategy.process_payment(total, details)
        if result.success:
            if result.immediate:
                self.items = []
            if result.notification is not None:
                result.notification()
        return result.success

    def send_confirmation_email(self) -> None:
        self.console.print("Confirmation email sent")

    def send_pending_order_email(self, reference: str) -> None:
        self.console.print(f"Email sent with payment instructions (ref: {reference})")


class PaymentStrategy(ABC):
    def __init__(self, cart: ShoppingCart, rng: random.Random, clock: Clock = datetime.now):
        self.cart = cart
        self.console = cart.console
        self.rng = rng
        self.clock = clock

    @abstractmethod
    def process_payment(self, amount: float, details: Dict[str, Any]) -> PaymentResult: ...


class CreditCardPayment(PaymentStrategy):
    def process_payment(self, amount: float, details: Dict[str, Any]) -> PaymentResult:
        card_number = details.get("card_number", "")
        if not self.validate(card_number, details.get("expiry_date", ""), details.get("cvv", "")):
            self.console.print("Payment failed: invalid card details")
            return PaymentResult(success=False)

        self.console.print(f"Processing credit card payment: {self.mask(card_number)}")
        self.console.print(f"Amount: {amount:.2f}€")
        if self.rng.random() <= CARD_FAILURE_RATE:
            self.console.print("Payment failed: transaction declined by the bank")
            return PaymentResult(success=False)
        self.console.print("Credit card payment authorized")
        return PaymentResult(success=True, immediate=True, notification=self.cart.send_confirmation_email)

    @staticmethod
    def validate(card_number: str, expiry_date: str, cvv: str) -> bool:
        number = re.sub(r"\s", "", card_number)
        return bool(CARD_NUMBER_PATTERN.fullmatch(number) and CVV_PATTERN.fullmatch(cvv)
                    and EXPIRY_PATTERN.fullmatch(expiry_date))

    @staticmethod
    def mask(card_number: str) -> str:
        digits = re.sub(r"\s", "", card_number)
        return f"**** **** **** {digits[-4:]}"


class PayPalPayment(PaymentStrategy):
    def process_payment(self, amount: float, details: Dict[str, Any]) -> PaymentResult:
        email = details.get("email", "")
        if not EMAIL_PATTERN.fullmatch(email):
            self.console.print("Payment failed: invalid PayPal account")
            return PaymentResult(success=False)

        self.console.print(f"Redirecting to PayPal for account: {email}")
        self.console.print(f"Amount: {amount:.2f}€")
        if self.rng.random() <= PAYPAL_FAILURE_RATE:
            self.console.print("Payment failed: insufficient PayPal balance")
            return PaymentResult(success=False)
        self.console.print("PayPal payment authorized")
        return PaymentResult(success=True, immediate=True, notification=self.cart.send_confirmation_email)


class BankTransferPayment(PaymentStrategy):
    def process_payment(self, amount: float, details: Dict[str, Any]) -> PaymentResult:
        if not (ACCOUNT_NUMBER_PATTERN.fullmatch(details.get("account_number", ""))
                and BANK_CODE_PATTERN.fullmatch(details.get("bank_code", ""))):
            self.console.print("Payment failed: invalid bank details")
            return PaymentResult(success=False)

        reference = self.generate_reference()
        self.console.print("Bank transfer details:")
        self.console.print(f"Amount: {amount:.2f}€")
        self.console.print("Account to credit: FRXX-XXXX-XXXX")
        self.console.print(f"Reference: {reference}")
        self.console.print("Your order will be processed once payment is received (2-3 business days)")
        return PaymentResult(
            success=True,
            immediate=False,
            notification=lambda: self.cart.send_pending_order_email(reference),
            details={"reference": reference},
        )

    def generate_reference(self) -> str:
        return f"CMD-{to_base36(timestamp_millis(self.clock()))}"


class CryptocurrencyPayment(PaymentStrategy):
    wallet_addresses: ClassVar[Dict[str, str]] = {
        "BTC": "3J98t1WpEZ73CNmQviecrnyiWrnqRhWNLy",
        "ETH": "0xffd8456fe0ce35863bd7778183bc1ef2c05c5e89",
    }
    conversion_rates: ClassVar[Dict[str, float]] = {"BTC": 0.000033, "ETH": 0.00052}

    def process_payment(self, amount: float, details: Dict[str, Any]) -> PaymentResult:
        coin = details.get("coin_type", "")
        if not self.validate_wallet(details.get("wallet_address", ""), coin):
            self.console.print("Payment failed: invalid wallet address")
            return PaymentResult(success=False)

        crypto_amount = self.convert(amount, coin)
        destination = self.wallet_addresses[coin]
        self.console.print(f"{coin} payment details:")
        self.console.print(f"Amount: {crypto_amount} {coin}")
        self.console.print(f"Destination address: {destination}")
        self.console.print("Your order will be processed once the transaction is confirmed (6 confirmations)")
        return PaymentResult(
            success=True,
            immediate=False,
            notification=lambda: self.console.print(
                f"Email sent with crypto payment instructions ({crypto_amount} {coin})"),
            details={"crypto_amount": crypto_amount, "wallet_address": destination},
        )

    @staticmethod
    def validate_wallet(address: str, coin: str) -> bool:
        if coin == "BTC":
            return address.startswith(("1", "3", "bc1"))
        if coin == "ETH":
            return address.startswith("0x") and len(address) == 42
        return False

    def convert(self, amount: float, coin: str) -> str:
        return f"{amount * self.conversion_rates[coin]:.6f}"


class PaymentStrategyFactory:
    strategies: ClassVar[Dict[str, Type[PaymentStrategy]]] = {
        "credit_card": CreditCardPayment,
        "paypal": PayPalPayment,
        "bank_transfer": BankTransferPayment,
        "cryptocurrency": CryptocurrencyPayment,
    }

    @classmethod
    def create_payment_strategy(cls, method: str, cart: ShoppingCart, rng: random.Random,
                                clock: Clock = datetime.now) -> PaymentStrategy:
        """
        Build the strategy registered under ``method``.

        Raises:
            PaymentMethodNotSupportedError: If ``method`` is unknown
        """
        strategy_class = cls.strategies.get(method)
        if strategy_class is None:
            raise PaymentMethodNotSupportedError(method)
        return strategy_class(cart, rng, clock)


def run(context: DemoContext) -> None:
    console = context.console

    def checkout(cart: ShoppingCart, method: str, details: Dict[str, Any]) -> bool:
        cart.set_payment_strategy(
            PaymentStrategyFactory.create_payment_strategy(method, cart, context.rng, context.clock))
        return cart.checkout(details)

    console.print("--- Credit card payment ---")
    cart = ShoppingCart(console)
    cart.add_item(CartItem(id=1, name="Book: Design Patterns", price=35.99, type="book"))
    cart.add_item(CartItem(id=2, name="Mechanical keyboard", price=129.99, type="electronics"))
    cart.add_item(CartItem(id=3, name="Wireless mouse", price=49.99, type="electronics"))
    cart.add_discount(PercentDiscount(name="Summer sale", value=10))
    checkout(cart, "credit_card", {"card_number": "4111 1111 1111 1111", "expiry_date": "12/25", "cvv": "123"})

    console.print("--- PayPal payment ---")
    cart = ShoppingCart(console)
    cart.add_item(CartItem(id=4, name="Smartphone", price=599.99, type="electronics"))
    cart.add_item(CartItem(id=5, name="Protective case", price=19.99, type="accessory"))
    checkout(cart, "paypal", {"email": "client@example.com", "password": "********"})

    console.print("--- Bank transfer payment ---")
    cart = ShoppingCart(console)
    cart.add_item(CartItem(id=6, name="Laptop", price=1299.99, type="electronics"))
    cart.add_item(CartItem(id=7, name="Carrying bag", price=59.99, type="accessory"))
    cart.add_item(CartItem(id=8, name="Bluetooth mouse", price=39.99, type="electronics"))
    cart.add_discount(BuyXGetYFreeDiscount(name="Buy 2 accessories, get 1 free", buy_quantity=2,
                                           free_quantity=1, item_type="accessory"))
    checkout(cart, "bank_transfer", {"account_number": "1234567890", "bank_code": "98765"})

    console.print("--- Cryptocurrency payment ---")
    cart = ShoppingCart(console)
    cart.add_item(CartItem(id=9, name="Headphones", price=149.99, type="electronics"))
    checkout(cart, "cryptocurrency", {"wallet_address": "0x742d35Cc6634C0532925a3b844Bc454e4438f44e",
                                      "coin_type": "ETH"})

    console.print("--- Missing and unsupported payment methods ---")
    ShoppingCart(console).checkout({})
    try:
        PaymentStrategyFactory.create_payment_strategy("cheque", cart, context.rng, context.clock)
    except PaymentMethodNotSupportedError as e:
        console.error(str(e))


if __name__ == "__main__":
    from pattern_gallery.patterns._standalone import run_standalone

    run_standalone(run)

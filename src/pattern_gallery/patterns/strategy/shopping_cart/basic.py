"""Monolithic checkout: every payment method lives in one method."""
import random
import re
from datetime import datetime
from typing import Any, Callable, Dict, List

from pattern_gallery.domain.base.ports import ConsolePort
from pattern_gallery.domain.catalog import DemoContext
from pattern_gallery.patterns._encoding import timestamp_millis, to_base36

CRYPTO_WALLETS = {
    "BTC": "3J98t1WpEZ73CNmQviecrnyiWrnqRhWNLy",
    "ETH": "0xffd8456fe0ce35863bd7778183bc1ef2c05c5e89",
}
CRYPTO_RATES = {"BTC": 0.000033, "ETH": 0.00052}


class ShoppingCart:
    def __init__(self, console: ConsolePort, rng: random.Random, clock: Callable[[], datetime] = datetime.now):
        self.console = console
        self.rng = rng
        self.clock = clock
        self.items: List[Dict[str, Any]] = []
        self.discounts: List[Dict[str, Any]] = []

    def add_item(self, item: Dict[str, Any]) -> None:
        self.items.append(item)
        self.console.print(f"Item added to cart: {item['name']} - {item['price']}€")

    def add_discount(self, discount: Dict[str, Any]) -> None:
        self.discounts.append(discount)
        self.console.print(f"Discount added: {discount['name']}")

    def calculate_subtotal(self) -> float:
        return sum(item["price"] for item in self.items)

    def calculate_discounts(self) -> float:
        total = 0.0
        for discount in self.discounts:
            if discount["type"] == "percent":
                total += self.calculate_subtotal() * discount["value"] / 100
            elif discount["type"] == "fixed":
                total += discount["value"]
            elif discount["type"] == "buy_x_get_y_free":
                applicable = sorted((i for i in self.items if i["type"] == discount["item_type"]),
                                    key=lambda i: i["price"])
                sets = len(applicable) // (discount["buy"] + discount["free"])
                total += sum(i["price"] for i in applicable[:sets * discount["free"]])
        return total

    def calculate_total(self) -> float:
        return self.calculate_subtotal() - self.calculate_discounts()

    def checkout(self, payment_method: str, details: Dict[str, Any]) -> bool:
        total = self.calculate_total()
        self.console.print(f"Cart total: {total:.2f}€")

        if payment_method == "credit_card":
            number = re.sub(r"\s", "", details["card_number"])
            if not (re.fullmatch(r"\d{16}", number) and re.fullmatch(r"\d{3,4}", details["cvv"])
                    and re.fullmatch(r"\d{2}/\d{2}", details["expiry_date"])):
                self.console.print("Payment failed: invalid card details")
                return False
            self.console.print(f"Processing credit card payment: **** **** **** {number[-4:]}")
            self.console.print(f"Amount: {total:.2f}€")
            if self.rng.random() > 0.1:
                self.console.print("Credit card payment authorized")
                self.console.print("Confirmation email sent")
                self.items = []
                return True
            self.console.print("Payment failed: transaction declined by the bank")
            return False
        elif payment_method == "paypal":
            if not re.fullmatch(r"[\w.-]+@[\w.-]+\.\w+", details["email"]):
                self.console.print("Payment failed: invalid PayPal account")
                return False
            self.console.print(f"Redirecting to PayPal for account: {details['email']}")
            self.console.print(f"Amount: {total:.2f}€")
            if self.rng.random() > 0.05:
                self.console.print("PayPal payment authorized")
                self.console.print("Confirmation email sent")
                self.items = []
                return True
            self.console.print("Payment failed: insufficient PayPal balance")
            return False
        elif payment_method == "bank_transfer":
            if not (re.fullmatch(r"\d{10,}", details["account_number"])
                    and re.fullmatch(r"\d{5,}", details["bank_code"])):
                self.console.print("Payment failed: invalid bank details")
                return False
            reference = f"CMD-{to_base36(timestamp_millis(self.clock()))}"
            self.console.print(f"Bank transfer of {total:.2f}€, reference {reference}")
            self.console.print(f"Email sent with payment instructions (ref: {reference})")
            return True
        elif payment_method == "cryptocurrency":
            coin, wallet = details["coin_type"], details["wallet_address"]
            if coin == "BTC":
                valid = wallet.startswith(("1", "3", "bc1"))
            elif coin == "ETH":
                valid = wallet.startswith("0x") and len(wallet) == 42
            else:
                valid = False
            if not valid:
                self.console.print("Payment failed: invalid wallet address")
                return False
            amount = f"{total * CRYPTO_RATES[coin]:.6f}"
            self.console.print(f"Send {amount} {coin} to {CRYPTO_WALLETS[coin]}")
            self.console.print(f"Email sent with crypto payment instructions ({amount} {coin})")
            return True
        else:
            self.console.print(f"Unsupported payment method: {payment_method}")
            return False


def run(context: DemoContext) -> None:
    cart = ShoppingCart(context.console, context.rng, context.clock)
    cart.add_item({"id": 1, "name": "Book: Design Patterns", "price": 35.99, "type": "book"})
    cart.add_item({"id": 2, "name": "Mechanical keyboard", "price": 129.99, "type": "electronics"})
    cart.add_discount({"name": "Summer sale", "type": "percent", "value": 10})
    cart.checkout("credit_card", {"card_number": "4111 1111 1111 1111", "expiry_date": "12/25", "cvv": "123"})

    cart = ShoppingCart(context.console, context.rng, context.clock)
    cart.add_item({"id": 9, "name": "Headphones", "price": 149.99, "type": "electronics"})
    cart.checkout("cryptocurrency", {"wallet_address": "0x742d35Cc6634C0532925a3b844Bc454e4438f44e",
                                     "coin_type": "ETH"})
    cart.checkout("cheque", {})


if __name__ == "__main__":
    from pattern_gallery.patterns._standalone import run_standalone

    run_standalone(run)

"""Payment methods created by :class:`PaymentMethodFactory`."""
from abc import ABC, abstractmethod
from typing import Dict, Type

from pattern_gallery.domain.base.ports import ConsolePort
from pattern_gallery.domain.catalog import DemoContext
from pattern_gallery.patterns.factory.errors import UnknownProductTypeError


class PaymentMethod(ABC):
    def __init__(self, console: ConsolePort):
        self.console = console

    @abstractmethod
    def process(self, amount: float) -> None: ...


class CreditCardPayment(PaymentMethod):
    def process(self, amount: float) -> None:
        self.console.print(f"Processing credit card payment for ${amount}")


class PayPalPayment(PaymentMethod):
    def process(self, amount: float) -> None:
        self.console.print(f"Processing PayPal payment for ${amount}")


class BitcoinPayment(PaymentMethod):
    def process(self, amount: float) -> None:
        self.console.print(f"Processing Bitcoin payment for ${amount}")


class PaymentMethodFactory:
    METHODS: Dict[str, Type[PaymentMethod]] = {
        "credit": CreditCardPayment,
        "paypal": PayPalPayment,
        "bitcoin": BitcoinPayment,
    }

    def __init__(self, console: ConsolePort):
        self.console = console

    def create_payment_method(self, method_type: str) -> PaymentMethod:
        method_class = self.METHODS.get(method_type)
        if method_class is None:
            raise UnknownProductTypeError("payment method", method_type, self.METHODS)
        return method_class(self.console)


def run(context: DemoContext) -> None:
    factory = PaymentMethodFactory(context.console)
    for method_type, amount in (("credit", 100), ("paypal", 50), ("bitcoin", 200)):
        factory.create_payment_method(method_type).process(amount)


if __name__ == "__main__":
    from pattern_gallery.patterns._standalone import run_standalone

    run_standalone(run)

"""Payment strategies selected at runtime by a :class:`PaymentProcessor`."""
from abc import ABC, abstractmethod

from pattern_gallery.domain.base.ports import ConsolePort
from pattern_gallery.domain.catalog import DemoContext


class PaymentStrategy(ABC):
    def __init__(self, console: ConsolePort):
        self.console = console

    @abstractmethod
    def process_payment(self, amount: float) -> bool: ...


class CreditCardStrategy(PaymentStrategy):
    def __init__(self, card_number: str, cvv: str, expiry: str, console: ConsolePort):
        super().__init__(console)
        self.card_number = card_number
        self.cvv = cvv
        self.expiry = expiry

    def process_payment(self, amount: float) -> bool:
        self.console.print(f"Payment of {amount}€ processed by credit card {self.card_number}")
        return True


class PayPalStrategy(PaymentStrategy):
    def __init__(self, email: str, password: str, console: ConsolePort):
        super().__init__(console)
        self.email = email
        self.password = password

    def process_payment(self, amount: float) -> bool:
        self.console.print(f"Payment of {amount}€ processed via PayPal ({self.email})")
        return True


class BankTransferStrategy(PaymentStrategy):
    def __init__(self, account_number: str, bank_code: str, console: ConsolePort):
        super().__init__(console)
        self.account_number = account_number
        self.bank_code = bank_code

    def process_payment(self, amount: float) -> bool:
        self.console.print(f"Payment of {amount}€ processed by bank transfer ({self.account_number})")
        return True


class PaymentProcessor:
    def __init__(self, strategy: PaymentStrategy):
        self.strategy = strategy

    def set_payment_strategy(self, strategy: PaymentStrategy) -> None:
        self.strategy = strategy

    def process_payment(self, amount: float) -> bool:
        return self.strategy.process_payment(amount)


def run(context: DemoContext) -> None:
    console = context.console
    credit_card = CreditCardStrategy("1234-5678-9012-3456", "123", "12/24", console)
    paypal = PayPalStrategy("user@example.com", "password", console)
    bank_transfer = BankTransferStrategy("FR761234567890", "ABCDEFGH", console)

    processor = PaymentProcessor(credit_card)
    processor.process_payment(100)

    processor.set_payment_strategy(paypal)
    processor.process_payment(200)

    processor.set_payment_strategy(bank_transfer)
    processor.process_payment(300)


if __name__ == "__main__":
    from pattern_gallery.patterns._standalone import run_standalone

    run_standalone(run)

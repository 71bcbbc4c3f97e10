"""Payment methods constructed directly by the caller."""
from pattern_gallery.domain.base.ports import ConsolePort
from pattern_gallery.domain.catalog import DemoContext


class CreditCardPayment:
    def __init__(self, console: ConsolePort):
        self.console = console

    def process(self, amount: float) -> None:
        self.console.print(f"Processing credit card payment for ${amount}")


class PayPalPayment:
    def __init__(self, console: ConsolePort):
        self.console = console

    def process(self, amount: float) -> None:
        self.console.print(f"Processing PayPal payment for ${amount}")


class BitcoinPayment:
    def __init__(self, console: ConsolePort):
        self.console = console

    def process(self, amount: float) -> None:
        self.console.print(f"Processing Bitcoin payment for ${amount}")


def run(context: DemoContext) -> None:
    CreditCardPayment(context.console).process(100)
    PayPalPayment(context.console).process(50)
    BitcoinPayment(context.console).process(200)


if __name__ == "__main__":
    from pattern_gallery.patterns._standalone import run_standalone

    run_standalone(run)

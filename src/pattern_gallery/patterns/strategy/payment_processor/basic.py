"""Payment type dispatch through if/else."""
from typing import Any, Dict

from pattern_gallery.domain.base.exceptions import ValidationError
from pattern_gallery.domain.base.ports import ConsolePort
from pattern_gallery.domain.catalog import DemoContext


def process_payment(payment_type: str, details: Dict[str, Any], console: ConsolePort) -> bool:
    amount = details["amount"]
    if payment_type == "credit_card":
        console.print(f"Payment of {amount}€ processed by credit card {details['card_number']}")
        return True
    elif payment_type == "paypal":
        console.print(f"Payment of {amount}€ processed via PayPal ({details['email']})")
        return True
    elif payment_type == "bank_transfer":
        console.print(f"Payment of {amount}€ processed by bank transfer ({details['account_number']})")
        return True
    raise ValidationError(f"Unsupported payment type: {payment_type}", field="payment_type")


def run(context: DemoContext) -> None:
    console = context.console
    process_payment("credit_card", {"amount": 100, "card_number": "1234-5678-9012-3456",
                                    "cvv": "123", "expiry": "12/24"}, console)
    process_payment("paypal", {"amount": 200, "email": "user@example.com", "password": "password"}, console)
    process_payment("bank_transfer", {"amount": 300, "account_number": "FR761234567890",
                                      "bank_code": "ABCDEFGH"}, console)
    try:
        process_payment("cheque", {"amount": 50}, console)
    except ValidationError as e:
        console.error(str(e))


if __name__ == "__main__":
    from pattern_gallery.patterns._standalone import run_standalone

    run_standalone(run)

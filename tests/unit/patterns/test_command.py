"""Tests for the command examples."""
from pattern_gallery.infrastructure.console import RecordingConsole
from pattern_gallery.patterns.command.calculator.refactored import AddCommand, Calculator, SubtractCommand
from pattern_gallery.patterns.command.drawing_app.refactored import DrawCommand, DrawingApp
from pattern_gallery.patterns.command.order_manager.refactored import (
    CancelOrderCommand,
    OrderManager,
    PlaceOrderCommand,
    TrackOrderCommand,
)
from pattern_gallery.patterns.command.remote_control.refactored import (
    TV,
    RemoteControl,
    TurnOffCommand,
    TurnOnCommand,
)
from pattern_gallery.patterns.command.stock_trading.refactored import Stock


class TestCalculator:
    """Test undoable arithmetic."""

    def test_execute_and_undo(self):
        calculator = Calculator()
        calculator.execute_command(AddCommand(5))
        calculator.execute_command(SubtractCommand(2))

        assert calculator.get_current_value() == 3
        calculator.undo()
        assert calculator.get_current_value() == 5

    def test_undo_on_empty_history(self):
        calculator = Calculator()

        calculator.undo()

        assert calculator.get_current_value() == 0


class TestDrawingApp:
    """Test stroke history."""

    def test_draw_and_undo(self, console):
        app = DrawingApp(console)
        app.draw(DrawCommand(app.canvas, 10, 20, console))
        app.draw(DrawCommand(app.canvas, 30, 40, console))

        app.undo()

        assert app.canvas == [(10, 20)]
        assert console.lines[-1] == "Undo drawing at (30, 40)"

    def test_nothing_to_undo(self, console):
        DrawingApp(console).undo()

        assert console.lines == ["Nothing to undo"]


def test_order_manager_lifecycle():
    manager = OrderManager()

    assert manager.execute(PlaceOrderCommand("Pad Thai", "1234")) == \
        "You have successfully ordered Pad Thai (1234)"
    manager.execute(PlaceOrderCommand("Green curry", "5678"))
    assert "20 minutes" in manager.execute(TrackOrderCommand("1234"))
    assert manager.execute(CancelOrderCommand("1234")) == "You have canceled your order 1234"
    assert manager.orders == ["5678"]


def test_remote_control_undo(console):
    tv = TV(console)
    remote = RemoteControl()
    remote.execute_command(TurnOnCommand(tv))
    remote.execute_command(TurnOffCommand(tv))
    assert tv.is_on is False

    remote.undo()

    assert tv.is_on is True
    assert console.lines == ["TV is ON", "TV is OFF", "TV is ON"]


class TestStockTrading:
    """Test buy and sell orders with undo."""

    def setup_method(self):
        self.console = RecordingConsole()
        self.stock = Stock("AAPL", 150, self.console)

    def test_buy_and_sell(self):
        assert self.stock.buy(10) is True
        assert self.stock.sell(5) is True

        assert self.stock.quantity == 5

    def test_refused_sell(self):
        self.stock.buy(10)

        assert self.stock.sell(20) is False
        assert self.stock.quantity == 10
        assert self.console.contains("Not enough shares of AAPL to sell")

    def test_undoing_refused_sell_is_a_no_op(self):
        self.stock.buy(10)
        self.stock.sell(20)

        self.stock.undo_last()

        assert self.stock.quantity == 10

    def test_undo_reverts_executed_orders(self):
        self.stock.buy(10)
        self.stock.sell(5)

        self.stock.undo_last()
        assert self.stock.quantity == 10
        self.stock.undo_last()
        assert self.stock.quantity == 0

    def test_price_updates_show_in_messages(self):
        self.stock.buy(1)
        self.stock.update_price(155)
        self.stock.buy(1)

        assert self.console.lines[-1] == "Bought 1 shares of AAPL at 155"

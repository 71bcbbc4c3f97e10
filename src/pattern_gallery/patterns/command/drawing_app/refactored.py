"""Drawing app recording every stroke as a :class:`DrawCommand`."""
from typing import List, Tuple

from pattern_gallery.domain.base.ports import ConsolePort
from pattern_gallery.domain.catalog import DemoContext


class DrawCommand:
    def __init__(self, canvas: List[Tuple[int, int]], x: int, y: int, console: ConsolePort):
        self.canvas = canvas
        self.x = x
        self.y = y
        self.console = console

    def execute(self) -> None:
        self.canvas.append((self.x, self.y))
        self.console.print(f"Drawing at ({self.x}, {self.y})")

    def undo(self) -> None:
        x, y = self.canvas.pop()
        self.console.print(f"Undo drawing at ({x}, {y})")


class DrawingApp:
    def __init__(self, console: ConsolePort):
        self.console = console
        self.canvas: List[Tuple[int, int]] = []
        self.history: List[DrawCommand] = []

    def draw(self, command: DrawCommand) -> None:
        command.execute()
        self.history.append(command)

    def undo(self) -> None:
        if self.history:
            self.history.pop().undo()
        else:
            self.console.print("Nothing to undo")


def run(context: DemoContext) -> None:
    app = DrawingApp(context.console)
    app.draw(DrawCommand(app.canvas, 10, 20, context.console))
    app.draw(DrawCommand(app.canvas, 30, 40, context.console))
    app.undo()
    app.undo()
    app.undo()


if __name__ == "__main__":
    from pattern_gallery.patterns._standalone import run_standalone

    run_standalone(run)

"""Drawing app managing its own point stack."""
from typing import List, Tuple

from pattern_gallery.domain.base.ports import ConsolePort
from pattern_gallery.domain.catalog import DemoContext


class DrawingApp:
    def __init__(self, console: ConsolePort):
        self.console = console
        self.canvas: List[Tuple[int, int]] = []

    def draw(self, x: int, y: int) -> None:
        self.canvas.append((x, y))
        self.console.print(f"Drawing at ({x}, {y})")

    def undo(self) -> None:
        if self.canvas:
            x, y = self.canvas.pop()
            self.console.print(f"Undo drawing at ({x}, {y})")
        else:
            self.console.print("Nothing to undo")


def run(context: DemoContext) -> None:
    app = DrawingApp(context.console)
    app.draw(10, 20)
    app.draw(30, 40)
    app.undo()


if __name__ == "__main__":
    from pattern_gallery.patterns._standalone import run_standalone

    run_standalone(run)

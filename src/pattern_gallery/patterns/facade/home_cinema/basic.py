"""The client drives every home cinema component itself."""
from pattern_gallery.domain.catalog import DemoContext
from pattern_gallery.patterns.facade.home_cinema.subsystems import (
    Amplifier,
    DvdPlayer,
    Lights,
    Projector,
    Screen,
    SurroundSound,
)


def run(context: DemoContext) -> None:
    console = context.console
    amplifier = Amplifier(console)
    dvd_player = DvdPlayer(console)
    projector = Projector(console)
    lights = Lights(console)
    screen = Screen(console)
    surround = SurroundSound(console)

    console.print("=== Starting the home cinema by hand ===")
    lights.dim(10)
    screen.down()
    projector.on()
    projector.set_input("DVD")
    projector.set_mode("Cinema mode")
    amplifier.on()
    amplifier.set_source("DVD")
    amplifier.set_volume(20)
    surround.on()
    surround.set_mode("Dolby Digital")
    surround.set_volume(20)
    dvd_player.on()
    dvd_player.play("Inception")

    console.print("[The movie is playing...]")

    console.print("=== Shutting the home cinema down by hand ===")
    dvd_player.stop()
    dvd_player.eject()
    dvd_player.off()
    amplifier.off()
    surround.off()
    projector.off()
    screen.up()
    lights.on()


if __name__ == "__main__":
    from pattern_gallery.patterns._standalone import run_standalone

    run_standalone(run)

"""Home cinema driven through :class:`HomeCinemaFacade`."""
from pattern_gallery.domain.base.ports import ConsolePort
from pattern_gallery.domain.catalog import DemoContext
from pattern_gallery.patterns.facade.home_cinema.subsystems import (
    Amplifier,
    DvdPlayer,
    Lights,
    Projector,
    Screen,
    SurroundSound,
)


class HomeCinemaFacade:
    """Owns the components and knows the order in which to drive them."""

    def __init__(self, console: ConsolePort):
        self.console = console
        self.amplifier = Amplifier(console)
        self.dvd_player = DvdPlayer(console)
        self.projector = Projector(console)
        self.lights = Lights(console)
        self.screen = Screen(console)
        self.surround_sound = SurroundSound(console)

    def watch_movie(self, movie: str) -> None:
        self.console.print("=== Preparing the home cinema through the facade ===")
        self.console.print(f'Getting ready to watch "{movie}"...')
        self.lights.dim(10)
        self.screen.down()
        self.projector.on()
        self.projector.set_input("DVD")
        self.projector.set_mode("Cinema mode")
        self.amplifier.on()
        self.amplifier.set_source("DVD")
        self.amplifier.set_volume(20)
        self.surround_sound.on()
        self.surround_sound.set_mode("Dolby Digital")
        self.surround_sound.set_volume(20)
        self.dvd_player.on()
        self.dvd_player.play(movie)
        self.console.print("Setup complete. Enjoy the movie!")

    def end_movie(self) -> None:
        self.console.print("=== Shutting down the home cinema through the facade ===")
        self.dvd_player.stop()
        self.dvd_player.eject()
        self.dvd_player.off()
        self.amplifier.off()
        self.surround_sound.off()
        self.projector.off()
        self.screen.up()
        self.lights.on()
        self.console.print("Home cinema shut down.")

    def listen_to_music(self, album: str) -> None:
        self.console.print(f'Setting up to listen to "{album}"...')
        self.lights.dim(50)
        self.amplifier.on()
        self.amplifier.set_source("CD")
        self.amplifier.set_volume(15)
        self.surround_sound.on()
        self.surround_sound.set_mode("Stereo")

    def play_game(self, game: str) -> None:
        self.console.print(f'Setting up to play "{game}"...')
        self.lights.dim(30)
        self.screen.down()
        self.projector.on()
        self.projector.set_input("Console")
        self.projector.set_mode("Game mode")
        self.amplifier.on()
        self.amplifier.set_source("Console")
        self.amplifier.set_volume(25)


def run(context: DemoContext) -> None:
    home_cinema = HomeCinemaFacade(context.console)
    home_cinema.watch_movie("Inception")
    context.console.print("[The movie is playing...]")
    home_cinema.end_movie()
    home_cinema.listen_to_music("Abbey Road")
    home_cinema.play_game("FIFA 2023")


if __name__ == "__main__":
    from pattern_gallery.patterns._standalone import run_standalone

    run_standalone(run)

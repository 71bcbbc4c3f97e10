"""Each playlist type ships its own traversal loop."""
from typing import Dict, List

from pattern_gallery.domain.base.ports import ConsolePort
from pattern_gallery.domain.catalog import DemoContext


class ArrayPlaylist:
    def __init__(self, name: str):
        self.name = name
        self.songs: List[str] = []

    def add_song(self, song: str) -> None:
        self.songs.append(song)

    def display_songs(self, console: ConsolePort) -> None:
        console.print(f'Songs in playlist "{self.name}" (list):')
        for i in range(len(self.songs)):
            console.print(f"{i + 1}. {self.songs[i]}")


class SetPlaylist:
    def __init__(self, name: str):
        self.name = name
        self.songs: Dict[str, None] = {}

    def add_song(self, song: str) -> None:
        self.songs[song] = None

    def display_songs(self, console: ConsolePort) -> None:
        console.print(f'Songs in playlist "{self.name}" (set):')
        index = 1
        for song in self.songs:
            console.print(f"{index}. {song}")
            index += 1


class MapPlaylist:
    def __init__(self, name: str):
        self.name = name
        self.songs: Dict[int, str] = {}
        self.next_id = 1

    def add_song(self, song: str) -> None:
        self.songs[self.next_id] = song
        self.next_id += 1

    def display_songs(self, console: ConsolePort) -> None:
        console.print(f'Songs in playlist "{self.name}" (map):')
        for song_id, song in self.songs.items():
            console.print(f"{song_id}. {song}")


def run(context: DemoContext) -> None:
    rock = ArrayPlaylist("Rock Classics")
    for song in ("Queen - Bohemian Rhapsody", "Led Zeppelin - Stairway to Heaven", "AC/DC - Highway to Hell"):
        rock.add_song(song)
    rock.display_songs(context.console)

    jazz = SetPlaylist("Jazz Favorites")
    for song in ("Miles Davis - So What", "John Coltrane - Giant Steps", "Dave Brubeck - Take Five"):
        jazz.add_song(song)
    jazz.display_songs(context.console)

    pop = MapPlaylist("Pop Hits")
    for song in ("Michael Jackson - Billie Jean", "Madonna - Like a Prayer", "Prince - Purple Rain"):
        pop.add_song(song)
    pop.display_songs(context.console)


if __name__ == "__main__":
    from pattern_gallery.patterns._standalone import run_standalone

    run_standalone(run)

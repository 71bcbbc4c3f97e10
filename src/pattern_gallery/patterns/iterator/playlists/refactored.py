"""
Playlists traversed through iterators.

Every playlist hands out an :class:`Iterator` with ``has_next``/``next``;
``next`` returns ``None`` once exhausted. The iterators also implement the
Python iterator protocol, so ``for song in playlist.create_iterator()``
works as well.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, NamedTuple, Optional

from pattern_gallery.domain.base.ports import ConsolePort
from pattern_gallery.domain.catalog import DemoContext


class MapEntry(NamedTuple):
    id: int
    song: str


class Iterator(ABC):
    @abstractmethod
    def has_next(self) -> bool: ...

    @abstractmethod
    def next(self) -> Optional[Any]: ...

    def __iter__(self) -> "Iterator":
        return self

    def __next__(self) -> Any:
        if not self.has_next():
            raise StopIteration
        return self.next()


class Collection(ABC):
    name: str

    @abstractmethod
    def create_iterator(self) -> Iterator: ...


class ArrayIterator(Iterator):
    def __init__(self, items: List[Any]):
        self.items = items
        self.position = 0

    def has_next(self) -> bool:
        return self.position < len(self.items)

    def next(self) -> Optional[Any]:
        if not self.has_next():
            return None
        item = self.items[self.position]
        self.position += 1
        return item


class SetIterator(ArrayIterator):
    """Walks a set-like collection in insertion order."""

    def __init__(self, items):
        super().__init__(list(items))


class MapIterator(Iterator):
    def __init__(self, mapping: Dict[int, str]):
        self.items = list(mapping.items())
        self.position = 0

    def has_next(self) -> bool:
        return self.position < len(self.items)

    def next(self) -> Optional[MapEntry]:
        if not self.has_next():
            return None
        song_id, song = self.items[self.position]
        self.position += 1
        return MapEntry(song_id, song)


class ReverseArrayIterator(Iterator):
    def __init__(self, items: List[Any]):
        self.items = items
        self.position = len(items) - 1

    def has_next(self) -> bool:
        return self.position >= 0

    def next(self) -> Optional[Any]:
        if not self.has_next():
            return None
        item = self.items[self.position]
        self.position -= 1
        return item


class ArrayPlaylist(Collection):
    def __init__(self, name: str):
        self.name = name
        self.songs: List[str] = []

    def add_song(self, song: str) -> None:
        self.songs.append(song)

    def create_iterator(self) -> Iterator:
        return ArrayIterator(self.songs)


class SetPlaylist(Collection):
    """Playlist without duplicates; a dict keeps insertion order."""

    def __init__(self, name: str):
        self.name = name
        self.songs: Dict[str, None] = {}

    def add_song(self, song: str) -> None:
        self.songs.setdefault(song, None)

    def create_iterator(self) -> Iterator:
        return SetIterator(self.songs)


class MapPlaylist(Collection):
    def __init__(self, name: str):
        self.name = name
        self.songs: Dict[int, str] = {}
        self.next_id = 1

    def add_song(self, song: str) -> None:
        self.songs[self.next_id] = song
        self.next_id += 1

    def create_iterator(self) -> Iterator:
        return MapIterator(self.songs)


class ExtendedArrayPlaylist(ArrayPlaylist):
    def create_reverse_iterator(self) -> Iterator:
        return ReverseArrayIterator(self.songs)


def display_playlist(playlist: Collection, console: ConsolePort) -> None:
    """Print any playlist, whatever structure stores it."""
    console.print(f'Songs in playlist "{playlist.name}":')
    iterator = playlist.create_iterator()
    index = 1
    while iterator.has_next():
        item = iterator.next()
        if isinstance(item, MapEntry):
            console.print(f"{item.id}. {item.song}")
        else:
            console.print(f"{index}. {item}")
            index += 1


def display_playlist_reversed(playlist: Collection, console: ConsolePort) -> None:
    if not isinstance(playlist, ExtendedArrayPlaylist):
        console.print("This playlist does not support reverse iteration")
        return
    console.print(f'Songs in playlist "{playlist.name}", reversed:')
    index = len(playlist.songs)
    for song in playlist.create_reverse_iterator():
        console.print(f"{index}. {song}")
        index -= 1


def run(context: DemoContext) -> None:
    console = context.console

    rock = ArrayPlaylist("Rock Classics")
    for song in ("Queen - Bohemian Rhapsody", "Led Zeppelin - Stairway to Heaven", "AC/DC - Highway to Hell"):
        rock.add_song(song)

    jazz = SetPlaylist("Jazz Favorites")
    for song in ("Miles Davis - So What", "John Coltrane - Giant Steps", "Dave Brubeck - Take Five",
                 "Miles Davis - So What"):
        jazz.add_song(song)

    pop = MapPlaylist("Pop Hits")
    for song in ("Michael Jackson - Billie Jean", "Madonna - Like a Prayer", "Prince - Purple Rain"):
        pop.add_song(song)

    for playlist in (rock, jazz, pop):
        display_playlist(playlist, console)

    classical = ExtendedArrayPlaylist("Classical Music")
    for song in ("Mozart - Requiem", "Beethoven - Symphony No. 9", "Bach - Toccata and Fugue"):
        classical.add_song(song)
    display_playlist(classical, console)
    display_playlist_reversed(classical, console)
    display_playlist_reversed(rock, console)


if __name__ == "__main__":
    from pattern_gallery.patterns._standalone import run_standalone

    run_standalone(run)

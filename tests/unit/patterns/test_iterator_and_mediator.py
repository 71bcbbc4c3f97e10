"""Tests for the playlist iterators and the chat room mediator."""
from pattern_gallery.infrastructure.console import RecordingConsole
from pattern_gallery.patterns.iterator.playlists.refactored import (
    ArrayIterator,
    ArrayPlaylist,
    ExtendedArrayPlaylist,
    MapEntry,
    MapPlaylist,
    SetPlaylist,
    display_playlist,
    display_playlist_reversed,
)
from pattern_gallery.patterns.mediator.chat_room.refactored import ChatRoom, User


class TestPlaylistIterators:
    """Test iteration over differently stored playlists."""

    def test_array_iterator_returns_none_when_exhausted(self):
        iterator = ArrayIterator(["a"])

        assert iterator.next() == "a"
        assert iterator.has_next() is False
        assert iterator.next() is None

    def test_iterator_protocol(self):
        playlist = ArrayPlaylist("Rock Classics")
        playlist.add_song("Queen - Bohemian Rhapsody")
        playlist.add_song("AC/DC - Highway to Hell")

        assert list(playlist.create_iterator()) == ["Queen - Bohemian Rhapsody", "AC/DC - Highway to Hell"]

    def test_set_playlist_drops_duplicates(self):
        playlist = SetPlaylist("Jazz Favorites")
        for song in ("So What", "Giant Steps", "So What"):
            playlist.add_song(song)

        assert list(playlist.create_iterator()) == ["So What", "Giant Steps"]

    def test_map_playlist_yields_numbered_entries(self):
        playlist = MapPlaylist("Pop Hits")
        playlist.add_song("Billie Jean")
        playlist.add_song("Purple Rain")

        assert list(playlist.create_iterator()) == [MapEntry(1, "Billie Jean"), MapEntry(2, "Purple Rain")]

    def test_display_any_playlist(self, console):
        playlist = MapPlaylist("Pop Hits")
        playlist.add_song("Billie Jean")

        display_playlist(playlist, console)

        assert console.lines == ['Songs in playlist "Pop Hits":', "1. Billie Jean"]

    def test_reverse_iteration(self, console):
        playlist = ExtendedArrayPlaylist("Classical Music")
        for song in ("Requiem", "Symphony No. 9", "Toccata"):
            playlist.add_song(song)

        display_playlist_reversed(playlist, console)

        assert console.lines[1:] == ["3. Toccata", "2. Symphony No. 9", "1. Requiem"]

    def test_reverse_iteration_not_supported(self, console):
        display_playlist_reversed(ArrayPlaylist("Rock Classics"), console)

        assert console.lines == ["This playlist does not support reverse iteration"]


class TestChatRoom:
    """Test message routing through the mediator."""

    def setup_method(self):
        self.console = RecordingConsole()
        self.chat = ChatRoom(self.console)
        self.alice, self.bob, self.charlie = (self.chat.register(User(name, self.chat, self.console))
                                              for name in ("Alice", "Bob", "Charlie"))

    def test_direct_message(self):
        self.alice.send("Hi Bob", self.bob)

        assert self.bob.chat_log == ["Alice: Hi Bob"]
        assert self.charlie.chat_log == []

    def test_broadcast_skips_sender(self):
        self.alice.send("Hello everyone!")

        assert self.alice.chat_log == []
        assert self.bob.chat_log == self.charlie.chat_log == ["Alice: Hello everyone!"]

    def test_blocked_sender(self):
        self.charlie.block(self.bob)

        self.bob.send("Why are you ignoring me?", self.charlie)

        assert self.charlie.chat_log == []
        assert self.charlie.blocked_users == {"Bob"}

    def test_unregistered_receiver(self):
        stranger = User("Eve", self.chat, self.console)

        self.alice.send("Who are you?", stranger)

        assert stranger.chat_log == []
        assert self.console.lines[-1] == "User Eve not found."

    def test_room_messages_reach_members_only(self):
        self.chat.create_chat_room("TechTalk")
        self.chat.join_chat_room(self.alice, "TechTalk")
        self.chat.join_chat_room(self.bob, "TechTalk")

        assert self.chat.send_to_room("Who knows Python?", self.alice, "TechTalk") is True
        assert self.bob.chat_log == ["Alice: [TechTalk] Who knows Python?"]
        assert self.charlie.chat_log == []
        assert [m.message for m in self.chat.get_room_history("TechTalk")] == ["Who knows Python?"]

    def test_non_member_cannot_post(self):
        self.chat.create_chat_room("TechTalk")

        assert self.chat.send_to_room("I can help too!", self.charlie, "TechTalk") is False
        assert self.chat.get_room_history("TechTalk") == []
        assert 'Charlie is not a member of room "TechTalk".' in self.console.errors

    def test_missing_room(self):
        assert self.chat.join_chat_room(self.charlie, "Gardening") is False
        assert self.chat.send_to_room("hello", self.charlie, "Gardening") is False
        assert self.chat.get_room_history("Gardening") == []

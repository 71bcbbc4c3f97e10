"""Tests for the composite examples."""
import pytest

from pattern_gallery.patterns.composite.file_system.refactored import (
    Directory,
    File,
    Shortcut,
    build_sample_tree,
)
from pattern_gallery.patterns.composite.restaurant_menu.refactored import (
    Dish,
    MenuCategory,
    RestaurantMenu,
    SpecialMenu,
)


class TestFileSystem:
    """Test uniform treatment of files and directories."""

    def setup_method(self):
        self.root = build_sample_tree()

    def test_total_size(self):
        assert self.root.get_size() == 9101

    def test_find_nested_directory(self):
        documents = self.root.find("Documents")

        assert isinstance(documents, Directory)
        assert documents.get_size() == 600

    def test_find_missing(self):
        assert self.root.find("Videos") is None

    def test_shortcut_size_is_its_own(self):
        shortcut = self.root.find("doc-shortcut.lnk")

        assert isinstance(shortcut, Shortcut)
        assert shortcut.get_size() == 1
        assert shortcut.get_target_size() == 100

    def test_remove_updates_size(self):
        image = self.root.find("image.jpg")

        self.root.remove(image).remove(File("not-a-child", 5))

        assert self.root.get_size() == 7101

    def test_display_indents_children(self, console):
        Directory("Root").add(Directory("Music").add(File("song1.mp3", 3000))).display(console)

        assert console.lines == [
            "Directory: Root (3000 KB)",
            "  Directory: Music (3000 KB)",
            "    File: song1.mp3 (3000 KB)",
        ]

    def test_get_path(self):
        assert File("a.txt", 1).get_path("Root/Docs") == "Root/Docs/a.txt"
        assert File("a.txt", 1).get_path() == "a.txt"


class TestRestaurantMenu:
    """Test prices across nested menus."""

    def setup_method(self):
        self.steak = Dish("Steak Frites", 18.5)
        self.mousse = Dish("Chocolate Mousse", 6.5)

    def test_category_price_is_sum(self):
        category = MenuCategory("Mains").add(self.steak).add(self.mousse)

        assert category.get_price() == 25.0

    def test_special_menu_discount(self):
        menu = SpecialMenu("Option 1", "First guest", 5).add(self.steak).add(self.mousse)

        assert menu.get_price() == pytest.approx(23.75)

    def test_nested_specials(self):
        salmon, tiramisu = Dish("Grilled Salmon", 16.0), Dish("Tiramisu", 7.0)
        for_two = (MenuCategory("Menu For Two")
                   .add(MenuCategory("Sharing").add(Dish("Charcuterie Board", 14.0)))
                   .add(SpecialMenu("Option 1", discount_percentage=5).add(self.steak).add(self.mousse))
                   .add(SpecialMenu("Option 2", discount_percentage=5).add(salmon).add(tiramisu)))

        assert for_two.get_price() == pytest.approx(14.0 + 23.75 + 21.85)

    def test_remove(self):
        category = MenuCategory("Desserts").add(self.mousse)

        category.remove(self.mousse)

        assert category.get_price() == 0

    def test_display(self, console):
        menu = RestaurantMenu("Le Bon Gout").add(MenuCategory("Desserts").add(Dish("Tiramisu", 7.0, "Coffee")))

        menu.display(console)

        assert console.lines[1] == "     LE BON GOUT MENU"
        assert "=== DESSERTS ===" in console.lines
        assert "  Tiramisu - 7.00€" in console.lines
        assert "    Description: Coffee" in console.lines

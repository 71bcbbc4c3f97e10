"""
Restaurant menu as a composite tree.

Dishes are leaves; categories, discounted set menus and the menu itself
are composites that can nest to any depth.
"""
from abc import ABC, abstractmethod
from typing import List

from pattern_gallery.domain.base.ports import ConsolePort
from pattern_gallery.domain.catalog import DemoContext

BANNER = "============================================"


class MenuComponent(ABC):
    def __init__(self, name: str, description: str = ""):
        self.name = name
        self.description = description

    @abstractmethod
    def display(self, console: ConsolePort, level: int = 0) -> None: ...

    @abstractmethod
    def get_price(self) -> float: ...

    @staticmethod
    def indentation(level: int) -> str:
        return "  " * level


class Dish(MenuComponent):
    def __init__(self, name: str, price: float, description: str = ""):
        super().__init__(name, description)
        self.price = price

    def display(self, console: ConsolePort, level: int = 0) -> None:
        indent = self.indentation(level)
        console.print(f"{indent}{self.name} - {self.price:.2f}€")
        if self.description:
            console.print(f"{indent}  Description: {self.description}")

    def get_price(self) -> float:
        return self.price


class MenuCategory(MenuComponent):
    def __init__(self, name: str, description: str = ""):
        super().__init__(name, description)
        self.elements: List[MenuComponent] = []

    def add(self, element: MenuComponent) -> "MenuCategory":
        self.elements.append(element)
        return self

    def remove(self, element: MenuComponent) -> "MenuCategory":
        if element in self.elements:
            self.elements.remove(element)
        return self

    def display(self, console: ConsolePort, level: int = 0) -> None:
        indent = self.indentation(level)
        console.print(f"{indent}=== {self.name.upper()} ===")
        if self.description:
            console.print(f"{indent}{self.description}")
        for element in self.elements:
            element.display(console, level + 1)

    def get_price(self) -> float:
        return sum(element.get_price() for element in self.elements)


class SpecialMenu(MenuCategory):
    """Category sold at a percentage discount."""

    def __init__(self, name: str, description: str = "", discount_percentage: float = 10):
        super().__init__(name, description)
        self.discount_percentage = discount_percentage

    def display(self, console: ConsolePort, level: int = 0) -> None:
        indent = self.indentation(level)
        console.print(f"{indent}*** SPECIAL MENU: {self.name} ***")
        if self.description:
            console.print(f"{indent}Description: {self.description}")
        console.print(f"{indent}Discount: {self.discount_percentage}%")
        console.print(f"{indent}Includes:")
        for element in self.elements:
            element.display(console, level + 1)
        console.print(f"{indent}Menu price: {self.get_price():.2f}€")

    def get_price(self) -> float:
        full_price = super().get_price()
        return round(full_price - full_price * self.discount_percentage / 100, 2)


class RestaurantMenu(MenuCategory):
    """Root of the tree."""

    def __init__(self, restaurant_name: str):
        super().__init__(restaurant_name, "Full restaurant menu")

    def display(self, console: ConsolePort, level: int = 0) -> None:
        console.print(BANNER)
        console.print(f"     {self.name.upper()} MENU")
        console.print(BANNER)
        for element in self.elements:
            element.display(console, level)
            console.print("")


def run(context: DemoContext) -> None:
    console = context.console

    caesar = Dish("Caesar Salad", 8.5, "Romaine, parmesan, croutons and Caesar dressing")
    onion_soup = Dish("Onion Soup", 7.0, "French onion soup au gratin")
    foie_gras = Dish("Foie Gras", 15.0, "House foie gras with onion jam")
    steak = Dish("Steak Frites", 18.5, "Beef steak and homemade fries")
    salmon = Dish("Grilled Salmon", 16.0, "Grilled salmon fillet, seasonal vegetables")
    risotto = Dish("Mushroom Risotto", 14.5, "Creamy wild mushroom risotto")
    mousse = Dish("Chocolate Mousse", 6.5, "Homemade dark chocolate mousse")
    tiramisu = Dish("Tiramisu", 7.0, "Traditional coffee tiramisu")
    fondant = Dish("Chocolate Fondant", 7.5, "Molten chocolate cake with vanilla ice cream")

    starters = MenuCategory("Starters").add(caesar).add(onion_soup).add(foie_gras)
    mains = MenuCategory("Main Courses").add(steak).add(salmon).add(risotto)
    desserts = MenuCategory("Desserts").add(mousse).add(tiramisu).add(fondant)

    tasting = SpecialMenu("Tasting Menu", "A selection of our best dishes", 10).add(foie_gras).add(salmon).add(tiramisu)
    vegetarian = SpecialMenu("Vegetarian Menu", "Meat-free selection", 15).add(caesar).add(risotto).add(mousse)

    sharing = MenuCategory("Sharing Starters").add(Dish("Charcuterie Board", 14.0, "Selection of fine cured meats"))
    menu_for_two = (MenuCategory("Menu For Two", "Perfect for sharing")
                    .add(sharing)
                    .add(SpecialMenu("Option 1", "First guest", 5).add(steak).add(mousse))
                    .add(SpecialMenu("Option 2", "Second guest", 5).add(salmon).add(tiramisu)))

    menu = (RestaurantMenu("Le Bon Gout")
            .add(starters)
            .add(mains)
            .add(desserts)
            .add(MenuCategory("Special Menus", "Our discounted offers")
                 .add(tasting).add(vegetarian).add(menu_for_two)))
    menu.display(console)

    console.print("=== ADDING A DISH ===")
    mains.add(Dish("Pasta Carbonara", 13.5, "Fresh pasta with cream and bacon"))
    mains.display(console)

    console.print("=== ADDING A SUBCATEGORY ===")
    desserts.add(MenuCategory("Ice Creams and Sorbets")
                 .add(Dish("Three Scoop Sundae", 6.0, "Vanilla, chocolate, strawberry"))
                 .add(Dish("Lemon Sorbet", 5.5, "Homemade lemon sorbet")))
    desserts.display(console)

    console.print(f"Tasting menu price: {tasting.get_price():.2f}€")
    console.print(f"Menu for two price: {menu_for_two.get_price():.2f}€")


if __name__ == "__main__":
    from pattern_gallery.patterns._standalone import run_standalone

    run_standalone(run)

"""Menu built from three unrelated classes with look-alike methods."""
from typing import List

from pattern_gallery.domain.base.ports import ConsolePort
from pattern_gallery.domain.catalog import DemoContext

BANNER = "============================================"


class Dish:
    def __init__(self, name: str, price: float, description: str):
        self.name = name
        self.price = price
        self.description = description

    def display(self, console: ConsolePort) -> None:
        console.print(f"{self.name} - {self.price:.2f}€")
        console.print(f"  Description: {self.description}")

    def get_price(self) -> float:
        return self.price


class DishCategory:
    def __init__(self, name: str):
        self.name = name
        self.dishes: List[Dish] = []

    def add_dish(self, dish: Dish) -> None:
        self.dishes.append(dish)

    def display(self, console: ConsolePort) -> None:
        console.print(f"=== {self.name.upper()} ===")
        for dish in self.dishes:
            dish.display(console)

    def get_total_price(self) -> float:
        total = 0.0
        for dish in self.dishes:
            total += dish.get_price()
        return total


class SpecialMenu:
    def __init__(self, name: str, description: str):
        self.name = name
        self.description = description
        self.dishes: List[Dish] = []

    def add_dish(self, dish: Dish) -> None:
        self.dishes.append(dish)

    def display(self, console: ConsolePort) -> None:
        console.print(f"*** SPECIAL MENU: {self.name} ***")
        console.print(f"Description: {self.description}")
        console.print("Includes:")
        for dish in self.dishes:
            console.print(f"- {dish.name}")
        console.print(f"Menu price: {self.get_price():.2f}€")

    def get_price(self) -> float:
        total = 0.0
        for dish in self.dishes:
            total += dish.get_price()
        # Fixed 10% discount
        return round(total * 0.9, 2)


class RestaurantMenu:
    def __init__(self, restaurant_name: str):
        self.restaurant_name = restaurant_name
        self.categories: List[DishCategory] = []
        self.special_menus: List[SpecialMenu] = []

    def add_category(self, category: DishCategory) -> None:
        self.categories.append(category)

    def add_special_menu(self, menu: SpecialMenu) -> None:
        self.special_menus.append(menu)

    def display(self, console: ConsolePort) -> None:
        console.print(BANNER)
        console.print(f"     {self.restaurant_name.upper()} MENU")
        console.print(BANNER)
        for category in self.categories:
            category.display(console)
            console.print("")
        if self.special_menus:
            console.print(BANNER)
            console.print("             SPECIAL MENUS")
            console.print(BANNER)
            for menu in self.special_menus:
                menu.display(console)
                console.print("")


def run(context: DemoContext) -> None:
    caesar = Dish("Caesar Salad", 8.5, "Romaine, parmesan, croutons and Caesar dressing")
    onion_soup = Dish("Onion Soup", 7.0, "French onion soup au gratin")
    foie_gras = Dish("Foie Gras", 15.0, "House foie gras with onion jam")
    steak = Dish("Steak Frites", 18.5, "Beef steak and homemade fries")
    salmon = Dish("Grilled Salmon", 16.0, "Grilled salmon fillet, seasonal vegetables")
    risotto = Dish("Mushroom Risotto", 14.5, "Creamy wild mushroom risotto")
    mousse = Dish("Chocolate Mousse", 6.5, "Homemade dark chocolate mousse")
    tiramisu = Dish("Tiramisu", 7.0, "Traditional coffee tiramisu")

    starters = DishCategory("Starters")
    for dish in (caesar, onion_soup, foie_gras):
        starters.add_dish(dish)
    mains = DishCategory("Main Courses")
    for dish in (steak, salmon, risotto):
        mains.add_dish(dish)
    desserts = DishCategory("Desserts")
    for dish in (mousse, tiramisu):
        desserts.add_dish(dish)

    tasting = SpecialMenu("Tasting Menu", "A selection of our best dishes")
    for dish in (foie_gras, salmon, tiramisu):
        tasting.add_dish(dish)
    vegetarian = SpecialMenu("Vegetarian Menu", "Meat-free selection")
    for dish in (caesar, risotto, mousse):
        vegetarian.add_dish(dish)

    menu = RestaurantMenu("Le Bon Gout")
    for category in (starters, mains, desserts):
        menu.add_category(category)
    menu.add_special_menu(tasting)
    menu.add_special_menu(vegetarian)
    menu.display(context.console)


if __name__ == "__main__":
    from pattern_gallery.patterns._standalone import run_standalone

    run_standalone(run)

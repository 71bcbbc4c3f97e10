"""Each service opens its own database connection."""
from typing import Optional

from pattern_gallery.domain.base.ports import ConsolePort
from pattern_gallery.domain.catalog import DemoContext


class Database:
    def __init__(self, host: str, username: str, password: str, console: ConsolePort):
        self.host = host
        self.username = username
        self.password = password
        self.console = console
        self.is_connected = False
        self.console.print(f"Creating a new database connection to {host}")
        self.connect()

    def connect(self) -> None:
        self.console.print(f"Database connection established as {self.username}@{self.host}")
        self.is_connected = True

    def query(self, sql: str) -> Optional[str]:
        if not self.is_connected:
            self.console.error("Error: the database is not connected!")
            return None
        self.console.print(f"Running query: {sql}")
        return f"Results for: {sql}"


class UserService:
    def __init__(self, console: ConsolePort):
        self.db = Database("localhost:3306", "user_service", "password123", console)

    def get_user_by_id(self, user_id: int) -> Optional[str]:
        return self.db.query(f"SELECT * FROM users WHERE id = {user_id}")


class ProductService:
    def __init__(self, console: ConsolePort):
        self.db = Database("localhost:3306", "product_service", "password123", console)

    def get_all_products(self) -> Optional[str]:
        return self.db.query("SELECT * FROM products")


class OrderController:
    def __init__(self, console: ConsolePort):
        self.db = Database("localhost:3306", "order_controller", "password123", console)

    def create_order(self, user_id: int, product_id: int) -> Optional[str]:
        return self.db.query(f"INSERT INTO orders (user_id, product_id) VALUES ({user_id}, {product_id})")


def run(context: DemoContext) -> None:
    console = context.console
    UserService(console).get_user_by_id(1)
    ProductService(console).get_all_products()
    OrderController(console).create_order(1, 2)


if __name__ == "__main__":
    from pattern_gallery.patterns._standalone import run_standalone

    run_standalone(run)

"""
One database connection shared by every service.

Constructing :class:`Database` again, or calling :meth:`Database.get_instance`,
hands back the connection that already exists.
"""
import threading
from typing import Optional

from pattern_gallery.domain.base.ports import ConsolePort
from pattern_gallery.domain.catalog import DemoContext

DB_CONFIG = {
    "host": "localhost:3306",
    "username": "app_user",
    "password": "secure_password",
}


class Database:
    _instance: Optional["Database"] = None
    _lock = threading.Lock()

    def __new__(cls, host: str, username: str, password: str, console: ConsolePort):
        with cls._lock:
            if cls._instance is None:
                instance = super().__new__(cls)
                instance._initialized = False
                cls._instance = instance
            else:
                console.print("Database already instantiated, reusing the existing instance")
            return cls._instance

    def __init__(self, host: str, username: str, password: str, console: ConsolePort):
        if self._initialized:
            return
        self._initialized = True
        self.host = host
        self.username = username
        self.password = password
        self.console = console
        self.is_connected = False
        self.console.print(f"Creating a new database connection to {host}")
        self.connect()

    @classmethod
    def get_instance(cls, host: str, username: str, password: str, console: ConsolePort) -> "Database":
        if cls._instance is not None:
            return cls._instance
        return cls(host, username, password, console)

    @classmethod
    def reset_instance(cls) -> None:
        with cls._lock:
            cls._instance = None

    def connect(self) -> None:
        self.console.print(f"Database connection established as {self.username}@{self.host}")
        self.is_connected = True

    def disconnect(self) -> None:
        if self.is_connected:
            self.console.print("Disconnecting from the database")
            self.is_connected = False

    def query(self, sql: str) -> Optional[str]:
        if not self.is_connected:
            self.console.error("Error: the database is not connected!")
            return None
        self.console.print(f"Running query: {sql}")
        return f"Results for: {sql}"


def get_database(console: ConsolePort) -> Database:
    return Database.get_instance(DB_CONFIG["host"], DB_CONFIG["username"], DB_CONFIG["password"], console)


class UserService:
    def __init__(self, console: ConsolePort):
        self.db = get_database(console)

    def get_user_by_id(self, user_id: int) -> Optional[str]:
        return self.db.query(f"SELECT * FROM users WHERE id = {user_id}")


class ProductService:
    def __init__(self, console: ConsolePort):
        self.db = get_database(console)

    def get_all_products(self) -> Optional[str]:
        return self.db.query("SELECT * FROM products")


class OrderController:
    def __init__(self, console: ConsolePort):
        self.db = get_database(console)

    def create_order(self, user_id: int, product_id: int) -> Optional[str]:
        return self.db.query(f"INSERT INTO orders (user_id, product_id) VALUES ({user_id}, {product_id})")


def run(context: DemoContext) -> None:
    console = context.console
    Database.reset_instance()

    UserService(console).get_user_by_id(1)
    ProductService(console).get_all_products()
    OrderController(console).create_order(1, 2)

    db1 = Database(DB_CONFIG["host"], DB_CONFIG["username"], DB_CONFIG["password"], console)
    db2 = Database(DB_CONFIG["host"], DB_CONFIG["username"], DB_CONFIG["password"], console)
    console.print(f"db1 is db2: {db1 is db2}")
    console.print(f"db1 is get_database(): {db1 is get_database(console)}")

    db1.disconnect()
    db2.query("SELECT 1")


if __name__ == "__main__":
    from pattern_gallery.patterns._standalone import run_standalone

    run_standalone(run)

"""
Per-name logger registry.

``ModuleLogger.get_logger(name)`` returns the same logger for the same
name. Global level and formatting changes reach every active logger.
"""
import random
import threading
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, ClassVar, Dict, List, Optional

from pattern_gallery.domain.base.ports import ConsolePort
from pattern_gallery.domain.catalog import DemoContext

Clock = Callable[[], datetime]

LEVELS = {"debug": 0, "info": 1, "warn": 2, "error": 3}
DEFAULT_LEVEL = "info"
DEFAULT_DATE_FORMAT = "%H:%M:%S"


@dataclass
class LogEntry:
    level: str
    message: str
    timestamp: datetime


class ModuleLogger:
    _instances: ClassVar[Dict[str, "ModuleLogger"]] = {}
    _lock: ClassVar[threading.RLock] = threading.RLock()

    global_log_level: ClassVar[str] = DEFAULT_LEVEL
    global_date_format: ClassVar[str] = DEFAULT_DATE_FORMAT
    global_include_timestamp: ClassVar[bool] = True

    def __init__(self, name: str, console: ConsolePort, clock: Clock = datetime.now):
        self.name = name
        self.console = console
        self.clock = clock
        self.history: List[LogEntry] = []
        self.log_level = ModuleLogger.global_log_level
        self.date_format = ModuleLogger.global_date_format
        self.include_timestamp = ModuleLogger.global_include_timestamp
        self.console.print(f"Creating a new logger: {name}")

    @classmethod
    def get_logger(cls, name: str, console: ConsolePort, clock: Clock = datetime.now) -> "ModuleLogger":
        with cls._lock:
            if name not in cls._instances:
                cls._instances[name] = cls(name, console, clock)
            return cls._instances[name]

    @classmethod
    def get_all_loggers(cls) -> List["ModuleLogger"]:
        with cls._lock:
            return list(cls._instances.values())

    @classmethod
    def set_global_log_level(cls, level: str, console: ConsolePort) -> bool:
        if level not in LEVELS:
            console.error(f"Invalid global log level: {level}")
            return False
        with cls._lock:
            cls.global_log_level = level
            for logger in cls._instances.values():
                logger.log_level = level
        console.print(f"Global log level set to {level}")
        return True

    @classmethod
    def set_global_config(cls, config: Dict[str, Any], console: ConsolePort) -> None:
        """Apply ``date_format``, ``include_timestamp`` and ``log_level`` to every logger."""
        with cls._lock:
            if config.get("date_format"):
                cls.global_date_format = config["date_format"]
            if config.get("include_timestamp") is not None:
                cls.global_include_timestamp = bool(config["include_timestamp"])
            for logger in cls._instances.values():
                logger.date_format = cls.global_date_format
                logger.include_timestamp = cls.global_include_timestamp
        if config.get("log_level"):
            cls.set_global_log_level(config["log_level"], console)
        console.print("Global logger configuration updated")

    @classmethod
    def clear_all_history(cls) -> None:
        for logger in cls.get_all_loggers():
            logger.clear_history()

    @classmethod
    def reset_registry(cls) -> None:
        with cls._lock:
            cls._instances.clear()
            cls.global_log_level = DEFAULT_LEVEL
            cls.global_date_format = DEFAULT_DATE_FORMAT
            cls.global_include_timestamp = True

    def set_log_level(self, level: str) -> bool:
        if level not in LEVELS:
            self.console.error(f"Invalid log level: {level}")
            return False
        self.log_level = level
        self.console.print(f"Log level set to {level} for logger {self.name}")
        return True

    def format_message(self, level: str, message: str, timestamp: datetime) -> str:
        prefix = f"[{timestamp.strftime(self.date_format)}] " if self.include_timestamp else ""
        return f"{prefix}[{level.upper()}] [{self.name}] {message}"

    def log(self, level: str, message: str) -> Optional[LogEntry]:
        if LEVELS[level] < LEVELS[self.log_level]:
            return None
        entry = LogEntry(level, message, self.clock())
        self.console.print(self.format_message(level, message, entry.timestamp))
        self.history.append(entry)
        return entry

    def debug(self, message: str) -> None:
        self.log("debug", message)

    def info(self, message: str) -> None:
        self.log("info", message)

    def warn(self, message: str) -> None:
        self.log("warn", message)

    def error(self, message: str) -> None:
        self.log("error", message)

    def get_history(self) -> List[LogEntry]:
        return list(self.history)

    def clear_history(self) -> None:
        self.history = []
        self.console.print(f"History cleared for logger {self.name}")


class UserModule:
    def __init__(self, console: ConsolePort, clock: Clock):
        self.logger = ModuleLogger.get_logger("UserModule", console, clock)

    def create_user(self, username: str) -> None:
        self.logger.debug(f"Creating user: {username}")
        self.logger.info(f"User created: {username}")

    def login(self, username: str) -> None:
        self.logger.info(f"User logged in: {username}")
        if username == "admin":
            self.logger.set_log_level("debug")


class CartModule:
    def __init__(self, console: ConsolePort, clock: Clock, rng: random.Random):
        self.logger = ModuleLogger.get_logger("CartModule", console, clock)
        self.rng = rng

    def add_to_cart(self, user: str, product: str) -> None:
        self.logger.info(f"Adding {product} to {user}'s cart")
        if self.rng.random() < 0.2:
            self.logger.error(f"Could not add {product}: out of stock")


class PaymentModule:
    def __init__(self, console: ConsolePort, clock: Clock, rng: random.Random):
        self.logger = ModuleLogger.get_logger("PaymentModule", console, clock)
        self.logger.set_log_level("warn")
        self.rng = rng

    def process_payment(self, user: str, amount: float) -> None:
        self.logger.info(f"Processing payment of {amount}€ for {user}")
        if self.rng.random() < 0.3:
            self.logger.warn(f"Slow payment for {user}")


def run(context: DemoContext) -> None:
    console = context.console
    ModuleLogger.reset_registry()
    ModuleLogger.set_global_log_level("info", console)
    ModuleLogger.set_global_config({"include_timestamp": True, "date_format": "%H:%M:%S"}, console)

    users = UserModule(console, context.clock)
    cart = CartModule(console, context.clock, context.rng)
    payments = PaymentModule(console, context.clock, context.rng)

    console.print(f"Same logger for UserModule: {users.logger is ModuleLogger.get_logger('UserModule', console)}")
    console.print(f"Same logger for CartModule: {cart.logger is ModuleLogger.get_logger('CartModule', console)}")

    users.login("admin")
    users.create_user("alice")
    cart.add_to_cart("alice", "Phone")
    payments.process_payment("alice", 599)

    console.print("--- Enabling global debug mode ---")
    ModuleLogger.set_global_log_level("debug", console)
    users.create_user("bob")
    cart.add_to_cart("bob", "Headphones")
    payments.process_payment("bob", 99)

    ModuleLogger.set_global_log_level("verbose", console)
    console.print(f"Active loggers: {', '.join(logger.name for logger in ModuleLogger.get_all_loggers())}")
    ModuleLogger.clear_all_history()


if __name__ == "__main__":
    from pattern_gallery.patterns._standalone import run_standalone

    run_standalone(run)

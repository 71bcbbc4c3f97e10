"""Modules sharing one :class:`ConfigManager`."""
import copy
import random
import threading
from typing import Any, Dict, Optional

from pattern_gallery.domain.base.ports import ConsolePort
from pattern_gallery.domain.catalog import DemoContext

DEFAULT_CONFIG: Dict[str, Any] = {
    "appName": "MyApp",
    "version": "1.0.0",
    "apiUrl": "https://api.example.com",
    "timeout": 3000,
    "maxRetries": 3,
    "debug": False,
}

LOGIN_TIMEOUT_STEP_MS = 1000


class ConfigManager:
    _instance: Optional["ConfigManager"] = None
    _lock = threading.Lock()

    def __init__(self, console: ConsolePort):
        self.console = console
        self.config: Dict[str, Any] = copy.deepcopy(DEFAULT_CONFIG)
        self.console.print("Creating a new configuration manager (singleton)")

    @classmethod
    def get_instance(cls, console: ConsolePort) -> "ConfigManager":
        """Return the shared manager. ``console`` is only used on first creation."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls(console)
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        with cls._lock:
            cls._instance = None

    def get(self, key: str) -> Any:
        return self.config.get(key)

    def set(self, key: str, value: Any) -> None:
        self.config[key] = value
        self.console.print(f"Configuration updated: {key} = {value}")

    def reset(self) -> None:
        self.config = copy.deepcopy(DEFAULT_CONFIG)
        self.console.print("Configuration reset")


class AuthModule:
    def __init__(self, console: ConsolePort, rng: random.Random):
        self.console = console
        self.rng = rng
        self.config_manager = ConfigManager.get_instance(console)

    def login(self, username: str) -> bool:
        """Try to log in. A failure raises the shared timeout."""
        api_url = self.config_manager.get("apiUrl")
        timeout = self.config_manager.get("timeout")
        self.console.print(f"Logging in to {api_url} as {username} (timeout: {timeout}ms)")
        if self.rng.random() > 0.5:
            self.config_manager.set("timeout", timeout + LOGIN_TIMEOUT_STEP_MS)
            self.console.print(f"Login failed, timeout raised to {timeout + LOGIN_TIMEOUT_STEP_MS}ms")
            return False
        self.console.print(f"{username} logged in")
        return True


class ApiModule:
    def __init__(self, console: ConsolePort):
        self.console = console
        self.config_manager = ConfigManager.get_instance(console)

    def fetch_data(self, endpoint: str) -> str:
        url = f"{self.config_manager.get('apiUrl')}/{endpoint}"
        self.console.print(f"Fetching {url} (timeout: {self.config_manager.get('timeout')}ms)")
        return url


class LoggerModule:
    def __init__(self, console: ConsolePort):
        self.console = console
        self.config_manager = ConfigManager.get_instance(console)

    def log(self, message: str) -> None:
        level = "DEBUG" if self.config_manager.get("debug") else "INFO"
        self.console.print(f"[{level}] {message}")

    def enable_debug(self) -> None:
        self.config_manager.set("debug", True)


def run(context: DemoContext) -> None:
    console = context.console
    ConfigManager.reset_instance()

    auth = AuthModule(console, context.rng)
    api = ApiModule(console)
    logger = LoggerModule(console)

    console.print(f"auth and api share a configuration: {auth.config_manager is api.config_manager}")
    console.print(f"api and logger share a configuration: {api.config_manager is logger.config_manager}")

    auth.login("user1")
    api.fetch_data("users")
    logger.enable_debug()
    logger.log("Testing debug mode")
    console.print(f"Debug mode seen by auth: {auth.config_manager.get('debug')}")

    auth.config_manager.reset()
    console.print(f"Timeout after reset: {api.config_manager.get('timeout')}ms")


if __name__ == "__main__":
    from pattern_gallery.patterns._standalone import run_standalone

    run_standalone(run)

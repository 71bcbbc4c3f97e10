"""Every module builds its own configuration copy."""
import random
from typing import Any, Dict

from pattern_gallery.domain.base.ports import ConsolePort
from pattern_gallery.domain.catalog import DemoContext


class ConfigManager:
    def __init__(self, console: ConsolePort):
        self.console = console
        self.config: Dict[str, Any] = {
            "appName": "MyApp",
            "version": "1.0.0",
            "apiUrl": "https://api.example.com",
            "timeout": 3000,
            "maxRetries": 3,
            "debug": False,
        }
        self.console.print("Creating a new configuration manager")

    def get(self, key: str) -> Any:
        return self.config.get(key)

    def set(self, key: str, value: Any) -> None:
        self.config[key] = value
        self.console.print(f"Configuration updated: {key} = {value}")


class AuthModule:
    def __init__(self, console: ConsolePort, rng: random.Random):
        self.console = console
        self.rng = rng
        self.config_manager = ConfigManager(console)

    def login(self, username: str) -> bool:
        timeout = self.config_manager.get("timeout")
        self.console.print(f"Logging in to {self.config_manager.get('apiUrl')} as {username} (timeout: {timeout}ms)")
        if self.rng.random() > 0.5:
            self.config_manager.set("timeout", timeout + 1000)
            self.console.print(f"Login failed, timeout raised to {timeout + 1000}ms")
            return False
        return True


class ApiModule:
    def __init__(self, console: ConsolePort):
        self.console = console
        self.config_manager = ConfigManager(console)

    def fetch_data(self, endpoint: str) -> None:
        self.console.print(f"Fetching {self.config_manager.get('apiUrl')}/{endpoint} "
                           f"(timeout: {self.config_manager.get('timeout')}ms)")


class LoggerModule:
    def __init__(self, console: ConsolePort):
        self.console = console
        self.config_manager = ConfigManager(console)

    def log(self, message: str) -> None:
        level = "DEBUG" if self.config_manager.get("debug") else "INFO"
        self.console.print(f"[{level}] {message}")

    def enable_debug(self) -> None:
        self.config_manager.set("debug", True)


def run(context: DemoContext) -> None:
    console = context.console
    auth = AuthModule(console, context.rng)
    api = ApiModule(console)
    logger = LoggerModule(console)

    console.print(f"auth and api share a configuration: {auth.config_manager is api.config_manager}")
    auth.login("user1")
    api.fetch_data("users")
    logger.enable_debug()
    logger.log("Testing debug mode")
    console.print(f"Debug mode seen by auth: {auth.config_manager.get('debug')}")


if __name__ == "__main__":
    from pattern_gallery.patterns._standalone import run_standalone

    run_standalone(run)

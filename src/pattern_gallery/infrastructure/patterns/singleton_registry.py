"""Registry that owns the process-wide singleton instances."""
import threading
from typing import Any, Dict, Optional, Type, TypeVar

T = TypeVar("T")


class SingletonRegistry:
    """
    Holds one instance per class.

    The registry itself is a singleton; use :meth:`get_instance`.
    """

    _instance: Optional["SingletonRegistry"] = None
    _instance_lock = threading.Lock()

    def __init__(self) -> None:
        self._instances: Dict[Type[Any], Any] = {}
        self._lock = threading.RLock()

    @classmethod
    def get_instance(cls) -> "SingletonRegistry":
        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    def get(self, singleton_class: Type[T], *args: Any, **kwargs: Any) -> T:
        """Return the instance of ``singleton_class``, creating it on first use."""
        if singleton_class not in self._instances:
            with self._lock:
                if singleton_class not in self._instances:
                    self._instances[singleton_class] = singleton_class(*args, **kwargs)
        return self._instances[singleton_class]

    def has(self, singleton_class: Type[Any]) -> bool:
        return singleton_class in self._instances

    def register(self, singleton_class: Type[T], instance: T) -> None:
        """Install an already-built instance."""
        with self._lock:
            self._instances[singleton_class] = instance

    def reset(self, singleton_class: Type[Any]) -> None:
        with self._lock:
            self._instances.pop(singleton_class, None)

    def reset_all(self) -> None:
        with self._lock:
            self._instances.clear()

# Standard library imports
from typing import Any, Callable, Dict, Hashable


class BaseContainer:
    """
    Minimal dependency injection container.
    
    Keys are usually the abstract class a dependency is resolved by, or a
    plain string for infrastructure objects. Singletons are stored as-is;
    factories build a fresh instance on every get().
    """
    
    def __init__(self) -> None:
        self._singletons: Dict[Hashable, Any] = {}
        self._factories: Dict[Hashable, Callable[[], Any]] = {}
    
    def register_singleton(self, key: Hashable, instance: Any) -> None:
        self._singletons[key] = instance
        self._factories.pop(key, None)
    
    def register_factory(self, key: Hashable, factory: Callable[[], Any]) -> None:
        self._factories[key] = factory
        self._singletons.pop(key, None)
    
    def has(self, key: Hashable) -> bool:
        return key in self._singletons or key in self._factories
    
    def get(self, key: Hashable) -> Any:
        """
        Resolve a dependency
        
        Raises:
            KeyError: If nothing is registered under the key
        """
        if key in self._singletons:
            return self._singletons[key]
        if key in self._factories:
            return self._factories[key]()
        name = getattr(key, "__name__", key)
        raise KeyError(f"No dependency registered for {name}")

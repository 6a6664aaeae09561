# daynight/core/service_locator.py
"""
Hands host-owned services, the screen above all, to the plugin without
global lookups.
"""
from typing import Any, Callable, Dict, Optional

from daynight.utils.logger import Logger


class ServiceNotFoundException(Exception):
    """Raised when no service is registered under the requested name."""
    pass


class ServiceLocator:
    """
    Registry of host services keyed by name.

    The host registers its screen once the map scene exists. Plugin systems
    hold a provider from `screen_provider()` and keep asking until the screen
    shows up.
    """

    _instance = None

    @classmethod
    def get_instance(cls) -> 'ServiceLocator':
        """The process-wide locator the launcher wires the host through."""
        if cls._instance is None:
            cls._instance = ServiceLocator()
        return cls._instance

    def __init__(self):
        self._services: Dict[str, Any] = {}

    def register_service(self, service_name: str, service: Any) -> None:
        self._services[service_name] = service
        Logger.debug("ServiceLocator", f"Registered service '{service_name}'")

    def get_service(self, service_name: str) -> Any:
        """
        Look up a registered service.

        Raises:
            ServiceNotFoundException: If nothing is registered under that name.
        """
        try:
            return self._services[service_name]
        except KeyError:
            raise ServiceNotFoundException(f"Service '{service_name}' not found") from None

    def screen_provider(self, service_name: str = "screen") -> Callable[[], Optional[Any]]:
        """
        Returns a callable yielding the named service, or None while it is
        not registered. Suitable as a deferred dependency.
        """
        def provide() -> Optional[Any]:
            try:
                return self.get_service(service_name)
            except ServiceNotFoundException:
                return None
        return provide


def get_service_locator() -> ServiceLocator:
    return ServiceLocator.get_instance()

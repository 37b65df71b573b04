# blockwatch/core/container.py

from typing import TypeVar, Type, Callable, Set, Any, Dict, Optional
import logging

from .logging import WatcherLogger, log_with_context

T = TypeVar('T')


class WatcherContainer:
    """
    Holds the watcher's services and owns their lifecycle.

    Services are registered as ready instances or as singleton factories.
    shutdown() calls close() on every created instance that has one, in
    reverse creation order.
    """

    def __init__(self, config):
        self._config = config
        self._factories: Dict[Type, Callable[['WatcherContainer'], Any]] = {}
        self._instances: Dict[Type, Any] = {}
        self._creation_order: list = []
        self._resolution_stack: Set[Type] = set()

        self._logger = WatcherLogger.get_logger('core.container')
        self._logger.debug("WatcherContainer initialized")

    @property
    def config(self):
        return self._config

    def register_instance(self, interface: Type[T], instance: T) -> 'WatcherContainer':
        log_with_context(self._logger, logging.DEBUG, "Registering service instance",
                         service_type=interface.__name__)
        self._instances[interface] = instance
        return self

    def register_factory(self, interface: Type[T], factory_func: Callable[['WatcherContainer'], T]) -> 'WatcherContainer':
        """Register a factory function (treated as singleton)"""
        log_with_context(self._logger, logging.DEBUG, "Registering factory service",
                         service_type=interface.__name__)
        self._factories[interface] = factory_func
        return self

    def peek(self, service_type: Type[T]) -> Optional[T]:
        """Return the instance if it has already been created, without creating it"""
        return self._instances.get(service_type)

    def get(self, service_type: Type[T]) -> T:
        """Get service instance, creating if necessary"""
        service_name = service_type.__name__

        if service_type in self._instances:
            return self._instances[service_type]

        if service_type in self._resolution_stack:
            raise ValueError(f"Circular dependency detected while resolving {service_name}")

        factory = self._factories.get(service_type)
        if factory is None:
            raise ValueError(f"Service {service_name} not registered")

        self._resolution_stack.add(service_type)
        try:
            instance = factory(self)
        except Exception as e:
            # the failing service logs its own error
            log_with_context(self._logger, logging.DEBUG, "Failed to create service instance",
                             service_type=service_name,
                             exception_type=type(e).__name__)
            raise
        finally:
            self._resolution_stack.discard(service_type)

        self._instances[service_type] = instance
        self._creation_order.append(instance)
        log_with_context(self._logger, logging.DEBUG, "Service instance created",
                         service_type=service_name)
        return instance

    def shutdown(self) -> None:
        while self._creation_order:
            instance = self._creation_order.pop()
            close = getattr(instance, 'close', None)
            if callable(close):
                close()
        self._instances.clear()
        self._logger.debug("WatcherContainer shut down")

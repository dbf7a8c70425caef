import logging
from typing import Any, Callable, Dict, Iterable

from click import style

from ..exceptions import ResourceConfigurationError, ResourceNotFoundException
from .base import NebulaResource

log = logging.getLogger('Nebula')


class ResourceManager:
    """The registry of all the resources shown by the admin panel."""

    def __init__(self, models: Iterable[Any] = (), context: 'ContextManager' = None, name: str | None = None):
        self.models = list(models)
        self.context = context
        self.app_name = name or 'no-name'
        self.resources: Dict[str, NebulaResource] = {}
        self.by_model: Dict[type, NebulaResource] = {}

    def __call__(self):
        return self.context()

    def add_models(self, namespace: Any) -> None:
        """Inject a model namespace searched before the resources' own namespaces."""
        self.models.append(namespace)

    def register(self, resource: NebulaResource | type) -> NebulaResource:
        """Register a resource (class or instance) for getting exposed to the admin panel."""
        if isinstance(resource, type):
            resource = resource(self)
        elif resource.resource_manager is None:
            resource.resource_manager = self
        name = resource.name()
        log.debug('registering resource "%s"', style(name, 'blue'))
        self.resources[name] = resource
        try:
            self.by_model[resource.model()] = resource
        except ResourceConfigurationError:
            log.warning('resource %s has no model yet', style(name, 'red'))
        return resource

    def expose(self, cls: type = None) -> type | Callable:
        """Class decorator registering the decorated resource."""
        def wrapper(cls):
            self.register(cls)
            return cls
        if cls is not None:
            return wrapper(cls)
        return wrapper

    def describe(self) -> Dict[str, dict]:
        return {name: resource.describe() for name, resource in self.resources.items()}

    def __getitem__(self, item: str | type) -> NebulaResource:
        """Return the resource by its name or by its model."""
        resource = self.resources.get(item) if isinstance(item, str) else self.by_model.get(item)
        if resource is None:
            raise ResourceNotFoundException(f'Resource "{item}" not found')
        return resource

    def __contains__(self, item):
        """Check if the resource is in the resource list"""
        return item in self.resources or item in self.by_model

    def __iter__(self):
        return iter(self.resources.values())

    def __len__(self):
        return len(self.resources)

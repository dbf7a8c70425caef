import importlib
import logging
from typing import Any, Iterable, List, Mapping

from click import style
from sqlalchemy.orm import DeclarativeBase

from ..exceptions import ResourceConfigurationError
from ..utils import all_model

log = logging.getLogger('Nebula')

DEFAULT_NAMESPACES = ('app', 'app.models')


class ModelResolver:
    """Looks up a model class by name through an ordered list of namespaces.

    A namespace can be:

    * a dotted module path, imported on demand and skipped when missing;
    * a mapping of class names to model classes;
    * a declarative base, whose mapped classes are looked up by name.

    The first namespace holding the name wins.
    """

    def __init__(self, namespaces: Iterable[Any] = DEFAULT_NAMESPACES):
        self.namespaces: List[Any] = list(namespaces)

    def add(self, namespace: Any, first: bool = False) -> None:
        if first:
            self.namespaces.insert(0, namespace)
        else:
            self.namespaces.append(namespace)

    def lookup(self, namespace: Any, class_name: str) -> type | None:
        """Return `class_name` from `namespace` or None."""
        if isinstance(namespace, str):
            try:
                module = importlib.import_module(namespace)
            except ModuleNotFoundError as e:
                if e.name and namespace != e.name and not namespace.startswith(f'{e.name}.'):
                    raise
                log.debug('namespace "%s" not importable, skipping', namespace)
                return None
            found = getattr(module, class_name, None)
            return found if isinstance(found, type) else None
        if isinstance(namespace, type) and issubclass(namespace, DeclarativeBase):
            return next((m for m in all_model(namespace) if m.__name__ == class_name), None)
        if isinstance(namespace, Mapping):
            return namespace.get(class_name)
        raise TypeError(f'Unsupported model namespace {namespace!r}')

    def resolve(self, class_name: str) -> type:
        for namespace in self.namespaces:
            found = self.lookup(namespace, class_name)
            if found is not None:
                log.debug('resolved model %s in %s', style(class_name, 'blue'), namespace)
                return found
        raise ResourceConfigurationError(
            f"Auto resolved {class_name} model doesn't exist, please add your own via the `model()` method.")

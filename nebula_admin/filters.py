from abc import ABCMeta, abstractmethod
from typing import Any, Dict

from sqlalchemy import Select

from .utils import humanize

TRUE_VALUES = {True, 1, '1', 'true', 'yes', 'on'}


class Filter(metaclass=ABCMeta):
    """A named refinement of the index query."""

    def __init__(self, name: str, label: str = None):
        self._name = name
        self._label = label

    def name(self) -> str:
        return self._name

    def label(self) -> str:
        return self._label or humanize(self._name)

    def options(self) -> Dict[str, str]:
        return {}

    @abstractmethod
    def apply(self, query: Select, model: type, value: Any) -> Select:
        """Refine `query` over `model` with the `value` chosen in the index view."""

    def to_dict(self) -> dict:
        return {'name': self.name(), 'label': self.label(), 'options': self.options()}

    def __repr__(self):
        return f'<{type(self).__name__} {self._name}>'


class SelectFilter(Filter):
    """Keeps the rows whose `attribute` equals the selected option."""

    def __init__(self, attribute: str, options: Dict[str, str], name: str = None, label: str = None):
        super().__init__(name or attribute, label)
        self.attribute = attribute
        self._options = dict(options)

    def options(self) -> Dict[str, str]:
        return dict(self._options)

    def apply(self, query: Select, model: type, value: Any) -> Select:
        if value is None or value == '':
            return query
        return query.where(getattr(model, self.attribute) == value)


class BooleanFilter(Filter):

    def __init__(self, attribute: str, name: str = None, label: str = None):
        super().__init__(name or attribute, label)
        self.attribute = attribute

    def options(self) -> Dict[str, str]:
        return {'1': 'Yes', '0': 'No'}

    def apply(self, query: Select, model: type, value: Any) -> Select:
        if value is None or value == '':
            return query
        flag = value.lower() in TRUE_VALUES if isinstance(value, str) else value in TRUE_VALUES
        return query.where(getattr(model, self.attribute) == flag)

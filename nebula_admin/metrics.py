from abc import ABCMeta, abstractmethod

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from .utils import humanize


class Metric(metaclass=ABCMeta):
    """An aggregate displayed alongside the resource listing."""

    def __init__(self, name: str, label: str = None):
        self._name = name
        self._label = label

    def name(self) -> str:
        return self._name

    def label(self) -> str:
        return self._label or humanize(self._name)

    @abstractmethod
    def calculate(self, session: Session, model: type):
        """Compute the metric value over all the records of `model`."""

    def to_dict(self) -> dict:
        return {'name': self.name(), 'label': self.label()}


class CountMetric(Metric):

    def __init__(self, name: str = 'count', label: str = None):
        super().__init__(name, label)

    def calculate(self, session: Session, model: type) -> int:
        return session.scalar(select(func.count()).select_from(model))


class SumMetric(Metric):

    def __init__(self, attribute: str, name: str = None, label: str = None):
        super().__init__(name or f'{attribute}_sum', label)
        self.attribute = attribute

    def calculate(self, session: Session, model: type):
        column = getattr(model, self.attribute)
        return session.scalar(select(func.coalesce(func.sum(column), 0)))

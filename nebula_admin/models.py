from typing import Any, Mapping

from .context import db
from .utils import col_names, serialize_value


class ActiveRecordMixin:
    """Gives a declarative model the `create`/`update`/`delete` verbs resources delegate to.

    Every verb works on the session bound to the current context (`db`).
    """

    @classmethod
    def create(cls, data: Mapping[str, Any]):
        """Create a new record from `data` and flush it."""
        item = cls(**data)
        db.add(item)
        db.flush()
        return item

    def update(self, data: Mapping[str, Any]):
        """Update the record with `data` and flush it."""
        for attr, value in data.items():
            setattr(self, attr, value)
        db.flush()
        return self

    def delete(self) -> None:
        """Delete the record on the DB."""
        db.delete(self)
        db.flush()

    def to_dict(self) -> dict:
        """Transform any Database object into a dictionary."""
        return {name: serialize_value(getattr(self, name, None)) for name in col_names(type(self))}

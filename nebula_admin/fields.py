from typing import Dict, List, Optional

from pydantic import BaseModel

from .utils import humanize


class Field(BaseModel):
    """A form input bound to one model attribute."""
    name: str
    label: Optional[str] = None
    rules: List[str] = []
    widget: str = 'text'
    help: Optional[str] = None

    def get_name(self) -> str:
        return self.name

    def get_rules(self) -> List[str]:
        return list(self.rules)

    def get_label(self) -> str:
        return self.label or humanize(self.name)

    def to_dict(self) -> dict:
        ret = self.model_dump()
        ret['label'] = self.get_label()
        return ret


class TextField(Field):
    widget: str = 'text'


class TextareaField(Field):
    widget: str = 'textarea'


class NumberField(Field):
    widget: str = 'number'


class BooleanField(Field):
    widget: str = 'checkbox'


class DateField(Field):
    widget: str = 'date'


class SelectField(Field):
    widget: str = 'select'
    options: Dict[str, str] = {}


class Column(BaseModel):
    """A display unit of the index table."""
    name: str
    label: Optional[str] = None
    sortable: bool = False

    def get_name(self) -> str:
        return self.name

    def get_label(self) -> str:
        return self.label or humanize(self.name)

    def to_dict(self) -> dict:
        ret = self.model_dump()
        ret['label'] = self.get_label()
        return ret

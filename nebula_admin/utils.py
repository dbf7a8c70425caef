import re
from datetime import date, datetime
from decimal import Decimal
from typing import Tuple, Callable

from pluralizer import Pluralizer
from sqlalchemy.orm import DeclarativeBase

pluralizer = Pluralizer()
pluralize = pluralizer.plural
singularize = pluralizer.singular

TYPE_SERIALIZERS = {
    datetime: lambda x: x.isoformat(),
    date: lambda x: x.isoformat(),
    Decimal: float,
}


def all_model(base) -> Tuple[DeclarativeBase]:
    return tuple(mapper.class_ for mapper in base.registry.mappers)


def columns(model):
    return {c.key: c for c in model.__mapper__.column_attrs}


def col_names(model):
    """Return the attribute names of all columns of the model."""
    return tuple(columns(model))


def serialize_value(value):
    convert = TYPE_SERIALIZERS.get(type(value))
    return convert(value) if convert else value


CAP_WORD = re.compile(r'[A-Z][a-z]')

def kebab_case(camel: str) -> str:
    """Transform any camel case string into a kebab case"""
    ret = CAP_WORD.sub(lambda x: f'-{x.group().lower()}', camel).lower()
    return ret[1:] if ret.startswith('-') else ret


def strip_suffix(text: str, suffix: str) -> str:
    """Remove the last occurrence of `suffix` from `text`."""
    head, sep, tail = text.rpartition(suffix)
    return head + tail if sep else text


def humanize(name: str) -> str:
    """`date_of_birth` -> `Date of birth`"""
    return re.sub(r'[_\-]+', ' ', name).strip().capitalize()


def _dict_merge(a: dict, b: dict, reduce_func: Callable = None) -> dict:
    sa, sb = map(set, (a, b))
    a_only, b_only = sa - sb, sb - sa
    both = sa.intersection(sb)
    for key in a_only:
        yield key, a[key]
    for key in b_only:
        yield key, b[key]
    for key in both:
        value = a[key]
        if isinstance(value, dict) and isinstance(b[key], dict):
            yield key, dict(_dict_merge(value, b[key], reduce_func))
        elif reduce_func:
            yield key, reduce_func(value, b[key])
        else:
            yield key, value


def dict_merge(a: dict, b: dict, reduce_func: Callable = None) -> dict:
    """Deep merge two dictionaries, `a` wins on conflicts unless `reduce_func` is given."""
    return dict(_dict_merge(a, b, reduce_func))


def load_class(class_path: str) -> type:
    full_path = class_path.rsplit('.')
    class_name = full_path.pop()
    module = __import__('.'.join(full_path), fromlist=[class_name])
    return getattr(module, class_name)

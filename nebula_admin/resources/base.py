from abc import ABCMeta, abstractmethod
from typing import Any, Dict, Iterable, List, Sequence

from orjson import dumps
from sqlalchemy import Select, or_, select

from ..context import db
from ..exceptions import DuplicateFieldError, FilterNotFoundError
from ..utils import kebab_case, pluralize, singularize, strip_suffix
from .resolver import DEFAULT_NAMESPACES, ModelResolver


def _describe(item) -> Any:
    to_dict = getattr(item, 'to_dict', None)
    return to_dict() if callable(to_dict) else str(item)


class NebulaResource(metaclass=ABCMeta):
    """Describes how a model is listed, created, edited and deleted in the admin panel.

    Concrete resources are named after their model, e.g. `PostResource` for
    `Post`, and must declare `fields()` and `columns()`::

        class PostResource(NebulaResource):

            def fields(self):
                return [TextField(name='title', rules=['required'])]

            def columns(self):
                return [Column(name='title', sortable=True)]
    """

    suffix = 'Resource'
    model_namespaces = DEFAULT_NAMESPACES

    def __init__(self, resource_manager: 'ResourceManager' = None):
        self.resource_manager = resource_manager

    def searchable(self) -> List[str]:
        """Specifies the searchable resource columns."""
        return []

    def metrics(self) -> list:
        """Specifies the metrics which should be displayed."""
        return []

    def icon(self) -> str:
        """Specifies the icon which should be used in the menu."""
        return 'tag'

    def model_name(self) -> str:
        return strip_suffix(type(self).__name__, self.suffix)

    def model(self) -> type:
        """Returns the model, if not overridden it's resolved from the resource class name."""
        namespaces = list(self.model_namespaces)
        if self.resource_manager is not None:
            namespaces = [*self.resource_manager.models, *namespaces]
        return ModelResolver(namespaces).resolve(self.model_name())

    def name(self) -> str:
        """Returns the basename of the resource, `BlogPostResource` -> `blog-posts`."""
        return pluralize(kebab_case(self.model_name()).lower())

    def singular_name(self) -> str:
        return singularize(self.name().replace('-', ' '))

    def plural_name(self) -> str:
        return pluralize(self.singular_name())

    @abstractmethod
    def fields(self) -> list:
        """Returns the resource fields."""

    def edit_fields(self) -> list:
        """Returns the fields used for the edit form."""
        return self.fields()

    def create_fields(self) -> list:
        """Returns the fields for the create form."""
        return self.fields()

    @abstractmethod
    def columns(self) -> list:
        """Returns the columns used in the index table."""

    def filters(self) -> list:
        return []

    def rules(self, fields: Iterable) -> Dict[str, Any]:
        """Returns the validation rules of each field keyed by field name."""
        rules = {}
        for field in fields:
            name = field.get_name()
            if name in rules:
                raise DuplicateFieldError(name)
            rules[name] = field.get_rules()
        return rules

    def resolve_filter(self, name: str):
        """Resolves one of the index filters by its name."""
        for filter in self.filters():
            if filter.name() == name:
                return filter
        raise FilterNotFoundError(name)

    def store(self, model: type, data: Dict[str, Any]):
        """Specifies the store query."""
        return model.create(data)

    def update(self, model, data: Dict[str, Any]):
        """Specifies the update query."""
        return model.update(data)

    def delete(self, model) -> None:
        """Specifies the delete query."""
        model.delete()

    def search(self, query: Select, term: str | None) -> Select:
        """Restrict `query` to the records whose searchable columns contain `term`."""
        searchable = self.searchable()
        if not term or not searchable:
            return query
        model = self.model()
        return query.where(or_(*(getattr(model, attr).ilike(f'%{term}%') for attr in searchable)))

    def apply_filter(self, query: Select, name: str, value: Any) -> Select:
        return self.resolve_filter(name).apply(query, self.model(), value)

    def index_query(self, search: str = None, filters: Dict[str, Any] = None) -> Select:
        """Build the query of the index view."""
        query = self.search(select(self.model()), search)
        for name, value in (filters or {}).items():
            query = self.apply_filter(query, name, value)
        return query

    def compute_metrics(self, session=None) -> Dict[str, Any]:
        """Calculate all the metrics on `session`, the current context session by default."""
        session = session if session is not None else db
        model = self.model()
        return {metric.name(): metric.calculate(session, model) for metric in self.metrics()}

    @property
    def description(self) -> dict:
        def describe_all(items: Sequence) -> list:
            return [_describe(item) for item in items]

        ret = {}
        ret['name'] = self.name()
        ret['singular_name'] = self.singular_name()
        ret['plural_name'] = self.plural_name()
        ret['icon'] = self.icon()
        ret['model'] = self.model().__name__
        ret['fields'] = describe_all(self.fields())
        ret['create_fields'] = describe_all(self.create_fields())
        ret['edit_fields'] = describe_all(self.edit_fields())
        ret['columns'] = describe_all(self.columns())
        ret['filters'] = describe_all(self.filters())
        ret['searchable'] = list(self.searchable())
        ret['metrics'] = describe_all(self.metrics())
        return ret

    def describe(self) -> dict:
        return self.description

    def to_json(self) -> bytes:
        return dumps(self.description)

    def __repr__(self):
        return f'<{type(self).__name__} {self.name()}>'

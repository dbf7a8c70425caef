from .exceptions import (NebulaException, ResourceConfigurationError, ResourceNotFoundException,
                         FilterNotFoundError, DuplicateFieldError)
from .resources import NebulaResource, ResourceManager, ModelResolver
from .fields import Field, TextField, TextareaField, NumberField, BooleanField, DateField, SelectField, Column
from .filters import Filter, SelectFilter, BooleanFilter
from .metrics import Metric, CountMetric, SumMetric
from .models import ActiveRecordMixin
from .context import ContextManager, db
from .application import setup_application

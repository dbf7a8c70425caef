from .base import NebulaResource
from .manager import ResourceManager
from .resolver import ModelResolver

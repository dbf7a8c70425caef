import logging
from typing import Any, Dict

from click import style
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from .app_config import default_config
from .context import ContextManager
from .resources.manager import ResourceManager
from .utils import dict_merge, load_class

log = logging.getLogger('Nebula')


def base_environment(config: Dict[str, Any]) -> ContextManager:
    """Create the engine and the context manager opening a session for each unit of work."""
    db_config = dict(config['db_engine'])
    db_uri = db_config.pop('url', None)
    if db_uri:
        engine = create_engine(db_uri, **db_config)
    else:
        engine = create_engine(**db_config)
    session_maker = sessionmaker(bind=engine, expire_on_commit=False)
    return ContextManager(session_maker)


def setup_application(config: Dict[str, Any] = None) -> ResourceManager:
    """Set up the application and returns the resource manager."""
    config = dict_merge(config or {}, default_config)
    log.setLevel(config['logging']['level'])

    context_manager = base_environment(config)
    resources_config = config['resources']
    resource_manager = ResourceManager(models=resources_config['namespaces'], context=context_manager,
                                       name=config['name'])
    for class_path in resources_config['classes']:
        resource_manager.register(load_class(class_path))
    log.info('application %s ready with %d resources', style(resource_manager.app_name, 'green'),
             len(resource_manager))
    return resource_manager

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from nebula_admin import ContextManager, ResourceManager
from tests.fixtures import Base


@pytest.fixture
def engine():
    """Generate an in-memory Sqlite with all the test tables."""
    engine = create_engine('sqlite://', echo=False, poolclass=StaticPool,
                           connect_args={'check_same_thread': False})
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_maker(engine):
    """Creates a database session maker."""
    return sessionmaker(bind=engine, expire_on_commit=False)


@pytest.fixture
def context(session_maker):
    """Creates the unit of work context manager."""
    return ContextManager(session_maker)


@pytest.fixture
def res_man(context):
    """A resource manager resolving models from the test declarative base."""
    return ResourceManager(models=[Base], context=context)

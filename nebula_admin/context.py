from contextvars import ContextVar
from typing import Callable

from sqlalchemy.orm import Session


class ContextProxy:
    def __init__(self, name: str):
        self.__dict__['name'] = name
        self.__dict__['__var'] = ContextVar(name)

    def update(self, obj: object):
        """Bind `obj` to the current context and return the reset token."""
        return self.__dict__['__var'].set(obj)

    def reset(self, token) -> None:
        self.__dict__['__var'].reset(token)

    @property
    def bound(self) -> bool:
        return self.__dict__['__var'].get(None) is not None

    def __getattr__(self, item: str):
        return getattr(self.__dict__['__var'].get(), item)

    def __setattr__(self, key, value):
        setattr(self.__dict__['__var'].get(), key, value)


db = ContextProxy('db_session')


class ContextManager:
    """Opens a database session for each unit of work."""

    class Context:
        def __init__(self, manager: 'ContextManager'):
            self.manager = manager
            self.session: Session | None = None
            self._token = None

        def __enter__(self):
            self.session = self.manager.session_maker()
            self._token = db.update(self.session)
            return self

        def __exit__(self, exc_type, exc_val, exc_tb):
            try:
                if exc_type is None and self.manager.auto_commit:
                    self.session.commit()
                else:
                    self.session.rollback()
            finally:
                self.session.close()
                db.reset(self._token)

    def __init__(self, session_maker: Callable[[], Session], auto_commit: bool = True):
        self.session_maker = session_maker
        self.auto_commit = auto_commit

    def __call__(self):
        return self.Context(self)

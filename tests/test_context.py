from contextvars import copy_context

import pytest

from nebula_admin import db
from nebula_admin.context import ContextProxy


class Holder:
    def __init__(self, value):
        self.value = value


def test_proxy_isolation():
    prop = ContextProxy('property')

    def task(x):
        prop.update(Holder(x))
        prop.value = prop.value * 2
        return prop.value

    assert [copy_context().run(task, x) for x in range(5)] == [0, 2, 4, 6, 8]
    assert not prop.bound


def test_proxy_reset():
    prop = ContextProxy('property')

    def task():
        token = prop.update(Holder('foo'))
        assert prop.value == 'foo'
        prop.reset(token)
        with pytest.raises(LookupError):
            _ = prop.value

    copy_context().run(task)


def test_nested_contexts(context):
    with context() as outer:
        with context() as inner:
            assert inner.session is not outer.session
        assert db.bound
        assert db.in_transaction() == outer.session.in_transaction()
    assert not db.bound

import pytest

from nebula_admin import ModelResolver, NebulaResource, ResourceConfigurationError
from tests import app
from tests.app import models as app_models
from tests.fixtures import Base, BlogPost, Post

NAMESPACES = ('tests.app', 'tests.app.models')


class SampleResource(NebulaResource):
    model_namespaces = NAMESPACES

    def fields(self):
        return []

    def columns(self):
        return []


def test_first_namespace_wins():
    resolver = ModelResolver(NAMESPACES)
    assert resolver.resolve('Category') is app.Category
    assert resolver.resolve('Tag') is app_models.Tag


def test_missing_model():
    resolver = ModelResolver(NAMESPACES)
    with pytest.raises(ResourceConfigurationError) as e:
        resolver.resolve('Comment')
    assert 'Comment' in e.value.message


def test_only_classes_are_models():
    with pytest.raises(ResourceConfigurationError):
        ModelResolver(NAMESPACES).resolve('NOT_A_MODEL')


def test_missing_modules_are_skipped():
    resolver = ModelResolver(('not_existing_package', 'tests.not_existing', 'tests.app.models'))
    assert resolver.resolve('Tag') is app_models.Tag


def test_declarative_base_and_mapping_namespaces():
    resolver = ModelResolver([{'Post': 'a post'}, Base])
    assert resolver.resolve('Post') == 'a post'
    assert resolver.resolve('BlogPost') is BlogPost

    resolver.add({'BlogPost': 'first'}, first=True)
    assert resolver.resolve('BlogPost') == 'first'


def test_unsupported_namespace():
    with pytest.raises(TypeError):
        ModelResolver([42]).resolve('Post')


def test_resource_model_resolution():

    class CategoryResource(SampleResource):
        pass

    class TagResource(SampleResource):
        pass

    class CommentResource(SampleResource):
        pass

    assert CategoryResource().model() is app.Category
    assert TagResource().model() is app_models.Tag
    with pytest.raises(ResourceConfigurationError):
        CommentResource().model()


def test_manager_models_are_searched_first(res_man):

    class PostResource(SampleResource):
        pass

    class CategoryResource(SampleResource):
        pass

    assert PostResource(res_man).model() is Post
    assert CategoryResource(res_man).model().__tablename__ == 'category'
    with pytest.raises(ResourceConfigurationError):
        PostResource().model()


def test_model_override():

    class AuthorResource(SampleResource):
        def model(self):
            return Post

    assert AuthorResource().model() is Post

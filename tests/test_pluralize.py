import gc
import weakref

import pytest

from jaclient.pluralize import NoPluralizer, Pluralizer, get_pluralizer


def test_plural_and_singular() -> None:
    pluralizer = Pluralizer()

    assert pluralizer.plural("post") == "posts"
    assert pluralizer("category") == "categories"
    assert pluralizer.singular("people") == "person"
    assert pluralizer.singular("post") == "post"
    assert pluralizer.plural("") == ""


def test_pluralizer_is_released() -> None:
    pluralizer = Pluralizer()
    pluralizer.plural("post")
    pluralizer.singular("posts")
    ref = weakref.ref(pluralizer)

    del pluralizer
    gc.collect()

    assert ref() is None


def test_caches_are_per_instance() -> None:
    first, second = Pluralizer(), Pluralizer()
    first.plural("post")

    assert first.plural.cache_info().currsize == 1
    assert second.plural.cache_info().currsize == 0


def test_get_pluralizer() -> None:
    assert isinstance(get_pluralizer(), Pluralizer)
    assert isinstance(get_pluralizer(False), NoPluralizer)
    with pytest.raises(TypeError):
        get_pluralizer(object())

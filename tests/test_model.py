"""Tests for the Model proxy registry."""

import pytest

from corebus import AlreadyConstructedError, Model, Proxy
from doubles import RecordingProxy


def test_model_is_one_per_context(context, model):
    assert context.get_model() is model

    with pytest.raises(AlreadyConstructedError):
        Model(context)


def test_register_and_retrieve_proxy(model):
    proxy = RecordingProxy("colors", ["red", "green", "blue"])
    model.register_proxy(proxy)

    retrieved = model.retrieve_proxy("colors")

    assert retrieved is proxy
    assert retrieved.data == ["red", "green", "blue"]
    assert proxy.registered == 1


def test_remove_proxy(model):
    proxy = RecordingProxy("sizes", [7, 13, 21])
    model.register_proxy(proxy)

    removed = model.remove_proxy("sizes")

    assert removed is proxy
    assert proxy.removed == 1
    assert model.retrieve_proxy("sizes") is None
    assert not model.has_proxy("sizes")


def test_remove_unknown_proxy(model):
    assert model.remove_proxy("missing") is None


def test_has_proxy(model):
    model.register_proxy(Proxy("aces", ["clubs", "spades", "hearts", "diamonds"]))
    assert model.has_proxy("aces")

    model.remove_proxy("aces")
    assert not model.has_proxy("aces")


def test_retrieve_unknown_proxy(model):
    assert model.retrieve_proxy("missing") is None


def test_registering_same_name_replaces(model):
    first = RecordingProxy("shared")
    second = RecordingProxy("shared")

    model.register_proxy(first)
    model.register_proxy(second)

    assert model.retrieve_proxy("shared") is second
    assert second.registered == 1

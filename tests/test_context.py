"""Tests for CoreContext construction rules and the default context."""

import pytest

from corebus import (
    AlreadyConstructedError, ConfigurationError, Controller, CoreConfig,
    CoreContext, DispatchConfig, Environment, Facade, Model, View,
    get_default_context, get_facade, reset_default_context, set_default_context
)


@pytest.mark.parametrize("cls", [Model, View, Controller, Facade])
def test_second_construction_fails(cls):
    context = CoreContext(name="twice")
    cls(context)

    with pytest.raises(AlreadyConstructedError) as excinfo:
        cls(context)

    assert excinfo.value.kind == cls.__name__


def test_accessors_build_once(context):
    assert context.get_model() is context.get_model()
    assert context.get_view() is context.get_view()
    assert context.get_controller() is context.get_controller()
    assert context.get_facade() is context.get_facade()


def test_accessor_returns_existing_instance_over_factory(context):
    view = View(context)

    class OtherView(View):
        pass

    assert context.get_view(OtherView) is view


def test_factory_must_build_for_this_context(context):
    other = CoreContext(name="other")

    with pytest.raises(ConfigurationError):
        context.get_model(lambda ctx: Model(other))


def test_registries_default_to_default_context():
    model = Model()
    assert get_default_context().model is model

    with pytest.raises(AlreadyConstructedError):
        Model()


def test_reset_default_context():
    first = get_facade()
    reset_default_context()
    second = get_facade()

    assert first is not second


def test_set_default_context():
    context = CoreContext(name="custom-default")
    set_default_context(context)

    assert get_default_context() is context
    assert get_facade() is context.facade


def test_metrics_disabled_by_config():
    config = CoreConfig(dispatch=DispatchConfig(enable_metrics=False))
    view = CoreContext(config, name="quiet").get_view()

    assert view.metrics is None


def test_context_uses_global_config_by_default(context):
    assert context.config.environment == Environment.TESTING

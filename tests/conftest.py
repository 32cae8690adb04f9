"""Shared fixtures: every test gets a fresh context and default globals."""

import pytest

from corebus import (
    CoreConfig, CoreContext, Environment,
    reset_default_context, set_config
)


@pytest.fixture(autouse=True)
def clean_globals():
    set_config(CoreConfig.for_environment(Environment.TESTING))
    reset_default_context()
    yield
    reset_default_context()
    set_config(None)


@pytest.fixture
def context():
    return CoreContext(name="test")


@pytest.fixture
def view(context):
    return context.get_view()


@pytest.fixture
def controller(context):
    return context.get_controller()


@pytest.fixture
def model(context):
    return context.get_model()


@pytest.fixture
def facade(context):
    return context.get_facade()

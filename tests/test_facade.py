"""Tests for the Facade and end-to-end broadcasts through it."""

import pytest

from corebus import (
    AlreadyConstructedError, CoreContext, Facade, Mediator,
    Notification, Proxy, SimpleCommand, View
)
from doubles import (
    AccumulateCommand, DoubleInputCommand, RecordingMediator,
    RecordingProxy, ValueObject
)


def test_facade_is_one_per_context(context, facade):
    assert context.get_facade() is facade
    assert facade.model is context.model
    assert facade.view is context.view
    assert facade.controller is context.controller

    with pytest.raises(AlreadyConstructedError):
        Facade(context)


def test_register_command_and_send_notification(facade):
    facade.register_command("FacadeTestNote", DoubleInputCommand)

    vo = ValueObject(32)
    facade.send_notification("FacadeTestNote", vo)

    assert vo.result == 64


def test_register_and_remove_command_and_send_notification(facade):
    facade.register_command("FacadeTestNote", AccumulateCommand)

    vo = ValueObject(32)
    facade.send_notification("FacadeTestNote", vo)
    assert vo.result == 64

    facade.remove_command("FacadeTestNote")

    vo = ValueObject(32)
    facade.send_notification("FacadeTestNote", vo)
    assert vo.result == 0


def test_send_notification_without_listeners(facade):
    vo = ValueObject(32)
    facade.send_notification("nobody", vo)

    assert vo.result == 0
    assert not facade.view.has_observers("nobody")


def test_send_empty_name_is_noop(facade):
    facade.send_notification("")

    assert not facade.view.has_observers("")
    assert not facade.has_command("")


def test_send_notification_passes_type(facade):
    mediator = RecordingMediator("typed", ["typed-note"])
    facade.register_mediator(mediator)

    facade.send_notification("typed-note", {"x": 1}, "delta")

    note = mediator.received[0]
    assert note.type == "delta"
    assert note.body == {"x": 1}


def test_register_and_retrieve_proxy(facade):
    facade.register_proxy(Proxy("colors", ["red", "green", "blue"]))

    proxy = facade.retrieve_proxy("colors")

    assert isinstance(proxy, Proxy)
    assert proxy.data == ["red", "green", "blue"]


def test_register_and_remove_proxy(facade):
    proxy = RecordingProxy("sizes", ["7", "13", "21"])
    facade.register_proxy(proxy)

    removed = facade.remove_proxy("sizes")

    assert removed is proxy
    assert facade.retrieve_proxy("sizes") is None
    assert not facade.has_proxy("sizes")


def test_register_retrieve_and_remove_mediator(facade):
    mediator = Mediator("panel", object())
    facade.register_mediator(mediator)

    assert facade.retrieve_mediator("panel") is mediator
    assert facade.has_mediator("panel")

    assert facade.remove_mediator("panel") is mediator
    assert facade.retrieve_mediator("panel") is None
    assert not facade.has_mediator("panel")


def test_has_command(facade):
    facade.register_command("facadeHasCommandTest", DoubleInputCommand)
    assert facade.has_command("facadeHasCommandTest")

    facade.remove_command("facadeHasCommandTest")
    assert not facade.has_command("facadeHasCommandTest")


def test_removed_mediator_no_longer_receives(facade):
    mediator = RecordingMediator("panel", ["a", "b", "c"])
    facade.register_mediator(mediator)
    facade.remove_mediator("panel")

    for name in ("a", "b", "c"):
        facade.send_notification(name)

    assert mediator.received == []


def test_notify_observers_with_prebuilt_notification(facade):
    mediator = RecordingMediator("panel", ["prebuilt"])
    facade.register_mediator(mediator)
    note = Notification("prebuilt", "payload")

    facade.notify_observers(note)

    assert mediator.received == [note]


def test_missing_registries_return_defaults():
    """A facade whose subclass skips the registries answers with None/False"""

    class Bare(Facade):
        def initialize_facade(self):
            pass

    facade = Bare(CoreContext(name="bare"))

    facade.register_command("x", DoubleInputCommand)
    facade.register_proxy(Proxy("p"))
    facade.register_mediator(Mediator("m"))
    facade.send_notification("x", ValueObject(1))
    facade.remove_command("x")

    assert facade.has_command("x") is False
    assert facade.retrieve_proxy("p") is None
    assert facade.has_proxy("p") is False
    assert facade.remove_proxy("p") is None
    assert facade.retrieve_mediator("m") is None
    assert facade.has_mediator("m") is False
    assert facade.remove_mediator("m") is None


def test_subclass_substitutes_view():
    class CountingView(View):
        def initialize_view(self):
            self.broadcasts = 0

        def notify_observers(self, notification):
            self.broadcasts += 1
            super().notify_observers(notification)

    class AppFacade(Facade):
        def initialize_controller(self):
            self.context.get_view(CountingView)
            super().initialize_controller()

    context = CoreContext(name="custom")
    facade = AppFacade(context)
    facade.register_command("go", DoubleInputCommand)

    vo = ValueObject(2)
    facade.send_notification("go", vo)

    assert isinstance(facade.view, CountingView)
    assert facade.controller.view is facade.view
    assert facade.view.broadcasts == 1
    assert vo.result == 4


def test_subclass_registers_startup_commands():
    class AppFacade(Facade):
        def initialize_controller(self):
            super().initialize_controller()
            self.register_command("startup", DoubleInputCommand)

    facade = AppFacade(CoreContext(name="startup"))

    assert facade.has_command("startup")


def test_contexts_are_isolated():
    first = CoreContext(name="first").get_facade()
    second = CoreContext(name="second").get_facade()
    first.register_command("go", DoubleInputCommand)

    vo = ValueObject(5)
    second.send_notification("go", vo)
    assert vo.result == 0

    first.send_notification("go", vo)
    assert vo.result == 10


def test_command_sends_through_its_context_facade(context, facade):
    """Commands built by a context's controller broadcast on that context"""
    relayed = RecordingMediator("relay", ["relayed"])
    facade.register_mediator(relayed)

    class Relay(SimpleCommand):
        def execute(self, notification):
            self.send_notification("relayed", notification.body)

    facade.register_command("relay", Relay)
    facade.send_notification("relay", "payload")

    assert [note.body for note in relayed.received] == ["payload"]

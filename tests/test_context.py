"""Tests for modbox.core.context module.

Version: 0.1.0

Tests for ModuleContext delegation and element/config resolution.
"""

import logging
import pytest
from unittest.mock import MagicMock, call, patch

from modbox.core.context import (
    DOM_SERVICE_NAME,
    ELEMENT_SELECTOR_PREFIX,
    ModuleContext,
    create_module_context,
)
from modbox.core.interfaces import IModuleContext
from modbox.testing import StubApplication, StubElement


@pytest.fixture
def application():
    """Mock coordinator whose 'dom' service resolves nothing."""
    app = MagicMock()
    app.get_service.return_value.query.return_value = None
    return app


@pytest.fixture
def context(application):
    return ModuleContext(application, "foo", "foo-1")


# =============================================================================
# Construction Tests
# =============================================================================

class TestModuleContextConstruction:
    """Tests for ModuleContext initialization."""

    def test_stores_module_name_and_id(self, context):
        assert context.module_name == "foo"
        assert context.module_id == "foo-1"

    def test_construction_has_no_side_effects(self, application):
        """Building a context should not call the coordinator."""
        ModuleContext(application, "foo", "does-not-exist")
        assert application.mock_calls == []

    def test_is_module_context_interface(self, context):
        assert isinstance(context, IModuleContext)

    def test_no_extra_attributes(self, context):
        """The context holds only its three captured values."""
        with pytest.raises(AttributeError):
            context.cache = {}

    def test_module_identity_is_read_only(self, context):
        with pytest.raises(AttributeError):
            context.module_id = "other"

    def test_factory_builds_context(self, application):
        context = create_module_context(application, "bar", "bar-2")
        assert isinstance(context, ModuleContext)
        assert context.module_name == "bar"
        assert context.module_id == "bar-2"

    def test_repr_does_not_expose_application(self, context):
        text = repr(context)
        assert "foo-1" in text
        assert "application" not in text


# =============================================================================
# Passthrough Tests
# =============================================================================

class TestBroadcast:
    """Tests for broadcast passthrough."""

    def test_forwards_name_and_data_once(self, context, application):
        payload = {"id": 7}
        context.broadcast("module:ready", payload)

        application.broadcast.assert_called_once_with("module:ready", payload)
        assert application.broadcast.call_args.args[1] is payload

    def test_data_defaults_to_none(self, context, application):
        context.broadcast("module:ready")
        application.broadcast.assert_called_once_with("module:ready", None)

    def test_returns_none(self, context, application):
        application.broadcast.return_value = "ignored"
        assert context.broadcast("x", 1) is None

    def test_collaborator_errors_propagate(self, context, application):
        error = RuntimeError("listener failed")
        application.broadcast.side_effect = error

        with pytest.raises(RuntimeError) as exc_info:
            context.broadcast("x")
        assert exc_info.value is error


class TestGetService:
    """Tests for service lookup."""

    def test_returns_registered_service(self, context, application):
        service = object()
        application.get_service.return_value = service

        assert context.get_service("analytics") is service
        application.get_service.assert_called_once_with("analytics")

    def test_unregistered_service_is_none(self, context, application):
        application.get_service.return_value = None
        assert context.get_service("analytics") is None


class TestGetGlobalConfig:
    """Tests for global config passthrough."""

    def test_named_value(self, context, application):
        application.get_global_config.return_value = "en-US"

        assert context.get_global_config("locale") == "en-US"
        application.get_global_config.assert_called_once_with("locale")

    def test_full_config_returned_unchanged(self, context, application):
        config = {"locale": "en-US", "debug": True}
        application.get_global_config.return_value = config

        assert context.get_global_config() is config
        application.get_global_config.assert_called_once_with(None)

    def test_does_not_resolve_element(self, context, application):
        with patch.object(ModuleContext, "get_element") as get_element:
            context.get_global_config("locale")
            context.get_global_config()

        get_element.assert_not_called()
        application.get_service.assert_not_called()


class TestNavigate:
    """Tests for navigate passthrough."""

    def test_forwards_all_arguments_positionally(self, context, application):
        state = {"tab": 2}
        params = {"legacy": True}
        context.navigate("/inbox", state, params)

        application.navigate.assert_called_once_with("/inbox", state, params)

    def test_omitted_arguments_forwarded_as_none(self, context, application):
        context.navigate()
        application.navigate.assert_called_once_with(None, None, None)

    def test_partial_arguments(self, context, application):
        context.navigate("/inbox", state={"tab": 2})
        application.navigate.assert_called_once_with("/inbox", {"tab": 2}, None)


# =============================================================================
# Element / Config Resolution Tests
# =============================================================================

class TestGetElement:
    """Tests for element resolution."""

    def test_queries_dom_service_with_id_selector(self, context, application):
        element = object()
        dom = application.get_service.return_value
        dom.query.return_value = element

        assert context.get_element() is element
        application.get_service.assert_called_once_with(DOM_SERVICE_NAME)
        dom.query.assert_called_once_with("#foo-1")

    def test_selector_is_literal_regardless_of_id(self, application):
        dom = application.get_service.return_value
        for module_id in ["", "a b", "#already", "x.y:z", "ünïcode"]:
            dom.query.reset_mock()
            ModuleContext(application, "m", module_id).get_element()
            dom.query.assert_called_once_with(ELEMENT_SELECTOR_PREFIX + module_id)

    def test_missing_element_is_none(self, context):
        assert context.get_element() is None

    def test_no_caching(self, context, application):
        dom = application.get_service.return_value
        first, second = object(), object()
        dom.query.side_effect = [first, second]

        assert context.get_element() is first
        assert context.get_element() is second
        assert dom.query.call_count == 2

    def test_missing_dom_service_raises_attribute_error(self, context, application):
        application.get_service.return_value = None
        with pytest.raises(AttributeError):
            context.get_element()


class TestGetConfig:
    """Tests for module-scoped config resolution."""

    def test_unresolved_element_passed_through(self, context, application):
        """Scenario: no element for '#foo-1' still reaches the config lookup."""
        context.get_config("x")

        assert application.mock_calls == [
            call.get_service("dom"),
            call.get_service().query("#foo-1"),
            call.get_module_config(None, "x"),
        ]

    def test_resolved_element_passed_with_name(self, context, application):
        element = object()
        application.get_service.return_value.query.return_value = element
        application.get_module_config.return_value = 20

        assert context.get_config("pageSize") == 20
        application.get_module_config.assert_called_once_with(element, "pageSize")

    def test_no_name_returns_full_config(self, context, application):
        config = {"pageSize": 20}
        application.get_module_config.return_value = config

        assert context.get_config() is config
        application.get_module_config.assert_called_once_with(None, None)

    def test_absent_config_is_none(self, context, application):
        application.get_module_config.return_value = None
        assert context.get_config("missing") is None

    def test_goes_through_get_element(self, context, application):
        element = object()
        with patch.object(ModuleContext, "get_element", return_value=element) as get_element:
            context.get_config("x")

        get_element.assert_called_once_with()
        application.get_module_config.assert_called_once_with(element, "x")


# =============================================================================
# Re-entrancy / Integration Tests
# =============================================================================

class TestReentrancy:
    """A broadcast listener may call back into the same context."""

    def test_listener_calls_back_into_context(self):
        app = StubApplication(global_config={"locale": "en-US"})
        app.dom.add(StubElement("foo-1", {"pageSize": 20}))
        context = app.create_context("foo", "foo-1")
        seen = []

        def on_ready(name, data):
            seen.append(context.get_config("pageSize"))
            context.broadcast("module:configured", {"pageSize": seen[-1]})

        app.on("module:ready", on_ready)
        context.broadcast("module:ready", {"id": 7})

        assert seen == [20]
        assert app.broadcasts == [
            ("module:ready", {"id": 7}),
            ("module:configured", {"pageSize": 20}),
        ]


class TestLogging:
    """Tests for debug logging of delegated calls."""

    def test_operations_logged_at_debug(self, context, caplog):
        with caplog.at_level(logging.DEBUG, logger="modbox.core.context"):
            context.broadcast("module:ready")
            context.navigate("/inbox")

        messages = [r.getMessage() for r in caplog.records if r.name == "modbox.core.context"]
        assert "[foo-1] broadcast module:ready" in messages
        assert "[foo-1] navigate /inbox" in messages
        assert all(r.levelno == logging.DEBUG for r in caplog.records)

    def test_empty_key_logged_as_given(self, context, caplog):
        with caplog.at_level(logging.DEBUG, logger="modbox.core.context"):
            context.get_global_config("")
            context.get_global_config()

        messages = [r.getMessage() for r in caplog.records if r.name == "modbox.core.context"]
        assert messages == ["[foo-1] get_global_config ", "[foo-1] get_global_config <all>"]

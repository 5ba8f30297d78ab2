"""Unit tests for JsonWireProtocolTranslator.

Tests cover: command table lookup, unsupported commands, element id
extraction, send keys parameter encoding, pass-through and idempotency.
"""

import pytest

from webdriver_wire.commands import DriverCommand, ExecutableWebDriverCommand, WebDriverCommand
from webdriver_wire.dialect import WebDriverDialect
from webdriver_wire.exceptions import InvalidElementReferenceError, UnsupportedCommandError
from webdriver_wire.translator import (
    JSON_WIRE_COMMANDS,
    W3C_ELEMENT_KEY,
    JsonWireProtocolTranslator,
)


@pytest.fixture
def translator():
    return JsonWireProtocolTranslator()


# =============================================================================
# Command translation
# =============================================================================


class TestTranslateCommand:

    def test_find_element(self, translator):
        command = WebDriverCommand(
            "session-ID-890", DriverCommand.FIND_ELEMENT, {"ELEMENT": "element-ID-123"}
        )
        executable = translator.translate_command(command)

        assert isinstance(executable, ExecutableWebDriverCommand)
        assert executable.method == "POST"
        assert executable.url == "/session/:sessionId/element"
        assert executable.session_id == "session-ID-890"
        assert executable.parameters == {"ELEMENT": "element-ID-123"}

    @pytest.mark.parametrize("name,route", sorted(JSON_WIRE_COMMANDS.items()))
    def test_every_table_entry(self, translator, name, route):
        executable = translator.translate_command(WebDriverCommand("s", name, {}))
        assert (executable.method, executable.url) == route

    def test_every_vocabulary_entry_not_w3c_only(self, translator):
        w3c_only = {
            DriverCommand.ACTIONS,
            DriverCommand.MINIMIZE_WINDOW,
            DriverCommand.FULLSCREEN_WINDOW,
            DriverCommand.GET_ELEMENT_PROPERTY,
            DriverCommand.GET_NAMED_COOKIE,
            DriverCommand.TAKE_ELEMENT_SCREENSHOT,
        }
        for name in DriverCommand:
            assert translator.supports(name) is (name not in w3c_only), name

    def test_legacy_only_commands(self, translator):
        equals = translator.translate_command(
            WebDriverCommand("s", DriverCommand.ELEMENT_EQUALS, {":id": "a", ":other": "b"})
        )
        assert (equals.method, equals.url) == ("GET", "/session/:sessionId/element/:id/equals/:other")

        scrolled = translator.translate_command(
            WebDriverCommand("s", DriverCommand.GET_ELEMENT_LOCATION_ONCE_SCROLLED_INTO_VIEW)
        )
        assert scrolled.url == "/session/:sessionId/element/:id/location_in_view"

    def test_plain_string_name(self, translator):
        executable = translator.translate_command(WebDriverCommand("s", "getTitle"))
        assert (executable.method, executable.url) == ("GET", "/session/:sessionId/title")

    def test_not_valid_command_raises(self, translator):
        command = WebDriverCommand(
            "session-ID-890", "some_not_valid_command", {"ELEMENT": "element-ID-123"}
        )
        with pytest.raises(UnsupportedCommandError) as exc_info:
            translator.translate_command(command)

        assert isinstance(exc_info.value, ValueError)
        assert exc_info.value.command_name == "some_not_valid_command"
        assert exc_info.value.dialect is WebDriverDialect.JSON_WIRE

    def test_w3c_only_command_raises(self, translator):
        with pytest.raises(UnsupportedCommandError):
            translator.translate_command(WebDriverCommand("s", DriverCommand.ACTIONS, {"actions": []}))

    def test_send_keys_parameters_are_translated(self, translator):
        command = WebDriverCommand(
            "s", DriverCommand.SEND_KEYS_TO_ELEMENT, {":id": "e1", "value": "ab"}
        )
        executable = translator.translate_command(command)
        assert executable.parameters == {":id": "e1", "value": ["a", "b"]}


# =============================================================================
# Element translation
# =============================================================================


class TestTranslateElement:

    def test_legacy_key(self, translator):
        expected_element_id = "uuid-3423dsa-sdfsd"
        assert translator.translate_element({"ELEMENT": expected_element_id}) == expected_element_id

    def test_legacy_key_preferred(self, translator):
        raw = {W3C_ELEMENT_KEY: "w3c-id", "ELEMENT": "legacy-id"}
        assert translator.translate_element(raw) == "legacy-id"

    def test_falls_back_to_w3c_key(self, translator):
        assert translator.translate_element({W3C_ELEMENT_KEY: "w3c-id"}) == "w3c-id"

    @pytest.mark.parametrize("raw", [{}, {"element": "x"}, None, "ELEMENT", ["ELEMENT"]])
    def test_missing_key_raises(self, translator, raw):
        with pytest.raises(InvalidElementReferenceError) as exc_info:
            translator.translate_element(raw)
        assert exc_info.value.results == raw


# =============================================================================
# Parameter translation
# =============================================================================


class TestTranslateParameters:

    @pytest.mark.parametrize(
        "command_name",
        [DriverCommand.SEND_KEYS_TO_ELEMENT, DriverCommand.SEND_KEYS_TO_ACTIVE_ELEMENT],
    )
    def test_send_keys_changes_parameters(self, translator, command_name):
        params = {"value": "Test text"}
        translated = translator.translate_parameters(command_name, params)

        assert translated != params
        assert translated == {"value": list("Test text")}

    def test_send_keys_flattens_lists_and_numbers(self, translator):
        translated = translator.translate_parameters(
            DriverCommand.SEND_KEYS_TO_ELEMENT, {"value": ["ab", 1, ["c"]]}
        )
        assert translated["value"] == ["a", "b", "1", "c"]

    def test_input_not_mutated(self, translator):
        params = {"value": "Test text", ":id": "e1"}
        translator.translate_parameters(DriverCommand.SEND_KEYS_TO_ELEMENT, params)
        assert params == {"value": "Test text", ":id": "e1"}

    @pytest.mark.parametrize(
        "command_name,params",
        [
            (DriverCommand.FIND_ELEMENT, {"using": "id", "value": "login"}),
            (DriverCommand.IMPLICITLY_WAIT, {"ms": 1000}),
            (DriverCommand.SWITCH_TO_WINDOW, {"name": "handle-1"}),
            (DriverCommand.SET_WINDOW_SIZE, {":windowHandle": "current", "width": 1, "height": 2}),
            (DriverCommand.EXECUTE_SCRIPT, {"script": "return 1;", "args": []}),
            ("someUnknownCommand", {"a": 1}),
        ],
    )
    def test_pass_through(self, translator, command_name, params):
        assert translator.translate_parameters(command_name, params) == params

    def test_pass_through_returns_copy(self, translator):
        params = {"url": "https://example.com"}
        translated = translator.translate_parameters(DriverCommand.GET, params)
        assert translated == params
        assert translated is not params

    def test_idempotent(self, translator):
        for name, params in [
            (DriverCommand.GET, {"url": "https://example.com"}),
            (DriverCommand.SEND_KEYS_TO_ELEMENT, {"value": "Test text"}),
        ]:
            once = translator.translate_parameters(name, params)
            twice = translator.translate_parameters(name, once)
            assert twice == once

    def test_empty_parameters(self, translator):
        assert translator.translate_parameters(DriverCommand.GET_TITLE, {}) == {}
        assert translator.translate_parameters(DriverCommand.GET_TITLE, None) == {}

"""Unit tests for WebDriverResponseFactory.

Tests cover: result validation, legacy and W3C extraction, the None
"no information" outcome and error decoding in both dialects.
"""

import pytest

from webdriver_wire.dialect import WebDriverDialect
from webdriver_wire.exceptions import (
    ErrorKind,
    InvalidResultStateError,
    NoSuchElementException,
    SessionNotCreatedException,
    StaleElementReferenceException,
    UnknownErrorException,
)
from webdriver_wire.response import WebDriverResponse, WebDriverResponseFactory

JSON_WIRE = WebDriverDialect.JSON_WIRE
W3C = WebDriverDialect.W3C


# =============================================================================
# Result validation
# =============================================================================


class TestCheckExecutorResult:

    @pytest.mark.parametrize("dialect", [JSON_WIRE, W3C])
    @pytest.mark.parametrize("results", [None, [], "error", 42])
    def test_non_mapping_is_invalid(self, dialect, results):
        with pytest.raises(InvalidResultStateError, match="Invalid result state") as exc_info:
            WebDriverResponseFactory.check_executor_result(dialect, results)
        assert exc_info.value.results == results

    def test_w3c_error_raises(self):
        results = {"value": {"error": "no such element", "message": "nope"}}
        with pytest.raises(NoSuchElementException):
            WebDriverResponseFactory.check_executor_result(W3C, results)

    def test_w3c_empty_error_passes(self):
        WebDriverResponseFactory.check_executor_result(W3C, {"value": {"error": ""}})

    def test_legacy_positive_status_raises(self):
        with pytest.raises(NoSuchElementException):
            WebDriverResponseFactory.check_executor_result(JSON_WIRE, {"status": 7})

    @pytest.mark.parametrize("results", [{"status": 0}, {}, {"status": None}, {"status": -1}])
    def test_legacy_non_error_passes(self, results):
        WebDriverResponseFactory.check_executor_result(JSON_WIRE, results)


# =============================================================================
# JSON Wire extraction
# =============================================================================


class TestJsonWire:

    def test_success(self):
        response = WebDriverResponseFactory.create(
            {"status": 0, "sessionId": "s1", "value": {"k": "v"}}, JSON_WIRE
        )
        assert response == WebDriverResponse(session_id="s1", status=0, value={"k": "v"})

    def test_status_only(self):
        response = WebDriverResponseFactory.create({"status": 0}, JSON_WIRE)
        assert response == WebDriverResponse(session_id=None, status=0, value=None)

    def test_missing_status_returns_none(self):
        assert WebDriverResponseFactory.create({}, JSON_WIRE) is None
        assert WebDriverResponseFactory.create({"value": "x"}, JSON_WIRE) is None

    def test_empty_value_is_not_none(self):
        response = WebDriverResponseFactory.create({"status": 0, "value": None}, JSON_WIRE)
        assert response is not None
        assert response.value is None

    def test_error_status(self):
        results = {"status": 7, "value": {"message": "no such element"}}
        with pytest.raises(NoSuchElementException) as exc_info:
            WebDriverResponseFactory.create(results, JSON_WIRE)

        assert exc_info.value.kind is ErrorKind.NO_SUCH_ELEMENT
        assert exc_info.value.message == "no such element"
        assert exc_info.value.results is results

    def test_top_level_message_fallback(self):
        with pytest.raises(NoSuchElementException) as exc_info:
            WebDriverResponseFactory.create({"status": 7, "message": "top"}, JSON_WIRE)
        assert exc_info.value.message == "top"

    def test_numeric_string_status(self):
        response = WebDriverResponseFactory.create({"status": "0", "value": 1}, JSON_WIRE)
        assert response.status == 0

    def test_unknown_status(self):
        with pytest.raises(UnknownErrorException) as exc_info:
            WebDriverResponseFactory.create({"status": 999, "value": {"message": "boom"}}, JSON_WIRE)
        assert "boom" in exc_info.value.message
        assert "999" in exc_info.value.message

    def test_extraction_rechecks_status(self):
        results = {"status": 7, "value": {"message": "gone"}}
        with pytest.raises(NoSuchElementException):
            WebDriverResponseFactory.create_json_wire_protocol(results)

    @pytest.mark.parametrize("results", [[], None, "text"])
    def test_extraction_rejects_non_mapping(self, results):
        with pytest.raises(InvalidResultStateError, match="Invalid result state") as exc_info:
            WebDriverResponseFactory.create_json_wire_protocol(results)
        assert exc_info.value.results == results

    def test_extraction_rejects_non_numeric_status(self):
        with pytest.raises(UnknownErrorException):
            WebDriverResponseFactory.create_json_wire_protocol({"status": "broken"})


# =============================================================================
# W3C extraction
# =============================================================================


class TestW3C:

    def test_new_session_with_capabilities(self):
        results = {"value": {"sessionId": "s2", "capabilities": {"browserName": "x"}}}
        response = WebDriverResponseFactory.create(results, W3C)
        assert response == WebDriverResponse(session_id="s2", value={"browserName": "x"})
        assert response.status is None

    def test_session_id_removed_from_copy(self):
        results = {"value": {"sessionId": "s2", "capabilities": {"browserName": "x"}}}
        WebDriverResponseFactory.create(results, W3C)
        assert results["value"]["sessionId"] == "s2"

    def test_nested_session_id_preferred(self):
        results = {
            "sessionId": "outer",
            "value": {"sessionId": "inner", "capabilities": {"a": 1}},
        }
        assert WebDriverResponseFactory.create(results, W3C).session_id == "inner"

    def test_top_level_session_id_used(self):
        results = {"sessionId": "outer", "value": {"capabilities": {"a": 1}}}
        assert WebDriverResponseFactory.create(results, W3C).session_id == "outer"

    def test_session_id_without_capabilities_returns_none(self):
        assert WebDriverResponseFactory.create({"value": {"sessionId": "s3"}}, W3C) is None
        assert WebDriverResponseFactory.create(
            {"sessionId": "s3", "value": {"foo": "bar"}}, W3C
        ) is None

    def test_firefox_profile_marker_keeps_response(self):
        results = {"value": {"sessionId": "s4", "moz:profile": "/tmp/p"}}
        response = WebDriverResponseFactory.create(results, W3C)
        assert response == WebDriverResponse(session_id="s4", value={"moz:profile": "/tmp/p"})

    @pytest.mark.parametrize("value", [None, "Title", 3, [1, 2], {"x": 1, "y": 2}])
    def test_command_values(self, value):
        response = WebDriverResponseFactory.create({"value": value}, W3C)
        assert response == WebDriverResponse(session_id=None, value=value)

    def test_error(self):
        results = {"value": {"error": "stale element reference", "message": "m"}}
        with pytest.raises(StaleElementReferenceException) as exc_info:
            WebDriverResponseFactory.create(results, W3C)

        assert exc_info.value.kind is ErrorKind.STALE_ELEMENT_REFERENCE
        assert exc_info.value.message == "m"
        assert exc_info.value.results is results

    def test_extraction_raises_error(self):
        results = {"value": {"error": "no such element", "message": "m"}}
        with pytest.raises(NoSuchElementException):
            WebDriverResponseFactory.create_w3c_protocol(results)

    @pytest.mark.parametrize("results", [["not", "a", "mapping"], [], None])
    def test_extraction_rejects_non_mapping(self, results):
        with pytest.raises(InvalidResultStateError, match="Invalid result state") as exc_info:
            WebDriverResponseFactory.create_w3c_protocol(results)
        assert exc_info.value.results == results

    def test_unknown_error_code(self):
        with pytest.raises(UnknownErrorException) as exc_info:
            WebDriverResponseFactory.create({"value": {"error": "kaboom", "message": "m"}}, W3C)
        assert "kaboom" in exc_info.value.message


# =============================================================================
# Dialect guessing
# =============================================================================


class TestCreateWithoutDialect:

    def test_guesses_w3c(self):
        results = {"value": {"sessionId": "s", "capabilities": {"browserName": "firefox"}}}
        response = WebDriverResponseFactory.create(results)
        assert response == WebDriverResponse(session_id="s", value={"browserName": "firefox"})

    def test_guesses_json_wire(self):
        results = {"status": 0, "sessionId": "x", "value": {}}
        response = WebDriverResponseFactory.create(results)
        assert response == WebDriverResponse(session_id="x", status=0, value={})

    def test_guessed_legacy_error(self):
        with pytest.raises(SessionNotCreatedException):
            WebDriverResponseFactory.create({"status": 33, "value": {"message": "no"}})

    def test_non_mapping_is_invalid(self):
        with pytest.raises(InvalidResultStateError):
            WebDriverResponseFactory.create(None)

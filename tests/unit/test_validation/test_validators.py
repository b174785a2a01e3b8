"""
Unit tests for validation helpers and error handling.
"""

import logging

import pytest

from autobuilder.validation import (
    ErrorSeverity,
    TerminationError,
    LaunchError,
    ValidationError,
    handle_cli_error,
    handle_error,
    validate_app_name,
    validate_bool,
    validate_command_list,
    validate_directory,
    validate_positive_float,
)


@pytest.mark.unit
class TestValidators:
    """Test cases for value validators."""

    def test_positive_float_bounds(self):
        assert validate_positive_float("0.5", min_value=0.1, max_value=1.0) == 0.5
        with pytest.raises(ValidationError) as exc_info:
            validate_positive_float(2, max_value=1.0, field_name="grace_period")
        assert exc_info.value.field_name == "grace_period"

    def test_directory(self, project_dir):
        assert validate_directory(project_dir) == project_dir
        with pytest.raises(ValidationError):
            validate_directory(project_dir / "main.go")

    @pytest.mark.parametrize("name", ["", None, ".", "..", "a/b", "a\\b"])
    def test_invalid_app_names(self, name):
        with pytest.raises(ValidationError):
            validate_app_name(name)

    def test_valid_app_name(self):
        assert validate_app_name("my-server_2") == "my-server_2"

    def test_command_list(self):
        assert validate_command_list(["-a", "b"]) == ["-a", "b"]
        with pytest.raises(ValidationError):
            validate_command_list("-a b")

    def test_bool(self):
        assert validate_bool(False) is False
        with pytest.raises(ValidationError):
            validate_bool(1)


@pytest.mark.unit
class TestErrorHandling:
    """Test cases for handle_error and handle_cli_error."""

    def test_termination_error_is_a_launch_error(self):
        assert issubclass(TerminationError, LaunchError)

    def test_handle_error_logs_and_reraises(self, caplog):
        with pytest.raises(ValueError):
            handle_error(ValueError("boom"), "testing", severity=ErrorSeverity.ERROR)

        assert "Error in testing: boom" in caplog.text

    def test_handle_error_without_reraise(self, caplog):
        handle_error(ValueError("soft"), "testing", severity="warning", reraise=False)

        assert caplog.records[-1].levelno == logging.WARNING

    def test_handle_error_attaches_command(self, caplog):
        handle_error(ValueError("x"), "ctx", reraise=False, command="B")

        assert caplog.records[-1].command == "B"

    def test_handle_cli_error_exits(self, caplog):
        with pytest.raises(SystemExit) as exc_info:
            handle_cli_error(ValueError("bad path"), "configuration", exit_code=3)

        assert exc_info.value.code == 3
        assert "bad path" in caplog.text

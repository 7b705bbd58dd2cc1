from tflocals.constants import (
    EXIT_CODE_ATTRIBUTE_NOT_FOUND,
    EXIT_CODE_FAILURE,
    EXIT_CODE_FILE_ACCESS,
    EXIT_CODE_PARSE_ERROR,
    EXIT_CODE_SAVE_ERROR,
)
from tflocals.errors import (
    AttributeNotFoundError,
    FileAccessError,
    ParseError,
    ReadError,
    SaveError,
    SeekError,
    TfLocalsError,
    TfLocalsException,
    TruncateError,
    UpdateHclFileError,
    WriteError,
)
from tflocals.hcl import Diagnostic, Pos, Range


class TestErrorMessages:

    def test_attribute_not_found_names_the_local(self):
        error = AttributeNotFoundError("my_var")
        assert str(error) == "local variable 'my_var' not found"
        assert error.attribute_name == "my_var"

    def test_parse_error_includes_diagnostics(self):
        diagnostic = Diagnostic(
            "Invalid block definition", "A block definition must have block content.",
            Range("main.tf", Pos(7, 31), Pos(8, 1)))
        error = ParseError([diagnostic])

        assert str(error) == ("failed to parse file content: main.tf:7,31-8,1: "
                              "Invalid block definition; A block definition must have block content.")
        assert error.diagnostics == [diagnostic]

    def test_parse_error_counts_other_diagnostics(self):
        error = ParseError([Diagnostic("First"), Diagnostic("Second"), Diagnostic("Third")])
        assert str(error) == "failed to parse file content: First, and 2 other diagnostics"

    def test_stage_error_wraps_reason(self):
        reason = AttributeNotFoundError("code_version")
        error = UpdateHclFileError("failed to update local", reason)

        assert str(error) == "failed to update local: local variable 'code_version' not found"
        assert error.reason is reason
        assert error.stage == "failed to update local"

    def test_unexpected_exception_message(self):
        error = TfLocalsException(info="boom")
        assert "boom" in str(error)


class TestExitCodes:

    def test_exit_codes(self):
        assert TfLocalsError().get_exit_code() == EXIT_CODE_FAILURE
        assert TfLocalsException().get_exit_code() == EXIT_CODE_FAILURE
        assert FileAccessError("x").get_exit_code() == EXIT_CODE_FILE_ACCESS
        assert ReadError("x").get_exit_code() == EXIT_CODE_FILE_ACCESS
        assert ParseError().get_exit_code() == EXIT_CODE_PARSE_ERROR
        assert AttributeNotFoundError("x").get_exit_code() == EXIT_CODE_ATTRIBUTE_NOT_FOUND
        for error_class in (TruncateError, SeekError, WriteError):
            error = error_class("x")
            assert isinstance(error, SaveError)
            assert error.get_exit_code() == EXIT_CODE_SAVE_ERROR

    def test_stage_error_uses_reason_exit_code(self):
        error = UpdateHclFileError("failed to parse HCL file", ParseError())
        assert error.get_exit_code() == EXIT_CODE_PARSE_ERROR

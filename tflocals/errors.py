from typing import List, Optional

from tflocals.constants import (
    EXIT_CODE_ATTRIBUTE_NOT_FOUND,
    EXIT_CODE_FAILURE,
    EXIT_CODE_FILE_ACCESS,
    EXIT_CODE_PARSE_ERROR,
    EXIT_CODE_SAVE_ERROR,
)
from tflocals.hcl import Diagnostic, format_diagnostics


class TfLocalsException(Exception):
    """
    Base exception for unexpected tflocals failures.

    Args:
        message (str): The error message template.
        info (str): Additional information to include in the error message.
    """
    def __init__(self, message: str = "An unexpected error occurred while updating the file: {info}",
                 info: str = ""):
        self.message = message.format(info=info)
        super().__init__(self.message)

    def get_exit_code(self) -> int:
        """
        Get the exit code associated with this exception.

        Returns:
            int: The exit code.
        """
        return EXIT_CODE_FAILURE


class TfLocalsError(Exception):
    """
    Generic tflocals error.

    Args:
        message (str): The error message.
    """
    def __init__(self, message: str = "An error occurred while updating the file."):
        self.message = message
        super().__init__(self.message)

    def get_exit_code(self) -> int:
        return EXIT_CODE_FAILURE


class FileAccessError(TfLocalsError):
    """
    Error raised when the target file cannot be opened or stat'd.
    """
    def get_exit_code(self) -> int:
        return EXIT_CODE_FILE_ACCESS


class ReadError(TfLocalsError):
    """
    Error raised when the file content cannot be read completely.
    """
    def get_exit_code(self) -> int:
        return EXIT_CODE_FILE_ACCESS


class ParseError(TfLocalsError):
    """
    Error raised when the file content is not valid HCL.

    Args:
        diagnostics (List[Diagnostic]): The problems reported by the parser.
        message (str): The error message template.
    """
    def __init__(self, diagnostics: Optional[List[Diagnostic]] = None,
                 message: str = "failed to parse file content: {diagnostics}"):
        self.diagnostics = list(diagnostics or [])
        super().__init__(message.format(diagnostics=format_diagnostics(self.diagnostics)))

    def get_exit_code(self) -> int:
        return EXIT_CODE_PARSE_ERROR


class AttributeNotFoundError(TfLocalsError):
    """
    Error raised when no block of the target type defines the attribute.

    Args:
        attribute_name (str): The attribute that was looked up.
        message (str): The error message template.
    """
    def __init__(self, attribute_name: str,
                 message: str = "local variable '{attribute_name}' not found"):
        self.attribute_name = attribute_name
        super().__init__(message.format(attribute_name=attribute_name))

    def get_exit_code(self) -> int:
        return EXIT_CODE_ATTRIBUTE_NOT_FOUND


class SaveError(TfLocalsError):
    """
    Base of the errors raised while writing the document back.
    """
    def get_exit_code(self) -> int:
        return EXIT_CODE_SAVE_ERROR


class TruncateError(SaveError):
    pass


class SeekError(SaveError):
    pass


class WriteError(SaveError):
    pass


class UpdateHclFileError(TfLocalsError):
    """
    Error raised by the update pipeline, naming the stage that failed.

    Args:
        stage (str): What the pipeline was doing, e.g. "failed to parse HCL file".
        reason (TfLocalsError): The error raised by that stage.
    """
    def __init__(self, stage: str, reason: TfLocalsError):
        self.stage = stage
        self.reason = reason
        super().__init__(f"{stage}: {reason}")

    def get_exit_code(self) -> int:
        return self.reason.get_exit_code()

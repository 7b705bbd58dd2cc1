from dataclasses import dataclass
from typing import List, Optional

from tflocals.hcl.tokens import Range


@dataclass(frozen=True)
class Diagnostic:
    """
    A single problem found while reading a configuration file.

    Args:
        summary (str): Short description of the problem.
        detail (str): Longer explanation, may be empty.
        subject (Optional[Range]): The source range the problem refers to.
    """
    summary: str
    detail: str = ""
    subject: Optional[Range] = None

    def __str__(self) -> str:
        text = self.summary
        if self.detail:
            text = f"{text}; {self.detail}"
        if self.subject is not None:
            text = f"{self.subject}: {text}"
        return text


class HCLSyntaxError(Exception):
    """
    Raised by the parser when the source is not valid HCL native syntax.
    """

    def __init__(self, diagnostics: List[Diagnostic]):
        self.diagnostics = list(diagnostics)
        super().__init__(format_diagnostics(self.diagnostics))


def format_diagnostics(diagnostics: List[Diagnostic]) -> str:
    if not diagnostics:
        return "no diagnostics"
    text = str(diagnostics[0])
    others = len(diagnostics) - 1
    if others == 1:
        text += ", and 1 other diagnostic"
    elif others > 1:
        text += f", and {others} other diagnostics"
    return text

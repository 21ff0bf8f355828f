"""Error types with formatted source context."""

from __future__ import annotations


def locate(source: str, position: int) -> tuple[int, int]:
    """Convert a 1-based character position into a 1-based (line, column).

    A position one past the end of the source maps to the column just after
    the last character of the last line.
    """
    offset = min(max(position - 1, 0), len(source))
    line = source.count("\n", 0, offset) + 1
    line_start = source.rfind("\n", 0, offset) + 1
    return line, offset - line_start + 1


class CalcError(Exception):
    """Base for the first error of an evaluation, with position and source context."""

    kind = "error"

    def __init__(self, message: str, position: int, source: str) -> None:
        self.message = message
        self.position = position
        self.source = source
        super().__init__(self.format())

    @property
    def line(self) -> int:
        return locate(self.source, self.position)[0]

    @property
    def column(self) -> int:
        return locate(self.source, self.position)[1]

    def format(self, filename: str = "input.txt") -> str:
        line_no, col = locate(self.source, self.position)
        lines = self.source.splitlines(keepends=True)
        line_idx = line_no - 1

        # Build the source line (strip trailing newline for display)
        if 0 <= line_idx < len(lines):
            source_line = lines[line_idx].rstrip("\n").rstrip("\r")
        else:
            source_line = ""

        pad = " " * (col - 1)

        line_num = str(line_no)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        return (
            f"{self.kind}: {self.message}\n"
            f"{' ' * gutter_width}--> {filename}:{line_no}:{col}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter} {pad}^"
        )


class LexError(CalcError):
    """Unrecognized character or malformed numeric literal."""

    kind = "lexical error"


class ParseError(CalcError):
    """Missing operand, unmatched parenthesis, or trailing input."""

    kind = "syntax error"


class EvalError(CalcError):
    """Arithmetic failure during evaluation (division by zero)."""

    kind = "arithmetic error"

"""Input discovery, output naming, and per-file evaluation."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from exprcalc.errors import CalcError
from exprcalc.eval import EvalResult, evaluate
from exprcalc.parser import DEFAULT_MAX_DEPTH
from exprcalc.render import render_result


@dataclass(frozen=True, slots=True)
class OutputNaming:
    """Naming conventions for result files and the default output directory."""

    file_suffix: str = "out"
    dir_suffix: str = "out"

    def output_name(self, input_path: Path) -> str:
        """task1.txt -> task1_<file_suffix>.txt"""
        return f"{input_path.stem}_{self.file_suffix}.txt"

    def default_output_dir(self, input_path: Path) -> Path:
        """task1.txt -> task1_<user>_<dir_suffix>/ in the working directory."""
        return Path(f"{input_path.stem}_{current_user()}_{self.dir_suffix}")


def current_user() -> str:
    """Return $USER, or 'user' when it is unset or empty."""
    return os.environ.get("USER") or "user"


def discover_inputs(directory: Path, pattern: str = "*.txt") -> list[Path]:
    """List matching regular files directly inside *directory*, sorted by name."""
    return sorted(p for p in directory.glob(pattern) if p.is_file())


def process_file(
    input_path: Path,
    output_dir: Path | None,
    naming: OutputNaming = OutputNaming(),
    max_depth: int = DEFAULT_MAX_DEPTH,
    report: TextIO | None = None,
) -> EvalResult:
    """Evaluate one file and write its result line.

    With output_dir None the line goes to stdout instead of a file. Failed
    expressions are described on *report* when it is given. Raises OSError
    when the input cannot be read or the result cannot be written.
    """
    buffer = input_path.read_bytes()

    def _report(exc: CalcError) -> None:
        if report is not None:
            print(exc.format(input_path.name), file=report)

    result = evaluate(buffer, max_depth=max_depth, on_error=_report)
    line = render_result(result) + "\n"

    if output_dir is None:
        sys.stdout.write(line)
        return result

    output_dir.mkdir(parents=True, exist_ok=True)
    (output_dir / naming.output_name(input_path)).write_text(line, encoding="ascii")
    return result

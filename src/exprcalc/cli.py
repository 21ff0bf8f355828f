"""Command-line interface for exprcalc."""

from __future__ import annotations

import argparse
import sys
import time
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from exprcalc.batch import OutputNaming, discover_inputs, process_file
from exprcalc.parser import DEFAULT_MAX_DEPTH, MAX_DEPTH_CEILING

CONFIG_NAME = "exprcalc.toml"


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    inputs: list[Path]
    output_dir: Path | None
    naming: OutputNaming
    max_depth: int
    stdout: bool
    verbose: bool
    debug: bool
    watch: bool


class ConfigError(Exception):
    """Raised when the config file cannot be read or parsed."""


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="exprcalc",
        description="Evaluate arithmetic expression files",
    )
    p.add_argument("input", nargs="?", help="Input expression file")
    p.add_argument(
        "-d",
        "--dir",
        metavar="DIR",
        help="Process every matching file in DIR (non-recursive)",
    )
    p.add_argument(
        "-o",
        "--output-dir",
        metavar="OUTDIR",
        help="Output directory (default: <input>_<user>_<suffix>)",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help=f"Config file (default: auto-discover {CONFIG_NAME})",
    )
    p.add_argument(
        "--max-depth",
        type=int,
        default=None,
        metavar="N",
        help=f"Maximum expression nesting depth (default: {DEFAULT_MAX_DEPTH})",
    )
    p.add_argument("--stdout", action="store_true", help="Print results instead of writing files")
    p.add_argument("--verbose", action="store_true", help="Describe failed expressions on stderr")
    p.add_argument("--debug", action="store_true", help="Dump tokens to stderr")
    p.add_argument("--watch", action="store_true", help="Watch the input and re-evaluate")
    return p


def load_config(config_path: Path | None, search_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else search_dir / CONFIG_NAME

    if not path.is_file():
        return {}

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"invalid config {path}: {exc}") from exc


def _table(config: dict[str, Any], name: str) -> dict[str, Any]:
    value = config.get(name)
    return value if isinstance(value, dict) else {}


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags.
    """
    if args.input is None and args.dir is None:
        raise argparse.ArgumentTypeError("an input file or --dir is required")
    if args.watch and (args.dir is not None or args.input is None):
        raise argparse.ArgumentTypeError("--watch needs a single input file")

    if args.dir is not None:
        search_dir = Path(args.dir)
    else:
        search_dir = Path(args.input).parent
        if not search_dir.parts:
            search_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, search_dir)
    cfg_eval = _table(config, "eval")
    cfg_input = _table(config, "input")
    cfg_output = _table(config, "output")

    # Inputs: the directory listing first, then the explicit file
    pattern = cfg_input.get("pattern")
    if not isinstance(pattern, str):
        pattern = "*.txt"
    inputs: list[Path] = []
    if args.dir is not None:
        directory = Path(args.dir)
        if not directory.is_dir():
            raise argparse.ArgumentTypeError(f"not a directory: {directory}")
        inputs.extend(discover_inputs(directory, pattern))
    if args.input is not None:
        inputs.append(Path(args.input))

    # Max depth: default < config < CLI
    max_depth = DEFAULT_MAX_DEPTH
    cfg_depth = cfg_eval.get("max_depth")
    if isinstance(cfg_depth, int) and not isinstance(cfg_depth, bool):
        max_depth = cfg_depth
    if args.max_depth is not None:
        max_depth = args.max_depth
    if max_depth < 1:
        raise argparse.ArgumentTypeError(f"max depth must be at least 1, got {max_depth}")
    if max_depth > MAX_DEPTH_CEILING:
        raise argparse.ArgumentTypeError(
            f"max depth must be at most {MAX_DEPTH_CEILING}, got {max_depth}"
        )

    # Naming suffixes: config only
    naming_kwargs: dict[str, str] = {}
    for key in ("file_suffix", "dir_suffix"):
        value = cfg_output.get(key)
        if isinstance(value, str) and value:
            naming_kwargs[key] = value
    naming = OutputNaming(**naming_kwargs)

    # Output directory: config < CLI; None means per-input default
    output_dir: Path | None = None
    cfg_dir = cfg_output.get("dir")
    if isinstance(cfg_dir, str) and cfg_dir:
        output_dir = Path(cfg_dir)
    if args.output_dir:
        output_dir = Path(args.output_dir)
    elif output_dir is None and args.dir is not None:
        # Directory mode shares one default directory named after DIR
        output_dir = naming.default_output_dir(Path(Path(args.dir).resolve().name))

    return CliOptions(
        inputs=inputs,
        output_dir=output_dir,
        naming=naming,
        max_depth=max_depth,
        stdout=args.stdout,
        verbose=args.verbose,
        debug=args.debug,
        watch=args.watch,
    )


def run_file(input_path: Path, options: CliOptions) -> bool:
    """Evaluate one input and write its result. Returns False on I/O failure."""
    if options.stdout:
        out_dir = None
    elif options.output_dir is not None:
        out_dir = options.output_dir
    else:
        out_dir = options.naming.default_output_dir(input_path)

    try:
        if options.debug:
            from exprcalc.debug import dump_tokens

            dump_tokens(input_path.read_bytes(), file=sys.stderr)
        process_file(
            input_path,
            out_dir,
            naming=options.naming,
            max_depth=options.max_depth,
            report=sys.stderr if options.verbose else None,
        )
    except OSError as exc:
        print(f"error: {input_path}: {exc.strerror or exc}", file=sys.stderr)
        return False
    return True


def watch_loop(options: CliOptions) -> None:
    """Poll the input file for changes, re-evaluate on each modification."""
    input_path = options.inputs[0]
    last_mtime = 0.0
    print(f"Watching {input_path} for changes...", file=sys.stderr)
    try:
        while True:
            try:
                mtime = input_path.stat().st_mtime
            except OSError:
                time.sleep(0.5)
                continue
            if mtime != last_mtime:
                last_mtime = mtime
                if run_file(input_path, options):
                    print(f"Evaluated {input_path}", file=sys.stderr)
            time.sleep(0.5)
    except KeyboardInterrupt:
        pass


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except (argparse.ArgumentTypeError, ConfigError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if options.watch:
        watch_loop(options)
        return 0

    status = 0
    for input_path in options.inputs:
        if not run_file(input_path, options):
            status = 1
    return status

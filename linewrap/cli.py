"""Command line entrypoint: wrap files or stdin to stdout."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from tqdm import tqdm

from linewrap.diagnostics import ConfigError, DecodingError, StreamReadError
from linewrap.pipeline import WrapRunResult, run_wrap_stream
from linewrap.wrap import DEFAULT_CHUNK_SIZE, DEFAULT_COLUMN_WIDTH, DEFAULT_TAB_WIDTH, WrapOptions

logger = logging.getLogger(__name__)

LINE_SEPARATORS = {
    "lf": "\n",
    "crlf": "\r\n",
    "cr": "\r",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="linewrap",
        description="Wrap UTF-8 text to a fixed column width",
    )
    parser.add_argument(
        "files",
        nargs="*",
        type=Path,
        help="Files to wrap (default: read stdin; '-' also means stdin)",
    )
    parser.add_argument(
        "-w",
        "--width",
        type=int,
        default=DEFAULT_COLUMN_WIDTH,
        help=f"Column width, indents included (default: {DEFAULT_COLUMN_WIDTH})",
    )
    parser.add_argument("--first-indent", default="", help="Indent for the first row of each input")
    parser.add_argument("--indent", default="", help="Indent for rows after the first")
    parser.add_argument(
        "--tab-width",
        type=int,
        default=DEFAULT_TAB_WIDTH,
        help=f"Spaces per tab (default: {DEFAULT_TAB_WIDTH})",
    )
    parser.add_argument(
        "--keep-line-breaks",
        action="store_true",
        help="Keep input line breaks instead of folding them into spaces",
    )
    parser.add_argument(
        "--separator",
        choices=sorted(LINE_SEPARATORS),
        default="lf",
        help="Line separator written at wrap points (default: lf)",
    )
    parser.add_argument(
        "--chunk-size",
        type=int,
        default=DEFAULT_CHUNK_SIZE,
        help=f"Bytes per read (default: {DEFAULT_CHUNK_SIZE})",
    )
    parser.add_argument(
        "--progress",
        action="store_true",
        help="Show a tqdm progress bar over the input files",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    try:
        options = WrapOptions(
            column_width=args.width,
            first_row_indent=args.first_indent,
            subsequent_row_indent=args.indent,
            fold_line_breaks=not args.keep_line_breaks,
            tab_width=args.tab_width,
            line_separator=LINE_SEPARATORS[args.separator],
        )
    except ConfigError as exc:
        parser.error(str(exc))
    if args.chunk_size <= 0:
        parser.error("--chunk-size must be >= 1")

    paths: list[Path] = args.files or [Path("-")]
    iterator = tqdm(paths, desc="wrap", unit="file", file=sys.stderr) if args.progress else paths

    status = 0
    for path in iterator:
        try:
            result = _wrap_path(path, options, chunk_size=args.chunk_size)
        except (DecodingError, StreamReadError, OSError) as exc:
            print(f"linewrap: {path}: {exc}", file=sys.stderr)
            status = 1
            continue

        if result.has_hard_splits:
            logger.info("%s: %d word(s) split mid-word", path, len(result.diagnostics))
        if result.wrapped_text:
            sys.stdout.write(result.wrapped_text + options.line_separator)

    sys.stdout.flush()
    return status


def _wrap_path(path: Path, options: WrapOptions, *, chunk_size: int) -> WrapRunResult:
    if str(path) == "-":
        return run_wrap_stream(sys.stdin.buffer, options, chunk_size=chunk_size)
    with path.open("rb") as handle:
        return run_wrap_stream(handle, options, chunk_size=chunk_size)


if __name__ == "__main__":
    raise SystemExit(main())

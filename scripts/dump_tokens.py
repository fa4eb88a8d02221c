#!/usr/bin/env python
import argparse
from pathlib import Path

from linewrap.lexer import Token, TokenKind, lex


def format_token(idx: int, token: Token) -> str:
    base = (
        f"[{idx}] kind={token.kind.name} "
        f"range=({token.range.start.value},{token.range.end.value}) "
        f"bytes={token.byte_length}"
    )
    if token.kind == TokenKind.WHITESPACE:
        return base + f" width={token.width} line_breaks={token.line_breaks}"
    return base + f" text={token.text!r}"


def main() -> None:
    parser = argparse.ArgumentParser(description="Dump the whitespace/word token stream of a file")
    parser.add_argument("input", type=Path, help="UTF-8 text file")
    parser.add_argument("--output", type=Path, default=Path("out/tokens.txt"))
    parser.add_argument("--tab-width", type=int, default=1)
    parser.add_argument("--keep-line-breaks", action="store_true")
    args = parser.parse_args()

    tokens = lex(
        args.input.read_bytes(),
        tab_width=args.tab_width,
        fold_line_breaks=not args.keep_line_breaks,
    )

    args.output.parent.mkdir(parents=True, exist_ok=True)

    with args.output.open("w", encoding="utf-8") as f:
        for idx, token in enumerate(tokens):
            f.write(format_token(idx, token) + "\n")

    print(f"Wrote {len(tokens)} tokens to {args.output}")


if __name__ == "__main__":
    main()

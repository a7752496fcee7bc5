# src/strtools/demo.py
import argparse
import json
import logging
import os
import sys

from .errors import StrToolsError
from .util.log import ENV_VAR, reload_topics


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="strtools-demo",
        description="Escape-aware splitting, partial numeral parsing and substring search.",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")
    sub = parser.add_subparsers(dest="command", required=True)

    p_split = sub.add_parser("split", help="Split text on unescaped delimiters")
    p_split.add_argument("text")
    p_split.add_argument("-d", "--delimiters", default=None, help="Delimiter chars (default ':')")
    p_split.add_argument("-e", "--escape", default="\\", help="Escape char (default '\\')")
    p_split.add_argument("--sanitize", action="store_true", help="Drop escapes before delimiters")
    p_split.add_argument("-n", "--max-splits", type=int, default=None, dest="max_splits")
    p_split.add_argument("--dialect", default=None, help="Use a named dialect from dialects.json")

    p_parse = sub.add_parser("parse", help="Parse a numeral from the front or back of text")
    p_parse.add_argument("text")
    p_parse.add_argument("-k", "--kind", default="i64", help="i8..i128, u8..u128, f32, f64")
    p_parse.add_argument("-r", "--radix", type=int, default=10)
    p_parse.add_argument("--back", action="store_true", help="Scan from the end")

    p_unique = sub.add_parser("unique", help="Longest substring without repeated chars")
    p_unique.add_argument("text")
    p_unique.add_argument("--max-len", type=int, default=None, dest="max_len")

    p_escape = sub.add_parser("escape", help="Escape a charset (and the escape char)")
    p_escape.add_argument("text")
    p_escape.add_argument("-c", "--charset", required=True)
    p_escape.add_argument("-e", "--escape", default="\\")
    return parser


def run(args: argparse.Namespace) -> dict:
    from . import (
        escape_charset,
        longest_unique_range,
        parse_numeral_back,
        parse_numeral_front,
        split,
        split_n,
        split_sanitized,
        split_with_dialect,
    )

    if args.command == "split":
        if args.dialect:
            segments = split_with_dialect(args.text, args.dialect)
        elif args.max_splits is not None:
            segments = split_n(args.text, args.escape, args.delimiters or ":", args.max_splits)
        elif args.sanitize:
            segments = split_sanitized(args.text, args.escape, args.delimiters or ":")
        else:
            segments = split(args.text, args.escape, args.delimiters or ":")
        return {"segments": list(segments)}

    if args.command == "parse":
        parse = parse_numeral_back if args.back else parse_numeral_front
        value, rest = parse(args.text, args.radix, args.kind)
        return {"value": value, "rest": rest}

    if args.command == "unique":
        window = longest_unique_range(args.text, args.max_len)
        return {
            "substring": args.text[window.start : window.stop],
            "start": window.start,
            "end": window.stop,
        }

    return {"escaped": escape_charset(args.text, args.escape, args.charset)}


def main(argv=None):
    """CLI demo: run one strtools operation and print the result as JSON."""
    args = _build_parser().parse_args(argv)
    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
        os.environ.setdefault(ENV_VAR, "all")
        reload_topics()

    try:
        result = run(args)
    except StrToolsError as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        sys.exit(1)
    print(json.dumps(result, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()

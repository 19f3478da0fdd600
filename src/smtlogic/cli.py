"""
Command-line interface for SMT-LIB logic definitions.

    smtlogic describe FILE...           summary of each logic
    smtlogic format FILE [-o OUT]       rewrite in canonical key order
    smtlogic export FILE -f json|yaml   dump as JSON or YAML
    smtlogic catalog DIR [-s TERM]      list (or search) a directory of logics
    smtlogic enum DIR [-o OUT]          Python Enum source for a directory of logics
"""

import argparse
import sys

from smtlogic.backends import generate_logic_enum
from smtlogic.catalog import load_catalog_dir
from smtlogic.describe import describe
from smtlogic.errors import DuplicateLogic, MalformedRecord
from smtlogic.logic_parser import load_file
from smtlogic.serialization import record_to_json, record_to_yaml, serialize


def _write(text: str, output) -> None:
    if output:
        with open(output, "w", encoding="utf-8") as f:
            f.write(text)
    else:
        sys.stdout.write(text if text.endswith("\n") else text + "\n")


def cmd_describe(args) -> int:
    summaries = [describe(load_file(path)) for path in args.files]
    print("\n\n".join(summaries))
    return 0


def cmd_format(args) -> int:
    _write(serialize(load_file(args.file)), args.output)
    return 0


def cmd_export(args) -> int:
    record = load_file(args.file)
    text = record_to_json(record) if args.format == "json" else record_to_yaml(record)
    _write(text, args.output)
    return 0


def cmd_catalog(args) -> int:
    catalog = load_catalog_dir(args.directory, pattern=args.pattern)
    if args.search:
        records = catalog.search(args.search)
        print("\n\n".join(describe(r) for r in records) if records else f"No logic matches {args.search!r}")
    else:
        print(catalog.describe_all())
    return 0


def cmd_enum(args) -> int:
    catalog = load_catalog_dir(args.directory, pattern=args.pattern)
    _write(generate_logic_enum(catalog, class_name=args.class_name), args.output)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="smtlogic", description="Inspect SMT-LIB logic definitions")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("describe", help="Summarize logic files")
    p.add_argument("files", nargs="+", help="Paths to .smt2 logic files")
    p.set_defaults(func=cmd_describe)

    p = sub.add_parser("format", help="Rewrite a logic file in canonical form")
    p.add_argument("file", help="Path to an .smt2 logic file")
    p.add_argument("-o", "--output", help="Write here instead of stdout")
    p.set_defaults(func=cmd_format)

    p = sub.add_parser("export", help="Export a logic file as JSON or YAML")
    p.add_argument("file", help="Path to an .smt2 logic file")
    p.add_argument("-f", "--format", choices=["json", "yaml"], default="yaml")
    p.add_argument("-o", "--output", help="Write here instead of stdout")
    p.set_defaults(func=cmd_export)

    p = sub.add_parser("catalog", help="List a directory of logic files")
    p.add_argument("directory", help="Directory holding .smt2 logic files")
    p.add_argument("-s", "--search", help="Only show logics mentioning this term")
    p.add_argument("--pattern", default="*.smt2", help="File glob (default: *.smt2)")
    p.set_defaults(func=cmd_catalog)

    p = sub.add_parser("enum", help="Generate a Python Enum of a directory of logics")
    p.add_argument("directory", help="Directory holding .smt2 logic files")
    p.add_argument("--class-name", default="Logic")
    p.add_argument("--pattern", default="*.smt2", help="File glob (default: *.smt2)")
    p.add_argument("-o", "--output", help="Write here instead of stdout")
    p.set_defaults(func=cmd_enum)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return args.func(args)
    except (MalformedRecord, DuplicateLogic, FileNotFoundError, NotADirectoryError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())

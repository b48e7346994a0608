#!/usr/bin/env python3
"""
List the documented preconditions of every function in a Python file.
"""

import argparse
import logging
import sys
from pathlib import Path

from .core.config import configure_logging
from .output import ConditionReportFormatter
from .parser import ContractSourceParser

logger = logging.getLogger(__name__)


def print_report(functions) -> None:
    """Print a human readable listing"""
    documented = [f for f in functions if f["preconditions"]]
    if not documented:
        print("No documented preconditions found")
        return

    for func in documented:
        qualified = f"{func['class']}.{func['name']}" if func["class"] else func["name"]
        print(f"{qualified} (line {func['lineno']})")
        for condition in func["preconditions"]:
            print(f"  [{condition['check']}] {condition['type']} -> argument {condition['param']}")

    print(f"\n{len(documented)}/{len(functions)} functions declare preconditions")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="List docstring preconditions in a Python file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    pacts-inspect mymodule.py
    pacts-inspect mymodule.py --json --output report.json
        """
    )
    parser.add_argument("file", help="Python file to inspect")
    parser.add_argument("--json", action="store_true", help="Emit a JSON report")
    parser.add_argument("-o", "--output", help="Write the JSON report to this path")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")

    args = parser.parse_args(argv)
    configure_logging("DEBUG" if args.verbose else None)

    path = Path(args.file)
    if not path.exists():
        print(f"Error: File not found: {args.file}", file=sys.stderr)
        return 1

    source = path.read_text(encoding='utf-8')
    try:
        functions = ContractSourceParser().parse_source(source, filename=str(path))
    except SyntaxError as e:
        print(f"Error: Cannot parse {args.file}: {e}", file=sys.stderr)
        return 1
    logger.debug("Parsed %d functions from %s", len(functions), path)

    if args.json or args.output:
        formatter = ConditionReportFormatter(str(path), source=source)
        for func in functions:
            formatter.add_entry(func["name"], func["lineno"], func["preconditions"], func["class"])
        if args.output:
            formatter.save(args.output)
            print(f"Report written to {args.output}")
        else:
            print(formatter.to_json())
    else:
        print_report(functions)

    return 0


if __name__ == "__main__":
    sys.exit(main())

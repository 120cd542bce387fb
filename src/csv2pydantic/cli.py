import argparse
import logging
import os
import sys
from typing import Any, Dict, List, Optional

import yaml

from csv2pydantic.adapters.csv_adapter import CSVAdapter, open_source
from csv2pydantic.observability.logger import set_level
from csv2pydantic.pipeline.runner import RunConfig, build_schema, render
from csv2pydantic.run_config import load_options
from csv2pydantic.utils.exceptions import ConfigError, Csv2PydanticError, OutputExistsError
from csv2pydantic.utils.naming import to_pascal_case


class C:
    RESET = "\033[0m"
    BOLD = "\033[1m"
    RED = "\033[31m"
    GREEN = "\033[32m"


def cprint(text: str, color: str = C.RESET, bold: bool = False):
    # Status goes to stderr; stdout may carry the generated code
    if sys.stderr.isatty():
        prefix = (C.BOLD if bold else "") + color
        text = f"{prefix}{text}{C.RESET}"
    print(text, file=sys.stderr)


DEFAULTS: Dict[str, Any] = {
    "name": None,
    "delimiter": ",",
    "lines": None,
    "min_fields": None,
    "blank_lines": 1,
    "output": None,
    "force": False,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="csv2pydantic",
        description="Generate a pydantic model from a CSV file",
    )

    parser.add_argument(
        "file",
        nargs="?",
        help="CSV file to analyze. Read from stdin when omitted (requires --name).",
    )
    parser.add_argument("-n", "--name", help="Name of the model, defaults to the file name")
    parser.add_argument("-o", "--output", help="File the model is written to (default: stdout)")
    parser.add_argument(
        "-f", "--force",
        action="store_true",
        default=None,
        help="Overwrite --output if it already exists",
    )
    parser.add_argument("-d", "--delimiter", help="Field delimiter (default: ',')")
    parser.add_argument("-l", "--lines", type=int, help="Number of rows to analyze")
    parser.add_argument(
        "-s", "--min-fields",
        type=int,
        help="Skip rows with this many or fewer non-empty fields (e.g. subsection headers)",
    )
    parser.add_argument(
        "-b", "--blank-lines",
        type=int,
        help="Blank lines between model fields (default: 1)",
    )
    parser.add_argument("--config", help="YAML file with default options")
    parser.add_argument(
        "--schema",
        action="store_true",
        help="Print the inferred schema as YAML instead of the model",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log inference events to stderr")
    return parser


def resolve_options(args: argparse.Namespace) -> Dict[str, Any]:
    """
    CLI flags win over the --config file, which wins over DEFAULTS.
    """
    options = dict(DEFAULTS)
    if args.config:
        options.update(load_options(args.config))

    for key in DEFAULTS:
        value = getattr(args, key)
        if value is not None:
            options[key] = value

    if options["force"] and not options["output"]:
        raise ConfigError("--force requires --output")
    return options


def resolve_type_name(name: Optional[str], file: Optional[str]) -> str:
    if name:
        return to_pascal_case(str(name))
    if file:
        stem = os.path.splitext(os.path.basename(file))[0]
        return to_pascal_case(stem)
    raise ConfigError("--name is required when reading from stdin")


def write_output(text: str, output: Optional[str], force: bool) -> None:
    if not output:
        sys.stdout.write(text)
        sys.stdout.flush()
        return

    try:
        with open(output, "w" if force else "x", encoding="utf-8") as f:
            f.write(text)
    except FileExistsError as e:
        raise OutputExistsError(
            f"Output file {output} already exists (use --force to overwrite)"
        ) from e


def main(argv: Optional[List[str]] = None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        set_level(logging.INFO)

    try:
        options = resolve_options(args)
        config = RunConfig(
            type_name=resolve_type_name(options["name"], args.file),
            max_rows=options["lines"],
            min_nonempty_fields=options["min_fields"],
            blank_lines=options["blank_lines"],
            delimiter=options["delimiter"],
        )

        with open_source(args.file) as stream:
            adapter = CSVAdapter(stream, delimiter=config.delimiter)
            schema = build_schema(adapter, config)

        if args.schema:
            text = yaml.safe_dump(schema.to_dict(), sort_keys=False, allow_unicode=True)
        else:
            text = render(schema, config) + "\n"

        write_output(text, options["output"], options["force"])

    except (Csv2PydanticError, OSError) as e:
        cprint("[FAILED] Model generation failed.", C.RED, bold=True)
        cprint(str(e), C.RED)
        raise SystemExit(1)

    if options["output"]:
        cprint(f"[DONE] {config.type_name} written to: {options['output']}", C.GREEN)


if __name__ == "__main__":
    main()

"""
GetOptions

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.

Command-line front end: parse a token list against option specifications and
show the result.

    getoptions --spec 'verbose|v+' --spec 'host=@s' -- -vv --host a b -- file1
    getoptions --config getoptions.yaml --json -- --debug
"""
from __future__ import annotations

import json
import logging
import sys
from typing import Any

from rich.markup import escape

from getoptions.config import find_spec_file, load_specs
from getoptions.console import console
from getoptions.exceptions import GetOptionsError
from getoptions.get_options import GetOptions
from getoptions.parser.spec_compiler import compile_specs
from getoptions.utils import get_program_invocation, setup_logging

CLI_SPECS = [
    "spec|s=@s",
    "config|c=s",
    "json|j",
    "log-mode=s",
    "verbose|v+",
    "help|h",
]

CLI_HELP = {
    "spec": "Option specification, repeatable (e.g. 'size=i').",
    "config": "YAML or TOML spec file. Defaults to ./getoptions.yaml and friends.",
    "json": "Print the result as JSON.",
    "log-mode": "Logging mode: cli or json.",
    "verbose": "Increase log verbosity, repeatable.",
    "help": "Show this help message.",
}


def split_tokens(argv: list[str]) -> tuple[list[str], list[str]]:
    """Split program arguments from the tokens to parse at the first `--`."""
    if "--" in argv:
        index = argv.index("--")
        return argv[:index], argv[index + 1 :]
    return argv, []


def render_help() -> None:
    program = get_program_invocation()
    usage = f"usage: {program} [options] -- TOKENS..."
    console.print(f"[usage]{escape(usage)}[/usage]\n")
    console.print("[usage]options:[/usage]")
    for definition in compile_specs(CLI_SPECS).definitions:
        flags = ", ".join(
            f"-{alias}" if len(alias) == 1 else f"--{alias}"
            for alias in definition.aliases
        )
        line = f"  {flags:<20} {definition.get_spec_text():<14} "
        console.print(f"{escape(line)}{CLI_HELP[definition.key]}")


def configure_logging(cli: GetOptions) -> None:
    verbose = cli["verbose"]
    if not verbose and not cli.has("log-mode"):
        return
    level = max(logging.WARNING - 10 * verbose, logging.DEBUG)
    try:
        setup_logging(mode=cli["log-mode"], console_log_level=level)
    except ValueError as error:
        raise GetOptionsError(str(error)) from error


def collect_specs(cli: GetOptions) -> list[str]:
    specs = list(cli["spec"] or [])
    config_path = cli["config"] or (None if specs else find_spec_file())
    if config_path:
        specs.extend(load_specs(config_path))
    return specs


def run(argv: list[str]) -> int:
    own_args, tokens = split_tokens(argv)
    cli = GetOptions(CLI_SPECS, own_args)
    if cli["help"]:
        render_help()
        return 0
    if cli.leftover:
        raise GetOptionsError(f"unexpected argument '{cli.leftover[0]}' before '--'")

    configure_logging(cli)
    specs = collect_specs(cli)
    if not specs:
        raise GetOptionsError("no option specifications given, use --spec or --config")

    parsed = GetOptions(specs, tokens)
    if cli["json"]:
        payload: dict[str, Any] = {
            "options": parsed.to_dict(),
            "leftover": parsed.leftover,
        }
        console.print_json(json.dumps(payload))
    else:
        parsed.render(console)
    return 0


def main(argv: list[str] | None = None) -> int:
    try:
        return run(list(sys.argv[1:] if argv is None else argv))
    except GetOptionsError as error:
        console.print(f"[error]error:[/error] {escape(str(error))}")
        return 2


if __name__ == "__main__":
    sys.exit(main())

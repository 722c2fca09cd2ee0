"""Typer CLI for optsplit."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from typer.core import TyperCommand

from .arguments import get_argument, get_arguments
from .names import safe_name
from .options import get_option, get_options
from .reporting import Reporter
from .require import Status, require_arguments, require_options
from .settings import SettingsError, build_reporter, load_settings

RAW_TOKENS_KEY = "optsplit.tokens"
COUNT_PATTERN = re.compile(r"-?[0-9]+")

app = typer.Typer(
    add_completion=False,
    help="Split command-line tokens into options and arguments and check what is required.",
)

console = Console(emoji=False)
err_console = Console(stderr=True, emoji=False)


class RawTokensCommand(TyperCommand):
    """Command that forwards every token after its positional parameters untouched.

    Click would otherwise swallow ``--`` and treat hyphenated tokens as its own
    options.
    """

    def parse_args(self, ctx: typer.Context, args: List[str]) -> List[str]:
        fixed = sum(1 for param in self.params if param.param_type_name == "argument")
        ctx.meta[RAW_TOKENS_KEY] = list(args[fixed:])
        return super().parse_args(ctx, ["--", *args[:fixed]])


@dataclass
class CliState:
    config: Optional[Path]
    json_output: bool


def _tokens(ctx: typer.Context) -> List[str]:
    return list(ctx.meta.get(RAW_TOKENS_KEY, []))


def _state(ctx: typer.Context) -> CliState:
    return ctx.obj or CliState(config=None, json_output=False)


def _print_plain(text: str) -> None:
    console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)


def _emit_value(ctx: typer.Context, value: str) -> None:
    _print_plain(json.dumps(value) if _state(ctx).json_output else value)


def _emit_list(ctx: typer.Context, values: List[str]) -> None:
    if _state(ctx).json_output:
        _print_plain(json.dumps(values))
        return
    for value in values:
        _print_plain(value)


def _load_reporter(config: Optional[Path]) -> Reporter:
    try:
        return build_reporter(load_settings(config).settings)
    except SettingsError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _print_quickstart() -> None:
    console.print("optsplit: command-line token parsing", style="bold")
    console.print("Quickstart:")
    console.print("  optsplit get-arguments <tokens...>")
    console.print("  optsplit get-option <name> <tokens...>")
    console.print("  optsplit require-options <name,name...> <tokens...>")
    console.print("Tokens after the operation are passed through verbatim, including `--`.")


@app.callback(invoke_without_command=True)
def root(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        dir_okay=False,
        help="Settings YAML for the failure reporter (default: $OPTSPLIT_CONFIG or bundled).",
    ),
    json_output: bool = typer.Option(False, "--json/--no-json", help="Print results as JSON."),
) -> None:
    """Show quickstart guidance when no operation is provided."""
    ctx.obj = CliState(config=config, json_output=json_output)
    if ctx.invoked_subcommand is not None:
        return
    _print_quickstart()
    raise typer.Exit(code=0)


@app.command("help")
def help_cmd() -> None:
    """Print a compact help reference."""
    _print_quickstart()
    console.print("Exit codes for require-*: 0 ok, 1 validation failed, 2 invalid usage.")


@app.command("get-argument", cls=RawTokensCommand)
def get_argument_cmd(ctx: typer.Context, index: int = typer.Argument(..., help="Zero-based position.")) -> None:
    """Print the argument at INDEX (empty when out of range)."""
    _emit_value(ctx, get_argument(index, _tokens(ctx)))


@app.command("get-arguments", cls=RawTokensCommand)
def get_arguments_cmd(ctx: typer.Context) -> None:
    """Print every non-option token."""
    _emit_list(ctx, get_arguments(_tokens(ctx)))


@app.command("get-option", cls=RawTokensCommand)
def get_option_cmd(ctx: typer.Context, name: str = typer.Argument(..., help="Option name.")) -> None:
    """Print the value of option NAME (empty when absent)."""
    _emit_value(ctx, get_option(name, _tokens(ctx)))


@app.command("get-options", cls=RawTokensCommand)
def get_options_cmd(ctx: typer.Context) -> None:
    """Print the option tokens exactly as given."""
    _emit_list(ctx, get_options(_tokens(ctx)))


@app.command("safe-name", cls=RawTokensCommand)
def safe_name_cmd(ctx: typer.Context) -> None:
    """Print each token rewritten as an identifier-safe name."""
    _emit_list(ctx, [safe_name(token) for token in _tokens(ctx)])


@app.command("require-arguments", cls=RawTokensCommand)
def require_arguments_cmd(
    ctx: typer.Context, count: str = typer.Argument(..., help="Exact number of arguments required.")
) -> None:
    """Exit 0 when exactly COUNT non-empty arguments are present."""
    if COUNT_PATTERN.fullmatch(count):
        status = require_arguments(int(count), _tokens(ctx))
    else:
        status = Status.INVALID_USAGE
    if status is Status.INVALID_USAGE:
        err_console.print(f"COUNT must be a non-negative integer, got {count!r}", markup=False)
    raise typer.Exit(code=int(status))


@app.command("require-options", cls=RawTokensCommand)
def require_options_cmd(
    ctx: typer.Context, names: str = typer.Argument(..., help="Comma separated option names.")
) -> None:
    """Exit 0 when every option in NAMES has a value; report each missing one."""
    wanted = [name.strip() for name in names.split(",") if name.strip()]
    reporter = _load_reporter(_state(ctx).config)
    status = require_options(wanted, _tokens(ctx), reporter=reporter)
    raise typer.Exit(code=int(status))


def main() -> None:
    """Entrypoint for console script."""
    app()


if __name__ == "__main__":
    main()

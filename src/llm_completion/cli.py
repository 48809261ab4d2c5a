from __future__ import annotations

import argparse
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from llm_completion.core.settings import load_dotenv_if_present, load_settings
from llm_completion.core.storage import load_completion_responses
from llm_completion.models.errors import ShapeMismatchError
from llm_completion.reporting.console_report import render_responses, unique_responses


def _cmd_inspect(args: argparse.Namespace) -> int:
    console = Console()
    try:
        load_dotenv_if_present(Path(args.env_file) if args.env_file else None)
        settings = load_settings()
        responses = load_completion_responses(Path(args.input))
    except (ShapeMismatchError, ValueError, OSError) as e:
        console.print(f"[red]error:[/red] {escape(str(e))}", highlight=False)
        return 1

    if args.unique:
        responses = unique_responses(responses)

    render_responses(responses, console=console, preview_chars=settings.text_preview_chars)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="llm-completion")
    parser.add_argument(
        "--env-file",
        default=None,
        help="Load settings from this file instead of searching for .env",
    )
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_inspect = sub.add_parser("inspect", help="Decode recorded completion responses and print a summary")
    p_inspect.add_argument(
        "--in",
        dest="input",
        required=True,
        help="Path to a .json, .jsonl, .yaml or .yml file of response bodies",
    )
    p_inspect.add_argument(
        "--unique",
        action="store_true",
        help="Collapse responses that compare equal (usage is ignored)",
    )
    p_inspect.set_defaults(func=_cmd_inspect)

    args = parser.parse_args(argv)
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())

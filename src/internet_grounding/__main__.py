"""Command-line host for internet-grounding.

Answers go to stdout; logs go to stderr.

Examples:
- python -m internet_grounding ask "What is the capital of France?"
- python -m internet_grounding --model-id gemini-2.5-flash ask "Latest Python release?"
- python -m internet_grounding tools
- python -m internet_grounding resource gemini_default_config
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import TYPE_CHECKING

from internet_grounding.client import GeminiClient
from internet_grounding.config import GeminiConfig
from internet_grounding.errors import GroundingError
from internet_grounding.resources import RESOURCES, get_resource
from internet_grounding.server import ASK_GEMINI_SPEC, GroundingServer

if TYPE_CHECKING:
    from collections.abc import Sequence

log = logging.getLogger("internet_grounding.cli")


def _build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for global flags and subcommands."""
    parser = argparse.ArgumentParser(
        prog="internet-grounding",
        description="Ask Gemini questions grounded with Google Search and URL context.",
    )
    parser.add_argument("--api-key", help="Gemini API key (default: $GEMINI_API_KEY)")
    parser.add_argument("--model-id", help="Gemini model id (default: $GEMINI_MODEL_ID)")
    parser.add_argument("--base-url", help="API base URL (default: $GEMINI_BASE_URL)")
    parser.add_argument(
        "--timeout",
        type=float,
        help="HTTP timeout in seconds (default: $GEMINI_TIMEOUT_S or 60)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level for stderr output (default: WARNING)",
    )

    sub = parser.add_subparsers(dest="command", required=True)
    ask = sub.add_parser("ask", help=ASK_GEMINI_SPEC.description)
    ask.add_argument("prompt", help="The question to ask")
    sub.add_parser("tools", help="List available tools")
    sub.add_parser("resources", help="List available resources")
    resource = sub.add_parser("resource", help="Print one resource")
    resource.add_argument("name", help="Resource name (see 'resources')")
    return parser


def configure_logging(level: str) -> None:
    """Send logs to stderr; keep URL-logging HTTP libraries quiet."""
    logging.basicConfig(
        level=getattr(logging, level),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # httpx logs full request URLs at INFO, and the API key is a query parameter.
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def _build_client(config: GeminiConfig) -> GeminiClient:
    return GeminiClient(config)


def _print_error(err: GroundingError) -> None:
    print(str(err), file=sys.stderr)
    if err.hint:
        print(f"Hint: {err.hint}", file=sys.stderr)


async def _ask(args: argparse.Namespace) -> int:
    try:
        config = GeminiConfig(
            api_key=args.api_key,
            model_id=args.model_id,
            base_url=args.base_url,
            timeout_s=args.timeout,
        )
    except GroundingError as exc:
        log.error("Gemini API configuration is missing or invalid")
        _print_error(exc)
        return 1

    client = _build_client(config)
    try:
        text = await GroundingServer(client).ask_gemini(args.prompt)
    except GroundingError as exc:
        _print_error(exc)
        return 1
    finally:
        await client.aclose()

    print(text, end="" if text.endswith("\n") else "\n")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    configure_logging(args.log_level)

    if args.command == "tools":
        print(f"{ASK_GEMINI_SPEC.name}: {ASK_GEMINI_SPEC.description}")
        return 0

    if args.command == "resources":
        for res in RESOURCES:
            print(f"{res.name:<28s} {res.description}")
        return 0

    if args.command == "resource":
        try:
            print(get_resource(args.name).text)
        except KeyError as exc:
            print(exc.args[0], file=sys.stderr)
            return 2
        return 0

    return asyncio.run(_ask(args))


if __name__ == "__main__":  # pragma: no cover - direct execution guard
    raise SystemExit(main())

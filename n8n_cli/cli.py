#!/usr/bin/env python3
"""
n8n CLI — Command-line access to an n8n instance's public API.

Usage:
    n8n-cli workflows list
    n8n-cli workflows list --limit 20
    n8n-cli --url https://n8n.example.com --api-key KEY workflows list

Connection settings default to the N8N_API_KEY / N8N_INSTANCE_URL
environment variables (or a local .env file).
"""

import argparse
import asyncio
import logging
import sys

import structlog
from pydantic import ValidationError

from n8n_cli.client import N8NClient
from n8n_cli.commands.workflows import list_workflows
from n8n_cli.config import CLISettings, get_settings
from n8n_cli.errors import ConfigurationError, N8NCliError
from n8n_cli.logging import setup_logging
from n8n_cli.models import DEFAULT_PAGE_LIMIT, MAX_PAGE_LIMIT
from n8n_cli.version import APP_NAME, VERSION

logger = structlog.get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=APP_NAME, description="n8n command-line client")
    parser.add_argument("--api-key", help="n8n API key (default: $N8N_API_KEY)")
    parser.add_argument("--url", help="n8n instance URL (default: $N8N_INSTANCE_URL)")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging on stderr"
    )
    parser.add_argument("--version", action="version", version=f"{APP_NAME} {VERSION}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # workflows command group
    workflows_parser = subparsers.add_parser("workflows", help="Manage workflows")
    workflows_sub = workflows_parser.add_subparsers(dest="workflows_command", required=True)

    list_parser = workflows_sub.add_parser("list", help="List workflows")
    list_parser.add_argument(
        "-l",
        "--limit",
        type=int,
        default=0,
        help=(
            "Maximum number of workflows to return "
            f"(default: {DEFAULT_PAGE_LIMIT}, max: {MAX_PAGE_LIMIT})"
        ),
    )

    return parser


def _resolve_settings(args: argparse.Namespace) -> CLISettings:
    """Apply command-line overrides on top of the environment settings."""
    overrides = {}
    if args.api_key:
        overrides["api_key"] = args.api_key
    if args.url:
        overrides["instance_url"] = args.url
    try:
        return get_settings().model_copy(update=overrides)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid N8N_* setting: {e}") from e


def _log_level(args: argparse.Namespace, settings: CLISettings) -> int:
    if args.verbose:
        return logging.DEBUG
    level = logging.getLevelName(settings.log_level.upper())
    return level if isinstance(level, int) else logging.WARNING


async def _run_workflows_list(settings: CLISettings, limit: int, out) -> None:
    api_key = settings.require_api_key()
    async with N8NClient(settings.instance_url, api_key, timeout=settings.timeout) as client:
        await list_workflows(client, limit, out)


def main(argv=None, stdout=None, stderr=None) -> int:
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = _resolve_settings(args)
    except N8NCliError as e:
        print(f"Error: {e}", file=stderr)
        return e.exit_code

    setup_logging(level=_log_level(args, settings))

    try:
        if args.command == "workflows" and args.workflows_command == "list":
            asyncio.run(_run_workflows_list(settings, args.limit, stdout))
    except N8NCliError as e:
        logger.debug("command_failed", **e.to_dict())
        print(f"Error: {e}", file=stderr)
        return e.exit_code

    return 0


if __name__ == "__main__":
    sys.exit(main())

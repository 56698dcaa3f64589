"""Command-line entry point: serve ``gpt5_query`` over stdio."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import TYPE_CHECKING

from gpt5_mcp.client import create_client
from gpt5_mcp.config import ENV_VARS, load_config
from gpt5_mcp.errors import ConfigurationError
from gpt5_mcp.server import build_server

if TYPE_CHECKING:
    from collections.abc import Sequence

log = logging.getLogger("gpt5_mcp")

LOG_LEVEL_ENV_VAR = "GPT5_MCP_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gpt5-mcp",
        description="MCP server exposing GPT-5 queries as the gpt5_query tool.",
    )
    parser.add_argument(
        "--log-level",
        default=os.environ.get(LOG_LEVEL_ENV_VAR, "INFO"),
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help=f"Logging level, written to stderr (default: ${LOG_LEVEL_ENV_VAR} or INFO)",
    )
    return parser


def configure_logging(level: str) -> None:
    """Send logs to stderr; stdout carries the protocol stream."""
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        config = load_config()
    except ConfigurationError as exc:
        log.error("%s", exc)
        if exc.hint:
            log.error("Hint: %s", exc.hint)
        return 1

    if not config.has_credentials:
        log.warning(
            "%s is not set. Please set it in your environment or .env file.",
            ENV_VARS["api_key"],
        )
    log.debug("Loaded %s", config)

    try:
        client = create_client(config)
        server = build_server(config, client)
        server.run("stdio")
    except Exception:
        log.exception("Fatal error in main()")
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover - direct execution guard
    raise SystemExit(main())

"""
Process entrypoint: validate configuration, log it, then serve with uvicorn.

Settings come from the environment; --host/--port/--log-level override it.
Invalid configuration exits with status 2 before anything is served.
"""

from __future__ import annotations

import argparse
import logging
import sys

import uvicorn
from pydantic import ValidationError

from value_replacer.api.settings import get_settings

logger = logging.getLogger("value_replacer.api")


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="value-replacer",
        description="Serve the JSON value replacement API.",
    )
    parser.add_argument("--host", default=None, help="Bind address (overrides HOST)")
    parser.add_argument("--port", type=int, default=None, help="HTTP port (overrides PORT)")
    parser.add_argument("--log-level", default=None, help="Log level (overrides LOG_LEVEL)")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)

    overrides = {
        k: v
        for k, v in (("host", args.host), ("port", args.port), ("log_level", args.log_level))
        if v is not None
    }

    try:
        settings = get_settings(**overrides)
        # main builds a module-level app from the environment on import
        from value_replacer.api.main import create_app
    except ValidationError as e:
        print(f"Invalid configuration:\n{e}", file=sys.stderr)
        return 2

    app = create_app(settings)

    logger.info("Server listening on %s:%s", settings.host, settings.port)
    logger.info("Target value: %r", settings.target_value)
    logger.info("Replacement value: %r", settings.replacement_value)
    logger.info("Default replacement limit: %s", settings.default_replacement_limit)
    logger.info("Max nesting depth: %s", settings.max_nesting_depth)

    # log_config=None keeps the handlers installed by configure_logging()
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

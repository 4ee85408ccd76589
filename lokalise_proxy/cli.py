"""
CLI entry point for the proxy.

Usage:
    # Serve the proxy with uvicorn
    python -m lokalise_proxy.cli serve --port 8787

    # Print the effective configuration (token-free)
    python -m lokalise_proxy.cli show-config
"""

import argparse
import logging

logger = logging.getLogger(__name__)


def cmd_serve(args: argparse.Namespace) -> None:
    """Start the proxy under uvicorn."""
    import uvicorn

    from lokalise_proxy.core.config import settings
    from lokalise_proxy.shared.logging import configure_logging

    configure_logging(level=settings.log_level)
    logger.info("Starting proxy at http://%s:%d", args.host, args.port)
    logger.info("Allowed origin: %s", settings.allow_origin)
    uvicorn.run(
        "lokalise_proxy.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.log_level.lower(),
    )


def cmd_show_config(args: argparse.Namespace) -> None:
    """Print the settings the proxy would start with."""
    from lokalise_proxy.core.config import settings

    for name, value in settings.model_dump().items():
        print(f"{name}={value}")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Lokalise Preview Proxy CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP proxy")
    serve_parser.add_argument("--host", default="0.0.0.0", help="Bind address")
    serve_parser.add_argument("--port", type=int, default=8787, help="Bind port")
    serve_parser.add_argument(
        "--reload", action="store_true", help="Reload on code changes (dev only)"
    )
    serve_parser.set_defaults(func=cmd_serve)

    config_parser = subparsers.add_parser(
        "show-config", help="Print the effective configuration"
    )
    config_parser.set_defaults(func=cmd_show_config)

    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()

"""Command line entry point for the chat parser."""

import argparse
import asyncio
import logging
import signal
import sys
import time

from chatparse.common import ParseTimeoutError, RootConfig, load_config
from chatparse.parser import Parser

logger = logging.getLogger(__name__)


def signal_handler(sig, frame):
    """Handle termination signals."""
    logger.info("Signal received, exiting gracefully...")
    sys.exit(0)


async def main(text: str, config: RootConfig, log: logging.Logger) -> int:
    """Parse text and print the result as JSON."""
    async with Parser.from_root_config(config, logger=log) as parser:
        start = time.time()
        try:
            result = await parser.parse(text)
        except ParseTimeoutError as e:
            print(f"Major error, unable to parse: {e}", file=sys.stderr)
            return 1
        log.debug(f"Parsed in {time.time() - start:.2f} seconds")

    print(result.to_json())
    return 0


def cmd_parse(args, config: RootConfig, log: logging.Logger) -> int:
    return asyncio.run(main(args.text, config, log))


def cmd_serve(args, config: RootConfig, log: logging.Logger) -> int:
    from chatparse.server import create_app

    port = args.port or config.server.port
    app = create_app(lambda: Parser.from_root_config(config, logger=log), logger=log)

    log.info(f"Starting chat parser server.. Listening on {config.server.host}:{port}")
    log.info(f"Example GET request: http://localhost:{port}/parse?input=@kris")
    app.run(host=config.server.host, port=port, debug=False)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Extract mentions, emoticons and links from text")
    parser.add_argument("--config", help="Path to a YAML config file")
    sub = parser.add_subparsers(dest="command", required=True)

    parse_cmd = sub.add_parser("parse", help="Parse one line of text and print JSON")
    parse_cmd.add_argument("text", help="Text to parse")
    parse_cmd.set_defaults(func=cmd_parse)

    serve_cmd = sub.add_parser("serve", help="Serve the /parse HTTP endpoint")
    serve_cmd.add_argument("--port", type=int, help="Port to listen on (default from config)")
    serve_cmd.set_defaults(func=cmd_serve)

    return parser


def run(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    config = load_config(args.config)
    log = config.logging.configure()

    # Register signal handlers
    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    return args.func(args, config, log)


if __name__ == "__main__":
    sys.exit(run())

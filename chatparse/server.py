"""HTTP endpoint exposing the parser."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from flask import Flask, Response, request

from chatparse.common.errors import ParseTimeoutError
from chatparse.models.result import Failure
from chatparse.parser import Parser


def _json(body: str, status: int = 200) -> Response:
    return Response(body, status=status, mimetype="application/json")


async def _parse(parser_factory: Callable[[], Parser], text: str) -> str:
    async with parser_factory() as parser:
        try:
            result = await parser.parse(text)
        except ParseTimeoutError as e:
            return Failure(failure=str(e)).to_json()
    return result.to_json()


def create_app(
    parser_factory: Callable[[], Parser],
    logger: logging.Logger | None = None,
) -> Flask:
    """Build the Flask app; every request gets a fresh parser and event loop."""
    logger = logger or logging.getLogger(__name__)
    app = Flask(__name__)

    @app.route("/parse")
    def parse():
        text = request.args.get("input", "")
        if not text:
            return _json(Failure.missing_input().to_json())

        logger.info(f"Parsing request input of {len(text)} characters")
        try:
            return _json(asyncio.run(_parse(parser_factory, text)))
        except Exception as e:
            logger.error(f"Error processing request: {e}", exc_info=True)
            return _json(Failure(failure="Unhandled server error").to_json(), status=500)

    @app.route("/health")
    def health():
        return _json('{"status": "ok"}')

    return app

import asyncio
import functools
import json
import logging
from typing import Any

from pydantic import ValidationError

from chatparse.common import ParseTimeoutError, RootConfig, load_config
from chatparse.models import Failure
from chatparse.parser import Parser

# Setup logger
logger = logging.getLogger(__name__)
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)


@functools.cache
def setup() -> tuple[RootConfig, logging.Logger]:
    """Load the configuration and configure logging once per container."""
    config = load_config()
    return config, config.logging.configure()


def _response(body: str, status: int = 200) -> dict[str, Any]:
    return {
        "statusCode": status,
        "headers": {"Content-Type": "application/json"},
        "body": body,
    }


async def process_request(event: dict[str, Any]) -> dict[str, Any]:
    """Process the incoming Lambda request."""
    logger.info(f"Received event: {json.dumps(event)}")

    query_params = event.get("queryStringParameters") or {}
    text = query_params.get("input") or ""
    if not text:
        return _response(Failure.missing_input().to_json())

    try:
        config, log = setup()

        async with Parser.from_root_config(config, logger=log) as parser:
            result = await parser.parse(text)
        return _response(result.to_json())
    except ParseTimeoutError as e:
        return _response(Failure(failure=str(e)).to_json())
    except ValidationError as e:
        logger.error(f"Config validation error: {e}")
        return _response(Failure(failure="Invalid configuration").to_json(), status=400)
    except Exception as e:
        logger.error(f"Error processing request: {e}")
        return _response(Failure(failure=str(e)).to_json(), status=500)


def lambda_handler(event: dict[str, Any], context: Any | None = None) -> dict[str, Any]:
    """AWS Lambda entry point."""
    logger.info("Starting Lambda handler...")
    try:
        return asyncio.run(process_request(event))
    except Exception as e:
        logger.error(f"Unhandled exception: {e}")
        return _response(Failure(failure="Unhandled server error").to_json(), status=500)

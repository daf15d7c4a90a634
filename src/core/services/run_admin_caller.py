"""
Admin Caller Entrypoint
Standalone run of the admin caller (Railway / docker / local)
"""

import asyncio
import logging

import httpx
from pydantic import ValidationError

from src.core.config import load_settings
from src.core.services.admin_caller import run_admin_caller, setup_logging

logger = logging.getLogger(__name__)


def _missing_variables(error: ValidationError) -> list[str]:
    return [
        str(err["loc"][0])
        for err in error.errors()
        if err.get("type") == "missing" and err.get("loc")
    ]


async def main():
    setup_logging("INFO")

    try:
        settings = load_settings()
    except ValidationError as e:
        missing = _missing_variables(e)
        if missing:
            logger.critical(f"Missing required environment variables: {', '.join(missing)}")
        else:
            logger.critical(f"Invalid configuration: {e}")
        raise SystemExit(1)

    setup_logging(settings.log_level)

    async with httpx.AsyncClient() as client:
        await run_admin_caller(settings, client)


def cli():
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Admin caller stopped")


if __name__ == "__main__":
    cli()

#!/usr/bin/env python3
"""Basic usage example"""

import asyncio

from swiss_log import (
    ContextVarCorrelationIdProvider,
    CloudRunFormatter,
    Logger,
    LoggerOptions,
    LogLevel,
)


async def fetch_user(user_id):
    await asyncio.sleep(0)
    raise LookupError(f"user {user_id} not found")


def main():
    provider = ContextVarCorrelationIdProvider()

    # Colored console output
    logger = (Logger(LoggerOptions(log_level=LogLevel.DEBUG, correlation_id_provider=provider))
        .set_context("example")
        .add_property("service", "demo"))

    logger.trace("This is trace")
    logger.debug("This is debug")
    logger.info("started server", {"port": 3030})
    logger.warn("This is warning")

    # Request-scoped logger with structured output
    request_logger = logger.clone_with_context("http").set_formatter(CloudRunFormatter())
    with provider.scope():
        request_logger.info("handling request", {"path": "/users/7"})
        try:
            asyncio.run(request_logger.capture_async_error(fetch_user(7), "lookup failed"))
        except LookupError:
            pass

    logger.fatal("This is fatal")


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""Basic usage example"""

import asyncio

from fanout_logger import LoggerBuilder, LogLevel
from fanout_logger.filters import PatternFilter


async def main():
    # Create logger with builder pattern
    logger = (LoggerBuilder()
        .with_name("example")
        .with_level(LogLevel.INFO)
        .with_console(colored=True)
        .with_context(app="MyApp")
        .with_filter(PatternFilter.excluding("password"))
        .build())

    # Log messages
    await logger.info("Application started", {"version": "1.0.0"})
    await logger.debug("This is a debug message", {"environment": "dev"})  # below INFO, dropped
    await logger.warn("User entered a password")  # filtered out

    # Child logger with extra context
    user_logger = logger.child({"userId": "123"})
    await user_logger.error("Failed to save", RuntimeError("Database error"))

    # Flush and shutdown
    await logger.flush()
    await logger.shutdown()


if __name__ == "__main__":
    asyncio.run(main())

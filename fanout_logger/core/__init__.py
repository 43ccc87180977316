"""
Core module for logger system

This module contains the fundamental classes:
- Logger: Main logger class
- LoggerBuilder: Builder pattern for logger construction
- LogEntry: Log entry data structure
- LogLevel: Log level enumeration
- LoggerConfig: Configuration management
"""

from fanout_logger.core.log_level import LogLevel
from fanout_logger.core.log_entry import LogEntry
from fanout_logger.core.logger_config import LoggerConfig
from fanout_logger.core.logger import Logger, TransportShutdownError
from fanout_logger.core.logger_builder import LoggerBuilder

__all__ = [
    "Logger",
    "LoggerBuilder",
    "LogEntry",
    "LogLevel",
    "LoggerConfig",
    "TransportShutdownError",
]

"""
Log formatters module

Provides formatter implementations for rendering log entries.
"""

from fanout_logger.formatters.base_formatter import BaseFormatter
from fanout_logger.formatters.text_formatter import TextFormatter, default_formatter
from fanout_logger.formatters.json_formatter import JSONFormatter
from fanout_logger.formatters.compact_formatter import CompactFormatter

__all__ = [
    "BaseFormatter",
    "TextFormatter",
    "default_formatter",
    "JSONFormatter",
    "CompactFormatter",
]

"""
Log filters module

Provides filter implementations for controlling which entries are delivered.
"""

from fanout_logger.filters.base_filter import AllOf, AnyOf, BaseFilter, Not
from fanout_logger.filters.level_filter import LevelFilter
from fanout_logger.filters.pattern_filter import PatternFilter
from fanout_logger.filters.callback_filter import CallbackFilter
from fanout_logger.filters.context_filter import ContextFilter

__all__ = [
    "BaseFilter",
    "AllOf",
    "AnyOf",
    "Not",
    "LevelFilter",
    "PatternFilter",
    "CallbackFilter",
    "ContextFilter",
]

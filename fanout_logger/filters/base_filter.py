"""
Base filter interface

Filters are predicates over the formatted log entry. Filter objects can be
combined with &, | and ~ into a single predicate.
"""

from abc import ABC, abstractmethod
from typing import Callable, Tuple
from fanout_logger.core.log_entry import LogEntry

Predicate = Callable[[LogEntry], bool]


class BaseFilter(ABC):
    """
    Abstract base class for log filters.

    Example:
        # Warnings from one tenant, unless they mention a password
        only = LevelFilter(min_level=LogLevel.WARN) & ContextFilter("tenant", "acme")
        logger = Logger(LoggerConfig(filters=[only & ~PatternFilter("password")]))
    """

    @abstractmethod
    def should_log(self, entry: LogEntry) -> bool:
        """
        Determine if a log entry should be delivered.

        Args:
            entry: The formatted log entry

        Returns:
            True if the entry should be delivered, False otherwise
        """
        pass

    def __call__(self, entry: LogEntry) -> bool:
        return self.should_log(entry)

    def __and__(self, other: Predicate) -> "BaseFilter":
        return AllOf(self, other)

    def __or__(self, other: Predicate) -> "BaseFilter":
        return AnyOf(self, other)

    def __invert__(self) -> "BaseFilter":
        return Not(self)


class AllOf(BaseFilter):
    """Deliver when every predicate passes, evaluated left to right."""

    def __init__(self, *predicates: Predicate):
        self.predicates: Tuple[Predicate, ...] = predicates

    def should_log(self, entry: LogEntry) -> bool:
        return all(predicate(entry) for predicate in self.predicates)

    def __repr__(self) -> str:
        return " & ".join(repr(p) for p in self.predicates)


class AnyOf(BaseFilter):
    """Deliver when at least one predicate passes, evaluated left to right."""

    def __init__(self, *predicates: Predicate):
        self.predicates: Tuple[Predicate, ...] = predicates

    def should_log(self, entry: LogEntry) -> bool:
        return any(predicate(entry) for predicate in self.predicates)

    def __repr__(self) -> str:
        return " | ".join(repr(p) for p in self.predicates)


class Not(BaseFilter):
    """Deliver when the wrapped predicate rejects the entry."""

    def __init__(self, predicate: Predicate):
        self.predicate = predicate

    def should_log(self, entry: LogEntry) -> bool:
        return not self.predicate(entry)

    def __repr__(self) -> str:
        return f"~{self.predicate!r}"

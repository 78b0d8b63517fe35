"""Reporting of unknown element symbols.

Property lookups never fail. When a symbol is missing from a table, the
lookup reports a diagnostic and returns a default value instead. The
diagnostic goes to an explicit sink when the caller passes one, and to the
``pdbelements.diagnostics`` logger otherwise.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import List, NamedTuple, Optional, TypeVar, Union

from pydantic import ValidationError

from pdbelements.config import get_settings

logger = logging.getLogger(__name__)

T = TypeVar("T")

DiagnosticSink = Callable[[str], None]


class LookupResult(NamedTuple):
    """Outcome of a table lookup.

    Attributes:
        value: Tabulated value, or the default when the symbol is unknown
        known: Whether the symbol was found in the table
    """
    value: Union[int, float]
    known: bool


def _diagnostic_level() -> int:
    try:
        return get_settings().diagnostic_levelno
    except ValidationError:
        # Broken settings must not hide the diagnostic itself
        return logging.WARNING


def _log_diagnostic(message: str) -> None:
    logger.log(_diagnostic_level(), message)


def defaulting(message: str, default: T, sink: Optional[DiagnosticSink] = None) -> T:
    """Report ``message`` and return ``default`` unchanged.

    Reporting is best-effort: errors raised while emitting the message
    (a closed stream, a failing callback) never reach the caller.

    Parameters
    ----------
    message : str
        Human-readable diagnostic, emitted as a single record.
    default : T
        Value returned to the caller.
    sink : callable, optional
        Receives the message. If None, the module logger is used.

    Returns
    -------
    T
        ``default``.
    """
    emit = sink if sink is not None else _log_diagnostic
    try:
        emit(message)
    except Exception:  # noqa: BLE001
        logger.debug("Could not emit diagnostic: %s", message, exc_info=True)
    return default


class DiagnosticCollector:
    """Sink that keeps every diagnostic it receives.

    Examples
    --------
    >>> collector = DiagnosticCollector()
    >>> atomic_number("ZZZ", sink=collector)
    0
    >>> collector.messages
    ["Unknown atomic number for element: 'ZZZ'"]
    """

    def __init__(self) -> None:
        self._messages: List[str] = []
        self._lock = threading.Lock()

    def __call__(self, message: str) -> None:
        with self._lock:
            self._messages.append(message)

    def __len__(self) -> int:
        with self._lock:
            return len(self._messages)

    @property
    def messages(self) -> List[str]:
        """Copy of the collected messages, oldest first."""
        with self._lock:
            return list(self._messages)

    def clear(self) -> None:
        with self._lock:
            self._messages.clear()

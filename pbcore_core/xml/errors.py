"""
Error Callback Bridge
=====================

libxml2 reports parse and validation problems through error logs rather
than return values, and lxml exposes those logs on shared objects (a
compiled schema keeps the log of its most recent run). This module owns a
single process-wide receiver slot: while an operation runs inside
``capture_errors`` every reported error is delivered to the receiver that
was installed for it, and the slot is restored afterwards on every exit
path.

The slot is guarded by a lock, so only one capturing operation runs at a
time across threads. Nested captures on the same thread are allowed.

Example:
    found = []
    with capture_errors(lambda message, line: found.append((line, message))):
        tree = etree.parse(stream, parser)
"""

from contextlib import contextmanager
from typing import Any, Callable, Iterable, Iterator, Optional
import logging
import threading

from lxml import etree

from pbcore_core.xml.utils import normalize_whitespace

logger = logging.getLogger(__name__)

ErrorReceiver = Callable[[str, Optional[int]], None]


def _log_receiver(message: str, line: Optional[int]) -> None:
    """Neutral default: nobody is listening, so just log it."""
    if line:
        logger.warning(f"Unhandled XML error on line {line}: {message}")
    else:
        logger.warning(f"Unhandled XML error: {message}")


_receiver_lock = threading.RLock()
_active_receiver: ErrorReceiver = _log_receiver


def active_receiver() -> ErrorReceiver:
    """Return the receiver currently installed in the slot."""
    return _active_receiver


def report(message: str, line: Optional[int] = None) -> None:
    """Deliver one error to the active receiver."""
    _active_receiver(normalize_whitespace(message), line or None)


def report_log(error_log: Iterable[Any]) -> int:
    """
    Forward every entry of an lxml error log to the active receiver.

    Args:
        error_log: An lxml ``_ListErrorLog`` (or any iterable of entries
            with ``message`` and ``line`` attributes)

    Returns:
        Number of entries forwarded
    """
    count = 0
    for entry in error_log:
        report(str(entry.message), entry.line)
        count += 1
    return count


@contextmanager
def capture_errors(receiver: ErrorReceiver) -> Iterator[None]:
    """
    Install ``receiver`` for the duration of the block.

    lxml errors raised inside the block have already been recorded in
    their error log; they are forwarded to the receiver and the block
    ends normally. Any other exception propagates. The previous receiver
    is always restored.

    Args:
        receiver: Callable taking ``(message, line)``
    """
    global _active_receiver

    with _receiver_lock:
        previous = _active_receiver
        _active_receiver = receiver
        try:
            yield
        except etree.LxmlError as e:
            error_log = getattr(e, "error_log", None)
            forwarded = report_log(error_log) if error_log else 0
            if not forwarded:
                report(str(e), getattr(e, "lineno", None))
            logger.debug(f"Captured {type(e).__name__}: {e}")
        finally:
            _active_receiver = previous

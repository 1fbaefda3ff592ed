"""QObject base for theme workers that run off the UI thread."""

from __future__ import annotations

import logging
from threading import Event

from PySide6.QtCore import QObject, Signal

from themecolors.errors import ErrorCode, classify_exception, format_error_for_user

logger = logging.getLogger(__name__)


class BaseWorker(QObject):
    """Signals and cancellation shared by themecolors workers.

    Run it with ``moveToThread``; connect ``QThread.started`` to :meth:`run`
    and ``finished``/``error``/``cancelled`` to ``QThread.quit``.
    """

    started = Signal()
    progress = Signal(int, int, str)    # done, total, theme label
    finished = Signal(object)           # list[ColorTheme]
    error = Signal(str)                 # user-facing message
    cancelled = Signal()

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._cancel_event = Event()

    def cancel(self) -> None:
        self._cancel_event.set()

    def is_cancelled(self) -> bool:
        """Polled by long-running loads; safe to call from any thread."""
        return self._cancel_event.is_set()

    def report_failure(self, exc: Exception, location: str | None = None) -> None:
        """Emit ``cancelled`` or ``error`` for an exception raised by :meth:`run`."""
        classified = classify_exception(exc, location)
        if classified.code is ErrorCode.OPERATION_CANCELLED:
            self.cancelled.emit()
            return
        if classified is exc:
            logger.warning("%s failed: %s", type(self).__name__, classified.to_dict())
        else:
            logger.error("%s failed unexpectedly", type(self).__name__, exc_info=exc)
        self.error.emit(format_error_for_user(classified))

    def run(self) -> None:
        raise NotImplementedError

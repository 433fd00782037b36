"""Process shutdown trigger bound to termination signals."""
from __future__ import annotations
import logging
import signal
import threading
from typing import Callable, Iterable, List, Optional

logger = logging.getLogger(__name__)

DEFAULT_SIGNALS = (signal.SIGINT, signal.SIGTERM)

__all__ = ['ShutdownTrigger', 'DEFAULT_SIGNALS']


class ShutdownTrigger:
    """Single event source for shutdown; the first trigger wins.

    Subscribers run on a helper thread, so a signal handler running on
    the main thread can stop a server whose loop is on that same thread.
    """

    def __init__(self):
        self._event = threading.Event()
        self._lock = threading.RLock()
        self._signum: Optional[int] = None
        self._callbacks: List[Callable[[], None]] = []

    def install(self, signals: Iterable[int] = DEFAULT_SIGNALS) -> 'ShutdownTrigger':
        # signal.signal only works from the main thread
        for sig in signals:
            signal.signal(sig, self._handle)
        return self

    def _handle(self, signum, frame):
        self.fire(signum)

    def subscribe(self, callback: Callable[[], None]) -> None:
        """Run `callback` once the trigger fires (right away if it already has)."""
        with self._lock:
            if not self._event.is_set():
                self._callbacks.append(callback)
                return
        self._dispatch([callback])

    def fire(self, signum: Optional[int] = None) -> bool:
        """Set the trigger. Returns False if it was already set."""
        with self._lock:
            if self._event.is_set():
                return False
            self._signum = signum
            self._event.set()
            callbacks, self._callbacks = self._callbacks, []
        if signum is not None:
            logger.info('received %s, shutting down', signal.Signals(signum).name)
        else:
            logger.info('shutdown requested')
        self._dispatch(callbacks)
        return True

    @staticmethod
    def _dispatch(callbacks: List[Callable[[], None]]) -> None:
        for callback in callbacks:
            threading.Thread(target=callback, name='image-rotator-shutdown', daemon=True).start()

    @property
    def signum(self) -> Optional[int]:
        return self._signum

    def is_set(self) -> bool:
        return self._event.is_set()

    def wait(self, timeout: Optional[float] = None) -> bool:
        return self._event.wait(timeout)

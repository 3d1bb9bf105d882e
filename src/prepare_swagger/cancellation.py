"""
Cooperative cancellation of the engine child process.

A single token is created per run. SIGINT/SIGTERM handlers trigger it, and the
subprocess strategy attaches the running child to it so that triggering
terminates the child. Termination is best effort: nothing waits for the child
to actually exit and there is no forced kill afterwards.
"""

import signal
import subprocess
import threading
from typing import Dict, Iterable, Optional

from .common import logger

DEFAULT_SIGNALS = ("SIGINT", "SIGTERM")


class CancellationToken:
    def __init__(self):
        # signal handlers call trigger() on the thread that may already hold the lock
        self._lock = threading.RLock()
        self._triggered = False
        self._process: Optional[subprocess.Popen] = None

    @property
    def triggered(self) -> bool:
        return self._triggered

    def attach(self, process: subprocess.Popen):
        """Arm the token for the given child. A triggered token terminates it immediately."""
        with self._lock:
            self._process = process
            triggered = self._triggered
        if triggered:
            self._terminate(process)

    def detach(self):
        with self._lock:
            self._process = None

    def trigger(self):
        with self._lock:
            if self._triggered:
                return
            self._triggered = True
            process = self._process
        logger().info("Cancellation requested")
        if process is not None:
            self._terminate(process)

    @staticmethod
    def _terminate(process: subprocess.Popen):
        if process.poll() is not None:
            return
        logger().debug(f"Terminating child process {process.pid}")
        try:
            process.terminate()
        except (ProcessLookupError, OSError) as ex:
            logger().debug(f"Child process {process.pid} could not be terminated: {ex}")


class NullCancellationToken:
    """Stand-in used when cancellation is unavailable or disabled; trigger() does nothing"""

    def __init__(self):
        self._triggered = False

    @property
    def triggered(self) -> bool:
        return self._triggered

    def attach(self, process):
        pass

    def detach(self):
        pass

    def trigger(self):
        self._triggered = True


def cancellation_supported() -> bool:
    return callable(getattr(subprocess.Popen, "terminate", None))


def create_token(enabled: bool = True):
    if enabled and cancellation_supported():
        return CancellationToken()
    logger().debug("Cancellation unavailable, using a no-op token")
    return NullCancellationToken()


def install_signal_handlers(token, signals: Iterable[str] = DEFAULT_SIGNALS) -> Dict[int, object]:
    """
    Trigger the token on each of the named signals.

    Signals the host does not define are skipped. Returns the previous handlers,
    keyed by signal number, for restore_signal_handlers().
    """
    previous = {}

    def handler(signum, frame):
        logger().info(f"Received signal {signal.Signals(signum).name}")
        token.trigger()

    for name in signals:
        signum = getattr(signal, name, None)
        if signum is None:
            logger().debug(f"Signal {name} is not available on this platform")
            continue
        try:
            previous[signum] = signal.signal(signum, handler)
        except ValueError as ex:
            # signal.signal() only works in the main thread
            logger().warning(f"Could not install handler for {name}: {ex}")
            restore_signal_handlers(previous)
            return {}
    return previous


def restore_signal_handlers(previous: Dict[int, object]):
    for signum, handler in previous.items():
        signal.signal(signum, handler if handler is not None else signal.SIG_DFL)

from __future__ import annotations

import logging
import queue
import threading
import time
from typing import Any, Callable, Optional, Protocol

from ..core.exceptions import ScannerError

logger = logging.getLogger(__name__)


class FrameSource(Protocol):
    def read(self) -> Optional[Any]:
        """Next frame, or None when no frame is available right now."""

        raise NotImplementedError

    def release(self) -> None:
        raise NotImplementedError


class QrScanner:
    """Background scan loop that publishes at most one decoded text.

    The worker thread reads frames until one decodes, puts the text on a
    single-slot queue and exits. ``stop()`` cancels a scan still in progress.
    The frame source is released exactly once, by whichever side finishes
    last with it.
    """

    def __init__(
        self,
        source: FrameSource,
        decode: Callable[[Any], Optional[str]],
        *,
        poll_interval: float = 0.05,
    ):
        self._source = source
        self._decode = decode
        self._poll_interval = float(poll_interval)
        self._results: "queue.Queue[str]" = queue.Queue(maxsize=1)
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._error: Optional[BaseException] = None
        self._release_lock = threading.Lock()
        self._released = False

    def __enter__(self) -> "QrScanner":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self._thread is not None:
            raise ScannerError("Scanner already started")
        self._thread = threading.Thread(target=self._run, name="qr-scanner", daemon=True)
        self._thread.start()

    def stop(self, timeout: Optional[float] = 2.0) -> None:
        self._stop_event.set()
        if self._thread is not None and self._thread is not threading.current_thread():
            self._thread.join(timeout)
        if not self.running:
            self._release()

    def wait_for_result(self, timeout: Optional[float] = None) -> Optional[str]:
        """Block until a code is decoded, the scan ends, or ``timeout`` passes.

        Returns None on timeout or cancellation; re-raises a worker failure
        as ScannerError.
        """
        deadline = None if timeout is None else time.monotonic() + timeout
        while True:
            try:
                return self._results.get(timeout=self._poll_interval)
            except queue.Empty:
                pass

            alive = self.running
            if self._error is not None:
                raise ScannerError(f"Scanner failed: {self._error}") from self._error
            if not alive:
                try:
                    return self._results.get_nowait()
                except queue.Empty:
                    return None
            if deadline is not None and time.monotonic() >= deadline:
                return None

    def _run(self) -> None:
        try:
            while not self._stop_event.is_set():
                frame = self._source.read()
                if frame is None:
                    self._stop_event.wait(self._poll_interval)
                    continue

                text = self._decode(frame)
                if text:
                    logger.debug("Decoded QR text (%s chars)", len(text))
                    self._results.put_nowait(text)
                    self._stop_event.set()
                    break
        except Exception as e:
            logger.exception("Scanner loop failed")
            self._error = e
        finally:
            self._release()

    def _release(self) -> None:
        with self._release_lock:
            if self._released:
                return
            self._released = True
        self._source.release()


def scan_once(
    source: FrameSource,
    decode: Callable[[Any], Optional[str]],
    *,
    timeout: Optional[float] = None,
) -> Optional[str]:
    """Run one activation: start, take the first decoded text, stop."""
    with QrScanner(source, decode) as scanner:
        return scanner.wait_for_result(timeout)

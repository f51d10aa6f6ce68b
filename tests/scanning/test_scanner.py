import threading

import pytest

from src.gym_checkin.gym_checkin.core.exceptions import ScannerError
from src.gym_checkin.gym_checkin.scanning.scanner import QrScanner, scan_once


class FakeSource:
    def __init__(self, frames):
        self._frames = list(frames)
        self.release_count = 0
        self._lock = threading.Lock()

    def read(self):
        with self._lock:
            if self._frames:
                return self._frames.pop(0)
        return None

    def release(self):
        self.release_count += 1


def decode_marked(frame):
    return frame if isinstance(frame, str) and frame.startswith("QR:") else None


def test_scan_once_returns_first_decoded_text():
    source = FakeSource(["noise", "QR:first", "QR:second"])

    assert scan_once(source, decode_marked, timeout=2.0) == "QR:first"
    assert source.release_count == 1


def test_scan_times_out_without_a_code():
    source = FakeSource([])

    assert scan_once(source, decode_marked, timeout=0.2) is None
    assert source.release_count == 1


def test_stop_cancels_scan_and_releases_once():
    source = FakeSource([])
    scanner = QrScanner(source, decode_marked, poll_interval=0.01)
    scanner.start()
    assert scanner.running

    scanner.stop()
    scanner.stop()

    assert not scanner.running
    assert scanner.wait_for_result(timeout=0.1) is None
    assert source.release_count == 1


def test_start_twice_is_rejected():
    scanner = QrScanner(FakeSource([]), decode_marked, poll_interval=0.01)
    with scanner:
        with pytest.raises(ScannerError):
            scanner.start()


def test_decoder_failure_surfaces_as_scanner_error():
    def broken(frame):
        raise RuntimeError("bad frame")

    source = FakeSource(["x"])
    with pytest.raises(ScannerError, match="bad frame"):
        scan_once(source, broken, timeout=2.0)
    assert source.release_count == 1


def test_decode_image_file_reads_generated_qr():
    pytest.importorskip("pyzbar.pyzbar")
    from src.gym_checkin.gym_checkin.members.controller import make_qr_png
    from src.gym_checkin.gym_checkin.scanning.decoder import decode_image_file

    text = "ethereum:0x52908400098527886E0F7030069857D2E4169EE7"
    assert decode_image_file(make_qr_png(text)) == text

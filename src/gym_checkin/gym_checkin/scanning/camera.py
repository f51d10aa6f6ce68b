from __future__ import annotations

from typing import Optional

import cv2
import numpy as np

from ..core.exceptions import ScannerError


class CameraFrameSource:
    """Grayscale frames from a local camera through OpenCV."""

    def __init__(self, index: int = 0):
        self._index = int(index)
        self._capture = cv2.VideoCapture(self._index)
        if not self._capture.isOpened():
            self._capture.release()
            raise ScannerError(f"Cannot open camera {self._index}")

    def read(self) -> Optional[np.ndarray]:
        ok, frame = self._capture.read()
        if not ok or frame is None:
            return None
        return cv2.cvtColor(frame, cv2.COLOR_BGR2GRAY)

    def release(self) -> None:
        self._capture.release()

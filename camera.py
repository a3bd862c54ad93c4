# camera.py
import logging

import cv2

from errors import SetupError

logger = logging.getLogger(__name__)


class VideoSource:
    """
    Camera frames via cv2.VideoCapture.

    Usage:
        with VideoSource(0) as source:
            frame = source.read()   # None at end of stream
    """

    def __init__(self, index=0):
        self.index = index
        self._cap = None

    def open(self):
        """
        Raises:
            SetupError: Device could not be opened
        """
        cap = cv2.VideoCapture(self.index)
        if not cap.isOpened():
            cap.release()
            raise SetupError(f"Failed to open camera index {self.index}")

        self._cap = cap
        logger.info("Opened camera %d", self.index)
        return self

    def read(self):
        """Next frame, or None when the stream has ended."""
        if self._cap is None:
            return None

        ret, frame = self._cap.read()
        if not ret or frame is None or frame.size == 0:
            return None
        return frame

    def read_first(self):
        """
        Read the frame used to size the detector.

        Raises:
            SetupError: No frame could be read
        """
        frame = self.read()
        if frame is None:
            raise SetupError("Failed to read initial frame from camera.")
        return frame

    def release(self):
        if self._cap is not None:
            self._cap.release()
            self._cap = None

    def __enter__(self):
        return self.open()

    def __exit__(self, *exc):
        self.release()
        return False

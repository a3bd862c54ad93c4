"""Tests for the camera and display wrappers, with OpenCV calls faked out."""

import numpy as np
import pytest

import camera
import display
from camera import VideoSource
from display import FrameDisplay
from errors import SetupError


class FakeCapture:
    instances = []

    def __init__(self, index, opened=True, frames=()):
        self.index = index
        self.opened = opened
        self.frames = list(frames)
        self.released = False
        FakeCapture.instances.append(self)

    def isOpened(self):
        return self.opened

    def read(self):
        if self.frames:
            return True, self.frames.pop(0)
        return False, None

    def release(self):
        self.released = True


@pytest.fixture
def capture(monkeypatch):
    FakeCapture.instances = []

    def install(opened=True, frames=()):
        monkeypatch.setattr(
            camera.cv2, "VideoCapture",
            lambda index: FakeCapture(index, opened=opened, frames=frames),
        )
        return FakeCapture

    return install


class TestVideoSource:
    def test_open_failure(self, capture):
        fake = capture(opened=False)
        with pytest.raises(SetupError, match="camera index 3"):
            VideoSource(3).open()
        assert fake.instances[0].released

    def test_reads_until_end(self, capture):
        frame = np.zeros((4, 4, 3), dtype=np.uint8)
        fake = capture(frames=[frame, frame])

        with VideoSource(0) as source:
            assert source.read() is frame
            assert source.read() is frame
            assert source.read() is None

        assert fake.instances[0].released

    def test_first_frame_failure(self, capture):
        capture(frames=[])
        with VideoSource(0) as source:
            with pytest.raises(SetupError, match="initial frame"):
                source.read_first()

    def test_read_before_open(self):
        assert VideoSource(0).read() is None


class TestFrameDisplay:
    @pytest.mark.parametrize("key,cancel", [(ord("q"), True), (27, True), (-1, False), (ord("p"), False)])
    def test_poll_cancel(self, monkeypatch, key, cancel):
        monkeypatch.setattr(display.cv2, "waitKey", lambda ms: key)
        assert FrameDisplay().poll_cancel() is cancel

    def test_show_and_close(self, monkeypatch):
        calls = []
        monkeypatch.setattr(display.cv2, "imshow", lambda title, frame: calls.append(("show", title)))
        monkeypatch.setattr(display.cv2, "destroyAllWindows", lambda: calls.append(("close",)))

        with FrameDisplay("test") as win:
            win.show(np.zeros((4, 4, 3), dtype=np.uint8))

        assert calls == [("show", "test"), ("close",)]

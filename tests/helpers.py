"""Fake camera, detector and display for pipeline tests."""

from detector import Detection
from privacy import Box


class FakeDetector:
    """Returns one canned detection list per call, then nothing."""

    def __init__(self, sequence):
        self.sequence = list(sequence)
        self.calls = 0

    def detect(self, frame):
        self.calls += 1
        if self.sequence:
            return self.sequence.pop(0)
        return []


class FakeSource:
    def __init__(self, frames):
        self.frames = list(frames)

    def read(self):
        if self.frames:
            return self.frames.pop(0)
        return None


class FakeSink:
    def __init__(self, cancel_after=None):
        self.shown = []
        self.cancel_after = cancel_after

    def show(self, frame):
        self.shown.append(frame)

    def poll_cancel(self):
        return self.cancel_after is not None and len(self.shown) >= self.cancel_after


def det(x, y, w, h, score=0.9):
    return Detection(box=Box(x, y, w, h), score=score)


def contains(outer, inner):
    """True if box `inner` lies entirely inside box `outer`."""
    return (
        inner.x >= outer.x
        and inner.y >= outer.y
        and inner.x + inner.w <= outer.x + outer.w
        and inner.y + inner.h <= outer.y + outer.h
    )

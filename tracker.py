# tracker.py
import logging
from dataclasses import dataclass
from typing import Tuple

from privacy import Box

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HoldState:
    """
    Short-term memory of the last successful detection.

    Attributes:
        last_boxes: Boxes from the most recent non-empty detection
        missed_frames: Consecutive frames since that detection
    """
    last_boxes: Tuple[Box, ...] = ()
    missed_frames: int = 0

    @property
    def is_tracking(self):
        return bool(self.last_boxes)


def hold_step(state, boxes, hold_frames):
    """
    Decide which boxes to mask this frame.

    A fresh detection always wins. When the detector returns nothing, the
    previous boxes are reused for up to `hold_frames` consecutive frames,
    after which the state drops back to idle.

    Args:
        state: Current HoldState
        boxes: This frame's boxes, already expanded and without degenerate ones
        hold_frames: Consecutive misses tolerated before the mask is dropped

    Returns:
        Tuple of (mask boxes, new HoldState)
    """
    boxes = tuple(boxes)

    if boxes:
        return list(boxes), HoldState(boxes, 0)

    if state.last_boxes and state.missed_frames < hold_frames:
        return list(state.last_boxes), HoldState(state.last_boxes, state.missed_frames + 1)

    return [], HoldState()


class DetectionHold:
    """
    Bridges brief detector dropouts for one video stream.
    """

    def __init__(self, hold_frames=20):
        """
        Args:
            hold_frames: Frames to keep the last boxes after detection drops
        """
        self.hold_frames = max(0, int(hold_frames))
        self.state = HoldState()

    @property
    def is_tracking(self):
        return self.state.is_tracking

    def update(self, boxes):
        """
        Feed this frame's boxes and get back the boxes to mask.

        Args:
            boxes: List of Box from the current detection

        Returns:
            List of Box to mask
        """
        previous = self.state
        mask, self.state = hold_step(previous, boxes, self.hold_frames)

        if previous.is_tracking and not self.state.is_tracking:
            logger.debug("Hold expired after %d missed frames", previous.missed_frames)
        elif self.state.missed_frames:
            logger.debug("Holding %d boxes (miss %d/%d)",
                         len(mask), self.state.missed_frames, self.hold_frames)

        return mask

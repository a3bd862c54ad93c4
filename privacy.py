# privacy.py
import cv2
from dataclasses import dataclass


@dataclass(frozen=True)
class Box:
    """Face region in frame pixel coordinates (x, y, width, height)."""
    x: int
    y: int
    w: int
    h: int

    @property
    def is_empty(self):
        return self.w <= 0 or self.h <= 0


def clamp_box(box, width, height):
    """
    Keep a box inside the frame.

    Args:
        box: Box to clamp
        width, height: Frame size

    Returns:
        Box intersected with [0, width) x [0, height)
    """
    x1 = min(max(0, box.x), width)
    y1 = min(max(0, box.y), height)
    x2 = min(width, box.x + box.w)
    y2 = min(height, box.y + box.h)
    return Box(x1, y1, max(0, x2 - x1), max(0, y2 - y1))


def expand_box(box, pad_ratio, width, height):
    """
    Grow a detector box on every side so hair, ears and jaw get masked too.

    Args:
        box: Raw detector box
        pad_ratio: Fraction of width/height added on each side
        width, height: Frame size

    Returns:
        Expanded box clamped to the frame
    """
    pad_w = int(box.w * pad_ratio)
    pad_h = int(box.h * pad_ratio)
    expanded = Box(box.x - pad_w, box.y - pad_h, box.w + 2 * pad_w, box.h + 2 * pad_h)
    return clamp_box(expanded, width, height)


def pixelate(region, block_size):
    """
    Pixelate an image region.

    Downscales with linear interpolation and scales back with
    nearest-neighbour, so fine detail is lost rather than blurred.

    Args:
        region: Image region (H, W[, C])
        block_size: Size of the output blocks, at least 2

    Returns:
        New array with the same shape as `region`
    """
    if region.size == 0:
        return region

    block_size = max(2, int(block_size))
    h, w = region.shape[:2]
    small_w = max(1, w // block_size)
    small_h = max(1, h // block_size)

    small = cv2.resize(region, (small_w, small_h), interpolation=cv2.INTER_LINEAR)
    return cv2.resize(small, (w, h), interpolation=cv2.INTER_NEAREST)


def pixelate_box(frame, box, block_size):
    """Pixelate `box` inside `frame` in place."""
    if box.is_empty:
        return frame

    roi = frame[box.y:box.y + box.h, box.x:box.x + box.w]
    if roi.size == 0:
        return frame

    frame[box.y:box.y + box.h, box.x:box.x + box.w] = pixelate(roi, block_size)
    return frame


def draw_outline(frame, box, color=(0, 255, 0), thickness=2):
    """Draw a rectangle around a masked box."""
    if box.is_empty:
        return frame
    cv2.rectangle(
        frame,
        (box.x, box.y),
        (box.x + box.w - 1, box.y + box.h - 1),
        color,
        thickness
    )
    return frame

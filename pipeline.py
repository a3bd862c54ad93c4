# pipeline.py
import logging

from privacy import draw_outline, expand_box, pixelate_box
from tracker import DetectionHold

logger = logging.getLogger(__name__)


def boxes_from_detections(detections, score_threshold, face_padding, width, height):
    """
    Turn detector output into boxes safe to mask.

    Args:
        detections: List of Detection
        score_threshold: Minimum score kept
        face_padding: Expansion ratio applied to each box
        width, height: Frame size

    Returns:
        List of expanded, clamped, non-degenerate Box
    """
    boxes = []
    for det in detections:
        if det.score < score_threshold:
            continue
        box = expand_box(det.box, face_padding, width, height)
        if box.is_empty:
            continue
        boxes.append(box)
    return boxes


def mask_frame(frame, boxes, pixel_block, outline=True):
    """Pixelate every box in place, then draw outlines on top."""
    for box in boxes:
        pixelate_box(frame, box, pixel_block)

    if outline:
        for box in boxes:
            draw_outline(frame, box)

    return frame


class FramePipeline:
    """
    detect -> expand -> hold -> pixelate, one frame at a time.
    """

    def __init__(self, detector, config):
        """
        Args:
            detector: Anything with detect(frame) -> list of Detection
            config: AppConfig
        """
        self.detector = detector
        self.config = config
        self.hold = DetectionHold(config.hold_frames)
        self.frame_count = 0

    def select_boxes(self, frame):
        """Boxes to mask for this frame, with dropouts bridged."""
        height, width = frame.shape[:2]
        detections = self.detector.detect(frame)
        boxes = boxes_from_detections(
            detections,
            self.config.score_threshold,
            self.config.face_padding,
            width,
            height
        )
        mask = self.hold.update(boxes)
        logger.debug("Frame %d: %d detections, %d fresh boxes, %d masked",
                     self.frame_count, len(detections), len(boxes), len(mask))
        return mask

    def process(self, frame):
        """Return a masked copy of the frame."""
        boxes = self.select_boxes(frame)
        output = frame.copy()
        mask_frame(output, boxes, self.config.pixel_block, self.config.outline)
        self.frame_count += 1
        return output

    def run(self, source, sink):
        """
        Process frames until the stream ends or the user quits.

        Args:
            source: Anything with read() -> frame or None
            sink: Anything with show(frame) and poll_cancel() -> bool

        Returns:
            Number of frames shown
        """
        shown = 0
        while True:
            frame = source.read()
            if frame is None:
                logger.info("End of stream")
                break

            sink.show(self.process(frame))
            shown += 1

            if sink.poll_cancel():
                logger.info("Stopped by user")
                break

        return shown

# detector.py
import logging
import os
from dataclasses import dataclass

import cv2
import numpy as np

from errors import SetupError
from privacy import Box

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "face_detection_yunet_2023mar.onnx"


@dataclass(frozen=True)
class Detection:
    box: Box
    score: float


class FaceDetector:
    """
    YuNet face detector (cv2.FaceDetectorYN).
    """

    def __init__(self, model_path=DEFAULT_MODEL, input_size=(320, 320),
                 score_threshold=0.8, nms_threshold=0.3, top_k=5000):
        """
        Load the ONNX model.

        Args:
            model_path: Path to the YuNet ONNX model
            input_size: (width, height) of the frames that will be fed in
            score_threshold: Confidence threshold
            nms_threshold: NMS threshold
            top_k: Candidate boxes kept before NMS

        Raises:
            SetupError: Model missing or OpenCV could not build the detector
        """
        if not os.path.exists(model_path):
            raise SetupError(f"Face detection model not found: {model_path}")

        self.input_size = tuple(int(v) for v in input_size)

        try:
            self.model = cv2.FaceDetectorYN.create(
                model_path,
                "",
                self.input_size,
                score_threshold,
                nms_threshold,
                top_k
            )
        except cv2.error as e:
            raise SetupError(
                f"Failed to create YuNet detector. Check model path: {model_path}"
            ) from e

        if self.model is None:
            raise SetupError(f"Failed to create YuNet detector. Check model path: {model_path}")

        logger.info("Loaded YuNet model %s (input %dx%d)", model_path, *self.input_size)

    def detect(self, frame):
        """
        Detect faces in a frame.

        Args:
            frame: BGR image

        Returns:
            List of Detection in frame pixel coordinates
        """
        height, width = frame.shape[:2]
        if (width, height) != self.input_size:
            self.input_size = (width, height)
            self.model.setInputSize(self.input_size)

        _, faces = self.model.detect(frame)
        return parse_faces(faces)


def parse_faces(faces):
    """
    Convert raw YuNet output rows to detections.

    Each row holds x, y, w, h, five landmark pairs and the score last.
    """
    if faces is None:
        return []

    faces = np.asarray(faces, dtype=np.float32)
    if faces.size == 0:
        return []
    faces = np.atleast_2d(faces)

    detections = []
    for row in faces:
        box = Box(int(row[0]), int(row[1]), int(row[2]), int(row[3]))
        detections.append(Detection(box=box, score=float(row[-1])))
    return detections

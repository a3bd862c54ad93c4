# main.py
import logging
import sys

from camera import VideoSource
from config import parse_args
from detector import FaceDetector
from display import FrameDisplay
from errors import SetupError
from pipeline import FramePipeline

logger = logging.getLogger(__name__)


def run(config):
    """
    Open the camera, build the detector and run the loop.

    Raises:
        SetupError: Camera, first frame or detector failed
    """
    with VideoSource(config.camera_index) as source:
        # First frame sizes the detector input
        frame = source.read_first()
        height, width = frame.shape[:2]

        detector = FaceDetector(
            model_path=config.model_path,
            input_size=(width, height),
            score_threshold=config.score_threshold,
            nms_threshold=config.nms_threshold,
            top_k=config.top_k
        )
        pipeline = FramePipeline(detector, config)

        print("Press q or ESC to quit.")
        with FrameDisplay(config.window_title) as display:
            shown = pipeline.run(source, display)

    logger.info("Processed %d frames", shown)
    return shown


def main(argv=None):
    config = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if config.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        run(config)
    except SetupError as e:
        logger.error("%s", e)
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())

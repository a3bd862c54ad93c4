# config.py
import argparse
import sys
from dataclasses import dataclass

from detector import DEFAULT_MODEL


@dataclass(frozen=True)
class AppConfig:
    # YuNet ONNX model file
    model_path: str = DEFAULT_MODEL
    # 0 = default camera
    camera_index: int = 0
    score_threshold: float = 0.8
    nms_threshold: float = 0.3
    # Candidate boxes before NMS
    top_k: int = 5000
    # Larger blocks => stronger anonymization
    pixel_block: int = 28
    # Extra mask around each face, as a fraction of the box size
    face_padding: float = 0.5
    # Frames to keep the last boxes when detection drops out
    hold_frames: int = 20
    outline: bool = True
    window_title: str = "YuNet Face Pixelate"
    verbose: bool = False


class _ArgumentParser(argparse.ArgumentParser):
    """Argument errors exit with status 1."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser():
    defaults = AppConfig()
    p = _ArgumentParser(
        prog="face-pixelate",
        description="Pixelate faces in a live camera feed.",
    )
    p.add_argument("--model", default=defaults.model_path,
                   help="YuNet model path")
    p.add_argument("--camera", type=int, default=defaults.camera_index,
                   help="Camera index (default 0)")
    p.add_argument("--score-threshold", type=float, default=defaults.score_threshold,
                   help="Detector score threshold")
    p.add_argument("--nms-threshold", type=float, default=defaults.nms_threshold,
                   help="NMS threshold")
    p.add_argument("--top-k", type=int, default=defaults.top_k,
                   help="Top-K before NMS")
    p.add_argument("--pixel-block", type=int, default=defaults.pixel_block,
                   help="Pixelation strength (min 2)")
    p.add_argument("--face-padding", type=float, default=defaults.face_padding,
                   help="Extra mask padding ratio (min 0)")
    p.add_argument("--hold-frames", type=int, default=defaults.hold_frames,
                   help="Frames to keep last boxes (min 0)")
    p.add_argument("--no-outline", dest="outline", action="store_false",
                   help="Do not draw a rectangle around masked faces")
    p.add_argument("-v", "--verbose", action="store_true",
                   help="Verbose output")
    return p


def parse_args(argv=None):
    """
    Parse command-line flags into an AppConfig.

    Out-of-range values are pulled back into range rather than rejected.
    """
    args = build_parser().parse_args(argv)

    return AppConfig(
        model_path=args.model,
        camera_index=args.camera,
        score_threshold=args.score_threshold,
        nms_threshold=args.nms_threshold,
        top_k=args.top_k,
        pixel_block=max(2, args.pixel_block),
        face_padding=max(0.0, args.face_padding),
        hold_frames=max(0, args.hold_frames),
        outline=args.outline,
        verbose=args.verbose,
    )

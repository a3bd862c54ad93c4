# display.py
import cv2

QUIT_KEYS = (ord('q'), 27)  # q, ESC


class FrameDisplay:
    """
    Live cv2 window. Press q or ESC to quit.
    """

    def __init__(self, title="YuNet Face Pixelate", wait_ms=1):
        self.title = title
        self.wait_ms = wait_ms

    def show(self, frame):
        cv2.imshow(self.title, frame)

    def poll_cancel(self):
        """True if the user pressed a quit key."""
        key = cv2.waitKey(self.wait_ms) & 0xFF
        return key in QUIT_KEYS

    def close(self):
        cv2.destroyAllWindows()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
        return False

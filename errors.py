# errors.py

class SetupError(RuntimeError):
    """Camera, detector or first frame could not be brought up."""

"""
Engine Errors

Only InsufficientDataError escapes the engine. MissingLandmarkError is
raised by PoseFrame.require_landmark and always recovered inside the
services with a neutral value.
"""


class SwingAnalysisError(Exception):
    """Base class for swing analysis errors."""


class InsufficientDataError(SwingAnalysisError, ValueError):
    """Too few frames were supplied to analyze a swing."""

    def __init__(self, frame_count: int, min_frames: int):
        self.frame_count = frame_count
        self.min_frames = min_frames
        super().__init__(
            f"Insufficient pose data for analysis: got {frame_count} frames, "
            f"need at least {min_frames}"
        )


class MissingLandmarkError(SwingAnalysisError, LookupError):
    """A required keypoint is absent from a frame."""

    def __init__(self, body_part, frame_number: int):
        self.body_part = body_part
        self.frame_number = frame_number
        super().__init__(f"{body_part.name} missing in frame {frame_number}")

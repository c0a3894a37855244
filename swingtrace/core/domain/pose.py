"""
Pose Domain Models

Data structures for the per-frame keypoints handed to the engine by the
external pose-estimation provider.

The landmark numbering follows MediaPipe's 33-point pose model:
https://developers.google.com/mediapipe/solutions/vision/pose_landmarker
"""
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional

from .errors import MissingLandmarkError


class BodyPart(IntEnum):
    """
    Pose landmark indices.

    This is the only place the anatomical numbering lives. If the upstream
    pose model changes its numbering, only this table changes.
    """
    # Face
    NOSE = 0

    # Upper body
    LEFT_SHOULDER = 11
    RIGHT_SHOULDER = 12
    LEFT_ELBOW = 13
    RIGHT_ELBOW = 14
    LEFT_WRIST = 15
    RIGHT_WRIST = 16

    # Lower body
    LEFT_HIP = 23
    RIGHT_HIP = 24
    LEFT_KNEE = 25
    RIGHT_KNEE = 26
    LEFT_ANKLE = 27
    RIGHT_ANKLE = 28


@dataclass(frozen=True)
class PoseLandmark:
    """
    A single body landmark with 3D coordinates and an optional confidence.

    Attributes:
        x: Horizontal position (0.0 = left edge, 1.0 = right edge)
        y: Vertical position (0.0 = top edge, 1.0 = bottom edge)
        z: Depth (smaller = closer to camera)
        visibility: Confidence score (0.0 to 1.0), None if the provider
                    did not report one

    Note:
        A missing visibility counts as 0.0, never as full confidence.
    """
    x: float
    y: float
    z: float = 0.0
    visibility: Optional[float] = None

    @property
    def confidence(self) -> float:
        """Visibility with the documented default for missing values."""
        return self.visibility if self.visibility is not None else 0.0

    def is_visible(self, threshold: float = 0.5) -> bool:
        """Check if landmark is visible above confidence threshold."""
        return self.confidence >= threshold


@dataclass
class PoseFrame:
    """
    All landmarks reported for a single video frame.

    Attributes:
        landmarks: Landmarks indexed by BodyPart value; a slot may be None
                   when the provider lost track of that keypoint
        timestamp_ms: Frame timestamp in milliseconds
        frame_number: Sequential frame number
    """
    landmarks: list[Optional[PoseLandmark]] = field(default_factory=list)
    timestamp_ms: float = 0.0
    frame_number: int = 0

    def get_landmark(self, body_part: BodyPart) -> Optional[PoseLandmark]:
        """Get a specific landmark by body part, None if absent."""
        index = body_part.value
        if 0 <= index < len(self.landmarks):
            return self.landmarks[index]
        return None

    def require_landmark(self, body_part: BodyPart) -> PoseLandmark:
        """Get a specific landmark, raising MissingLandmarkError if absent."""
        landmark = self.get_landmark(body_part)
        if landmark is None:
            raise MissingLandmarkError(body_part, self.frame_number)
        return landmark

    @property
    def confidence(self) -> float:
        """Average confidence over all landmark slots (missing count as 0)."""
        if not self.landmarks:
            return 0.0
        total = sum(lm.confidence for lm in self.landmarks if lm is not None)
        return total / len(self.landmarks)

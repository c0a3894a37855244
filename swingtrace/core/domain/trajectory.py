"""
Trajectory Domain Models

Frame-indexed time series of 3D positions for the tracked body points
and the derived clubhead.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator

from .pose import BodyPart


@dataclass(frozen=True)
class TrajectoryPoint:
    """
    Position of one tracked point at one frame.

    Attributes:
        x, y, z: Normalized image coordinates (y grows downward)
        timestamp: Frame timestamp in milliseconds
        frame: Frame index (non-negative)
        filled: True when the landmark was missing in this frame and the
                position was interpolated from neighbouring frames
    """
    x: float
    y: float
    z: float
    timestamp: float
    frame: int
    filled: bool = False


# Ordered by frame; read-only to every stage that did not produce it.
Trajectory = list[TrajectoryPoint]


class TrackedPoint(Enum):
    """Points whose trajectories make up a SwingTrajectory."""
    RIGHT_WRIST = "right_wrist"
    LEFT_WRIST = "left_wrist"
    RIGHT_SHOULDER = "right_shoulder"
    LEFT_SHOULDER = "left_shoulder"
    RIGHT_HIP = "right_hip"
    LEFT_HIP = "left_hip"
    CLUBHEAD = "clubhead"

    @property
    def body_part(self):
        """Landmark backing this point, None for the derived clubhead."""
        return _BODY_PARTS.get(self)


_BODY_PARTS = {
    TrackedPoint.RIGHT_WRIST: BodyPart.RIGHT_WRIST,
    TrackedPoint.LEFT_WRIST: BodyPart.LEFT_WRIST,
    TrackedPoint.RIGHT_SHOULDER: BodyPart.RIGHT_SHOULDER,
    TrackedPoint.LEFT_SHOULDER: BodyPart.LEFT_SHOULDER,
    TrackedPoint.RIGHT_HIP: BodyPart.RIGHT_HIP,
    TrackedPoint.LEFT_HIP: BodyPart.LEFT_HIP,
}


@dataclass
class SwingTrajectory:
    """
    Trajectories of every tracked point for one swing.

    All trajectories share the same length and frame indexing.
    The clubhead is derived from the wrists, not tracked directly.
    """
    right_wrist: Trajectory = field(default_factory=list)
    left_wrist: Trajectory = field(default_factory=list)
    right_shoulder: Trajectory = field(default_factory=list)
    left_shoulder: Trajectory = field(default_factory=list)
    right_hip: Trajectory = field(default_factory=list)
    left_hip: Trajectory = field(default_factory=list)
    clubhead: Trajectory = field(default_factory=list)

    def __getitem__(self, point: TrackedPoint) -> Trajectory:
        return getattr(self, point.value)

    def __iter__(self) -> Iterator[tuple[TrackedPoint, Trajectory]]:
        for point in TrackedPoint:
            yield point, self[point]

    def __len__(self) -> int:
        """Number of frames covered."""
        return len(self.right_wrist)

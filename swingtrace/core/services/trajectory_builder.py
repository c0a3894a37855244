"""
Trajectory Builder Service

Converts the per-frame pose records from the pose-estimation provider
into one trajectory per tracked point, plus the derived clubhead.

Partial visibility is common, so a missing landmark never fails the
analysis. Interior gaps are interpolated linearly between the known
frames on either side; leading and trailing gaps hold the nearest known
position. Every such point is marked `filled` so that acceleration-based
detectors can skip it.
"""

import logging
from typing import List, Optional, Sequence, Tuple

import numpy as np

from ..config import DEFAULT_CONFIG, ClubheadEstimation, SwingEngineConfig
from ..domain.errors import MissingLandmarkError
from ..domain.pose import BodyPart, PoseFrame
from ..domain.trajectory import SwingTrajectory, TrackedPoint, Trajectory, TrajectoryPoint

logger = logging.getLogger(__name__)

Position = Tuple[float, float, float]


class TrajectoryBuilder:
    """
    Builds a SwingTrajectory from a sequence of PoseFrames.

    Usage:
        builder = TrajectoryBuilder()
        swing = builder.build(frames)
        print(len(swing.clubhead))
    """

    def __init__(self, config: Optional[SwingEngineConfig] = None):
        self.config = config or DEFAULT_CONFIG

    def build(self, frames: Sequence[PoseFrame]) -> SwingTrajectory:
        """
        Extract every tracked trajectory from the frames.

        Args:
            frames: Pose frames in time order

        Returns:
            SwingTrajectory whose trajectories all have len(frames) points
        """
        timestamps = self.timestamps(frames)

        positions = {}
        filled = {}
        for part in (
            BodyPart.RIGHT_WRIST,
            BodyPart.LEFT_WRIST,
            BodyPart.RIGHT_ELBOW,
            BodyPart.RIGHT_SHOULDER,
            BodyPart.LEFT_SHOULDER,
            BodyPart.RIGHT_HIP,
            BodyPart.LEFT_HIP,
        ):
            positions[part], filled[part] = self._fill_gaps(
                self._landmark_positions(frames, part), part
            )

        trajectories = {
            point.value: self._to_trajectory(
                positions[point.body_part], timestamps, filled[point.body_part]
            )
            for point in TrackedPoint
            if point is not TrackedPoint.CLUBHEAD
        }

        # The clubhead is only as reliable as the wrists it comes from
        clubhead_filled = [
            right or left
            for right, left in zip(filled[BodyPart.RIGHT_WRIST], filled[BodyPart.LEFT_WRIST])
        ]
        trajectories["clubhead"] = self._to_trajectory(
            self._clubhead_positions(frames, positions),
            timestamps,
            clubhead_filled,
        )

        return SwingTrajectory(**trajectories)

    @staticmethod
    def timestamps(frames: Sequence[PoseFrame]) -> List[float]:
        """Timestamp of every frame in milliseconds."""
        return [float(frame.timestamp_ms) for frame in frames]

    # -------------------------------------------------------------------------
    # Landmark Extraction
    # -------------------------------------------------------------------------

    @staticmethod
    def _landmark_positions(
        frames: Sequence[PoseFrame],
        body_part: BodyPart,
    ) -> List[Optional[Position]]:
        """Raw positions of one landmark, None where it is missing."""
        positions: List[Optional[Position]] = []
        for frame in frames:
            try:
                landmark = frame.require_landmark(body_part)
            except MissingLandmarkError as e:
                logger.debug(f"{e}, filling from neighbouring frames")
                positions.append(None)
                continue
            positions.append((float(landmark.x), float(landmark.y), float(landmark.z)))
        return positions

    @staticmethod
    def _fill_gaps(
        positions: List[Optional[Position]],
        body_part: BodyPart,
    ) -> Tuple[List[Position], List[bool]]:
        """
        Replace missing positions.

        Interior gaps are interpolated linearly over the frame index;
        leading and trailing gaps take the nearest known position. A
        landmark that is never seen sits at the origin.

        Returns:
            (positions, filled) where filled[i] is True for replaced frames
        """
        filled = [p is None for p in positions]
        known = [i for i, p in enumerate(positions) if p is not None]

        if not known:
            if positions:
                logger.warning(f"{body_part.name} missing in every frame, using origin")
            return [(0.0, 0.0, 0.0)] * len(positions), filled

        if len(known) == len(positions):
            return list(positions), filled

        frame_indices = np.arange(len(positions))
        values = np.array([positions[i] for i in known], dtype=float)
        # np.interp holds the edge values outside the known range
        columns = [np.interp(frame_indices, known, values[:, axis]) for axis in range(3)]

        return [(float(x), float(y), float(z)) for x, y, z in zip(*columns)], filled

    def _clubhead_positions(
        self,
        frames: Sequence[PoseFrame],
        positions: dict,
    ) -> List[Position]:
        """
        Estimate the clubhead in every frame.

        MIDPOINT uses the midpoint of the wrists. FOREARM_EXTENSION pushes
        the right wrist along the elbow -> wrist direction; frames where the
        elbow was not detected fall back to the midpoint.
        """
        right = positions[BodyPart.RIGHT_WRIST]
        left = positions[BodyPart.LEFT_WRIST]
        midpoints = [
            ((r[0] + l[0]) / 2, (r[1] + l[1]) / 2, (r[2] + l[2]) / 2)
            for r, l in zip(right, left)
        ]

        if self.config.clubhead_estimation is ClubheadEstimation.MIDPOINT:
            return midpoints

        extension = self.config.clubhead_extension
        elbows = positions[BodyPart.RIGHT_ELBOW]
        clubhead = []
        for frame, wrist, elbow, midpoint in zip(frames, right, elbows, midpoints):
            if frame.get_landmark(BodyPart.RIGHT_ELBOW) is None:
                clubhead.append(midpoint)
                continue
            clubhead.append(tuple(
                w + (w - e) * extension for w, e in zip(wrist, elbow)
            ))
        return clubhead

    @staticmethod
    def _to_trajectory(
        positions: Sequence[Position],
        timestamps: Sequence[float],
        filled: Sequence[bool],
    ) -> Trajectory:
        return [
            TrajectoryPoint(x=x, y=y, z=z, timestamp=timestamp, frame=index, filled=is_filled)
            for index, ((x, y, z), timestamp, is_filled) in enumerate(zip(positions, timestamps, filled))
        ]

"""
Swing Path Service

Classifies the clubhead path: plane angle, consistency, deviation from a
straight line, and inside-out / outside-in direction.

Angles follow image coordinates (y grows downward) and are in degrees.
"""

import logging
import math
from typing import Optional, Sequence

import numpy as np

from ..config import DEFAULT_CONFIG, SwingEngineConfig
from ..domain.analysis import PhaseName, SwingPathAnalysis, SwingPhase
from ..domain.trajectory import SwingTrajectory, TrajectoryPoint
from .kinematics import TrajectoryAnalyzer

logger = logging.getLogger(__name__)


class SwingPathClassifier:
    """
    Analyzes the clubhead trajectory against the detected phases.

    Usage:
        classifier = SwingPathClassifier()
        path = classifier.analyze_swing_path(swing, phase_analysis.phases)
        if path.outside_in:
            print("Over the top")
    """

    def __init__(self, config: Optional[SwingEngineConfig] = None):
        self.config = config or DEFAULT_CONFIG

    def analyze_swing_path(
        self,
        trajectory: SwingTrajectory,
        phases: Sequence[SwingPhase],
    ) -> SwingPathAnalysis:
        """
        Classify the clubhead path.

        Args:
            trajectory: Swing trajectories (the clubhead is used)
            phases: Detected phases; Backswing and Transition drive the
                    direction classification

        Returns:
            SwingPathAnalysis for the clubhead
        """
        clubhead = trajectory.clubhead
        inside_out, outside_in, on_plane = self._path_direction(clubhead, phases)

        return SwingPathAnalysis(
            clubhead_path=list(clubhead),
            swing_plane=self.swing_plane(clubhead),
            path_consistency=self.path_consistency(clubhead),
            path_deviation=self.path_deviation(clubhead),
            inside_out=inside_out,
            outside_in=outside_in,
            on_plane=on_plane,
        )

    # -------------------------------------------------------------------------
    # Geometry
    # -------------------------------------------------------------------------

    @staticmethod
    def direction(p1: TrajectoryPoint, p2: TrajectoryPoint) -> float:
        """Angle of the p1 -> p2 vector in the image plane, -180 to 180."""
        return math.degrees(math.atan2(p2.y - p1.y, p2.x - p1.x))

    @classmethod
    def swing_plane(cls, points: Sequence[TrajectoryPoint]) -> float:
        """Angle of the straight line from the first to the last point."""
        if len(points) < 2:
            return 0.0
        return cls.direction(points[0], points[-1])

    @staticmethod
    def path_consistency(points: Sequence[TrajectoryPoint]) -> float:
        """
        1 minus the velocity variance normalized by the squared mean (0-1).

        Short or stationary paths are perfectly consistent.
        """
        if len(points) < 3:
            return 1.0

        velocities = np.asarray(TrajectoryAnalyzer.velocities(points), dtype=float)
        mean = float(velocities.mean())
        if mean == 0:
            return 1.0

        normalized_variance = float(velocities.var()) / (mean ** 2)
        return max(0.0, min(1.0, 1.0 - normalized_variance))

    @staticmethod
    def path_deviation(points: Sequence[TrajectoryPoint]) -> float:
        """
        Mean distance of every point from the first -> last line.

        Distances are perpendicular, in the image plane. When the first and
        last points coincide the distance to that point is used instead.
        """
        if len(points) < 3:
            return 0.0

        start, end = points[0], points[-1]
        dx = end.x - start.x
        dy = end.y - start.y
        length = math.hypot(dx, dy)

        if length == 0:
            deviations = [math.hypot(p.x - start.x, p.y - start.y) for p in points]
        else:
            deviations = [
                abs(dy * (p.x - start.x) - dx * (p.y - start.y)) / length
                for p in points
            ]

        return sum(deviations) / len(deviations)

    # -------------------------------------------------------------------------
    # Direction Classification
    # -------------------------------------------------------------------------

    def _path_direction(
        self,
        points: Sequence[TrajectoryPoint],
        phases: Sequence[SwingPhase],
    ) -> tuple:
        """
        Compare the backswing and downswing direction angles.

        Returns (inside_out, outside_in, on_plane). Defaults to on plane
        when the path is too short or either phase is missing.
        """
        if len(points) < 3:
            return False, False, True

        backswing = next((p for p in phases if p.name == PhaseName.BACKSWING), None)
        downswing = next((p for p in phases if p.name == PhaseName.TRANSITION), None)
        if backswing is None or downswing is None:
            logger.debug("Backswing or downswing phase missing, assuming on plane")
            return False, False, True

        backswing_direction = self._segment_direction(points, backswing)
        downswing_direction = self._segment_direction(points, downswing)

        inside_out = downswing_direction > backswing_direction
        outside_in = downswing_direction < backswing_direction
        on_plane = abs(downswing_direction - backswing_direction) < self.config.on_plane_tolerance

        return inside_out, outside_in, on_plane

    def _segment_direction(self, points: Sequence[TrajectoryPoint], phase: SwingPhase) -> float:
        last = len(points) - 1
        start = min(max(0, phase.start_frame), last)
        end = min(max(0, phase.end_frame), last)
        return self.direction(points[start], points[end])

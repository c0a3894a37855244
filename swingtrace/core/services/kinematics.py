"""
Kinematics Service

Distance, velocity, acceleration and smoothness of a single trajectory.

Velocities are in normalized image units per millisecond. A zero time
step never raises: the affected sample is reported as 0.
"""

import logging
import math
from typing import List, Optional, Sequence

import numpy as np

from ..config import DEFAULT_CONFIG, SwingEngineConfig
from ..domain.analysis import (
    SwingPhase,
    TrajectoryMetrics,
    TrajectoryVisualization,
    VelocityProfile,
)
from ..domain.trajectory import Trajectory, TrajectoryPoint

logger = logging.getLogger(__name__)


class TrajectoryAnalyzer:
    """
    Computes kinematic properties of a trajectory.

    The analyzer holds only its configuration, so one instance can be
    shared across threads.

    Usage:
        analyzer = TrajectoryAnalyzer()
        metrics = analyzer.analyze_trajectory(swing.right_wrist)
        profile = analyzer.create_velocity_profile(swing.clubhead)
    """

    def __init__(self, config: Optional[SwingEngineConfig] = None):
        self.config = config or DEFAULT_CONFIG

    # -------------------------------------------------------------------------
    # Point-to-point Calculations
    # -------------------------------------------------------------------------

    @staticmethod
    def distance(p1: TrajectoryPoint, p2: TrajectoryPoint) -> float:
        """Euclidean 3D distance between two points."""
        return math.sqrt(
            (p2.x - p1.x) ** 2 +
            (p2.y - p1.y) ** 2 +
            (p2.z - p1.z) ** 2
        )

    @staticmethod
    def velocity(p1: TrajectoryPoint, p2: TrajectoryPoint) -> float:
        """Speed between two points, 0 if they share a timestamp."""
        try:
            return TrajectoryAnalyzer.distance(p1, p2) / (p2.timestamp - p1.timestamp)
        except ZeroDivisionError:
            return 0.0

    @staticmethod
    def acceleration(
        p1: TrajectoryPoint,
        p2: TrajectoryPoint,  # Center point
        p3: TrajectoryPoint
    ) -> float:
        """
        Magnitude of the speed change around p2.

        Uses the half span between the outer timestamps as the time step,
        0 if p1 and p3 share a timestamp.
        """
        v1 = TrajectoryAnalyzer.velocity(p1, p2)
        v2 = TrajectoryAnalyzer.velocity(p2, p3)
        try:
            return abs(v2 - v1) / ((p3.timestamp - p1.timestamp) / 2)
        except ZeroDivisionError:
            return 0.0

    # -------------------------------------------------------------------------
    # Series
    # -------------------------------------------------------------------------

    @classmethod
    def velocities(cls, points: Sequence[TrajectoryPoint]) -> List[float]:
        """Velocity of every consecutive pair (length n-1)."""
        return [cls.velocity(a, b) for a, b in zip(points, points[1:])]

    @classmethod
    def accelerations(cls, points: Sequence[TrajectoryPoint]) -> List[float]:
        """Acceleration at every interior point (length n-2)."""
        return [
            cls.acceleration(points[i - 1], points[i], points[i + 1])
            for i in range(1, len(points) - 1)
        ]

    @classmethod
    def total_distance(cls, points: Sequence[TrajectoryPoint]) -> float:
        """Path length along the trajectory."""
        return sum(cls.distance(a, b) for a, b in zip(points, points[1:]))

    # -------------------------------------------------------------------------
    # Analysis
    # -------------------------------------------------------------------------

    def analyze_trajectory(self, points: Sequence[TrajectoryPoint]) -> TrajectoryMetrics:
        """
        Summarize the kinematics of a trajectory.

        An empty trajectory has smoothness 0, a single stationary point
        is perfectly smooth (1). All motion fields are 0 in both cases.

        Args:
            points: Trajectory to analyze

        Returns:
            TrajectoryMetrics for the trajectory
        """
        if not points:
            return TrajectoryMetrics(smoothness=0.0)

        if len(points) < 2:
            return TrajectoryMetrics(smoothness=1.0)

        velocities = np.asarray(self.velocities(points), dtype=float)
        accelerations = np.asarray(self.accelerations(points), dtype=float)

        max_acceleration = float(accelerations.max()) if accelerations.size else 0.0
        avg_acceleration = float(accelerations.mean()) if accelerations.size else 0.0

        return TrajectoryMetrics(
            total_distance=self.total_distance(points),
            max_velocity=float(velocities.max()),
            avg_velocity=float(velocities.mean()),
            max_acceleration=max_acceleration,
            avg_acceleration=avg_acceleration,
            peak_frame=int(np.argmax(velocities)),
            smoothness=self._smoothness(accelerations),
        )

    @staticmethod
    def _smoothness(accelerations: np.ndarray) -> float:
        """
        1 minus the acceleration variance normalized by the squared peak.

        No acceleration samples, or a zero peak, means no detectable jerk.
        """
        if accelerations.size == 0:
            return 1.0

        max_acceleration = float(accelerations.max())
        if max_acceleration == 0:
            return 1.0

        normalized_variance = float(accelerations.var()) / (max_acceleration ** 2)
        return max(0.0, min(1.0, 1.0 - normalized_variance))

    def create_velocity_profile(self, points: Sequence[TrajectoryPoint]) -> VelocityProfile:
        """
        Velocity and acceleration series with their peak indices.

        Peak indices are 0 when the corresponding series is empty.
        """
        velocities = self.velocities(points)
        accelerations = self.accelerations(points)

        return VelocityProfile(
            frames=list(range(len(points))),
            velocities=velocities,
            accelerations=accelerations,
            peak_velocity_frame=int(np.argmax(velocities)) if velocities else 0,
            peak_acceleration_frame=int(np.argmax(accelerations)) if accelerations else 0,
        )

    def smooth_trajectory(
        self,
        points: Sequence[TrajectoryPoint],
        window: Optional[int] = None,
    ) -> Trajectory:
        """
        Centered moving average over x, y, z and timestamp.

        The window is clipped at both ends of the sequence (no padding),
        so the output always has the input's length. A trajectory shorter
        than the window is returned as is.

        Args:
            points: Trajectory to smooth
            window: Window size in frames (default from config)

        Returns:
            New trajectory; frame numbers are renumbered 0..n-1
        """
        window = window if window is not None else self.config.smoothing_window
        if window < 1:
            raise ValueError(f"Smoothing window must be at least 1, got {window}")

        if len(points) < window:
            return list(points)

        coords = np.array([[p.x, p.y, p.z, p.timestamp] for p in points], dtype=float)
        before = window // 2
        after = math.ceil(window / 2)
        n = len(points)

        smoothed = []
        for i in range(n):
            x, y, z, timestamp = coords[max(0, i - before):min(n, i + after)].mean(axis=0)
            smoothed.append(TrajectoryPoint(
                x=float(x),
                y=float(y),
                z=float(z),
                timestamp=float(timestamp),
                frame=i,
            ))

        return smoothed

    def create_visualization_data(
        self,
        points: Sequence[TrajectoryPoint],
        phases: Sequence[SwingPhase],
    ) -> TrajectoryVisualization:
        """Bundle raw and smoothed points, velocity profile, phases and metrics."""
        logger.debug(f"Building visualization data for {len(points)} points")
        return TrajectoryVisualization(
            points=list(points),
            smoothed_points=self.smooth_trajectory(points),
            velocity_profile=self.create_velocity_profile(points),
            phases=list(phases),
            metrics=self.analyze_trajectory(points),
        )

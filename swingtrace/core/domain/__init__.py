"""
Domain Models

Pure data structures representing swing trajectory analysis concepts.
No external dependencies - just Python dataclasses and enums.
"""

from .errors import SwingAnalysisError, InsufficientDataError, MissingLandmarkError
from .pose import PoseLandmark, PoseFrame, BodyPart
from .trajectory import TrajectoryPoint, Trajectory, TrackedPoint, SwingTrajectory
from .analysis import (
    PhaseName,
    SwingPhase,
    RotationMetrics,
    WeightDistribution,
    PhaseMetrics,
    PhaseAnalysis,
    TrajectoryMetrics,
    VelocityProfile,
    SwingPathAnalysis,
    KeyMoments,
    TrajectoryVisualization,
    SwingAnalysis,
)

__all__ = [
    "SwingAnalysisError",
    "InsufficientDataError",
    "MissingLandmarkError",
    "PoseLandmark",
    "PoseFrame",
    "BodyPart",
    "TrajectoryPoint",
    "Trajectory",
    "TrackedPoint",
    "SwingTrajectory",
    "PhaseName",
    "SwingPhase",
    "RotationMetrics",
    "WeightDistribution",
    "PhaseMetrics",
    "PhaseAnalysis",
    "TrajectoryMetrics",
    "VelocityProfile",
    "SwingPathAnalysis",
    "KeyMoments",
    "TrajectoryVisualization",
    "SwingAnalysis",
]

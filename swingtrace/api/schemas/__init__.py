"""
API Schemas

Pydantic models for request/response validation.
"""

from .pose import (
    LandmarkSchema,
    PoseFrameSchema,
    AnalyzeFramesRequest,
)

from .analysis import (
    PhaseNameEnum,
    TrajectoryPointSchema,
    TrajectoryMetricsSchema,
    VelocityProfileSchema,
    SwingPhaseSchema,
    RotationSchema,
    WeightDistributionSchema,
    PhaseMetricsSchema,
    PhaseAnalysisSchema,
    SwingPathSchema,
    KeyMomentsSchema,
    SwingTrajectorySchema,
    SwingAnalysisResponse,
    TrajectoryAnalyzeRequest,
    TrajectoryAnalyzeResponse,
    HealthResponse,
)

__all__ = [
    # Pose schemas
    "LandmarkSchema",
    "PoseFrameSchema",
    "AnalyzeFramesRequest",
    # Analysis schemas
    "PhaseNameEnum",
    "TrajectoryPointSchema",
    "TrajectoryMetricsSchema",
    "VelocityProfileSchema",
    "SwingPhaseSchema",
    "RotationSchema",
    "WeightDistributionSchema",
    "PhaseMetricsSchema",
    "PhaseAnalysisSchema",
    "SwingPathSchema",
    "KeyMomentsSchema",
    "SwingTrajectorySchema",
    "SwingAnalysisResponse",
    "TrajectoryAnalyzeRequest",
    "TrajectoryAnalyzeResponse",
    "HealthResponse",
]

"""
REST API Routes

FastAPI routes for golf swing analysis.
Handles HTTP requests for frame-sequence analysis and single-trajectory
visualization.
"""

import logging
from dataclasses import asdict
from typing import List, Optional
from fastapi import APIRouter, HTTPException

from .. import __version__
from .schemas import (
    AnalyzeFramesRequest,
    SwingAnalysisResponse,
    SwingTrajectorySchema,
    PhaseAnalysisSchema,
    RotationSchema,
    PhaseMetricsSchema,
    SwingPhaseSchema,
    PhaseNameEnum,
    TrajectoryMetricsSchema,
    VelocityProfileSchema,
    SwingPathSchema,
    KeyMomentsSchema,
    TrajectoryPointSchema,
    TrajectoryAnalyzeRequest,
    TrajectoryAnalyzeResponse,
    HealthResponse,
)
from ..core.services import SwingAnalyzer, TrajectoryAnalyzer, KeyMomentExtractor
from ..core.domain import (
    InsufficientDataError,
    PhaseName,
    PhaseMetrics,
    PoseFrame,
    PoseLandmark,
    RotationMetrics,
    SwingAnalysis,
    SwingPhase,
    TrajectoryPoint,
    WeightDistribution,
)

# Configure logging
logger = logging.getLogger(__name__)

# Create router
router = APIRouter()

# =============================================================================
# Health Check
# =============================================================================

@router.get(
    "/health",
    response_model=HealthResponse,
    tags=["Health"],
    summary="Health check endpoint"
)
async def health_check() -> HealthResponse:
    """
    Check if the API is running.

    Returns:
        Health status and version information
    """
    return HealthResponse(status="healthy", version=__version__)


# =============================================================================
# Swing Analysis
# =============================================================================

@router.post(
    "/analysis/frames",
    response_model=SwingAnalysisResponse,
    tags=["Swing Analysis"],
    summary="Analyze a swing from pre-detected poses"
)
def analyze_frames(request: AnalyzeFramesRequest) -> SwingAnalysisResponse:
    """
    Analyze a golf swing from pose frames detected by the client.

    The frames will be:
    1. Turned into wrist, shoulder, hip and clubhead trajectories
    2. Segmented into swing phases
    3. Measured for kinematics, swing path and key moments

    Args:
        request: Pose frames in time order (at least 10)

    Returns:
        Complete swing analysis
    """
    frames = _frames_from_request(request)

    try:
        result = SwingAnalyzer().analyze_frames(frames)
        return _convert_analysis_to_response(result)

    except InsufficientDataError as e:
        logger.error(f"Swing analysis rejected: {e}")
        raise HTTPException(status_code=422, detail=str(e))

    except Exception as e:
        logger.error(f"Swing analysis failed: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.post(
    "/trajectory/analyze",
    response_model=TrajectoryAnalyzeResponse,
    tags=["Trajectory"],
    summary="Visualization data for a single trajectory"
)
def analyze_trajectory(request: TrajectoryAnalyzeRequest) -> TrajectoryAnalyzeResponse:
    """
    Compute the plotting bundle and key moments for one trajectory.

    Any length is accepted; empty and single-point trajectories produce
    neutral results.
    """
    points = [
        TrajectoryPoint(x=p.x, y=p.y, z=p.z, timestamp=p.timestamp, frame=p.frame, filled=p.filled)
        for p in request.points
    ]
    phases = [_phase_from_schema(phase) for phase in request.phases]

    try:
        visualization = TrajectoryAnalyzer().create_visualization_data(points, phases)
        key_moments = KeyMomentExtractor().find_key_moments(points)
    except Exception as e:
        logger.error(f"Trajectory analysis failed: {e}")
        raise HTTPException(status_code=500, detail=str(e))

    return TrajectoryAnalyzeResponse(
        points=_convert_points(visualization.points),
        smoothed_points=_convert_points(visualization.smoothed_points),
        velocity_profile=VelocityProfileSchema(**asdict(visualization.velocity_profile)),
        phases=[_convert_phase(phase) for phase in visualization.phases],
        metrics=TrajectoryMetricsSchema(**asdict(visualization.metrics)),
        key_moments=KeyMomentsSchema(**asdict(key_moments)),
    )


# =============================================================================
# Helper Functions
# =============================================================================

def _frames_from_request(request: AnalyzeFramesRequest) -> List[PoseFrame]:
    """Convert API pose frames to domain PoseFrames."""
    frames = []
    for frame in request.frames:
        landmarks = [
            PoseLandmark(x=lm.x, y=lm.y, z=lm.z, visibility=lm.visibility) if lm is not None else None
            for lm in frame.landmarks
        ]
        frames.append(PoseFrame(
            landmarks=landmarks,
            timestamp_ms=frame.timestamp_ms,
            frame_number=frame.frame_number,
        ))
    return frames


def _phase_from_schema(phase: SwingPhaseSchema) -> SwingPhase:
    return SwingPhase(
        name=PhaseName(phase.name.value),
        start_frame=phase.start_frame,
        end_frame=phase.end_frame,
        start_time=phase.start_time,
        end_time=phase.end_time,
        duration=phase.duration,
        color=phase.color,
        description=phase.description,
        confidence=phase.confidence,
        key_metrics=_metrics_from_schema(phase.key_metrics),
    )


def _metrics_from_schema(metrics: Optional[PhaseMetricsSchema]) -> PhaseMetrics:
    if metrics is None:
        return PhaseMetrics()

    club_position = None
    if metrics.club_position is not None:
        club_position = TrajectoryPoint(**metrics.club_position.model_dump())

    return PhaseMetrics(
        club_position=club_position,
        body_rotation=RotationMetrics(**metrics.body_rotation.model_dump()),
        weight_distribution=WeightDistribution(**metrics.weight_distribution.model_dump()),
        velocity=metrics.velocity,
        acceleration=metrics.acceleration,
    )


def _convert_phase(phase: SwingPhase) -> SwingPhaseSchema:
    return SwingPhaseSchema(
        name=PhaseNameEnum(phase.name.value),
        start_frame=phase.start_frame,
        end_frame=phase.end_frame,
        start_time=phase.start_time,
        end_time=phase.end_time,
        duration=phase.duration,
        color=phase.color,
        description=phase.description,
        confidence=phase.confidence,
        key_metrics=PhaseMetricsSchema(**asdict(phase.key_metrics)),
    )


def _convert_points(points: List[TrajectoryPoint]) -> List[TrajectoryPointSchema]:
    return [TrajectoryPointSchema(**asdict(p)) for p in points]


def _convert_analysis_to_response(result: SwingAnalysis) -> SwingAnalysisResponse:
    """Convert domain SwingAnalysis to API response schema."""
    phase_analysis = result.phase_analysis

    return SwingAnalysisResponse(
        id=result.id,
        timestamp=result.timestamp,
        frame_count=result.frame_count,
        duration_ms=result.duration_ms,
        trajectory=SwingTrajectorySchema(**asdict(result.trajectory)),
        phase_analysis=PhaseAnalysisSchema(
            phases=[_convert_phase(phase) for phase in phase_analysis.phases],
            impact_frame=phase_analysis.impact_frame,
            total_duration=phase_analysis.total_duration,
            tempo_ratio=phase_analysis.tempo_ratio,
            rotation=RotationSchema(**asdict(phase_analysis.rotation)),
            spine_tilt=phase_analysis.spine_tilt,
            weight_transfer=phase_analysis.weight_transfer,
        ),
        wrist_metrics=TrajectoryMetricsSchema(**asdict(result.wrist_metrics)),
        clubhead_metrics=TrajectoryMetricsSchema(**asdict(result.clubhead_metrics)),
        swing_path=SwingPathSchema(**asdict(result.swing_path)),
        velocity_profile=VelocityProfileSchema(**asdict(result.velocity_profile)),
        key_moments=KeyMomentsSchema(**asdict(result.key_moments)),
        processing_time_ms=result.processing_time_ms,
    )

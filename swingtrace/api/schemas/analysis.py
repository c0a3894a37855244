"""
Analysis API Schemas

Pydantic models for swing analysis API requests and responses.
"""

from pydantic import BaseModel, Field
from typing import List, Optional
from enum import Enum
from datetime import datetime


class PhaseNameEnum(str, Enum):
    """Swing phases for API."""
    SETUP = "Setup"
    BACKSWING = "Backswing"
    TRANSITION = "Transition"
    IMPACT = "Impact"
    FOLLOW_THROUGH = "Follow-through"


class TrajectoryPointSchema(BaseModel):
    """
    One sample of a trajectory.

    Coordinates are normalized image units; derived points such as the
    clubhead may fall outside 0-1.
    """
    x: float = Field(..., description="Horizontal position")
    y: float = Field(..., description="Vertical position (grows downward)")
    z: float = Field(0.0, description="Depth")
    timestamp: float = Field(..., description="Time in milliseconds")
    frame: int = Field(..., ge=0, description="Frame index")
    filled: bool = Field(False, description="Interpolated over a missing landmark")

    class Config:
        json_schema_extra = {
            "example": {
                "x": 0.52,
                "y": 0.41,
                "z": -0.05,
                "timestamp": 333.3,
                "frame": 10,
                "filled": False
            }
        }


class TrajectoryMetricsSchema(BaseModel):
    """
    Kinematic summary of one trajectory.

    Velocities are in normalized units per millisecond.
    """
    total_distance: float = Field(..., description="Path length")
    max_velocity: float = Field(..., description="Peak speed")
    avg_velocity: float = Field(..., description="Mean speed")
    max_acceleration: float = Field(..., description="Peak acceleration magnitude")
    avg_acceleration: float = Field(..., description="Mean acceleration magnitude")
    peak_frame: int = Field(..., description="Index of the peak velocity sample")
    smoothness: float = Field(..., ge=0.0, le=1.0, description="1 = no detectable jerk")


class VelocityProfileSchema(BaseModel):
    """Velocity and acceleration series for plotting."""
    frames: List[int] = Field(default_factory=list)
    velocities: List[float] = Field(default_factory=list)
    accelerations: List[float] = Field(default_factory=list)
    peak_velocity_frame: int = Field(0)
    peak_acceleration_frame: int = Field(0)


class RotationSchema(BaseModel):
    """Shoulder and hip turn between two frames (degrees)."""
    shoulder: float = Field(0.0, ge=0.0, le=180.0)
    hip: float = Field(0.0, ge=0.0, le=180.0)


class WeightDistributionSchema(BaseModel):
    """Share of the stance on each foot, in percent."""
    left: float = Field(50.0, ge=0.0, le=100.0)
    right: float = Field(50.0, ge=0.0, le=100.0)


class PhaseMetricsSchema(BaseModel):
    """Body and club measurements for one phase."""
    club_position: Optional[TrajectoryPointSchema] = Field(None, description="Clubhead at the middle frame")
    body_rotation: RotationSchema = Field(default_factory=RotationSchema)
    weight_distribution: WeightDistributionSchema = Field(default_factory=WeightDistributionSchema)
    velocity: float = Field(0.0, description="Wrist speed from phase start to end")
    acceleration: float = Field(0.0, description="Wrist speed change around the middle frame")


class SwingPhaseSchema(BaseModel):
    """
    A named frame range of the swing.

    Times are only required in responses; clients posting phases for
    visualization may send frame ranges alone.
    """
    name: PhaseNameEnum = Field(..., description="Phase name")
    start_frame: int = Field(..., ge=0, description="First frame")
    end_frame: int = Field(..., ge=0, description="Last frame (shared with the next phase)")
    start_time: float = Field(0.0, description="Start time in milliseconds")
    end_time: float = Field(0.0, description="End time in milliseconds")
    duration: float = Field(0.0, description="Duration in milliseconds")
    color: str = Field("", description="Display color")
    description: str = Field("", description="Human-readable description")
    confidence: float = Field(0.0, ge=0.0, le=1.0, description="Detection confidence")
    key_metrics: Optional[PhaseMetricsSchema] = Field(None, description="Per-phase measurements")

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Backswing",
                "start_frame": 6,
                "end_frame": 33,
                "start_time": 200.0,
                "end_time": 1100.0,
                "duration": 900.0,
                "color": "#10B981",
                "description": "Takeaway to top of backswing",
                "confidence": 0.8
            }
        }


class PhaseAnalysisSchema(BaseModel):
    """
    Phase segmentation result.
    """
    phases: List[SwingPhaseSchema] = Field(..., description="Ordered phases covering every frame")
    impact_frame: int = Field(..., description="Detected impact frame")
    total_duration: float = Field(..., description="Swing duration in milliseconds")
    tempo_ratio: float = Field(..., description="Backswing / downswing duration")
    rotation: RotationSchema = Field(..., description="Shoulder and hip turn")
    spine_tilt: float = Field(..., description="Spine tilt at impact (degrees)")
    weight_transfer: float = Field(..., ge=0.0, le=1.0, description="Stance stability, setup to impact")


class SwingPathSchema(BaseModel):
    """Clubhead path classification."""
    clubhead_path: List[TrajectoryPointSchema] = Field(default_factory=list)
    swing_plane: float = Field(..., ge=-180.0, le=180.0, description="Start-to-end angle (degrees)")
    path_consistency: float = Field(..., ge=0.0, le=1.0)
    path_deviation: float = Field(..., ge=0.0, description="Mean distance from the straight path")
    inside_out: bool
    outside_in: bool
    on_plane: bool


class KeyMomentsSchema(BaseModel):
    """Frame indices of the key swing moments."""
    takeaway: int
    top: int
    impact: int
    finish: int


class SwingTrajectorySchema(BaseModel):
    """All tracked trajectories of a swing, sharing one frame index."""
    right_wrist: List[TrajectoryPointSchema] = Field(default_factory=list)
    left_wrist: List[TrajectoryPointSchema] = Field(default_factory=list)
    right_shoulder: List[TrajectoryPointSchema] = Field(default_factory=list)
    left_shoulder: List[TrajectoryPointSchema] = Field(default_factory=list)
    right_hip: List[TrajectoryPointSchema] = Field(default_factory=list)
    left_hip: List[TrajectoryPointSchema] = Field(default_factory=list)
    clubhead: List[TrajectoryPointSchema] = Field(default_factory=list)


class SwingAnalysisResponse(BaseModel):
    """
    Complete swing analysis result.

    This is the main response from the analyze endpoint.
    """
    # Identification
    id: str = Field(..., description="Unique analysis ID")
    timestamp: datetime = Field(..., description="When analysis was performed")

    # Input info
    frame_count: int = Field(..., description="Frames analyzed")
    duration_ms: float = Field(..., description="Swing duration in milliseconds")

    # Technical data
    trajectory: SwingTrajectorySchema
    phase_analysis: PhaseAnalysisSchema
    wrist_metrics: TrajectoryMetricsSchema
    clubhead_metrics: TrajectoryMetricsSchema
    swing_path: SwingPathSchema
    velocity_profile: VelocityProfileSchema
    key_moments: KeyMomentsSchema

    processing_time_ms: float = Field(..., description="Time taken to analyze")

    class Config:
        json_schema_extra = {
            "example": {
                "id": "550e8400-e29b-41d4-a716-446655440000",
                "timestamp": "2024-01-15T10:30:00Z",
                "frame_count": 60,
                "duration_ms": 1966.5,
                "key_moments": {"takeaway": 0, "top": 41, "impact": 41, "finish": 59}
            }
        }


class TrajectoryAnalyzeRequest(BaseModel):
    """
    Request to analyze a single trajectory.

    Phases are passed through to the response for plotting.
    """
    points: List[TrajectoryPointSchema] = Field(..., description="Trajectory in time order")
    phases: List[SwingPhaseSchema] = Field(default_factory=list, description="Phases to overlay")


class TrajectoryAnalyzeResponse(BaseModel):
    """
    Visualization data and key moments for a single trajectory.
    """
    points: List[TrajectoryPointSchema]
    smoothed_points: List[TrajectoryPointSchema]
    velocity_profile: VelocityProfileSchema
    phases: List[SwingPhaseSchema]
    metrics: TrajectoryMetricsSchema
    key_moments: KeyMomentsSchema


class HealthResponse(BaseModel):
    """
    Health check response.
    """
    status: str = Field("healthy", description="Service status")
    version: str = Field(..., description="API version")

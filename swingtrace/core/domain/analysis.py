"""
Swing Analysis Domain Models

Data structures for the results of trajectory analysis: kinematics,
phases, swing path and key moments.

All records are plain dataclasses so callers can serialize them with
dataclasses.asdict without any behavior attached.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional

from .trajectory import SwingTrajectory, Trajectory, TrajectoryPoint


class PhaseName(Enum):
    """
    The five phases a swing is segmented into, in order.

    - SETUP: Address position before the takeaway
    - BACKSWING: Takeaway to the top of the backswing
    - TRANSITION: Top of the backswing down to impact (the downswing)
    - IMPACT: Club meets ball and the frames just after
    - FOLLOW_THROUGH: Deceleration to the finish
    """
    SETUP = "Setup"
    BACKSWING = "Backswing"
    TRANSITION = "Transition"
    IMPACT = "Impact"
    FOLLOW_THROUGH = "Follow-through"


@dataclass
class RotationMetrics:
    """Shoulder and hip turn from setup to the top, in degrees (0-180)."""
    shoulder: float = 0.0
    hip: float = 0.0


@dataclass
class WeightDistribution:
    """Share of the stance on each foot, in percent (left + right = 100)."""
    left: float = 50.0
    right: float = 50.0


@dataclass
class PhaseMetrics:
    """
    Body and club measurements for one phase.

    Attributes:
        club_position: Clubhead at the middle frame of the phase
        body_rotation: Shoulder and hip turn from the phase start to its middle
        weight_distribution: Stance split at the middle frame
        velocity: Right-wrist speed from phase start to end (units per ms)
        acceleration: Right-wrist speed change around the middle frame
    """
    club_position: Optional[TrajectoryPoint] = None
    body_rotation: RotationMetrics = field(default_factory=RotationMetrics)
    weight_distribution: WeightDistribution = field(default_factory=WeightDistribution)
    velocity: float = 0.0
    acceleration: float = 0.0


@dataclass
class SwingPhase:
    """
    A named contiguous frame range.

    Consecutive phases share their boundary frame:
    phases[i].end_frame == phases[i + 1].start_frame.
    """
    name: PhaseName
    start_frame: int
    end_frame: int
    start_time: float
    end_time: float
    duration: float
    color: str = ""
    description: str = ""
    confidence: float = 0.0
    key_metrics: PhaseMetrics = field(default_factory=PhaseMetrics)

    def contains(self, frame: int) -> bool:
        return self.start_frame <= frame <= self.end_frame


@dataclass
class PhaseAnalysis:
    """
    Output of phase segmentation.

    Attributes:
        phases: Ordered phases covering every frame
        impact_frame: Detected impact frame
        total_duration: Last timestamp minus first, in milliseconds
        tempo_ratio: Backswing duration / downswing duration
        rotation: Shoulder and hip turn at the top of the backswing
        spine_tilt: Spine tilt at impact, in degrees
        weight_transfer: Stance stability from setup to impact (0-1)
    """
    phases: list[SwingPhase] = field(default_factory=list)
    impact_frame: int = 0
    total_duration: float = 0.0
    tempo_ratio: float = 1.0
    rotation: RotationMetrics = field(default_factory=RotationMetrics)
    spine_tilt: float = 0.0
    weight_transfer: float = 0.0

    def get_phase(self, name: PhaseName) -> Optional[SwingPhase]:
        """Get a phase by name."""
        for phase in self.phases:
            if phase.name == name:
                return phase
        return None


@dataclass
class TrajectoryMetrics:
    """
    Kinematic summary of one trajectory.

    peak_frame indexes the velocity array (length n-1), so velocity sample
    k spans points k and k+1.
    """
    total_distance: float = 0.0
    max_velocity: float = 0.0
    avg_velocity: float = 0.0
    max_acceleration: float = 0.0
    avg_acceleration: float = 0.0
    peak_frame: int = 0
    smoothness: float = 0.0


@dataclass
class VelocityProfile:
    """Velocity and acceleration series for plotting."""
    frames: list[int] = field(default_factory=list)
    velocities: list[float] = field(default_factory=list)
    accelerations: list[float] = field(default_factory=list)
    peak_velocity_frame: int = 0
    peak_acceleration_frame: int = 0


@dataclass
class SwingPathAnalysis:
    """Clubhead path classification."""
    clubhead_path: Trajectory = field(default_factory=list)
    swing_plane: float = 0.0
    path_consistency: float = 1.0
    path_deviation: float = 0.0
    inside_out: bool = False
    outside_in: bool = False
    on_plane: bool = True


@dataclass
class KeyMoments:
    """Frame indices of the key swing moments (takeaway <= top <= impact <= finish)."""
    takeaway: int = 0
    top: int = 0
    impact: int = 0
    finish: int = 0


@dataclass
class TrajectoryVisualization:
    """Everything a trajectory plot needs."""
    points: Trajectory
    smoothed_points: Trajectory
    velocity_profile: VelocityProfile
    phases: list[SwingPhase]
    metrics: TrajectoryMetrics


@dataclass
class SwingAnalysis:
    """
    Complete analysis of one swing.

    This is the main result object returned by SwingAnalyzer.
    """
    # Identification
    id: str
    timestamp: datetime

    # Input info
    frame_count: int
    duration_ms: float

    # Technical data
    trajectory: SwingTrajectory
    phase_analysis: PhaseAnalysis
    wrist_metrics: TrajectoryMetrics
    clubhead_metrics: TrajectoryMetrics
    swing_path: SwingPathAnalysis
    velocity_profile: VelocityProfile
    key_moments: KeyMoments

    processing_time_ms: float = 0.0

    @property
    def phases(self) -> list[SwingPhase]:
        return self.phase_analysis.phases

    @property
    def tempo_ratio(self) -> float:
        return self.phase_analysis.tempo_ratio

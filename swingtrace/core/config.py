"""
Engine Configuration

Every heuristic threshold the services use, with its default.
Services take an optional SwingEngineConfig and fall back to DEFAULT_CONFIG.
"""

from dataclasses import dataclass
from enum import Enum

from .domain.trajectory import TrackedPoint


class ClubheadEstimation(Enum):
    """How the clubhead position is derived from the arms."""
    MIDPOINT = "midpoint"                    # Midpoint of the two wrists
    FOREARM_EXTENSION = "forearm_extension"  # Right wrist pushed along elbow -> wrist


@dataclass(frozen=True)
class SwingEngineConfig:
    """
    Tunable constants for trajectory and phase analysis.

    Fractions are of the total frame count unless noted otherwise.
    """
    # Input validation
    min_frames: int = 10

    # Phase boundaries
    setup_fraction: float = 0.10            # Setup ends at 10% of frames
    backswing_fraction: float = 0.80        # Backswing ends at 80% of the impact frame
    follow_through_fraction: float = 1.20   # Follow-through starts at 120% of the impact frame
    impact_default_fraction: float = 0.70   # Impact fallback when no acceleration peak exists
    min_phase_frames: int = 2
    impact_reference: TrackedPoint = TrackedPoint.RIGHT_WRIST
    rotation_cap_degrees: float = 180.0

    # Swing path
    on_plane_tolerance: float = 10.0        # Degrees

    # Kinematics
    smoothing_window: int = 5

    # Key moments
    min_velocity_threshold: float = 0.001   # Normalized units per ms
    top_search_fraction: float = 0.70
    impact_search_fraction: float = 0.50

    # Clubhead derivation
    clubhead_estimation: ClubheadEstimation = ClubheadEstimation.MIDPOINT
    clubhead_extension: float = 1.0         # Forearm lengths beyond the wrist


DEFAULT_CONFIG = SwingEngineConfig()

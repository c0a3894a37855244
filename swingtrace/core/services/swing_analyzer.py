"""
Swing Analyzer Service

High-level service that orchestrates trajectory building, phase
segmentation, kinematics, swing path and key moments to provide a
complete golf swing analysis.

This is the main entry point for analyzing golf swings.
"""

import logging
import time
import uuid
from datetime import datetime
from typing import List, Optional

from ..config import DEFAULT_CONFIG, SwingEngineConfig
from ..domain.analysis import SwingAnalysis
from ..domain.errors import InsufficientDataError
from ..domain.pose import PoseFrame
from .key_moments import KeyMomentExtractor
from .kinematics import TrajectoryAnalyzer
from .phase_segmenter import PhaseSegmenter
from .swing_path import SwingPathClassifier
from .trajectory_builder import TrajectoryBuilder

logger = logging.getLogger(__name__)


class SwingAnalyzer:
    """
    Analyzes golf swings from pose frame sequences.

    This service:
    1. Builds wrist, shoulder, hip and clubhead trajectories
    2. Segments the swing into phases (tempo, rotation, posture)
    3. Computes wrist and clubhead kinematics
    4. Classifies the clubhead path
    5. Finds the key moments

    Usage:
        analyzer = SwingAnalyzer()
        result = analyzer.analyze_frames(frames)
        print(f"Tempo: {result.tempo_ratio:.1f}:1")
    """

    def __init__(self, config: Optional[SwingEngineConfig] = None):
        """Initialize the swing analyzer and its services."""
        self.config = config or DEFAULT_CONFIG
        self.trajectory_builder = TrajectoryBuilder(self.config)
        self.trajectory_analyzer = TrajectoryAnalyzer(self.config)
        self.phase_segmenter = PhaseSegmenter(self.config)
        self.path_classifier = SwingPathClassifier(self.config)
        self.key_moment_extractor = KeyMomentExtractor(self.config)

    # -------------------------------------------------------------------------
    # Main Analysis Methods
    # -------------------------------------------------------------------------

    def analyze_frames(self, frames: List[PoseFrame]) -> SwingAnalysis:
        """
        Analyze a golf swing from pre-detected pose frames.

        Args:
            frames: List of PoseFrame objects in time order

        Returns:
            Complete SwingAnalysis

        Raises:
            InsufficientDataError: Fewer than config.min_frames frames
        """
        if len(frames) < self.config.min_frames:
            raise InsufficientDataError(len(frames), self.config.min_frames)

        started = time.perf_counter()

        trajectory = self.trajectory_builder.build(frames)
        timestamps = self.trajectory_builder.timestamps(frames)

        phase_analysis = self.phase_segmenter.segment(frames, trajectory, timestamps)

        wrist_metrics = self.trajectory_analyzer.analyze_trajectory(trajectory.right_wrist)
        clubhead_metrics = self.trajectory_analyzer.analyze_trajectory(trajectory.clubhead)
        swing_path = self.path_classifier.analyze_swing_path(trajectory, phase_analysis.phases)
        velocity_profile = self.trajectory_analyzer.create_velocity_profile(trajectory.clubhead)
        key_moments = self.key_moment_extractor.find_key_moments(trajectory.right_wrist)

        processing_time_ms = (time.perf_counter() - started) * 1000

        logger.info(
            f"Analyzed {len(frames)} frames: impact at frame {phase_analysis.impact_frame}, "
            f"tempo {phase_analysis.tempo_ratio:.2f}, {processing_time_ms:.1f}ms"
        )

        return SwingAnalysis(
            id=str(uuid.uuid4()),
            timestamp=datetime.now(),
            frame_count=len(frames),
            duration_ms=phase_analysis.total_duration,
            trajectory=trajectory,
            phase_analysis=phase_analysis,
            wrist_metrics=wrist_metrics,
            clubhead_metrics=clubhead_metrics,
            swing_path=swing_path,
            velocity_profile=velocity_profile,
            key_moments=key_moments,
            processing_time_ms=processing_time_ms,
        )

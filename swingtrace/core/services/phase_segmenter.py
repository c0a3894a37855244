"""
Phase Segmenter Service

Splits a swing into Setup, Backswing, Transition, Impact and
Follow-through in a single deterministic pass.

Boundaries are proportional to the detected impact frame rather than
learned, so they are cheap to compute and easy to tune through
SwingEngineConfig.
"""

import logging
import math
from typing import List, Optional, Sequence

from ..config import DEFAULT_CONFIG, SwingEngineConfig
from ..domain.analysis import (
    PhaseAnalysis,
    PhaseMetrics,
    PhaseName,
    RotationMetrics,
    SwingPhase,
    WeightDistribution,
)
from ..domain.errors import InsufficientDataError, MissingLandmarkError
from ..domain.pose import BodyPart, PoseFrame
from ..domain.trajectory import SwingTrajectory, TrajectoryPoint
from .kinematics import TrajectoryAnalyzer

logger = logging.getLogger(__name__)


class PhaseSegmenter:
    """
    Segments a swing into its five phases.

    Usage:
        segmenter = PhaseSegmenter()
        analysis = segmenter.segment(frames, swing)
        for phase in analysis.phases:
            print(phase.name.value, phase.start_frame, phase.end_frame)
    """

    # -------------------------------------------------------------------------
    # Display metadata and detection confidence per phase
    # -------------------------------------------------------------------------

    PHASE_STYLES = {
        PhaseName.SETUP: ("#3B82F6", "Initial setup and address position", 0.9),
        PhaseName.BACKSWING: ("#10B981", "Takeaway to top of backswing", 0.8),
        PhaseName.TRANSITION: ("#F59E0B", "Top of swing down to impact", 0.8),
        PhaseName.IMPACT: ("#EF4444", "Ball contact moment", 0.9),
        PhaseName.FOLLOW_THROUGH: ("#8B5CF6", "Follow-through to finish", 0.8),
    }

    def __init__(self, config: Optional[SwingEngineConfig] = None):
        self.config = config or DEFAULT_CONFIG

    # -------------------------------------------------------------------------
    # Main Segmentation
    # -------------------------------------------------------------------------

    def segment(
        self,
        frames: Sequence[PoseFrame],
        trajectory: SwingTrajectory,
        timestamps: Optional[Sequence[float]] = None,
    ) -> PhaseAnalysis:
        """
        Segment a swing into phases and derive tempo and rotation.

        Args:
            frames: Pose frames in time order
            trajectory: Trajectories built from the same frames
            timestamps: Per-frame timestamps in ms (default: from frames)

        Returns:
            PhaseAnalysis whose phases cover every frame

        Raises:
            InsufficientDataError: Fewer than config.min_frames frames
        """
        total_frames = len(frames)
        if total_frames < self.config.min_frames:
            raise InsufficientDataError(total_frames, self.config.min_frames)

        if timestamps is None:
            timestamps = [float(frame.timestamp_ms) for frame in frames]
        if len(timestamps) != total_frames or len(trajectory) != total_frames:
            raise ValueError(
                f"Frame count mismatch: {total_frames} frames, "
                f"{len(timestamps)} timestamps, {len(trajectory)} trajectory points"
            )

        detected_impact = self.detect_impact_frame(trajectory[self.config.impact_reference])
        cuts = self._cut_points(total_frames, detected_impact)

        # The Impact phase always starts at the reported impact frame
        impact_frame = cuts[3]
        if impact_frame != detected_impact:
            logger.debug(f"Impact moved from frame {detected_impact} to {impact_frame} to fit phase floors")

        phases = [
            self._create_phase(name, start, end, timestamps, frames, trajectory)
            for name, start, end in zip(PhaseName, cuts, cuts[1:])
        ]

        backswing_top = cuts[2]
        rotation = self.calculate_rotation(frames[0], frames[backswing_top])
        tempo_ratio = self.calculate_tempo_ratio(phases)

        logger.debug(
            "Phases: " + ", ".join(
                f"{p.name.value} {p.start_frame}-{p.end_frame} ({p.duration:.0f}ms)"
                for p in phases
            )
        )

        return PhaseAnalysis(
            phases=phases,
            impact_frame=impact_frame,
            total_duration=timestamps[-1] - timestamps[0],
            tempo_ratio=tempo_ratio,
            rotation=rotation,
            spine_tilt=self.calculate_spine_tilt(frames[impact_frame]),
            weight_transfer=self.calculate_weight_transfer(frames[0], frames[impact_frame]),
        )

    # -------------------------------------------------------------------------
    # Impact Detection
    # -------------------------------------------------------------------------

    def detect_impact_frame(self, points: Sequence[TrajectoryPoint]) -> int:
        """
        Frame of the largest speed change.

        Scans every consecutive triple (i-1, i, i+1), skipping triples that
        touch a filled point. Falls back to impact_default_fraction of the
        sequence when no triple shows any speed change, and never returns
        the first or last frame. Fewer than 3 points have no interior triple
        to scan, so frame 0 is returned.
        """
        n = len(points)
        if n < 3:
            return 0

        impact_frame = int(n * self.config.impact_default_fraction)
        max_change = 0.0

        for i in range(1, n - 1):
            if points[i - 1].filled or points[i].filled or points[i + 1].filled:
                continue
            change = abs(
                TrajectoryAnalyzer.velocity(points[i], points[i + 1]) -
                TrajectoryAnalyzer.velocity(points[i - 1], points[i])
            )
            if change > max_change:
                max_change = change
                impact_frame = i

        if max_change == 0:
            logger.debug(f"No acceleration peak found, impact defaults to frame {impact_frame}")

        return max(1, min(impact_frame, n - 2))

    # -------------------------------------------------------------------------
    # Boundaries
    # -------------------------------------------------------------------------

    def _cut_points(self, total_frames: int, impact_frame: int) -> List[int]:
        """
        Phase boundaries [0, setup_end, backswing_end, impact, follow_start, last].

        Interior cuts are pushed apart by at least min_phase_frames (shrunk
        for short swings) so each phase spans at least one frame step.
        """
        last = total_frames - 1
        cuts = [
            0,
            int(total_frames * self.config.setup_fraction),
            int(impact_frame * self.config.backswing_fraction),
            impact_frame,
            min(int(impact_frame * self.config.follow_through_fraction), last),
            last,
        ]

        phase_count = len(cuts) - 1
        floor = max(1, min(self.config.min_phase_frames, last // phase_count))

        for i in range(1, phase_count):
            lowest = cuts[i - 1] + floor
            highest = last - (phase_count - i) * floor
            cuts[i] = min(max(cuts[i], lowest), highest)

        return cuts

    def _create_phase(
        self,
        name: PhaseName,
        start_frame: int,
        end_frame: int,
        timestamps: Sequence[float],
        frames: Sequence[PoseFrame],
        trajectory: SwingTrajectory,
    ) -> SwingPhase:
        color, description, confidence = self.PHASE_STYLES[name]
        start_time = float(timestamps[start_frame])
        end_time = float(timestamps[end_frame])
        return SwingPhase(
            name=name,
            start_frame=start_frame,
            end_frame=end_frame,
            start_time=start_time,
            end_time=end_time,
            duration=end_time - start_time,
            color=color,
            description=description,
            confidence=confidence,
            key_metrics=self.calculate_phase_metrics(frames, trajectory, start_frame, end_frame),
        )

    def calculate_phase_metrics(
        self,
        frames: Sequence[PoseFrame],
        trajectory: SwingTrajectory,
        start_frame: int,
        end_frame: int,
    ) -> PhaseMetrics:
        """
        Measurements for one phase.

        Club position and weight distribution are read at the middle frame,
        body rotation from the start to the middle frame. Wrist velocity
        needs a span of at least 2 frames and acceleration at least 3;
        shorter phases report 0.
        """
        mid_frame = (start_frame + end_frame) // 2
        span = end_frame - start_frame
        wrist = trajectory.right_wrist

        velocity = 0.0
        if span >= 2:
            velocity = TrajectoryAnalyzer.velocity(wrist[start_frame], wrist[end_frame])

        acceleration = 0.0
        if span >= 3:
            acceleration = TrajectoryAnalyzer.acceleration(
                wrist[start_frame], wrist[mid_frame], wrist[end_frame]
            )

        return PhaseMetrics(
            club_position=trajectory.clubhead[mid_frame] if trajectory.clubhead else None,
            body_rotation=self.calculate_rotation(frames[start_frame], frames[mid_frame]),
            weight_distribution=self.calculate_weight_distribution(frames[mid_frame]),
            velocity=velocity,
            acceleration=acceleration,
        )

    # -------------------------------------------------------------------------
    # Derived Metrics
    # -------------------------------------------------------------------------

    @staticmethod
    def calculate_tempo_ratio(phases: Sequence[SwingPhase]) -> float:
        """
        Backswing duration divided by downswing (Transition) duration.

        Ideal tempo is roughly 3:1. Returns 1.0 if either phase is missing
        or the downswing has no duration.
        """
        backswing = next((p for p in phases if p.name == PhaseName.BACKSWING), None)
        downswing = next((p for p in phases if p.name == PhaseName.TRANSITION), None)

        if backswing is None or downswing is None or downswing.duration <= 0:
            return 1.0

        return backswing.duration / downswing.duration

    def calculate_rotation(self, setup: PoseFrame, top: PoseFrame) -> RotationMetrics:
        """
        Shoulder and hip turn between setup and the top of the backswing.

        Each turn is the change in orientation of the left -> right line,
        in degrees, capped at rotation_cap_degrees. A turn whose landmarks
        are missing in either frame is 0.
        """
        return RotationMetrics(
            shoulder=self._line_turn(setup, top, BodyPart.LEFT_SHOULDER, BodyPart.RIGHT_SHOULDER),
            hip=self._line_turn(setup, top, BodyPart.LEFT_HIP, BodyPart.RIGHT_HIP),
        )

    def _line_turn(
        self,
        setup: PoseFrame,
        top: PoseFrame,
        left: BodyPart,
        right: BodyPart,
    ) -> float:
        try:
            start_angle = self._line_angle(setup.require_landmark(left), setup.require_landmark(right))
            top_angle = self._line_angle(top.require_landmark(left), top.require_landmark(right))
        except MissingLandmarkError as e:
            logger.debug(f"Rotation unavailable: {e}")
            return 0.0

        return min(abs(top_angle - start_angle), self.config.rotation_cap_degrees)

    @staticmethod
    def _line_angle(left, right) -> float:
        return math.degrees(math.atan2(right.y - left.y, right.x - left.x))

    @staticmethod
    def calculate_spine_tilt(frame: PoseFrame) -> float:
        """
        Spine tilt from vertical at the given frame, in degrees.

        Measured from the shoulder midpoint to the hip midpoint. 0 if any
        shoulder or hip is missing.
        """
        try:
            left_shoulder = frame.require_landmark(BodyPart.LEFT_SHOULDER)
            right_shoulder = frame.require_landmark(BodyPart.RIGHT_SHOULDER)
            left_hip = frame.require_landmark(BodyPart.LEFT_HIP)
            right_hip = frame.require_landmark(BodyPart.RIGHT_HIP)
        except MissingLandmarkError as e:
            logger.debug(f"Spine tilt unavailable: {e}")
            return 0.0

        shoulder_x = (left_shoulder.x + right_shoulder.x) / 2
        shoulder_y = (left_shoulder.y + right_shoulder.y) / 2
        hip_x = (left_hip.x + right_hip.x) / 2
        hip_y = (left_hip.y + right_hip.y) / 2

        return math.degrees(math.atan2(hip_x - shoulder_x, hip_y - shoulder_y))

    @staticmethod
    def calculate_weight_transfer(setup: PoseFrame, impact: PoseFrame) -> float:
        """
        How well the stance width is kept from setup to impact (0-1).

        1 means the ankles are exactly as far apart at impact as at setup.
        0 if an ankle is missing or the setup stance has no width.
        """
        try:
            setup_width = abs(
                setup.require_landmark(BodyPart.LEFT_ANKLE).x -
                setup.require_landmark(BodyPart.RIGHT_ANKLE).x
            )
            impact_width = abs(
                impact.require_landmark(BodyPart.LEFT_ANKLE).x -
                impact.require_landmark(BodyPart.RIGHT_ANKLE).x
            )
        except MissingLandmarkError as e:
            logger.debug(f"Weight transfer unavailable: {e}")
            return 0.0

        try:
            return max(0.0, 1.0 - abs(impact_width - setup_width) / setup_width)
        except ZeroDivisionError:
            return 0.0

    @staticmethod
    def calculate_weight_distribution(frame: PoseFrame) -> WeightDistribution:
        """
        Stance split between the feet from the ankle x positions, in percent.

        Each foot's share is its ankle's |x| over the sum of both. An even
        50/50 split is reported when an ankle is missing or both sit at x=0.
        """
        try:
            left_x = abs(frame.require_landmark(BodyPart.LEFT_ANKLE).x)
            right_x = abs(frame.require_landmark(BodyPart.RIGHT_ANKLE).x)
        except MissingLandmarkError as e:
            logger.debug(f"Weight distribution unavailable: {e}")
            return WeightDistribution()

        try:
            left = left_x / (left_x + right_x) * 100
        except ZeroDivisionError:
            return WeightDistribution()

        return WeightDistribution(left=left, right=100 - left)

    # -------------------------------------------------------------------------
    # Phase Lookup
    # -------------------------------------------------------------------------

    @staticmethod
    def get_phase_at_frame(phases: Sequence[SwingPhase], frame: int) -> Optional[SwingPhase]:
        """
        Phase containing the frame, None outside the swing.

        A boundary frame belongs to the phase that closes on it.
        """
        return next((phase for phase in phases if phase.contains(frame)), None)

    @staticmethod
    def get_phase_progress(phase: SwingPhase, frame: int) -> float:
        """Progress through a phase: 0 at its start, 1 at its end."""
        if frame <= phase.start_frame:
            return 0.0
        if frame >= phase.end_frame:
            return 1.0
        return (frame - phase.start_frame) / (phase.end_frame - phase.start_frame)

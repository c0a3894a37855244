"""
Key Moment Service

Picks the takeaway, top, impact and finish frames out of one trajectory.
"""

import logging
from typing import Optional, Sequence

from ..config import DEFAULT_CONFIG, SwingEngineConfig
from ..domain.analysis import KeyMoments
from ..domain.trajectory import TrajectoryPoint
from .kinematics import TrajectoryAnalyzer

logger = logging.getLogger(__name__)


class KeyMomentExtractor:
    """
    Finds key moments in a wrist or clubhead trajectory.

    Image y grows downward, so the top of the backswing is the frame with
    the smallest y.
    """

    def __init__(self, config: Optional[SwingEngineConfig] = None):
        self.config = config or DEFAULT_CONFIG

    def find_key_moments(self, points: Sequence[TrajectoryPoint]) -> KeyMoments:
        """
        Locate takeaway, top, impact and finish.

        - takeaway: first velocity sample above min_velocity_threshold
        - top: lowest y within the first top_search_fraction of frames
        - impact: largest acceleration sample from impact_search_fraction on,
          ignoring samples that touch a filled point
        - finish: last frame

        The result is forced into takeaway <= top <= impact <= finish.
        """
        if not points:
            return KeyMoments()

        n = len(points)
        velocities = TrajectoryAnalyzer.velocities(points)
        accelerations = TrajectoryAnalyzer.accelerations(points)

        takeaway = next(
            (i for i, v in enumerate(velocities) if v > self.config.min_velocity_threshold),
            0,
        )

        top = 0
        min_y = points[0].y
        search_end = min(int(n * self.config.top_search_fraction), n - 1)
        for i in range(1, search_end + 1):
            if points[i].y < min_y:
                min_y = points[i].y
                top = i

        impact = int(n * self.config.impact_default_fraction)
        max_acceleration = 0.0
        for i in range(int(n * self.config.impact_search_fraction), len(accelerations)):
            if any(p.filled for p in points[i:i + 3]):
                continue
            if accelerations[i] > max_acceleration:
                max_acceleration = accelerations[i]
                impact = i

        finish = n - 1

        top = max(takeaway, top)
        impact = min(max(top, impact), finish)

        logger.debug(f"Key moments: takeaway={takeaway} top={top} impact={impact} finish={finish}")

        return KeyMoments(takeaway=takeaway, top=top, impact=impact, finish=finish)

"""
Services Layer

Business logic services for golf swing trajectory and phase analysis.
These services operate on domain models only; pose estimation happens
upstream.
"""

from .trajectory_builder import TrajectoryBuilder
from .kinematics import TrajectoryAnalyzer
from .phase_segmenter import PhaseSegmenter
from .swing_path import SwingPathClassifier
from .key_moments import KeyMomentExtractor
from .swing_analyzer import SwingAnalyzer

__all__ = [
    "TrajectoryBuilder",
    "TrajectoryAnalyzer",
    "PhaseSegmenter",
    "SwingPathClassifier",
    "KeyMomentExtractor",
    "SwingAnalyzer",
]

"""Shared fixtures: a synthetic 60-frame swing and trajectory builders."""

import math

import pytest

from swingtrace.core.domain import BodyPart, PoseFrame, PoseLandmark, TrajectoryPoint

N_FRAMES = 60
FRAME_INTERVAL_MS = 33.33
LANDMARK_SLOTS = 33


def _landmark(x, y, z=0.0, visibility=0.9):
    return PoseLandmark(x=x, y=y, z=z, visibility=visibility)


def _rotated_pair(center_x, center_y, half_width, degrees):
    """Left/right landmarks on a line through the center, turned by degrees."""
    angle = math.radians(degrees)
    dx = half_width * math.cos(angle)
    dy = half_width * math.sin(angle)
    return (
        _landmark(center_x - dx, center_y - dy),
        _landmark(center_x + dx, center_y + dy),
    )


def build_frame(i, n=N_FRAMES):
    """
    One frame of the synthetic swing.

    The right wrist follows x = 0.3 + 0.4 sin(t pi), y = 0.7 - 0.6 t; the
    shoulders turn up to 60 degrees and the hips up to 30.
    """
    t = i / (n - 1) if n > 1 else 0.0
    wrist_x = 0.3 + 0.4 * math.sin(t * math.pi)
    wrist_y = 0.7 - 0.6 * t
    turn = math.sin(t * math.pi)

    landmarks = [None] * LANDMARK_SLOTS
    landmarks[BodyPart.NOSE] = _landmark(0.5, 0.2)
    landmarks[BodyPart.LEFT_SHOULDER], landmarks[BodyPart.RIGHT_SHOULDER] = _rotated_pair(
        0.5, 0.35, 0.08, 60 * turn
    )
    landmarks[BodyPart.LEFT_HIP], landmarks[BodyPart.RIGHT_HIP] = _rotated_pair(
        0.5, 0.6, 0.06, 30 * turn
    )
    landmarks[BodyPart.RIGHT_WRIST] = _landmark(wrist_x, wrist_y, -0.1)
    landmarks[BodyPart.LEFT_WRIST] = _landmark(wrist_x - 0.02, wrist_y + 0.01, -0.1)
    landmarks[BodyPart.RIGHT_ELBOW] = _landmark(wrist_x - 0.05, wrist_y + 0.08, -0.05)
    landmarks[BodyPart.LEFT_ELBOW] = _landmark(wrist_x - 0.07, wrist_y + 0.09, -0.05)
    landmarks[BodyPart.LEFT_KNEE] = _landmark(0.42, 0.75)
    landmarks[BodyPart.RIGHT_KNEE] = _landmark(0.58, 0.75)
    landmarks[BodyPart.LEFT_ANKLE] = _landmark(0.4, 0.9)
    landmarks[BodyPart.RIGHT_ANKLE] = _landmark(0.6, 0.9)

    return PoseFrame(landmarks=landmarks, timestamp_ms=i * FRAME_INTERVAL_MS, frame_number=i)


def build_swing(n=N_FRAMES):
    return [build_frame(i, n) for i in range(n)]


def build_points(coords, interval=FRAME_INTERVAL_MS):
    """Trajectory from (x, y) or (x, y, z) tuples, evenly spaced in time."""
    points = []
    for i, coord in enumerate(coords):
        x, y = coord[0], coord[1]
        z = coord[2] if len(coord) > 2 else 0.0
        points.append(TrajectoryPoint(x=x, y=y, z=z, timestamp=i * interval, frame=i))
    return points


@pytest.fixture
def swing_frames():
    return build_swing()


@pytest.fixture
def make_swing():
    return build_swing


@pytest.fixture
def make_points():
    return build_points


@pytest.fixture
def wrist_path():
    """The right-wrist path of the synthetic swing as a trajectory."""
    coords = []
    for i in range(N_FRAMES):
        t = i / (N_FRAMES - 1)
        coords.append((0.3 + 0.4 * math.sin(t * math.pi), 0.7 - 0.6 * t))
    return build_points(coords)

import logging

import pytest

from swingtrace.core.config import ClubheadEstimation, SwingEngineConfig
from swingtrace.core.domain import BodyPart, TrackedPoint
from swingtrace.core.services import TrajectoryBuilder


def _drop(frame, body_part):
    frame.landmarks[body_part] = None


class TestBuild:

    def test_every_trajectory_covers_every_frame(self, swing_frames):
        swing = TrajectoryBuilder().build(swing_frames)

        assert len(swing) == len(swing_frames)
        for point, trajectory in swing:
            assert len(trajectory) == len(swing_frames), point
            assert [p.frame for p in trajectory] == list(range(len(swing_frames)))

    def test_positions_and_timestamps_come_from_frames(self, swing_frames):
        swing = TrajectoryBuilder().build(swing_frames)
        frame = swing_frames[17]
        wrist = frame.get_landmark(BodyPart.RIGHT_WRIST)

        point = swing.right_wrist[17]
        assert (point.x, point.y, point.z) == (wrist.x, wrist.y, wrist.z)
        assert point.timestamp == frame.timestamp_ms

    def test_lookup_by_tracked_point(self, swing_frames):
        swing = TrajectoryBuilder().build(swing_frames)
        assert swing[TrackedPoint.LEFT_HIP] is swing.left_hip

    def test_no_frames(self):
        swing = TrajectoryBuilder().build([])
        assert len(swing) == 0
        assert swing.clubhead == []

    def test_timestamps(self, swing_frames):
        timestamps = TrajectoryBuilder.timestamps(swing_frames)
        assert timestamps == [f.timestamp_ms for f in swing_frames]


class TestMissingLandmarks:

    def test_gap_is_interpolated(self, swing_frames):
        _drop(swing_frames[5], BodyPart.RIGHT_WRIST)
        swing = TrajectoryBuilder().build(swing_frames)
        before, gap, after = swing.right_wrist[4:7]

        assert gap.x == pytest.approx((before.x + after.x) / 2)
        assert gap.y == pytest.approx((before.y + after.y) / 2)
        assert gap.timestamp == swing_frames[5].timestamp_ms
        assert gap.filled
        assert not before.filled and not after.filled

    def test_long_gap_is_a_straight_line(self, swing_frames):
        for frame in swing_frames[24:34]:
            _drop(frame, BodyPart.RIGHT_WRIST)
        swing = TrajectoryBuilder().build(swing_frames)
        start, end = swing.right_wrist[23], swing.right_wrist[34]

        for i in range(24, 34):
            share = (i - 23) / 11
            assert swing.right_wrist[i].x == pytest.approx(start.x + share * (end.x - start.x))
            assert swing.right_wrist[i].y == pytest.approx(start.y + share * (end.y - start.y))
        assert [p.filled for p in swing.right_wrist[23:35]] == [False] + [True] * 10 + [False]

    def test_leading_gap_takes_first_known_position(self, swing_frames):
        _drop(swing_frames[0], BodyPart.LEFT_SHOULDER)
        _drop(swing_frames[1], BodyPart.LEFT_SHOULDER)
        swing = TrajectoryBuilder().build(swing_frames)

        assert swing.left_shoulder[0].x == swing.left_shoulder[2].x
        assert swing.left_shoulder[1].y == swing.left_shoulder[2].y
        assert [p.filled for p in swing.left_shoulder[:3]] == [True, True, False]

    def test_trailing_gap_takes_last_known_position(self, swing_frames):
        _drop(swing_frames[-1], BodyPart.LEFT_HIP)
        swing = TrajectoryBuilder().build(swing_frames)

        assert swing.left_hip[-1].x == swing.left_hip[-2].x
        assert swing.left_hip[-1].filled

    def test_clubhead_is_filled_with_either_wrist(self, swing_frames):
        _drop(swing_frames[8], BodyPart.LEFT_WRIST)
        swing = TrajectoryBuilder().build(swing_frames)

        assert swing.clubhead[8].filled
        assert not swing.right_wrist[8].filled
        assert not swing.clubhead[9].filled

    def test_never_seen_landmark_sits_at_origin(self, swing_frames, caplog):
        for frame in swing_frames:
            _drop(frame, BodyPart.RIGHT_HIP)

        with caplog.at_level(logging.WARNING):
            swing = TrajectoryBuilder().build(swing_frames)

        assert all((p.x, p.y, p.z) == (0.0, 0.0, 0.0) for p in swing.right_hip)
        assert "RIGHT_HIP missing in every frame" in caplog.text

    def test_short_landmark_list(self, swing_frames):
        swing_frames[3].landmarks = swing_frames[3].landmarks[:12]
        swing = TrajectoryBuilder().build(swing_frames)

        assert swing.right_wrist[3].x == pytest.approx(
            (swing.right_wrist[2].x + swing.right_wrist[4].x) / 2
        )
        assert swing.left_shoulder[3].x == swing_frames[3].landmarks[BodyPart.LEFT_SHOULDER].x
        assert not swing.left_shoulder[3].filled


class TestClubhead:

    def test_midpoint_of_wrists(self, swing_frames):
        swing = TrajectoryBuilder().build(swing_frames)

        for i in (0, 20, 59):
            right, left = swing.right_wrist[i], swing.left_wrist[i]
            assert swing.clubhead[i].x == pytest.approx((right.x + left.x) / 2)
            assert swing.clubhead[i].y == pytest.approx((right.y + left.y) / 2)

    def test_forearm_extension(self, swing_frames):
        config = SwingEngineConfig(clubhead_estimation=ClubheadEstimation.FOREARM_EXTENSION)
        swing = TrajectoryBuilder(config).build(swing_frames)

        wrist = swing_frames[10].get_landmark(BodyPart.RIGHT_WRIST)
        elbow = swing_frames[10].get_landmark(BodyPart.RIGHT_ELBOW)
        assert swing.clubhead[10].x == pytest.approx(2 * wrist.x - elbow.x)
        assert swing.clubhead[10].y == pytest.approx(2 * wrist.y - elbow.y)

    def test_forearm_extension_length(self, swing_frames):
        config = SwingEngineConfig(
            clubhead_estimation=ClubheadEstimation.FOREARM_EXTENSION,
            clubhead_extension=2.0,
        )
        swing = TrajectoryBuilder(config).build(swing_frames)

        wrist = swing_frames[10].get_landmark(BodyPart.RIGHT_WRIST)
        elbow = swing_frames[10].get_landmark(BodyPart.RIGHT_ELBOW)
        assert swing.clubhead[10].x == pytest.approx(wrist.x + 2 * (wrist.x - elbow.x))

    def test_forearm_extension_without_elbow_uses_midpoint(self, swing_frames):
        _drop(swing_frames[10], BodyPart.RIGHT_ELBOW)
        config = SwingEngineConfig(clubhead_estimation=ClubheadEstimation.FOREARM_EXTENSION)
        swing = TrajectoryBuilder(config).build(swing_frames)

        right, left = swing.right_wrist[10], swing.left_wrist[10]
        assert swing.clubhead[10].x == pytest.approx((right.x + left.x) / 2)

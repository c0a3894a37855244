import logging

import pytest

from swingtrace.core.config import SwingEngineConfig
from swingtrace.core.domain import BodyPart, InsufficientDataError, PhaseName
from swingtrace.core.services import SwingAnalyzer


class TestAnalyzeFrames:

    def test_complete_analysis(self, swing_frames):
        result = SwingAnalyzer().analyze_frames(swing_frames)

        assert result.id
        assert result.frame_count == 60
        assert result.duration_ms == pytest.approx(59 * 33.33)
        assert result.processing_time_ms >= 0
        assert len(result.trajectory) == 60
        assert [p.name for p in result.phases] == list(PhaseName)
        assert result.tempo_ratio == result.phase_analysis.tempo_ratio

    def test_metrics(self, swing_frames):
        result = SwingAnalyzer().analyze_frames(swing_frames)

        assert result.wrist_metrics.total_distance > 0
        assert result.clubhead_metrics.max_velocity > 0
        assert 0.0 <= result.clubhead_metrics.smoothness <= 1.0
        assert result.velocity_profile.frames == list(range(60))
        assert len(result.velocity_profile.velocities) == 59

    def test_swing_path_and_key_moments(self, swing_frames):
        result = SwingAnalyzer().analyze_frames(swing_frames)
        path = result.swing_path
        moments = result.key_moments

        assert not (path.inside_out and path.outside_in)
        assert -180.0 <= path.swing_plane <= 180.0
        assert 0.0 <= path.path_consistency <= 1.0
        assert path.clubhead_path == result.trajectory.clubhead
        assert moments.finish == 59
        assert moments.takeaway <= moments.top <= moments.impact <= moments.finish

    @pytest.mark.parametrize("n", [0, 1, 9])
    def test_too_few_frames(self, make_swing, n):
        with pytest.raises(InsufficientDataError) as excinfo:
            SwingAnalyzer().analyze_frames(make_swing(n))
        assert excinfo.value.frame_count == n
        assert isinstance(excinfo.value, ValueError)

    def test_minimum_frames(self, make_swing):
        result = SwingAnalyzer().analyze_frames(make_swing(10))
        assert len(result.phases) == 5

    def test_missing_landmark_everywhere(self, swing_frames):
        for frame in swing_frames:
            frame.landmarks[BodyPart.LEFT_HIP] = None

        result = SwingAnalyzer().analyze_frames(swing_frames)

        assert result.phase_analysis.rotation.hip == 0.0
        assert result.phase_analysis.rotation.shoulder > 0.0

    def test_config_is_shared_with_services(self):
        config = SwingEngineConfig(min_frames=20)
        analyzer = SwingAnalyzer(config)
        assert analyzer.phase_segmenter.config is config
        assert analyzer.trajectory_builder.config is config

    def test_logs_summary(self, swing_frames, caplog):
        with caplog.at_level(logging.INFO, logger="swingtrace.core.services.swing_analyzer"):
            SwingAnalyzer().analyze_frames(swing_frames)

        assert "Analyzed 60 frames" in caplog.text

import pytest
from fastapi.testclient import TestClient

from swingtrace import __version__
from swingtrace.main import app


@pytest.fixture
def client():
    return TestClient(app)


def _frame_payload(frame):
    return {
        "landmarks": [
            None if lm is None else {"x": lm.x, "y": lm.y, "z": lm.z, "visibility": lm.visibility}
            for lm in frame.landmarks
        ],
        "timestamp_ms": frame.timestamp_ms,
        "frame_number": frame.frame_number,
    }


def _point_payload(points):
    return [
        {"x": p.x, "y": p.y, "z": p.z, "timestamp": p.timestamp, "frame": p.frame}
        for p in points
    ]


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["health"] == "/api/health"


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "version": __version__}


class TestAnalyzeFrames:

    def test_full_analysis(self, client, swing_frames):
        payload = {"frames": [_frame_payload(f) for f in swing_frames]}
        response = client.post("/api/analysis/frames", json=payload)

        assert response.status_code == 200
        body = response.json()
        assert body["frame_count"] == 60
        assert [p["name"] for p in body["phase_analysis"]["phases"]] == [
            "Setup", "Backswing", "Transition", "Impact", "Follow-through"
        ]
        assert len(body["trajectory"]["clubhead"]) == 60
        assert body["key_moments"]["finish"] == 59

    def test_missing_landmark_slots(self, client, swing_frames):
        payload = {"frames": [_frame_payload(f) for f in swing_frames]}
        for frame in payload["frames"][10:20]:
            frame["landmarks"][16] = None

        response = client.post("/api/analysis/frames", json=payload)
        assert response.status_code == 200

        wrist = response.json()["trajectory"]["right_wrist"]
        assert [p["filled"] for p in wrist[9:21]] == [False] + [True] * 10 + [False]

    def test_phase_confidence_and_metrics(self, client, swing_frames):
        payload = {"frames": [_frame_payload(f) for f in swing_frames]}
        response = client.post("/api/analysis/frames", json=payload)

        phases = response.json()["phase_analysis"]["phases"]
        assert [p["confidence"] for p in phases] == [0.9, 0.8, 0.8, 0.9, 0.8]

        metrics = phases[1]["key_metrics"]
        assert metrics["club_position"]["frame"] == (phases[1]["start_frame"] + phases[1]["end_frame"]) // 2
        assert metrics["weight_distribution"] == pytest.approx({"left": 40.0, "right": 60.0})
        assert metrics["velocity"] > 0
        assert set(metrics["body_rotation"]) == {"shoulder", "hip"}

    def test_landmark_without_visibility(self, client, swing_frames):
        payload = {"frames": [_frame_payload(f) for f in swing_frames]}
        del payload["frames"][0]["landmarks"][16]["visibility"]

        response = client.post("/api/analysis/frames", json=payload)
        assert response.status_code == 200

    def test_too_few_frames(self, client, swing_frames):
        payload = {"frames": [_frame_payload(f) for f in swing_frames[:5]]}
        response = client.post("/api/analysis/frames", json=payload)

        assert response.status_code == 422
        assert "Insufficient pose data" in response.json()["detail"]

    def test_no_frames(self, client):
        response = client.post("/api/analysis/frames", json={"frames": []})
        assert response.status_code == 422

    def test_out_of_range_landmark(self, client, swing_frames):
        payload = {"frames": [_frame_payload(f) for f in swing_frames]}
        payload["frames"][0]["landmarks"][16]["x"] = 1.5

        response = client.post("/api/analysis/frames", json=payload)
        assert response.status_code == 422


class TestAnalyzeTrajectory:

    def test_visualization(self, client, wrist_path):
        payload = {
            "points": _point_payload(wrist_path),
            "phases": [{"name": "Backswing", "start_frame": 5, "end_frame": 30}],
        }
        response = client.post("/api/trajectory/analyze", json=payload)

        assert response.status_code == 200
        body = response.json()
        assert len(body["points"]) == 60
        assert len(body["smoothed_points"]) == 60
        assert body["phases"][0]["name"] == "Backswing"
        assert body["metrics"]["max_velocity"] > 0
        assert body["key_moments"]["finish"] == 59

    def test_phase_metrics_pass_through(self, client, wrist_path):
        key_metrics = {
            "club_position": {"x": 0.5, "y": 0.4, "timestamp": 100.0, "frame": 3},
            "body_rotation": {"shoulder": 30.0, "hip": 15.0},
            "weight_distribution": {"left": 45.0, "right": 55.0},
            "velocity": 0.01,
            "acceleration": 0.001,
        }
        payload = {
            "points": _point_payload(wrist_path),
            "phases": [{
                "name": "Backswing",
                "start_frame": 0,
                "end_frame": 6,
                "confidence": 0.8,
                "key_metrics": key_metrics,
            }],
        }
        response = client.post("/api/trajectory/analyze", json=payload)

        assert response.status_code == 200
        phase = response.json()["phases"][0]
        assert phase["confidence"] == 0.8
        assert phase["key_metrics"]["club_position"]["frame"] == 3
        assert phase["key_metrics"]["body_rotation"] == {"shoulder": 30.0, "hip": 15.0}
        assert phase["key_metrics"]["weight_distribution"] == {"left": 45.0, "right": 55.0}

    def test_empty_trajectory(self, client):
        response = client.post("/api/trajectory/analyze", json={"points": []})

        assert response.status_code == 200
        body = response.json()
        assert body["metrics"]["smoothness"] == 0.0
        assert body["key_moments"] == {"takeaway": 0, "top": 0, "impact": 0, "finish": 0}

    def test_unknown_phase_name(self, client, wrist_path):
        payload = {
            "points": _point_payload(wrist_path[:3]),
            "phases": [{"name": "Downswing", "start_frame": 0, "end_frame": 2}],
        }
        response = client.post("/api/trajectory/analyze", json=payload)
        assert response.status_code == 422

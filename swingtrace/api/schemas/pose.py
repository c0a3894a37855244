"""
Pose API Schemas

Pydantic models for the pose frames a client submits for analysis.
Frames come from an external pose-estimation provider; the API only
validates their shape.
"""

from pydantic import BaseModel, Field
from typing import Optional, List


class LandmarkSchema(BaseModel):
    """
    Single body landmark in an API request.

    Coordinates are normalized (0.0 to 1.0).
    """
    x: float = Field(..., ge=0.0, le=1.0, description="Horizontal position (0=left, 1=right)")
    y: float = Field(..., ge=0.0, le=1.0, description="Vertical position (0=top, 1=bottom)")
    z: float = Field(0.0, description="Depth (negative=closer to camera)")
    visibility: Optional[float] = Field(None, ge=0.0, le=1.0, description="Detection confidence, if reported")

    class Config:
        json_schema_extra = {
            "example": {
                "x": 0.45,
                "y": 0.32,
                "z": -0.15,
                "visibility": 0.95
            }
        }


class PoseFrameSchema(BaseModel):
    """
    Pose detection result for one frame.

    Landmarks are indexed by body part (MediaPipe layout, 33 slots).
    A null slot means the landmark was not detected in this frame.
    """
    landmarks: List[Optional[LandmarkSchema]] = Field(..., description="Landmarks indexed by body part")
    timestamp_ms: float = Field(..., ge=0, description="Capture time in milliseconds")
    frame_number: int = Field(0, ge=0, description="Sequential frame number")

    class Config:
        json_schema_extra = {
            "example": {
                "landmarks": [
                    {"x": 0.5, "y": 0.2, "z": 0.0, "visibility": 0.99},
                    None
                ],
                "timestamp_ms": 1500.0,
                "frame_number": 45
            }
        }


class AnalyzeFramesRequest(BaseModel):
    """
    Request to analyze pre-extracted pose frames.

    Used when the client has already done pose detection.
    """
    frames: List[PoseFrameSchema] = Field(..., description="Pose frames in time order (at least 10)")

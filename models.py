# models.py

from pydantic import BaseModel, ConfigDict, Field, conint, conlist
from typing import Any, Optional


class AudioFeatureRecord(BaseModel):
    """
    Summary statistics computed upstream from the recorded audio.
    Values are interpolated into the prompt as received, without type checks.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    pitch_variance: Optional[Any] = Field(None, alias="pitchVariance")
    volume_max: Optional[Any] = Field(None, alias="volumeMax")
    volume_min: Optional[Any] = Field(None, alias="volumeMin")
    volume_avg: Optional[Any] = Field(None, alias="volumeAvg")
    pause_count: Optional[Any] = Field(None, alias="pauseCount")
    pause_avg_duration: Optional[Any] = Field(None, alias="pauseAvgDuration", description="Milliseconds")


class EvaluationRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    transcript: str
    audio_features: Optional[AudioFeatureRecord] = Field(None, alias="audioFeatures")


Score = conint(ge=0, le=100)


class EvaluationScore(BaseModel):
    structure: Score
    sentence: Score
    delivery: Score
    explaining_data: Score
    pace: Score
    overall: Score


class EvaluationResult(BaseModel):
    """Shape the model is asked to produce. Only enforced in strict schema mode."""

    title: str
    score: EvaluationScore
    feedback: str
    structured_summary: str
    questions: conlist(str, min_length=3, max_length=5)


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None

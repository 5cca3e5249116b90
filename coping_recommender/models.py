"""
Shared data models for the coping recommender.

This module defines the core domain models used across multiple layers
of the application (engine, catalog loading, CLI, API). Wire names are
camelCase; Python attribute names are snake_case and both are accepted
on input.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_serializer
from pydantic.alias_generators import to_camel


class Mood(str, Enum):
    """Self-reported emotional state from a mood check-in."""

    ANXIOUS = "anxious"
    FRUSTRATED = "frustrated"
    SAD = "sad"
    NEUTRAL = "neutral"
    CALM = "calm"
    HAPPY = "happy"


class CopingCategory(str, Enum):
    """Therapeutic family a coping technique belongs to."""

    BREATHING = "breathing"
    GROUNDING = "grounding"
    COGNITIVE = "cognitive"
    MOVEMENT = "movement"
    REFLECTION = "reflection"


class IntensityLevel(str, Enum):
    """Expected cognitive or physical demand of a technique."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class _WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CopingTool(_WireModel):
    """Immutable catalog entry describing one coping technique."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Unique catalog identifier")
    title: str = Field(..., description="Display title")
    description: str = Field("", description="One-line summary of the technique")
    category: CopingCategory = Field(..., description="Therapeutic category")
    supported_moods: frozenset[Mood] = Field(
        ..., description="Moods this technique is known to help with"
    )
    intensity_level: IntensityLevel = Field(..., description="Demand of the technique")
    duration_minutes: int = Field(..., gt=0, description="Expected completion time")

    @field_serializer("supported_moods")
    def _serialize_moods(self, moods: frozenset[Mood]) -> list[str]:
        # Declaration order keeps serialized output stable across runs
        return [mood.value for mood in Mood if mood in moods]


class CheckIn(_WireModel):
    """Raw record from the mood journal."""

    mood: Mood = Field(..., description="Mood reported in this check-in")
    created_at: datetime = Field(..., description="When the check-in was recorded")


class ChatMessage(_WireModel):
    """Raw record from the chat history."""

    text: str = Field(..., description="Message text")


class SentimentResult(_WireModel):
    """Keyword categories detected in a piece of text."""

    model_config = ConfigDict(frozen=True)

    keywords: tuple[str, ...] = ()
    has_crisis: bool = False
    has_low_mood: bool = False
    has_stress: bool = False


class RecommendationContext(_WireModel):
    """Per-request snapshot consumed by scoring and explanation."""

    model_config = ConfigDict(frozen=True)

    current_mood: Mood | None = Field(None, description="Today's most recent mood")
    mood_intensity: int = Field(5, ge=1, le=10, description="Urgency derived from mood")
    recent_chat_summary: str = Field("", description="Recent chat text, space joined")
    chat_keywords: tuple[str, ...] = Field(
        (), description="Sentiment keywords found in the chat summary"
    )


class RecommendedTool(CopingTool):
    """A catalog tool with its relevance score and explanation."""

    score: int = Field(..., ge=0, le=100, description="Relevance score")
    reason: str = Field(..., description="Human-readable justification")


class ScoreBreakdown(_WireModel):
    """Per-component view of a tool's score, for tuning and diagnostics."""

    model_config = ConfigDict(frozen=True)

    mood: int = Field(..., ge=0, le=40)
    sentiment: int = Field(..., ge=0, le=30)
    intensity: int = Field(..., ge=0, le=20)
    duration: int = Field(..., ge=0, le=10)
    total: int = Field(..., ge=0, le=100)

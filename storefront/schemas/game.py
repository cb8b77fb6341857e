"""
Game, profile and reward schemas
"""

from pydantic import Field, field_validator
from typing import Optional
from datetime import datetime

from .base import BaseSchema, MAX_DB_INT

class ProfileResponse(BaseSchema):
    """Per-session game profile"""
    id: int
    session_id: str
    username: Optional[str] = None
    total_points: int
    level: int
    games_played: int
    high_score: int
    last_played_at: Optional[datetime] = None
    created_at: datetime

class ProfileUpdate(BaseSchema):
    """Only the display name is client-editable"""
    username: Optional[str] = Field(None, max_length=50)

    @field_validator("username")
    @classmethod
    def strip_username(cls, v):
        if v is None:
            return v
        v = v.strip()
        return v or None

class ScoreCreate(BaseSchema):
    """Finished game submitted by the client"""
    game_type: str = Field(..., min_length=1, max_length=50)
    score: int = Field(..., ge=0, le=MAX_DB_INT)
    points_earned: int = Field(..., ge=0, le=MAX_DB_INT)
    duration: int = Field(..., ge=0, le=MAX_DB_INT, description="Game length in seconds")
    max_combo: Optional[int] = Field(None, ge=0, le=MAX_DB_INT, description="Highest combo reached")

class ScoreResponse(BaseSchema):
    id: int
    session_id: str
    game_type: str
    score: int
    points_earned: int
    duration: int
    played_at: datetime

class RewardResponse(BaseSchema):
    id: int
    name: str
    description: str
    points_cost: int
    reward_type: str
    reward_value: str
    is_active: bool
    max_redemptions: Optional[int] = None
    current_redemptions: int
    created_at: datetime

class RewardUpdate(BaseSchema):
    """Admin toggle for a reward"""
    is_active: bool

class UserRewardResponse(BaseSchema):
    id: int
    session_id: str
    reward_id: int
    redeemed_at: datetime
    is_used: bool
    used_at: Optional[datetime] = None

class UserRewardLineResponse(UserRewardResponse):
    """Redemption joined with its reward"""
    reward: RewardResponse

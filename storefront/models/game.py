"""
Mini-game and rewards models
Profiles, score log, redeemable rewards and redemptions
"""

from sqlalchemy import Column, String, Integer, Text, Boolean, DateTime, ForeignKey, Index, CheckConstraint
from sqlalchemy.orm import relationship

from .base import Base, CreatedAtModel, utcnow

class UserProfile(Base, CreatedAtModel):
    """Per-session game profile"""

    __tablename__ = "user_profiles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    session_id = Column(String(255), unique=True, nullable=False)
    username = Column(String(50), nullable=True)

    # Progress
    total_points = Column(Integer, nullable=False, default=0)
    level = Column(Integer, nullable=False, default=1)
    games_played = Column(Integer, nullable=False, default=0)
    high_score = Column(Integer, nullable=False, default=0)
    last_played_at = Column(DateTime(timezone=True), nullable=True)

    # Constraints
    __table_args__ = (
        CheckConstraint("total_points >= 0", name="check_non_negative_points"),
        CheckConstraint("level >= 1", name="check_positive_level"),
    )

class GameScore(Base):
    """Append-only log of finished games"""

    __tablename__ = "game_scores"

    id = Column(Integer, primary_key=True, autoincrement=True)
    session_id = Column(String(255), nullable=False)
    game_type = Column(String(50), nullable=False)
    score = Column(Integer, nullable=False)
    points_earned = Column(Integer, nullable=False)
    duration = Column(Integer, nullable=False)  # seconds
    played_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    # Indexes
    __table_args__ = (
        Index("idx_game_scores_type_score", "game_type", "score"),
        Index("idx_game_scores_session", "session_id"),
    )

class GameReward(Base, CreatedAtModel):
    """Reward redeemable with game points"""

    __tablename__ = "game_rewards"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    description = Column(Text, nullable=False, default="")
    points_cost = Column(Integer, nullable=False)
    reward_type = Column(String(50), nullable=False)  # discount, product, badge
    reward_value = Column(String(100), nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)

    # None means unlimited
    max_redemptions = Column(Integer, nullable=True)
    current_redemptions = Column(Integer, nullable=False, default=0)

    # Relationships
    redemptions = relationship("UserReward", back_populates="reward")

    # Constraints
    __table_args__ = (
        CheckConstraint("points_cost > 0", name="check_positive_points_cost"),
        CheckConstraint("current_redemptions >= 0", name="check_non_negative_redemptions"),
    )

    @property
    def is_available(self) -> bool:
        if not self.is_active:
            return False
        return self.max_redemptions is None or self.current_redemptions < self.max_redemptions

class UserReward(Base):
    """A reward redeemed by a session"""

    __tablename__ = "user_rewards"

    id = Column(Integer, primary_key=True, autoincrement=True)
    session_id = Column(String(255), nullable=False)
    reward_id = Column(Integer, ForeignKey("game_rewards.id"), nullable=False)
    redeemed_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    is_used = Column(Boolean, nullable=False, default=False)
    used_at = Column(DateTime(timezone=True), nullable=True)

    # Relationships
    reward = relationship("GameReward", back_populates="redemptions")

    __table_args__ = (
        Index("idx_user_rewards_session", "session_id"),
    )

"""
Game profile and score service
"""

from typing import List, Optional
import logging

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from storefront.models import UserProfile, GameScore, utcnow
from storefront.core.config import settings
from storefront.core.exceptions import ValidationException
from storefront.core.locks import session_locks
from .scoring import level_for_points, validate_submission

logger = logging.getLogger(__name__)

class GameService:
    """
    Per-session profiles, the score log and leaderboards
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_profile(self, session_id: str) -> Optional[UserProfile]:
        result = await self.db.execute(
            select(UserProfile).where(UserProfile.session_id == session_id)
        )
        return result.scalar_one_or_none()

    async def _get_or_create(self, session_id: str, for_update: bool = False) -> UserProfile:
        """
        Load the session profile, inserting a fresh one when missing.
        Must be called before anything else is pending in the transaction.
        """
        query = select(UserProfile).where(UserProfile.session_id == session_id)
        if for_update:
            query = query.with_for_update().execution_options(populate_existing=True)

        result = await self.db.execute(query)
        profile = result.scalar_one_or_none()
        if profile:
            return profile

        profile = UserProfile(
            session_id=session_id,
            total_points=0,
            level=1,
            games_played=0,
            high_score=0,
        )
        self.db.add(profile)
        try:
            await self.db.flush()
        except IntegrityError:
            # Created concurrently under the same session id
            await self.db.rollback()
            result = await self.db.execute(query)
            profile = result.scalar_one()
        return profile

    async def get_or_create_profile(self, session_id: str) -> UserProfile:
        async with session_locks.acquire(session_id):
            profile = await self._get_or_create(session_id)
            await self.db.commit()
            await self.db.refresh(profile)
            return profile

    async def update_profile(self, session_id: str, username: Optional[str]) -> UserProfile:
        """Set the display name; counters are never client-writable"""
        async with session_locks.acquire(session_id):
            profile = await self._get_or_create(session_id, for_update=True)
            profile.username = username
            await self.db.commit()
            await self.db.refresh(profile)
            return profile

    async def record_score(
        self,
        session_id: str,
        game_type: str,
        score: int,
        points_earned: int,
        duration: int,
        max_combo: Optional[int] = None
    ) -> GameScore:
        """
        Append a score and fold it into the profile in one transaction
        """
        validate_submission(game_type, score, points_earned, max_combo)

        async with session_locks.acquire(session_id):
            try:
                profile = await self._get_or_create(session_id, for_update=True)

                game_score = GameScore(
                    session_id=session_id,
                    game_type=game_type,
                    score=score,
                    points_earned=points_earned,
                    duration=duration,
                )
                self.db.add(game_score)

                profile.games_played += 1
                profile.high_score = max(profile.high_score, score)
                profile.last_played_at = utcnow()
                profile.total_points += points_earned
                # Level never goes down, even when points are spent
                profile.level = max(profile.level, level_for_points(profile.total_points))

                await self.db.commit()
            except Exception:
                await self.db.rollback()
                raise

            await self.db.refresh(game_score)
            logger.info(
                f"Recorded {game_type} score {score} (+{points_earned} points) "
                f"for session {session_id[:8]}"
            )
            return game_score

    async def leaderboard(self, game_type: str, limit: Optional[int] = None) -> List[GameScore]:
        """
        Top scores for a game; ties keep submission order
        """
        if limit is None:
            limit = settings.LEADERBOARD_DEFAULT_LIMIT
        if limit < 1 or limit > settings.LEADERBOARD_MAX_LIMIT:
            raise ValidationException(
                f"limit must be between 1 and {settings.LEADERBOARD_MAX_LIMIT}"
            )

        result = await self.db.execute(
            select(GameScore)
            .where(GameScore.game_type == game_type)
            .order_by(GameScore.score.desc(), GameScore.id.asc())
            .limit(limit)
        )
        return list(result.scalars().all())

    async def user_high_scores(
        self,
        session_id: str,
        game_type: Optional[str] = None
    ) -> List[GameScore]:
        query = select(GameScore).where(GameScore.session_id == session_id)
        if game_type:
            query = query.where(GameScore.game_type == game_type)

        result = await self.db.execute(
            query
            .order_by(GameScore.score.desc(), GameScore.id.asc())
            .limit(settings.USER_HIGH_SCORES_LIMIT)
        )
        return list(result.scalars().all())

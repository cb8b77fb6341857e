"""
Reward ledger: listing, redemption and admin toggling
"""

from typing import List, Optional
import logging

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update, and_, or_
from sqlalchemy.orm import contains_eager

from storefront.models import GameReward, UserReward, UserProfile
from storefront.core.locks import session_locks

logger = logging.getLogger(__name__)

def _has_capacity():
    return or_(
        GameReward.max_redemptions.is_(None),
        GameReward.current_redemptions < GameReward.max_redemptions
    )

class RewardService:
    """
    Redeemable rewards paid for with game points
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_available(self) -> List[GameReward]:
        """Active rewards below their cap, cheapest first"""
        result = await self.db.execute(
            select(GameReward)
            .where(and_(GameReward.is_active.is_(True), _has_capacity()))
            .order_by(GameReward.points_cost.asc(), GameReward.id.asc())
        )
        return list(result.scalars().all())

    async def list_all(self) -> List[GameReward]:
        result = await self.db.execute(
            select(GameReward).order_by(GameReward.points_cost.asc(), GameReward.id.asc())
        )
        return list(result.scalars().all())

    async def set_active(self, reward_id: int, is_active: bool) -> Optional[GameReward]:
        reward = await self.db.get(GameReward, reward_id)
        if not reward:
            return None
        reward.is_active = is_active
        await self.db.commit()
        await self.db.refresh(reward)
        logger.info(f"Reward {reward_id} {'enabled' if is_active else 'disabled'}")
        return reward

    async def redeem(self, session_id: str, reward_id: int) -> Optional[UserReward]:
        """
        Spend points on a reward.

        Returns None when the reward is missing, inactive or capped, or when
        the session has no profile or too few points. Points are debited and
        the redemption counter bumped with conditional updates, so concurrent
        redemptions can neither overdraw a profile nor overshoot the cap.
        """
        async with session_locks.acquire(session_id):
            reward = await self.db.get(GameReward, reward_id, populate_existing=True)
            if not reward or not reward.is_available:
                return None
            cost = reward.points_cost

            debit = await self.db.execute(
                update(UserProfile)
                .where(
                    and_(
                        UserProfile.session_id == session_id,
                        UserProfile.total_points >= cost
                    )
                )
                .values(total_points=UserProfile.total_points - cost)
                .execution_options(synchronize_session="fetch")
            )
            if debit.rowcount != 1:
                await self.db.rollback()
                return None

            claim = await self.db.execute(
                update(GameReward)
                .where(
                    and_(
                        GameReward.id == reward_id,
                        GameReward.is_active.is_(True),
                        _has_capacity()
                    )
                )
                .values(current_redemptions=GameReward.current_redemptions + 1)
                .execution_options(synchronize_session="fetch")
            )
            if claim.rowcount != 1:
                await self.db.rollback()
                return None

            user_reward = UserReward(
                session_id=session_id,
                reward_id=reward_id,
                is_used=False,
            )
            self.db.add(user_reward)
            await self.db.commit()
            await self.db.refresh(user_reward)

            logger.info(f"Session {session_id[:8]} redeemed reward {reward_id} for {cost} points")
            return user_reward

    async def list_user_rewards(self, session_id: str) -> List[UserReward]:
        """Redemptions joined with their reward, newest first"""
        result = await self.db.execute(
            select(UserReward)
            .join(UserReward.reward)
            .options(contains_eager(UserReward.reward))
            .where(UserReward.session_id == session_id)
            .order_by(UserReward.redeemed_at.desc(), UserReward.id.desc())
        )
        return list(result.scalars().all())

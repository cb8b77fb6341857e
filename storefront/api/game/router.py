"""Mini-game router: profile, scores, leaderboards and rewards"""

from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

from storefront.core.config import settings
from storefront.core.database import get_db
from storefront.core.exceptions import RewardUnavailableException
from storefront.services.game_service import GameService
from storefront.services.reward_service import RewardService
from storefront.schemas.base import MAX_DB_INT
from storefront.schemas.game import (
    ProfileResponse,
    ProfileUpdate,
    ScoreCreate,
    ScoreResponse,
    RewardResponse,
    UserRewardResponse,
    UserRewardLineResponse,
)
from storefront.utils.dependencies import get_session_id

router = APIRouter()

# Profile

@router.get("/profile", response_model=ProfileResponse)
async def get_profile(
    session_id: str = Depends(get_session_id),
    db: AsyncSession = Depends(get_db)
):
    """Get the session's game profile, creating it on first visit"""
    return await GameService(db).get_or_create_profile(session_id)

@router.patch("/profile", response_model=ProfileResponse)
async def update_profile(
    profile_data: ProfileUpdate,
    session_id: str = Depends(get_session_id),
    db: AsyncSession = Depends(get_db)
):
    """Update the display name"""
    return await GameService(db).update_profile(session_id, profile_data.username)

# Scores

@router.post("/score", response_model=ScoreResponse, status_code=status.HTTP_201_CREATED)
async def submit_score(
    score_data: ScoreCreate,
    session_id: str = Depends(get_session_id),
    db: AsyncSession = Depends(get_db)
):
    """Submit a finished game; points are credited to the profile"""
    return await GameService(db).record_score(
        session_id=session_id,
        game_type=score_data.game_type,
        score=score_data.score,
        points_earned=score_data.points_earned,
        duration=score_data.duration,
        max_combo=score_data.max_combo,
    )

@router.get("/scores", response_model=List[ScoreResponse])
async def get_user_scores(
    game_type: Optional[str] = Query(None, alias="gameType"),
    session_id: str = Depends(get_session_id),
    db: AsyncSession = Depends(get_db)
):
    """Get the session's best scores"""
    return await GameService(db).user_high_scores(session_id, game_type)

@router.get("/leaderboard/{game_type}", response_model=List[ScoreResponse])
async def get_leaderboard(
    game_type: str,
    limit: int = Query(settings.LEADERBOARD_DEFAULT_LIMIT),
    db: AsyncSession = Depends(get_db)
):
    """Get the top scores for a game"""
    return await GameService(db).leaderboard(game_type, limit)

# Rewards

@router.get("/rewards", response_model=List[RewardResponse])
async def get_rewards(db: AsyncSession = Depends(get_db)):
    """Get rewards that can currently be redeemed"""
    return await RewardService(db).list_available()

@router.post(
    "/rewards/{reward_id}/redeem",
    response_model=UserRewardResponse,
    status_code=status.HTTP_201_CREATED
)
async def redeem_reward(
    reward_id: int = Path(..., ge=1, le=MAX_DB_INT),
    session_id: str = Depends(get_session_id),
    db: AsyncSession = Depends(get_db)
):
    """Spend points on a reward"""
    user_reward = await RewardService(db).redeem(session_id, reward_id)
    if not user_reward:
        raise RewardUnavailableException()
    return user_reward

@router.get("/user-rewards", response_model=List[UserRewardLineResponse])
async def get_user_rewards(
    session_id: str = Depends(get_session_id),
    db: AsyncSession = Depends(get_db)
):
    """Get rewards redeemed by the session, newest first"""
    return await RewardService(db).list_user_rewards(session_id)

import pytest

from storefront.core.exceptions import ValidationException
from storefront.services.game_service import GameService

async def test_get_or_create_profile_is_idempotent(db_session):
    service = GameService(db_session)
    first = await service.get_or_create_profile("s1")
    second = await service.get_or_create_profile("s1")

    assert first.id == second.id
    assert first.level == 1
    assert first.total_points == 0
    assert first.games_played == 0
    assert first.high_score == 0
    assert first.last_played_at is None

async def test_record_score_creates_missing_profile(db_session):
    service = GameService(db_session)
    assert await service.get_profile("s1") is None

    await service.record_score("s1", "memory-match", 40, 4, 30)

    profile = await service.get_profile("s1")
    assert profile.games_played == 1
    assert profile.total_points == 4
    assert profile.high_score == 40
    assert profile.last_played_at is not None

async def test_level_follows_cumulative_points(db_session):
    service = GameService(db_session)

    await service.record_score("s1", "memory-match", 100, 200, 30)
    await service.record_score("s1", "memory-match", 300, 200, 30)
    profile = await service.get_profile("s1")
    assert profile.total_points == 400
    assert profile.level == 1

    await service.record_score("s1", "memory-match", 50, 150, 30)
    profile = await service.get_profile("s1")
    assert profile.total_points == 550
    assert profile.level == 2
    assert profile.games_played == 3
    assert profile.high_score == 300

async def test_rejected_score_changes_nothing(db_session):
    service = GameService(db_session)
    with pytest.raises(ValidationException):
        await service.record_score("s1", "squishy-clicker", 15, 9, 30, max_combo=10)

    assert await service.get_profile("s1") is None
    assert await service.user_high_scores("s1") == []

async def test_update_profile_sets_username(db_session):
    service = GameService(db_session)
    profile = await service.update_profile("s1", "squish")
    assert profile.username == "squish"
    assert profile.total_points == 0

async def test_leaderboard_orders_by_score_then_submission(db_session):
    service = GameService(db_session)
    first_80 = await service.record_score("a", "squishy-clicker", 80, 0, 30)
    await service.record_score("b", "squishy-clicker", 50, 0, 30)
    second_80 = await service.record_score("c", "squishy-clicker", 80, 0, 30)
    await service.record_score("d", "squishy-clicker", 20, 0, 30)
    await service.record_score("e", "memory-match", 999, 0, 30)

    board = await service.leaderboard("squishy-clicker")
    assert [s.score for s in board] == [80, 80, 50, 20]
    assert [board[0].id, board[1].id] == [first_80.id, second_80.id]

    top = await service.leaderboard("squishy-clicker", 2)
    assert [s.session_id for s in top] == ["a", "c"]

@pytest.mark.parametrize("limit", [0, 101])
async def test_leaderboard_limit_bounds(db_session, limit):
    with pytest.raises(ValidationException):
        await GameService(db_session).leaderboard("squishy-clicker", limit)

async def test_user_high_scores_are_capped(db_session):
    service = GameService(db_session)
    for score in range(12):
        await service.record_score("s1", "memory-match", score, 0, 30)
    await service.record_score("s1", "squishy-clicker", 5, 0, 30)

    scores = await service.user_high_scores("s1", "memory-match")
    assert [s.score for s in scores] == list(range(11, 1, -1))

    all_games = await service.user_high_scores("s1")
    assert len(all_games) == 10

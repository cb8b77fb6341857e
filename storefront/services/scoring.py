"""
Click/combo scoring rules for the squishy clicker game.

Each click awards ``1 + combo // 5`` points, where ``combo`` is the value
before the click, then raises the combo by one. Every click also schedules
its own combo decrement one second later (floored at zero), so a burst of
clicks decays back one step per click. At the end of a 30 second game the
player earns ``score // 10 + max_combo // 5`` reward points.

The server never runs the game; these rules are used to replay click
timelines in tests and to sanity-check submitted results. Other game types
have no server-side rules, so their submissions are only held to the
per-game ceiling ``MAX_POINTS_PER_GAME``.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional
import heapq

from storefront.core.config import settings
from storefront.core.exceptions import ValidationException

SQUISHY_CLICKER = "squishy-clicker"
GAME_DURATION_SECONDS = 30
COMBO_DECAY_SECONDS = 1.0
COMBO_STEP = 5
SCORE_PER_POINT = 10

@dataclass
class GameResult:
    score: int
    max_combo: int
    points_earned: int
    clicks: int

def click_value(combo: int) -> int:
    """Points awarded by a click made at the given combo"""
    return 1 + combo // COMBO_STEP

def points_for_game(score: int, max_combo: int) -> int:
    return score // SCORE_PER_POINT + max_combo // COMBO_STEP

def level_for_points(total_points: int) -> int:
    return total_points // settings.POINTS_PER_LEVEL + 1

class ComboSimulator:
    """Replays a click timeline with per-click combo decay"""

    def __init__(self, duration: float = GAME_DURATION_SECONDS):
        self.duration = duration
        self.score = 0
        self.combo = 0
        self.max_combo = 0
        self.clicks = 0
        self.now = 0.0
        self._decays: List[float] = []

    @property
    def is_over(self) -> bool:
        return self.now >= self.duration

    def advance(self, to: float) -> None:
        """Move the clock forward, applying every decay that has come due"""
        if to < self.now:
            raise ValueError("Clicks must be given in time order")
        while self._decays and self._decays[0] <= to:
            heapq.heappop(self._decays)
            self.combo = max(0, self.combo - 1)
        self.now = to

    def click(self, at: Optional[float] = None) -> int:
        """Register a click; returns the points it awarded (0 once the game is over)"""
        self.advance(self.now if at is None else at)
        if self.is_over:
            return 0

        awarded = click_value(self.combo)
        self.score += awarded
        self.combo += 1
        self.max_combo = max(self.max_combo, self.combo)
        self.clicks += 1
        heapq.heappush(self._decays, self.now + COMBO_DECAY_SECONDS)
        return awarded

    def finish(self) -> GameResult:
        self.advance(max(self.now, self.duration))
        return GameResult(
            score=self.score,
            max_combo=self.max_combo,
            points_earned=points_for_game(self.score, self.max_combo),
            clicks=self.clicks,
        )

def simulate(click_times: Iterable[float], duration: float = GAME_DURATION_SECONDS) -> GameResult:
    """Play a whole game from a list of click timestamps (seconds from start)"""
    game = ComboSimulator(duration)
    for at in click_times:
        game.click(at)
    return game.finish()

def validate_submission(
    game_type: str,
    score: int,
    points_earned: int,
    max_combo: Optional[int] = None
) -> None:
    """Reject results over the per-game ceiling or that the clicker rules could not produce"""
    if points_earned > settings.MAX_POINTS_PER_GAME:
        raise ValidationException(
            f"pointsEarned cannot exceed {settings.MAX_POINTS_PER_GAME} for a single game"
        )
    if game_type != SQUISHY_CLICKER:
        return

    if max_combo is not None:
        # Every click scores at least one point, so the combo never outruns the score
        if max_combo > score:
            raise ValidationException("maxCombo cannot exceed score")
        expected = points_for_game(score, max_combo)
        if points_earned != expected:
            raise ValidationException(
                f"pointsEarned must be {expected} for score {score} and maxCombo {max_combo}"
            )
        return

    ceiling = score // SCORE_PER_POINT + score // COMBO_STEP
    if points_earned > ceiling:
        raise ValidationException(f"pointsEarned cannot exceed {ceiling} for score {score}")

"""Use case for drawing a shareable practice combo."""

import random
from dataclasses import dataclass

from combo.codec import encode
from combo.config import DEFAULT_BASE_URL, DEFAULT_DIFFICULTY
from combo.generator import generate
from combo.scenario import Scenario
from combo.share import build_share_link


@dataclass
class RandomizeComboRequest:
    """Request to draw a combo."""

    difficulty: int = DEFAULT_DIFFICULTY
    container_height: float = 0.0
    page_url: str = DEFAULT_BASE_URL


@dataclass
class RandomizeComboResult:
    """A drawn combo with its token and share link."""

    scenario: Scenario
    token: str
    share_link: str


class RandomizeComboUseCase:
    """Use case for drawing a combo.

    The generator is fully computed before the token is derived from it, so
    the share link always describes the returned scenario.
    """

    def __init__(self, rng: random.Random | None = None):
        self._rng = rng

    def execute(self, request: RandomizeComboRequest) -> RandomizeComboResult:
        scenario = generate(request.difficulty, request.container_height, self._rng)
        token = encode(scenario)
        return RandomizeComboResult(
            scenario=scenario,
            token=token,
            share_link=build_share_link(request.page_url, token),
        )

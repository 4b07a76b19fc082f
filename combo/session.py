"""Arena state that keeps its share link in step with the scenario."""

from __future__ import annotations

import dataclasses
import logging
import random
from typing import Any, Optional

from .codec import encode
from .config import DEFAULT_BASE_URL, DEFAULT_DIFFICULTY
from .generator import bottom_offset_for, defaults, generate
from .scenario import Scenario
from .share import build_share_link, scenario_from_query

logger = logging.getLogger(__name__)


class ComboSession:
    """Current scenario plus the token and link derived from it.

    Every mutating method applies its position/settings change first and then
    calls ``_recompute`` so ``token`` and ``share_link`` never describe a stale
    scenario.
    """

    def __init__(
        self,
        page_url: str = DEFAULT_BASE_URL,
        container_height: float = 0.0,
        rng: Optional[random.Random] = None,
    ):
        self.page_url = page_url
        self.container_height = container_height
        self.randomized = False
        self._rng = rng or random.Random()
        self.scenario: Scenario = defaults()
        self.token = ""
        self.share_link = ""
        self.resize(container_height)

    def _recompute(self) -> None:
        self.token = encode(self.scenario)
        self.share_link = build_share_link(self.page_url, self.token)

    def randomize(self, difficulty: int = DEFAULT_DIFFICULTY) -> Scenario:
        self.scenario = generate(difficulty, self.container_height, self._rng)
        self.randomized = True
        self._recompute()
        return self.scenario

    def reset(self) -> Scenario:
        self.scenario = defaults()
        self.randomized = False
        self._recompute()
        return self.scenario

    def resize(self, container_height: float) -> None:
        self.container_height = container_height
        positions = dataclasses.replace(
            self.scenario.positions, bottom_offset=bottom_offset_for(container_height)
        )
        self.scenario = dataclasses.replace(self.scenario, positions=positions)
        self._recompute()

    def load(self, query: str) -> Scenario:
        self.scenario = scenario_from_query(query)
        self._recompute()
        return self.scenario

    def update(self, **changes: Any) -> Scenario:
        self.scenario = dataclasses.replace(self.scenario, **changes)
        logger.debug(f"Scenario updated: {sorted(changes)}")
        self._recompute()
        return self.scenario

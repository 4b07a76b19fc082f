import random
from collections import Counter
from typing import List

import pytest

from combo.generator import (
    defaults,
    generate,
    generation_errors,
    max_percentage,
    pick_di,
    pick_sdi_strength,
    pick_tool,
    place_fighters,
)
from combo.scenario import DI, SDI, Move, Position, Scenario, SDIStrength, Tool


class ScriptedRandom(random.Random):
    """Hands out a fixed list of draws and fails if asked for more."""

    def __init__(self, values: List[float]) -> None:
        super().__init__(0)
        self._values = list(values)

    def random(self) -> float:
        return self._values.pop(0)


def test_generated_scenarios_hold_invariants() -> None:
    rng = random.Random(1234)
    for i in range(10_000):
        difficulty = i % 10 + 1
        scenario = generate(difficulty, container_height=420.0, rng=rng)
        assert generation_errors(scenario, difficulty) == []
        assert scenario.positions.bottom_offset == 210.0


def test_tool_draw_matches_weights() -> None:
    rng = random.Random(99)
    n = 100_000
    counts = Counter(pick_tool(rng.random()) for _ in range(n))
    expected = {
        Tool.WOOD: 0.30,
        Tool.STONE: 0.10,
        Tool.GOLD: 0.15,
        Tool.IRON: 0.15,
        Tool.DIAMOND: 0.30,
    }
    assert set(counts) == set(expected)
    for tool, share in expected.items():
        assert counts[tool] / n == pytest.approx(share, abs=0.01)


def test_sdi_follows_di() -> None:
    rng = random.Random(7)
    scenarios = [generate(5, rng=rng) for _ in range(20_000)]
    with_di = [s for s in scenarios if s.di != DI.NONE]
    no_sdi = sum(1 for s in with_di if s.sdi == SDI.NONE)
    assert no_sdi / len(with_di) == pytest.approx(0.30, abs=0.02)
    assert len(with_di) / len(scenarios) == pytest.approx(0.90, abs=0.02)
    for s in scenarios:
        if s.sdi != SDI.NONE:
            assert s.sdi.value == s.di.value
        if s.di == DI.NONE:
            assert s.sdi == SDI.NONE


def test_place_fighters_clamps_to_stage() -> None:
    pos = place_fighters(78.0, 8.0, flip=False)
    assert pos == Position(steve_x=74.0, lucina_x=80.0, bottom_offset=0.0)

    pos = place_fighters(21.0, 6.0, flip=False)
    assert pos.steve_x == 20.0
    assert pos.lucina_x == 24.0


def test_place_fighters_flip_swaps_sides() -> None:
    pos = place_fighters(50.0, 4.0, flip=True, container_height=300.0)
    assert pos.steve_x == 52.0
    assert pos.lucina_x == 48.0
    assert pos.bottom_offset == 150.0


def test_negative_container_height_gives_zero_offset() -> None:
    assert place_fighters(50.0, 4.0, flip=False, container_height=-10.0).bottom_offset == 0.0


def test_max_percentage_by_move() -> None:
    assert max_percentage(Move.DOWN_TILT, 10) == 50
    assert max_percentage(Move.JAB, 1) == 72
    assert max_percentage(Move.SFAIR, 5) == 65
    assert max_percentage(Move.SBAIR, 5) == 65
    assert max_percentage(Move.UP_TILT_FRONT, 3) == 100
    assert max_percentage(Move.UP_TILT_BACK, 10) == 100


def test_pick_tool_walks_weights_in_order() -> None:
    assert pick_tool(0.0) == Tool.WOOD
    assert pick_tool(0.35) == Tool.STONE
    assert pick_tool(0.45) == Tool.GOLD
    assert pick_tool(0.62) == Tool.IRON
    assert pick_tool(0.999) == Tool.DIAMOND
    # A draw that walks off the end lands on the first tool.
    assert pick_tool(1.0) == Tool.WOOD


def test_pick_di_and_strength_cutoffs() -> None:
    assert pick_di(0.05) == DI.NONE
    assert pick_di(0.10) == DI.IN
    assert pick_di(0.549) == DI.IN
    assert pick_di(0.55) == DI.OUT
    assert pick_sdi_strength(0.69) == SDIStrength.ONE
    assert pick_sdi_strength(0.70) == SDIStrength.TWO
    assert pick_sdi_strength(0.949) == SDIStrength.TWO
    assert pick_sdi_strength(0.95) == SDIStrength.THREE


def test_generate_uses_draws_in_order() -> None:
    # center, separation, flip, move, percentage, gold, tool, di, sdi, strength
    rng = ScriptedRandom([0.5, 0.0, 0.9, 0.5, 0.5, 0.9, 0.0, 0.7, 0.5, 0.8])
    scenario = generate(5, container_height=100.0, rng=rng)
    assert scenario == Scenario(
        percentage=33,
        gold=True,
        starting_move=Move.SFAIR,
        di=DI.OUT,
        sdi=SDI.OUT,
        sdi_strength=SDIStrength.TWO,
        tool=Tool.WOOD,
        positions=Position(steve_x=48.5, lucina_x=51.5, bottom_offset=50.0),
    )


def test_no_di_skips_sdi_draws() -> None:
    # Only eight draws: asking for SDI or strength would exhaust the script.
    rng = ScriptedRandom([0.5, 0.5, 0.1, 0.0, 0.0, 0.1, 0.5, 0.05])
    scenario = generate(5, rng=rng)
    assert scenario.di == DI.NONE
    assert scenario.sdi == SDI.NONE
    assert scenario.sdi_strength == SDIStrength.ZERO
    assert scenario.gold is False


def test_out_of_range_difficulty_is_clamped() -> None:
    rng = ScriptedRandom([0.5, 0.5, 0.1, 0.0, 0.9999, 0.1, 0.5, 0.05])
    scenario = generate(99, rng=rng)
    assert scenario.starting_move == Move.JAB
    assert scenario.percentage == max_percentage(Move.JAB, 10)


def test_defaults() -> None:
    scenario = defaults()
    assert scenario.percentage == 0
    assert scenario.gold is False
    assert scenario.starting_move == Move.JAB
    assert scenario.di == DI.NONE
    assert scenario.sdi == SDI.NONE
    assert scenario.sdi_strength == SDIStrength.ZERO
    assert scenario.tool == Tool.NONE
    assert scenario.positions == Position(30.0, 70.0, 0.0)


def test_generation_errors_flags_inconsistent_sdi() -> None:
    bad = Scenario(di=DI.IN, sdi=SDI.OUT, sdi_strength=SDIStrength.ONE, positions=Position(40, 45, 0))
    errors = generation_errors(bad, 5)
    assert any("match DI" in e for e in errors)

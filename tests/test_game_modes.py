import pytest

from fun_math_quest.game_modes import (
    DIVISORS,
    MULTIPLY_FACTORS,
    GameMode,
    clamp_question_count,
    drill_modes,
    parse_mode,
)


def test_drill_modes_exclude_table() -> None:
    modes = drill_modes()
    assert GameMode.TABLE not in modes
    assert len(modes) == 6
    assert not GameMode.TABLE.is_drill


def test_every_mode_has_description() -> None:
    for mode in GameMode:
        assert mode.description


def test_factor_tables_cover_single_operand_modes() -> None:
    assert set(MULTIPLY_FACTORS) | set(DIVISORS) | {GameMode.TABLE, GameMode.RANDOM} == set(GameMode)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("Multiply by 10", GameMode.BY_10),
        ("by_1000", GameMode.BY_1000),
        (" RANDOM ", GameMode.RANDOM),
        ("Divide by 3", None),
        (None, None),
    ],
)
def test_parse_mode(raw: str | None, expected: GameMode | None) -> None:
    assert parse_mode(raw) is expected


@pytest.mark.parametrize(("value", "expected"), [(0, 5), (5, 5), (12, 12), (20, 20), (99, 20), (-3, 5)])
def test_clamp_question_count(value: int, expected: int) -> None:
    assert clamp_question_count(value) == expected

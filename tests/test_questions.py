import random
from collections import Counter

import pytest

from fun_math_quest.game_modes import GameMode
from fun_math_quest.questions import (
    Operation,
    PLACEHOLDER_QUESTION,
    Question,
    build_question_pool,
    multiplication_table,
    random_mode_facts,
)


def test_question_answer_and_text() -> None:
    assert Question(7, 10, Operation.MULTIPLY).answer == 70
    assert Question(700, 100, Operation.DIVIDE).answer == 7
    assert Question(7, 10, Operation.MULTIPLY).text == "7 × 10"
    assert Question(90, 10, Operation.DIVIDE).text == "90 ÷ 10"


def test_multiply_by_10_pool_shape() -> None:
    pool = build_question_pool(GameMode.BY_10, 10, random.Random(1))
    assert len(pool) == 10
    assert all(q.rhs == 10 for q in pool)
    assert all(1 <= q.lhs <= 12 for q in pool)
    assert all(q.answer == q.lhs * 10 for q in pool)
    assert len({q.lhs for q in pool}) == 10


@pytest.mark.parametrize("mode,factor", [(GameMode.BY_100, 100), (GameMode.BY_1000, 1000)])
def test_multiply_pools_use_mode_factor(mode: GameMode, factor: int) -> None:
    pool = build_question_pool(mode, 12, random.Random(3))
    assert sorted(q.lhs for q in pool) == list(range(1, 13))
    assert all(q.rhs == factor and q.operation is Operation.MULTIPLY for q in pool)


def test_divide_by_100_pool_is_exact() -> None:
    pool = build_question_pool(GameMode.DIV_100, 5, random.Random(7))
    assert len(pool) == 5
    for q in pool:
        assert q.operation is Operation.DIVIDE
        assert q.rhs == 100
        assert q.lhs % q.rhs == 0
        assert 1 <= q.answer <= 12


@pytest.mark.parametrize("total", [13, 20])
def test_repetition_only_after_full_coverage(total: int) -> None:
    pool = build_question_pool(GameMode.DIV_10, total, random.Random(11))
    assert len(pool) == total
    counts = Counter(q.answer for q in pool)
    assert set(counts) == set(range(1, 13))
    assert max(counts.values()) == 2
    assert {q.answer for q in pool[:12]} == set(range(1, 13))


def test_random_mode_union_size_and_exactness() -> None:
    facts = random_mode_facts()
    assert len(facts) == 36 + 24 + 144 + 132
    assert all(q.lhs % q.rhs == 0 for q in facts if q.operation is Operation.DIVIDE)


def test_random_pool_draws_from_union() -> None:
    union = set(random_mode_facts())
    pool = build_question_pool(GameMode.RANDOM, 20, random.Random(5))
    assert len(pool) == 20
    assert all(q in union for q in pool)


def test_pool_is_deterministic_for_seed() -> None:
    first = build_question_pool(GameMode.RANDOM, 8, random.Random(42))
    second = build_question_pool(GameMode.RANDOM, 8, random.Random(42))
    assert first == second


def test_table_mode_has_placeholder() -> None:
    assert build_question_pool(GameMode.TABLE, 10, random.Random(0)) == [PLACEHOLDER_QUESTION]


def test_multiplication_table_grid() -> None:
    grid = multiplication_table()
    assert len(grid) == 12
    assert grid[0][:3] == [1, 2, 3]
    assert grid[6][9] == 70
    assert grid[11][11] == 144

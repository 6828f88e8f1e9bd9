"""Question model and question-pool generation for drill sessions."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum

from fun_math_quest.game_modes import DIVISORS, MULTIPLY_FACTORS, GameMode

FACT_RANGE = range(1, 13)
RANDOM_DIVISOR_RANGE = range(2, 13)


class Operation(str, Enum):
    MULTIPLY = "multiply"
    DIVIDE = "divide"

    @property
    def symbol(self) -> str:
        return "×" if self is Operation.MULTIPLY else "÷"


@dataclass(frozen=True)
class Question:
    lhs: int
    rhs: int
    operation: Operation

    @property
    def answer(self) -> int:
        if self.operation is Operation.MULTIPLY:
            return self.lhs * self.rhs
        return self.lhs // self.rhs

    @property
    def symbol(self) -> str:
        return self.operation.symbol

    @property
    def text(self) -> str:
        return f"{self.lhs} {self.symbol} {self.rhs}"


PLACEHOLDER_QUESTION = Question(lhs=1, rhs=1, operation=Operation.MULTIPLY)


def multiply_facts(factor: int) -> list[Question]:
    return [Question(lhs=n, rhs=factor, operation=Operation.MULTIPLY) for n in FACT_RANGE]


def division_facts(divisor: int) -> list[Question]:
    # Dividend is built from the quotient so every fact divides exactly.
    return [Question(lhs=divisor * q, rhs=divisor, operation=Operation.DIVIDE) for q in FACT_RANGE]


def random_mode_facts() -> list[Question]:
    facts: list[Question] = []
    for factor in MULTIPLY_FACTORS.values():
        facts.extend(multiply_facts(factor))
    for divisor in DIVISORS.values():
        facts.extend(division_facts(divisor))
    for lhs in FACT_RANGE:
        for rhs in FACT_RANGE:
            facts.append(Question(lhs=lhs, rhs=rhs, operation=Operation.MULTIPLY))
    for quotient in FACT_RANGE:
        for divisor in RANDOM_DIVISOR_RANGE:
            facts.append(Question(lhs=quotient * divisor, rhs=divisor, operation=Operation.DIVIDE))
    return facts


def _shuffled(base: list[Question], rng: random.Random) -> list[Question]:
    items = list(base)
    rng.shuffle(items)
    return items


def build_repeated_pool(base: list[Question], total: int, rng: random.Random) -> list[Question]:
    """Sample ``total`` facts from ``base``.

    Without repetition when the base is large enough; otherwise whole
    reshuffled copies of the base are appended until the pool is long enough,
    so every fact appears before any repeats.
    """
    if total <= 0:
        return []
    if total <= len(base):
        return rng.sample(base, total)
    pool: list[Question] = []
    while len(pool) < total:
        pool.extend(_shuffled(base, rng))
    return pool[:total]


def build_question_pool(mode: GameMode, total: int, rng: random.Random | None = None) -> list[Question]:
    rng = rng or random.Random()
    if mode in MULTIPLY_FACTORS:
        return build_repeated_pool(multiply_facts(MULTIPLY_FACTORS[mode]), total, rng)
    if mode in DIVISORS:
        return build_repeated_pool(division_facts(DIVISORS[mode]), total, rng)
    if mode is GameMode.RANDOM:
        return _shuffled(random_mode_facts(), rng)[: max(0, total)]
    return [PLACEHOLDER_QUESTION]


def multiplication_table(size: int = 12) -> list[list[int]]:
    return [[row * col for col in range(1, size + 1)] for row in range(1, size + 1)]

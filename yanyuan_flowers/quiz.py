"""The flower identification game: random questions and answer checking."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable

from .campus import CampusMap, Point
from .flowers import FlowerInfo


class QuizError(Exception):
    """Raised when the quiz cannot pose or accept a question."""


@dataclass(frozen=True)
class QuizResult:
    """The outcome of one answer."""

    correct: bool
    selected_id: int
    correct_id: int
    selected_name: str
    correct_name: str

    @property
    def message(self) -> str:
        """The text shown to the player after answering."""
        if self.correct:
            return f"✓ 回答正确！\n\n你找到了: {self.selected_name}"
        return (
            f"✗ 回答错误\n\n你选择了: {self.selected_name}\n"
            f"正确答案: {self.correct_name}"
        )


class FlowerQuiz:
    """Shows flowers in random order without repeats until every one has been shown."""

    def __init__(
        self, flowers: Iterable[FlowerInfo], rng: random.Random | None = None
    ) -> None:
        self.flowers: list[FlowerInfo] = list(flowers)
        self._rng = rng if rng is not None else random.Random()
        self.shown_ids: list[int] = []
        self.current: FlowerInfo | None = None

    def next_flower(self) -> FlowerInfo:
        """Pick a flower not shown yet in this round and make it the current question."""
        if not self.flowers:
            raise QuizError("没有可用的花卉数据！")
        if len(self.shown_ids) >= len(self.flowers):
            self.shown_ids.clear()
        shown = set(self.shown_ids)
        pool = [flower for flower in self.flowers if flower.id not in shown]
        flower = self._rng.choice(pool or self.flowers)
        self.current = flower
        self.shown_ids.append(flower.id)
        return flower

    def _name_of(self, flower_id: int) -> str:
        return next((f.name for f in self.flowers if f.id == flower_id), "")

    def answer(self, flower_id: int) -> QuizResult:
        """Check the chosen flower against the current question, then pose the next one."""
        if self.current is None:
            raise QuizError("no question has been asked")
        correct_id = self.current.id
        result = QuizResult(
            correct=flower_id == correct_id,
            selected_id=flower_id,
            correct_id=correct_id,
            selected_name=self._name_of(flower_id),
            correct_name=self._name_of(correct_id),
        )
        self.next_flower()
        return result


def candidates_at(campus: CampusMap, point: Point) -> list[FlowerInfo]:
    """Return the flowers at the place nearest to a clicked map point."""
    location = campus.nearest_location(point)
    if location is None:
        return []
    return list(location.flowers)
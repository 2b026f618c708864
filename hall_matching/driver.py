"""
Построение паросочетания, насыщающего левую долю (конструктивная теорема Холла).

Вместо индукции по |L| — явный цикл: аккумулятор-паросочетание и очередь
ещё не насыщенных левых вершин (по возрастанию индекса). На каждом шаге из
очередной свободной вершины запускается BFS по чередующимся путям:
  - путь найден  -> аугментация, вершина насыщена, очередь короче на один;
  - путь не найден -> посещённые левые вершины дают HallViolation.
Всего не более |L| шагов по O(V + E), итого O(V·(V + E)).

Режим stop_on_violation=False повторяет классический алгоритм Куна: застрявшая
вершина пропускается, а результат — максимальное паросочетание.
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, List, NamedTuple, Optional, Union

from hall_matching.alternating import AlternatingSearch, StepBudget
from hall_matching.augment import augment
from hall_matching.errors import InvalidEdge
from hall_matching.graph_view import Vertex
from hall_matching.hall import HallViolation, violation_from_search
from hall_matching.matching import Matching
from hall_matching.step_log import StepLog, say

if TYPE_CHECKING:
    from hall_matching.graph_view import BipartiteGraph


class StepOutcome(NamedTuple):
    start: Vertex
    path: Optional[List[Vertex]]
    violation: Optional[HallViolation]


class MatchingResult(NamedTuple):
    matching: Matching
    violation: Optional[HallViolation]
    unsaturated: List[Vertex]
    steps: int
    left_size: int
    right_size: int

    @property
    def saturating(self) -> bool:
        return not self.unsaturated

    @property
    def size(self) -> int:
        return len(self.matching)

    @property
    def complete(self) -> bool:
        """Полное по меньшей доле."""
        return self.size == min(self.left_size, self.right_size)

    @property
    def perfect(self) -> bool:
        return self.left_size == self.right_size == self.size


class MatchingDriver:
    """Пошаговый драйвер: prepare() -> next_step() ... -> finalize(), либо сразу run()."""

    def __init__(
        self,
        graph: "BipartiteGraph",
        log: Optional[StepLog] = None,
        max_steps: Optional[int] = None,
        stop_on_violation: bool = True,
        initial: Optional[Matching] = None,
    ) -> None:
        initial = initial if initial is not None else Matching.empty()
        if not initial.is_valid(graph):
            raise InvalidEdge(f"Начальное паросочетание {initial!r} не является паросочетанием графа")

        self.graph = graph
        self.log = log
        self.max_steps = max_steps
        self.stop_on_violation = stop_on_violation
        self.initial = initial

        self.matching: Matching = initial
        self.budget = StepBudget(max_steps)
        self.work: deque[Vertex] = deque()
        self.left_order: List[Vertex] = []
        self.current_start: Optional[Vertex] = None
        self.violation: Optional[HallViolation] = None
        self.skipped: List[Vertex] = []
        self.step_index = 0
        self._prepared = False

    # ---------- Управление шагами ----------

    def prepare(self) -> None:
        """Сброс состояния; стартовать только из СВОБОДНЫХ левых вершин."""
        say(self.log, "=== Построение паросочетания, насыщающего левую долю ===")
        self.matching = self.initial
        self.budget = StepBudget(self.max_steps)
        self.violation = None
        self.skipped = []
        self.step_index = 0
        self.left_order = self.matching.unsaturated(self.graph.left)
        self.work = deque(self.left_order)
        say(self.log, f"Порядок обхода свободных левых вершин: {self.left_order}")
        self._prepared = True
        self._advance_to_next_left()

    def _advance_to_next_left(self) -> None:
        while self.work and self.matching.is_matched(self.work[0]):
            self.work.popleft()
        self.current_start = self.work.popleft() if self.work else None

    @property
    def finished(self) -> bool:
        return self._prepared and self.current_start is None

    @property
    def steps_used(self) -> int:
        return self.budget.used

    def next_step(self) -> StepOutcome:
        if not self._prepared:
            self.prepare()
        if self.current_start is None:
            raise RuntimeError("Алгоритм уже завершён")

        start = self.current_start
        self.step_index += 1
        say(self.log, f"[Шаг {self.step_index}/{len(self.left_order)}] Пытаемся насытить левую вершину {start}")

        search = AlternatingSearch(self.graph, self.matching, start, log=self.log, budget=self.budget)
        path = search.run()

        if path is not None:
            self.matching = augment(self.matching, path, self.graph, log=self.log)
            self._advance_to_next_left()
            return StepOutcome(start, path, None)

        violation = violation_from_search(self.graph, search)
        say(self.log, f"Нет увеличивающего пути для {start}. Размер прежний: {len(self.matching)}", depth=1)
        say(self.log, violation.describe(self.graph), depth=1)
        if self.violation is None:
            self.violation = violation
        self.skipped.append(start)

        if self.stop_on_violation:
            self.current_start = None
        else:
            self._advance_to_next_left()
        return StepOutcome(start, None, violation)

    def run(self) -> MatchingResult:
        if not self._prepared:
            self.prepare()
        while self.current_start is not None:
            self.next_step()
        return self.finalize()

    def finalize(self) -> MatchingResult:
        """Итоговая сводка: размер, насыщенность левой доли, «полное из меньшей доли», совершенство."""
        result = MatchingResult(
            matching=self.matching,
            violation=self.violation,
            unsaturated=self.matching.unsaturated(self.graph.left),
            steps=self.budget.used,
            left_size=len(self.graph.left),
            right_size=len(self.graph.right),
        )
        say(self.log, "=== Завершение ===")
        say(self.log, f"Размер паросочетания |M| = {result.size}")
        say(self.log, f"|L| = {result.left_size}, |R| = {result.right_size}")
        say(self.log, f"Левая доля насыщена: {'ДА' if result.saturating else 'НЕТ'}")
        say(self.log, f"Полное по меньшей доле: {'ДА' if result.complete else 'НЕТ'}")
        say(self.log, f"Совершенное (идеальное): {'ДА' if result.perfect else 'НЕТ'}")
        say(self.log, f"Просмотрено рёбер: {result.steps}")
        return result


# ---------- Разовые вызовы ----------

def saturate_left(
    graph: "BipartiteGraph",
    log: Optional[StepLog] = None,
    max_steps: Optional[int] = None,
    initial: Optional[Matching] = None,
) -> Union[Matching, HallViolation]:
    """Паросочетание, насыщающее L, или дефицитное множество, доказывающее, что его нет."""
    result = MatchingDriver(graph, log=log, max_steps=max_steps, initial=initial).run()
    if result.violation is not None:
        return result.violation
    return result.matching


def maximum_matching(
    graph: "BipartiteGraph",
    log: Optional[StepLog] = None,
    max_steps: Optional[int] = None,
    initial: Optional[Matching] = None,
) -> MatchingResult:
    driver = MatchingDriver(
        graph, log=log, max_steps=max_steps, stop_on_violation=False, initial=initial
    )
    return driver.run()

"""
Поиск чередующихся путей.

BFS идёт от свободной левой вершины s. Состояние пути чередуется:
  UNMATCHED — следующее ребро берётся вне паросочетания (левая -> правая),
  MATCHED   — следующее ребро единственное ребро паросочетания в вершине (правая -> левая).
Поиск успешен, когда достигнута свободная правая вершина: путь s … t имеет
нечётное число рёбер и годится для аугментации. Каждая вершина посещается не
более одного раза, так что путь простой, а поиск стоит O(V + E).

Если очередь опустела, из s увеличить паросочетание нельзя; посещённые левые
вершины тогда образуют дефицитное множество (см. hall.violation_from_search).
"""

from __future__ import annotations

import enum
from collections import deque
from typing import TYPE_CHECKING, Dict, Iterator, List, Optional, Sequence

from hall_matching.errors import InvalidPath, StepBudgetExceeded
from hall_matching.graph_view import Vertex
from hall_matching.matching import Edge, Matching
from hall_matching.step_log import StepLog, say

if TYPE_CHECKING:
    from hall_matching.graph_view import BipartiteGraph


class PathState(enum.Enum):
    UNMATCHED = "unmatched"
    MATCHED = "matched"

    def flipped(self) -> "PathState":
        if self is PathState.UNMATCHED:
            return PathState.MATCHED
        return PathState.UNMATCHED


class StepBudget:
    """Счётчик просмотренных рёбер, общий для всех поисков одного запуска."""

    def __init__(self, limit: Optional[int] = None) -> None:
        if limit is not None and limit < 0:
            raise ValueError("Бюджет шагов не может быть отрицательным")
        self.limit = limit
        self.used = 0

    def spend(self, n: int = 1) -> None:
        self.used += n
        if self.limit is not None and self.used > self.limit:
            raise StepBudgetExceeded(self.limit)


class AlternatingSearch:
    """Пошаговый BFS по чередующимся путям из одной свободной левой вершины."""

    def __init__(
        self,
        graph: "BipartiteGraph",
        matching: Matching,
        start: Vertex,
        log: Optional[StepLog] = None,
        budget: Optional[StepBudget] = None,
    ) -> None:
        if not graph.is_left(start):
            raise InvalidPath(f"Поиск должен начинаться в левой доле, а {start!r} в ней не лежит")
        if matching.is_matched(start):
            raise InvalidPath(f"Стартовая вершина {start!r} уже насыщена")

        self.graph = graph
        self.matching = matching
        self.start = start
        self.log = log
        self.budget = budget if budget is not None else StepBudget()

        self.queue: deque[Vertex] = deque([start])
        # parent одновременно множество посещённых (в порядке посещения)
        self.parent: Dict[Vertex, Optional[Vertex]] = {start: None}
        self.state: Dict[Vertex, PathState] = {start: PathState.UNMATCHED}
        self.end_vertex: Optional[Vertex] = None
        say(log, f"Инициализирован BFS для вершины {start}", depth=1)

    @property
    def found(self) -> bool:
        return self.end_vertex is not None

    @property
    def exhausted(self) -> bool:
        return self.end_vertex is None and not self.queue

    @property
    def visited(self) -> List[Vertex]:
        return list(self.parent)

    @property
    def visited_left(self) -> List[Vertex]:
        return [v for v in self.parent if self.graph.is_left(v)]

    @property
    def visited_right(self) -> List[Vertex]:
        return [v for v in self.parent if self.graph.is_right(v)]

    def step(self) -> bool:
        """Обработать одну левую вершину из очереди. True — найден свободный правый конец."""
        if self.end_vertex is not None:
            return True
        if not self.queue:
            return False

        u = self.queue.popleft()
        say(self.log, f"Обрабатываем вершину {u}", depth=2)

        for v in self._extensions(u):
            if v in self.parent:
                continue

            self.parent[v] = u
            self.state[v] = self.state[u].flipped()
            say(self.log, f"Проверяем ребро {u}-{v}", depth=3)

            if not self.matching.is_matched(v):
                self.end_vertex = v
                say(self.log, f"Вершина {v} свободна! Путь найден", depth=3)
                return True

            for w in self._extensions(v):
                if w not in self.parent:
                    self.parent[w] = v
                    self.state[w] = self.state[v].flipped()
                    self.queue.append(w)
                    say(self.log, f"Вершина {v} соединена с {w}, продолжаем поиск", depth=3)

        return False

    def _extensions(self, u: Vertex) -> Iterator[Vertex]:
        """
        Допустимые продолжения пути из u по её состоянию: в UNMATCHED — рёбра
        вне паросочетания, в MATCHED — только ребро паросочетания в u.
        Каждое просмотренное ребро списывается с бюджета.
        """
        if self.state[u] is PathState.UNMATCHED:
            for v in self.graph.neighbors(u):
                self.budget.spend()
                if not self.matching.contains_edge((u, v)):
                    yield v
        elif self.matching.is_matched(u):
            self.budget.spend()
            yield self.matching.opposite(u)

    def run(self) -> Optional[List[Vertex]]:
        """Полный проход BFS до нахождения пути или опустошения очереди."""
        while self.end_vertex is None and self.queue:
            self.step()
        return self.path

    @property
    def path(self) -> Optional[List[Vertex]]:
        if self.end_vertex is None:
            return None
        return self.reconstruct_path()

    def reconstruct_path(self) -> List[Vertex]:
        """Восстановление пути s … t (список вершин) по предкам."""
        if self.end_vertex is None:
            raise InvalidPath("Путь ещё не найден")
        path: List[Vertex] = []
        current: Optional[Vertex] = self.end_vertex
        while current is not None:
            path.append(current)
            current = self.parent[current]
        path.reverse()
        return path


def find_augmenting_path(
    graph: "BipartiteGraph",
    matching: Matching,
    start: Vertex,
    log: Optional[StepLog] = None,
    budget: Optional[StepBudget] = None,
) -> Optional[List[Vertex]]:
    """Кратчайший увеличивающий путь из свободной левой вершины start или None."""
    return AlternatingSearch(graph, matching, start, log=log, budget=budget).run()


# ---------- Проверки путей ----------

def path_edges(path: Sequence[Vertex]) -> List[Edge]:
    return [frozenset((path[i], path[i + 1])) for i in range(len(path) - 1)]


def is_alternating_path(graph: "BipartiteGraph", matching: Matching, path: Sequence[Vertex]) -> bool:
    """
    Простой путь по рёбрам графа, в котором рёбра паросочетания и рёбра вне
    него строго чередуются (начинать можно с любого типа).
    """
    if not path or len(set(path)) != len(path):
        return False
    if any(v not in graph for v in path):
        return False
    previous: Optional[bool] = None
    for edge in path_edges(path):
        u, v = tuple(edge)
        if not graph.adjacent(u, v):
            return False
        in_matching = matching.contains_edge(edge)
        if previous is not None and in_matching == previous:
            return False
        previous = in_matching
    return True


def is_augmenting_path(graph: "BipartiteGraph", matching: Matching, path: Sequence[Vertex]) -> bool:
    if len(path) < 2 or len(path) % 2:
        return False
    if matching.is_matched(path[0]) or matching.is_matched(path[-1]):
        return False
    return is_alternating_path(graph, matching, path)

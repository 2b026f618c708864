"""
Условие Холла: для любого S ⊆ L выполнено |N(S)| >= |S|.

Нарушение описывается значением HallViolation (дефицитное множество S и его
окрестность N(S)) — это обычный ответ алгоритма, а не исключение. Его можно
проверить вручную: все соседи S перечислены, и их меньше, чем вершин в S.
"""

from __future__ import annotations

from itertools import combinations
from typing import TYPE_CHECKING, FrozenSet, Iterable, NamedTuple, Optional

from hall_matching.errors import MatchingInvariantError
from hall_matching.graph_view import Vertex

if TYPE_CHECKING:
    from hall_matching.alternating import AlternatingSearch
    from hall_matching.graph_view import BipartiteGraph

# полный перебор подмножеств: 2^limit проверок
EXHAUSTIVE_LIMIT = 16


def neighbor_image(graph: "BipartiteGraph", vertices: Iterable[Vertex]) -> FrozenSet[Vertex]:
    image = set()
    for v in vertices:
        image.update(graph.neighbors(v))
    return frozenset(image)


def is_deficient(graph: "BipartiteGraph", vertices: Iterable[Vertex]) -> bool:
    s = frozenset(vertices)
    return len(neighbor_image(graph, s)) < len(s)


class HallViolation(NamedTuple):
    deficient_set: FrozenSet[Vertex]
    neighbors: FrozenSet[Vertex]

    @property
    def deficiency(self) -> int:
        return len(self.deficient_set) - len(self.neighbors)

    def verify(self, graph: "BipartiteGraph") -> bool:
        """Свидетельство корректно: S слева, N(S) посчитана верно и |N(S)| < |S|."""
        if not all(graph.is_left(v) for v in self.deficient_set):
            return False
        return (
            neighbor_image(graph, self.deficient_set) == self.neighbors
            and len(self.neighbors) < len(self.deficient_set)
        )

    def describe(self, graph: Optional["BipartiteGraph"] = None) -> str:
        if graph is not None:
            s, n = graph.sort(self.deficient_set), graph.sort(self.neighbors)
        else:
            s, n = sorted(self.deficient_set, key=repr), sorted(self.neighbors, key=repr)
        return (
            f"Условие Холла нарушено: S = {s}, N(S) = {n}, "
            f"|N(S)| = {len(n)} < |S| = {len(s)}"
        )


def violation_from_search(graph: "BipartiteGraph", search: "AlternatingSearch") -> HallViolation:
    """
    Дефицитное множество из неудачного BFS: S — посещённые левые вершины.
    Каждая посещённая правая вершина насыщена партнёром из S, а старт свободен,
    поэтому |N(S)| = |S| - 1.
    """
    if not search.exhausted:
        raise MatchingInvariantError("Поиск ещё не исчерпан, дефицитное множество не определено")
    s = frozenset(search.visited_left)
    n = neighbor_image(graph, s)
    if len(n) >= len(s) or n != frozenset(search.visited_right):
        raise MatchingInvariantError(
            f"Посещённые вершины {graph.sort(s)} не образуют дефицитного множества"
        )
    return HallViolation(s, n)


def find_deficient_subset(
    graph: "BipartiteGraph",
    vertices: Optional[Iterable[Vertex]] = None,
    limit: int = EXHAUSTIVE_LIMIT,
) -> Optional[HallViolation]:
    """
    Полный перебор подмножеств (по возрастанию размера) — только для маленьких
    долей, служит эталоном для проверки основного алгоритма.
    """
    side = graph.sort(vertices) if vertices is not None else graph.left
    if len(side) > limit:
        raise ValueError(f"Перебор 2^{len(side)} подмножеств слишком велик (предел {limit})")
    for k in range(1, len(side) + 1):
        for subset in combinations(side, k):
            image = neighbor_image(graph, subset)
            if len(image) < k:
                return HallViolation(frozenset(subset), image)
    return None


def hall_condition_holds(
    graph: "BipartiteGraph",
    vertices: Optional[Iterable[Vertex]] = None,
    limit: int = EXHAUSTIVE_LIMIT,
) -> bool:
    return find_deficient_subset(graph, vertices, limit) is None

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Sequence

from hall_matching.alternating import path_edges
from hall_matching.errors import InvalidPath
from hall_matching.graph_view import Vertex
from hall_matching.matching import Matching
from hall_matching.step_log import StepLog, say

if TYPE_CHECKING:
    from hall_matching.graph_view import BipartiteGraph


def augment(
    matching: Matching,
    path: Sequence[Vertex],
    graph: Optional["BipartiteGraph"] = None,
    log: Optional[StepLog] = None,
) -> Matching:
    """
    Флиппинг рёбер увеличивающего пути v0 … v(2k+1):
    M' = (M \\ рёбра пути из M) ∪ (рёбра пути вне M).

    |M'| = |M| + 1, носитель растёт ровно на концы v0 и v(2k+1).
    Если передан graph, дополнительно проверяется, что все рёбра пути есть в графе.
    """
    path = list(path)
    if len(path) < 2 or len(path) % 2:
        raise InvalidPath(f"Увеличивающий путь должен содержать чётное число вершин (≥ 2), получено {len(path)}")
    if len(set(path)) != len(path):
        raise InvalidPath(f"Путь {path} повторяет вершину")
    for end in (path[0], path[-1]):
        if matching.is_matched(end):
            raise InvalidPath(f"Конец пути {end!r} уже насыщен")

    for i, edge in enumerate(path_edges(path)):
        u, v = path[i], path[i + 1]
        if graph is not None and not graph.adjacent(u, v):
            raise InvalidPath(f"{u!r} — {v!r} не является ребром графа")
        # чётные позиции вне паросочетания, нечётные — в нём
        if matching.contains_edge(edge) != (i % 2 == 1):
            raise InvalidPath(f"Путь {path} не чередуется на ребре {u!r} — {v!r}")

    result = matching._rematched((path[i], path[i + 1]) for i in range(0, len(path), 2))
    say(log, "Найден увеличивающий путь: " + " -> ".join(str(v) for v in path), depth=1)
    say(log, f"Обновлено паросочетание. Новый размер: {len(result)}", depth=1)
    return result

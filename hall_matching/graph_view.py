"""
Двудольный неориентированный граф в том виде, в каком его потребляет ядро:
конечное множество вершин, симметричная смежность без петель и раскраска
вершин в две доли (0 = левая L, 1 = правая R).

Порядок вершин — порядок перечисления. Он же задаёт детерминированный выбор
«вершины с наименьшим индексом» во всех алгоритмах.
"""

from __future__ import annotations

from collections import deque
from typing import Dict, Hashable, Iterable, Iterator, List, Mapping, Set, Tuple

from hall_matching.errors import GraphInputError, NotBipartiteError

Vertex = Hashable


class BipartiteGraph:
    """Неизменяемое представление графа с разбиением на доли (проверяется на входе)."""

    def __init__(
        self,
        vertices: Iterable[Vertex],
        adjacency: Mapping[Vertex, Iterable[Vertex]],
        color: Mapping[Vertex, int],
    ) -> None:
        self._vertices: List[Vertex] = []
        self._index: Dict[Vertex, int] = {}
        for v in vertices:
            if v in self._index:
                raise GraphInputError(f"Вершина {v!r} перечислена дважды")
            self._index[v] = len(self._vertices)
            self._vertices.append(v)

        self._color: Dict[Vertex, int] = {}
        for v in self._vertices:
            if v not in color:
                raise GraphInputError(f"Вершине {v!r} не назначена доля")
            c = color[v]
            if c not in (0, 1):
                raise GraphInputError(f"Доля вершины {v!r} должна быть 0 или 1, получено {c!r}")
            self._color[v] = int(c)

        adj: Dict[Vertex, Set[Vertex]] = {v: set() for v in self._vertices}
        for u, nbrs in adjacency.items():
            if u not in self._index:
                raise GraphInputError(f"Неизвестная вершина {u!r} в списке смежности")
            for w in nbrs:
                if w not in self._index:
                    raise GraphInputError(f"Ребро {u!r} — {w!r} ведёт в неизвестную вершину")
                if w == u:
                    raise GraphInputError(f"Петля в вершине {u!r}")
                if self._color[u] == self._color[w]:
                    raise GraphInputError(f"Ребро {u!r} — {w!r} соединяет вершины одной доли")
                adj[u].add(w)

        for u, nbrs in adj.items():
            for w in nbrs:
                if u not in adj[w]:
                    raise GraphInputError(f"Смежность несимметрична: {u!r} → {w!r} без обратного ребра")

        # соседи храним уже упорядоченными: поиск всегда идёт по возрастанию индекса
        self._adj: Dict[Vertex, Tuple[Vertex, ...]] = {
            v: tuple(self.sort(nbrs)) for v, nbrs in adj.items()
        }
        self._adj_sets: Dict[Vertex, frozenset] = {v: frozenset(n) for v, n in adj.items()}
        self._left = [v for v in self._vertices if self._color[v] == 0]
        self._right = [v for v in self._vertices if self._color[v] == 1]

    # ---------- Конструкторы ----------

    @classmethod
    def from_edges(
        cls,
        left: Iterable[Vertex],
        right: Iterable[Vertex],
        edges: Iterable[Tuple[Vertex, Vertex]],
    ) -> "BipartiteGraph":
        left = list(left)
        right = list(right)
        common = set(left) & set(right)
        if common:
            raise GraphInputError(f"Вершины {sorted(common, key=repr)} указаны в обеих долях")
        color = {v: 0 for v in left}
        color.update({v: 1 for v in right})
        adjacency: Dict[Vertex, Set[Vertex]] = {v: set() for v in color}
        for u, w in edges:
            if u not in adjacency or w not in adjacency:
                raise GraphInputError(f"Ребро {u!r} — {w!r} ведёт в неизвестную вершину")
            adjacency[u].add(w)
            adjacency[w].add(u)
        return cls(left + right, adjacency, color)

    @classmethod
    def from_adjacency(cls, adjacency: Mapping[Vertex, Iterable[Vertex]]) -> "BipartiteGraph":
        """
        Строит граф по списку смежности, считая его неориентированным
        (ребро есть, если оно указано хотя бы в одну сторону), и сам вычисляет доли.
        """
        vertices = list(adjacency)
        sym: Dict[Vertex, Set[Vertex]] = {v: set() for v in vertices}
        for u, nbrs in adjacency.items():
            for w in nbrs:
                if w not in sym:
                    raise GraphInputError(f"Ребро {u!r} — {w!r} ведёт в неизвестную вершину")
                sym[u].add(w)
                sym[w].add(u)
        color = two_coloring(vertices, sym)
        return cls(vertices, sym, color)

    # ---------- Запросы ----------

    @property
    def vertices(self) -> List[Vertex]:
        return list(self._vertices)

    @property
    def left(self) -> List[Vertex]:
        return list(self._left)

    @property
    def right(self) -> List[Vertex]:
        return list(self._right)

    @property
    def edge_count(self) -> int:
        return sum(len(n) for n in self._adj.values()) // 2

    def color(self, v: Vertex) -> int:
        return self._color[v]

    def is_left(self, v: Vertex) -> bool:
        return self._color.get(v) == 0

    def is_right(self, v: Vertex) -> bool:
        return self._color.get(v) == 1

    def adjacent(self, u: Vertex, v: Vertex) -> bool:
        nbrs = self._adj_sets.get(u)
        return nbrs is not None and v in nbrs

    def neighbors(self, v: Vertex) -> Tuple[Vertex, ...]:
        return self._adj[v]

    def edges(self) -> Iterator[Tuple[Vertex, Vertex]]:
        """Рёбра (левый конец, правый конец) в порядке вершин."""
        for u in self._left:
            for w in self._adj[u]:
                yield u, w

    def order_key(self, v: Vertex) -> int:
        return self._index[v]

    def sort(self, vertices: Iterable[Vertex]) -> List[Vertex]:
        return sorted(vertices, key=self._index.__getitem__)

    def __contains__(self, v: object) -> bool:
        return v in self._index

    def __len__(self) -> int:
        return len(self._vertices)

    def __repr__(self) -> str:
        return f"BipartiteGraph(|L|={len(self._left)}, |R|={len(self._right)}, |E|={self.edge_count})"


# ---------- Проверка двудольности ----------

def two_coloring(
    vertices: List[Vertex],
    adjacency: Mapping[Vertex, Iterable[Vertex]],
) -> Dict[Vertex, int]:
    """
    BFS-окраска: первая вершина каждой компоненты (в порядке перечисления)
    попадает в левую долю, изолированные вершины тоже остаются слева.
    Если найден нечётный цикл — NotBipartiteError.
    """
    color: Dict[Vertex, int] = {}
    for start in vertices:
        if start in color:
            continue
        color[start] = 0
        q: deque[Vertex] = deque([start])

        while q:
            u = q.popleft()
            for v in adjacency.get(u, ()):
                if v not in color:
                    color[v] = 1 - color[u]
                    q.append(v)
                elif color[v] == color[u]:
                    raise NotBipartiteError(
                        f"Граф не является двудольным: ребро {u!r} — {v!r} замыкает нечётный цикл"
                    )
    return color

"""
Паросочетание: множество рёбер графа без общих вершин.

Внутри хранится только таблица партнёров mate (вершина -> её пара). Она же
является носителем (ключи) и отображением opposite. Обе записи ребра всегда
добавляются вместе, поэтому инвариант «никакая вершина не лежит в двух рёбрах»
выполняется конструктивно.

Значение неизменяемое: аугментация и объединение возвращают новое паросочетание.
"""

from __future__ import annotations

from typing import (
    TYPE_CHECKING, Dict, FrozenSet, Iterable, Iterator, List, Optional, Tuple,
)

from hall_matching.errors import InvalidEdge, NotMatched, OverlappingSupport
from hall_matching.graph_view import Vertex

if TYPE_CHECKING:
    from hall_matching.graph_view import BipartiteGraph

Edge = FrozenSet[Vertex]


def edge_ends(e) -> Tuple[Vertex, Vertex]:
    """Концы ребра; принимает frozenset({u, v}) или пару (u, v)."""
    if isinstance(e, (set, frozenset)):
        if len(e) != 2:
            raise InvalidEdge(f"Ребро должно состоять из двух различных вершин: {set(e)!r}")
        u, v = tuple(e)
        return u, v
    try:
        u, v = e
    except (TypeError, ValueError):
        raise InvalidEdge(f"Ожидается пара вершин, получено {e!r}") from None
    return u, v


class Matching:
    __slots__ = ("_mate",)

    def __init__(self) -> None:
        self._mate: Dict[Vertex, Vertex] = {}

    # ---------- Конструкторы ----------

    @classmethod
    def empty(cls) -> "Matching":
        return cls()

    @classmethod
    def from_edges(cls, edges: Iterable, graph: Optional["BipartiteGraph"] = None) -> "Matching":
        """
        Начальное паросочетание из явного списка рёбер (например, чтобы
        продолжить аугментацию с известного состояния). Повтор одного и того же
        ребра допускается, два разных ребра с общей вершиной — нет.
        """
        mate: Dict[Vertex, Vertex] = {}
        for e in edges:
            u, v = edge_ends(e)
            if u == v:
                raise InvalidEdge(f"Петля {u!r} — {v!r} не может входить в паросочетание")
            if graph is not None and not graph.adjacent(u, v):
                raise InvalidEdge(f"{u!r} — {v!r} не является ребром графа")
            if mate.get(u) == v:
                continue
            common = {u, v} & mate.keys()
            if common:
                raise OverlappingSupport(common)
            mate[u] = v
            mate[v] = u
        return cls._from_mate(mate)

    @classmethod
    def _from_mate(cls, mate: Dict[Vertex, Vertex]) -> "Matching":
        m = cls()
        m._mate = mate
        return m

    def _rematched(self, pairs: Iterable[Tuple[Vertex, Vertex]]) -> "Matching":
        """
        Копия, в которой каждая вершина из pairs получает нового партнёра.
        Старые рёбра этих вершин исчезают сами: у каждой вершины одна запись.
        Проверка, что результат остаётся паросочетанием, — на вызывающей стороне.
        """
        mate = dict(self._mate)
        for u, v in pairs:
            mate[u] = v
            mate[v] = u
        return Matching._from_mate(mate)

    # ---------- Запросы ----------

    def contains_edge(self, e) -> bool:
        u, v = edge_ends(e)
        return u != v and u in self._mate and self._mate[u] == v

    def support(self) -> FrozenSet[Vertex]:
        return frozenset(self._mate)

    def opposite(self, v: Vertex) -> Vertex:
        try:
            return self._mate[v]
        except KeyError:
            raise NotMatched(v) from None

    def is_matched(self, v: Vertex) -> bool:
        return v in self._mate

    def is_valid(self, graph: "BipartiteGraph") -> bool:
        """Все рёбра — рёбра графа, вершины не повторяются, opposite — инволюция."""
        for v, w in self._mate.items():
            if v == w or self._mate.get(w) != v:
                return False
            if not graph.adjacent(v, w):
                return False
        return True

    def is_saturating(self, vertices: Iterable[Vertex]) -> bool:
        return all(v in self._mate for v in vertices)

    def unsaturated(self, vertices: Iterable[Vertex]) -> List[Vertex]:
        return [v for v in vertices if v not in self._mate]

    def edges(self) -> FrozenSet[Edge]:
        return frozenset(self)

    def pairs(self, graph: "BipartiteGraph") -> List[Tuple[Vertex, Vertex]]:
        """Пары (левая, правая) по возрастанию левой вершины."""
        return [(u, self._mate[u]) for u in graph.left if u in self._mate]

    # ---------- Композиция ----------

    def disjoint_union(self, other: "Matching") -> "Matching":
        common = self._mate.keys() & other._mate.keys()
        if common:
            raise OverlappingSupport(common)
        mate = dict(self._mate)
        mate.update(other._mate)
        return Matching._from_mate(mate)

    # ---------- Протоколы ----------

    def __len__(self) -> int:
        return len(self._mate) // 2

    def __iter__(self) -> Iterator[Edge]:
        seen = set()
        for v, w in self._mate.items():
            if v not in seen:
                seen.add(w)
                yield frozenset((v, w))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matching):
            return NotImplemented
        return self._mate == other._mate

    def __hash__(self) -> int:
        return hash(self.edges())

    def __repr__(self) -> str:
        shown = ", ".join(f"{v!r}—{w!r}" for v, w in (tuple(e) for e in self))
        return f"Matching({{{shown}}})"

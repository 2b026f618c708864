"""
Отрисовка двудольного графа: левая доля слева (x=0), правая справа (x=3).
Рёбра графа серые, рёбра паросочетания красные, увеличивающий путь —
оранжевый пунктир. Дефицитное множество S и его окрестность N(S) подсвечиваются.
"""

from __future__ import annotations

from typing import Dict, Optional, Sequence, Set, Tuple

from matplotlib.figure import Figure

from hall_matching.alternating import path_edges
from hall_matching.graph_view import BipartiteGraph, Vertex
from hall_matching.hall import HallViolation
from hall_matching.matching import Matching


def _positions(graph: BipartiteGraph) -> Dict[Vertex, Tuple[int, int]]:
    pos: Dict[Vertex, Tuple[int, int]] = {}
    for i, node in enumerate(graph.left):
        pos[node] = (0, i)
    for i, node in enumerate(graph.right):
        pos[node] = (3, i)
    return pos


def draw_graph(
    graph: BipartiteGraph,
    matching: Optional[Matching] = None,
    ax=None,
    highlight_path: Optional[Sequence[Vertex]] = None,
    violation: Optional[HallViolation] = None,
    title: Optional[str] = None,
):
    """
    Рисует граф на ax и возвращает ax. Без ax рисует на отдельной Figure,
    которая не регистрируется в pyplot и не зависит от выбранного backend.
    """
    if ax is None:
        ax = Figure(figsize=(8, 6)).subplots()
    ax.clear()

    if len(graph) == 0:
        ax.text(0.5, 0.5, "Граф пуст", ha="center", va="center", transform=ax.transAxes)
        ax.set_axis_off()
        return ax

    pos = _positions(graph)

    for u, v in graph.edges():
        (x1, y1), (x2, y2) = pos[u], pos[v]
        ax.plot([x1, x2], [y1, y2], "gray", alpha=0.5)

    if matching is not None:
        for u, v in matching.pairs(graph):
            (x1, y1), (x2, y2) = pos[u], pos[v]
            ax.plot([x1, x2], [y1, y2], "red", linewidth=3)

    if highlight_path:
        for edge in path_edges(highlight_path):
            u, v = tuple(edge)
            (x1, y1), (x2, y2) = pos[u], pos[v]
            ax.plot([x1, x2], [y1, y2], "orange", linewidth=3, linestyle="dashed")

    deficient: Set[Vertex] = set(violation.deficient_set) if violation else set()
    image: Set[Vertex] = set(violation.neighbors) if violation else set()

    for node, (x, y) in pos.items():
        if node in deficient:
            face, edge_width, size = "purple", 2, 20
        elif node in image:
            face, edge_width, size = "gold", 2, 20
        elif graph.is_left(node):
            face, edge_width, size = "lightblue", 1, 15
        else:
            face, edge_width, size = "lightgreen", 1, 15
        ax.plot(x, y, "o", markersize=size, markerfacecolor=face,
                markeredgecolor="black", markeredgewidth=edge_width)
        ax.text(x, y, str(node), ha="center", va="center")

    ax.set_xlim(-1, 4)
    ax.set_ylim(-1, max(len(graph.left), len(graph.right)) + 1)
    ax.set_axis_off()
    if title is None:
        title = "Двудольный граф — паросочетание"
        if matching is not None:
            title += f" (|M| = {len(matching)})"
    ax.set_title(title)
    return ax


def save_drawing(
    path: str,
    graph: BipartiteGraph,
    matching: Optional[Matching] = None,
    highlight_path: Optional[Sequence[Vertex]] = None,
    violation: Optional[HallViolation] = None,
    title: Optional[str] = None,
) -> str:
    fig = Figure(figsize=(8, 6))
    ax = fig.subplots()
    draw_graph(graph, matching, ax=ax, highlight_path=highlight_path,
               violation=violation, title=title)
    fig.tight_layout()
    fig.savefig(path)
    return path

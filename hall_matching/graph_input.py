"""
Загрузка графа из текстового формата (тот же, что у консоли и встроенных тестов):
  1-я строка: N (число вершин, нумерация 0..N-1)
  далее N строк матрицы; '-' = нет ребра, любое другое значение (включая 0, отриц.) = есть ребро.
Граф НЕОРИЕНТИРОВАННЫЙ: ребро (i, j) есть, если matrix[i][j] != '-' ИЛИ matrix[j][i] != '-'.
Самопетли игнорируются. Доли вычисляются BFS-окраской.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Set, Tuple

from hall_matching.errors import GraphInputError
from hall_matching.graph_view import BipartiteGraph
from hall_matching.step_log import StepLog, say

NO_EDGE = "-"


def parse_graph_text(text: str) -> Tuple[int, List[List[str]]]:
    """Разбор текстового представления графа (валидация формата)."""
    lines = [ln.strip() for ln in text.splitlines() if ln.strip()]
    if not lines:
        raise GraphInputError("Пустой ввод")

    if not lines[0].isdecimal():
        raise GraphInputError("Первая строка должна содержать число вершин (целое)")

    n = int(lines[0])
    if n <= 0:
        raise GraphInputError("Число вершин должно быть положительным")

    if len(lines) - 1 < n:
        raise GraphInputError(f"Ожидается {n} строк матрицы, получено {len(lines) - 1}")

    matrix: List[List[str]] = []
    for i in range(n):
        row = lines[1 + i].split()
        if len(row) != n:
            raise GraphInputError(f"Строка {i + 2} должна содержать {n} элементов")
        matrix.append(row)
    return n, matrix


def graph_from_matrix(matrix: List[List[str]]) -> BipartiteGraph:
    n = len(matrix)
    adj: Dict[int, Set[int]] = {i: set() for i in range(n)}
    for i in range(n):
        for j in range(i + 1, n):
            if matrix[i][j] != NO_EDGE or matrix[j][i] != NO_EDGE:
                adj[i].add(j)
                adj[j].add(i)
    return BipartiteGraph.from_adjacency(adj)


def load_graph_text(text: str, log: Optional[StepLog] = None, source_name: str = "текст") -> BipartiteGraph:
    n, matrix = parse_graph_text(text)
    graph = graph_from_matrix(matrix)
    say(log, f"Загружено ({source_name}): N={n}, |E|={graph.edge_count} (неориентированный)")
    say(log, f"Двудольное разбиение: |L|={len(graph.left)}, |R|={len(graph.right)}")
    say(log, f"  L = {graph.left}")
    say(log, f"  R = {graph.right}")
    return graph


def load_graph(path: str, log: Optional[StepLog] = None) -> BipartiteGraph:
    say(log, f"Чтение файла: {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except UnicodeDecodeError as e:
        raise GraphInputError(f"Файл {path} не в кодировке UTF-8: {e}") from None
    return load_graph_text(text, log, source_name=path)

"""
Генератор больших двудольных графов в текстовом формате матрицы
(левая доля: 0..n-1, правая: n..2n-1; '-' = нет ребра, '1' = ребро).
"""

from __future__ import annotations

import random
from typing import List


def random_bipartite_matrix(
    n: int,
    extras: int = 12,
    seed: int = 42,
    perfect: bool = True,
    s_ratio: float = 0.35,
    t_ratio: float = 0.25,
) -> List[List[str]]:
    """
    perfect=True  -> гарантированно есть совершенное паросочетание (i <-> n+i).
    perfect=False -> нарушаем Холла: S = первые s левых смежны только с первыми t < s правыми.
    extras — число дополнительных рёбер от каждой левой вершины (вне S при perfect=False).
    """
    if n < 2:
        raise ValueError("Нужно хотя бы 2 вершины в каждой доле")
    size = 2 * n
    matrix = [["-" for _ in range(size)] for _ in range(size)]

    def add_edge(u: int, v: int) -> None:
        matrix[u][v] = "1"
        matrix[v][u] = "1"

    left = list(range(n))
    right = list(range(n, 2 * n))
    rng = random.Random(seed)

    deficient: List[int] = []
    if perfect:
        for i in range(n):
            add_edge(left[i], right[i])
    else:
        s = max(2, int(n * s_ratio))
        t = max(1, int(n * t_ratio))
        t = min(t, s - 1)
        deficient = left[:s]
        for u in deficient:
            for v in right[:t]:
                add_edge(u, v)

        remaining_left = left[s:]
        remaining_right = right[t:]
        for u, v in zip(remaining_left, remaining_right):
            add_edge(u, v)

    # дополнительные рёбра для плотности; S не трогаем, иначе дефицит исчезнет
    for u in left:
        if u in deficient:
            continue
        choices = [j for j in range(n) if not (perfect and j == u)]
        k = min(extras, len(choices))
        for j in rng.sample(choices, k):
            add_edge(u, right[j])

    return matrix


def format_matrix(matrix: List[List[str]]) -> str:
    return "\n".join([str(len(matrix))] + [" ".join(row) for row in matrix]) + "\n"


def write_graph(filename: str, n: int, **kwargs) -> str:
    text = format_matrix(random_bipartite_matrix(n, **kwargs))
    with open(filename, "w", encoding="utf-8") as f:
        f.write(text)
    return filename

"""
Исключения ядра паросочетаний.

HallViolation сюда не входит: это обычный результат алгоритма, а не ошибка
(см. hall.py). Здесь только ошибки входа и нарушения инвариантов.
"""

from __future__ import annotations


# ---------- Ошибки входных данных ----------

class GraphInputError(ValueError):
    """Некорректный граф или разбиение на доли (отклоняется на границе)."""


class NotBipartiteError(GraphInputError):
    """В графе есть нечётный цикл."""


# ---------- Нарушения инвариантов (ошибки программиста) ----------

class MatchingInvariantError(AssertionError):
    """Базовый класс: при корректном драйвере такие ошибки недостижимы."""


class NotMatched(MatchingInvariantError):
    """opposite() вызван для вершины вне носителя паросочетания."""

    def __init__(self, vertex) -> None:
        super().__init__(f"Вершина {vertex!r} не покрыта паросочетанием")
        self.vertex = vertex


class OverlappingSupport(MatchingInvariantError):
    """Два паросочетания (или два ребра) имеют общую вершину."""

    def __init__(self, common) -> None:
        shown = sorted(common, key=repr)
        super().__init__(f"Носители пересекаются по вершинам {shown}")
        self.common = frozenset(common)


class InvalidEdge(MatchingInvariantError):
    """Ребро не является ребром графа (или это петля)."""


class InvalidPath(MatchingInvariantError):
    """Путь не чередуется, повторяет вершину или имеет насыщенный конец."""


# ---------- Ресурсы ----------

class StepBudgetExceeded(RuntimeError):
    def __init__(self, budget: int) -> None:
        super().__init__(f"Превышен бюджет шагов: {budget}")
        self.budget = budget

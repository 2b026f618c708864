"""Встроенные графы (в текстовом формате матрицы) и ожидаемые результаты для них."""

from __future__ import annotations

from typing import Dict

SAMPLES: Dict[str, str] = {
    "1) perfect_6": """6
- - - 1 1 -
- - - 1 1 -
- - - 1 1 1
1 1 1 - - -
1 1 1 - - -
- - 1 - - -""",
    "2) star_5": """5
- 1 1 1 1
1 - - - -
1 - - - -
1 - - - -
1 - - - -""",
    "3) hall_violation_8": """8
- - - - 1 1 - -
- - - - 1 1 - -
- - - - 1 1 - -
- - - - - - 1 -
1 1 1 - - - - -
1 1 1 - - - - -
- - - 1 - - - -
- - - - - - - -""",
    "4) empty_6": """6
- - - - - -
- - - - - -
- - - - - -
- - - - - -
- - - - - -
- - - - - -""",
    "5) not_bipartite_triangle_5": """5
- 1 1 - -
1 - 1 - -
1 1 - - -
- - - - 1
- - - 1 -""",
    "6) two_edges_isolates_7": """7
- - - - - 1 -
- - - - - - 1
- - - - - - -
- - - - - - -
- - - - - - -
1 - - - - - -
- 1 - - - - -""",
    "7) K5,5_complete_10": """10
- - - - - 1 1 1 1 1
- - - - - 1 1 1 1 1
- - - - - 1 1 1 1 1
- - - - - 1 1 1 1 1
- - - - - 1 1 1 1 1
1 1 1 1 1 - - - - -
1 1 1 1 1 - - - - -
1 1 1 1 1 - - - - -
1 1 1 1 1 - - - - -
1 1 1 1 1 - - - - -""",
    "8) weighted_perfect_6": """6
- - - 0 -5 -
- - - -1 2 -
- - - 0 - 7
0 -1 0 - - -
-5 2 - - - -
- - 7 - - -""",
}

# size — размер максимального паросочетания; deficient — первое дефицитное
# множество, которое находит драйвер (None, если левая доля насыщается).
EXPECTATIONS: Dict[str, Dict] = {
    "1) perfect_6": dict(size=3, saturating=True, complete=True, perfect=True,
                         deficient=None, bipartite=True),
    "2) star_5": dict(size=1, saturating=True, complete=True, perfect=False,
                      deficient=None, bipartite=True),
    "3) hall_violation_8": dict(size=3, saturating=False, complete=True, perfect=False,
                                deficient={0, 1, 2}, bipartite=True),
    "4) empty_6": dict(size=0, saturating=False, complete=True, perfect=False,
                       deficient={0}, bipartite=True),
    "5) not_bipartite_triangle_5": dict(bipartite=False),
    "6) two_edges_isolates_7": dict(size=2, saturating=False, complete=True, perfect=False,
                                    deficient={2}, bipartite=True),
    "7) K5,5_complete_10": dict(size=5, saturating=True, complete=True, perfect=True,
                                deficient=None, bipartite=True),
    "8) weighted_perfect_6": dict(size=3, saturating=True, complete=True, perfect=True,
                                  deficient=None, bipartite=True),
}

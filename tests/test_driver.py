import pytest

from hall_matching.driver import MatchingDriver, maximum_matching, saturate_left
from hall_matching.errors import InvalidEdge, StepBudgetExceeded
from hall_matching.graph_view import BipartiteGraph
from hall_matching.hall import HallViolation
from hall_matching.matching import Matching
from hall_matching.step_log import StepLog


def test_two_by_two_needs_augmentation():
    graph = BipartiteGraph.from_edges(["a", "b"], ["x", "y"], [("a", "x"), ("a", "y"), ("b", "x")])
    m = saturate_left(graph)
    assert isinstance(m, Matching)
    assert m == Matching.from_edges([("a", "y"), ("b", "x")])


def test_three_left_two_right_is_deficient():
    graph = BipartiteGraph.from_edges(
        ["a", "b", "c"], ["x", "y"], [(u, v) for u in "abc" for v in "xy"]
    )
    v = saturate_left(graph)
    assert v == HallViolation(frozenset("abc"), frozenset("xy"))
    assert v.verify(graph)


def test_single_edge():
    graph = BipartiteGraph.from_edges(["a"], ["x"], [("a", "x")])
    m = saturate_left(graph)
    assert m == Matching.from_edges([("a", "x")])
    assert m.opposite("a") == "x"
    assert m.opposite("x") == "a"


def test_empty_left_side_runs_no_search():
    graph = BipartiteGraph.from_edges([], ["x", "y"], [])
    driver = MatchingDriver(graph)
    result = driver.run()
    assert result.matching == Matching.empty()
    assert result.saturating
    assert result.steps == 0
    assert driver.step_index == 0


def test_augmentation_from_seeded_matching():
    graph = BipartiteGraph.from_edges(["a", "b"], ["x", "y"], [("a", "x"), ("a", "y"), ("b", "x")])
    driver = MatchingDriver(graph, initial=Matching.from_edges([("a", "x")], graph))
    outcome = driver.next_step()
    assert outcome.start == "b"
    assert outcome.path == ["b", "x", "a", "y"]
    assert outcome.violation is None
    assert driver.finished
    assert driver.matching == Matching.from_edges([("b", "x"), ("a", "y")])
    assert len(driver.matching) == 2


def test_invalid_seed_rejected():
    graph = BipartiteGraph.from_edges(["a"], ["x", "y"], [("a", "x")])
    with pytest.raises(InvalidEdge):
        MatchingDriver(graph, initial=Matching.from_edges([("a", "y")]))


def test_matching_grows_by_one_each_step():
    graph = BipartiteGraph.from_edges(
        range(4), range(4, 8),
        [(0, 4), (0, 5), (1, 4), (2, 5), (2, 6), (3, 6), (3, 7)],
    )
    driver = MatchingDriver(graph)
    driver.prepare()
    sizes = [len(driver.matching)]
    supports = [driver.matching.support()]
    while not driver.finished:
        outcome = driver.next_step()
        assert outcome.path is not None
        assert driver.matching.is_valid(graph)
        sizes.append(len(driver.matching))
        supports.append(driver.matching.support())
    assert sizes == [0, 1, 2, 3, 4]
    assert all(a <= b for a, b in zip(supports, supports[1:]))


def test_stop_and_continue_modes():
    # 0 и 1 делят вершину 3, у 2 своя вершина 4
    graph = BipartiteGraph.from_edges([0, 1, 2], [3, 4], [(0, 3), (1, 3), (2, 4)])

    stopped = MatchingDriver(graph).run()
    assert stopped.violation == HallViolation(frozenset({0, 1}), frozenset({3}))
    assert stopped.unsaturated == [1, 2]
    assert stopped.size == 1

    result = maximum_matching(graph)
    assert result.violation == HallViolation(frozenset({0, 1}), frozenset({3}))
    assert result.unsaturated == [1]
    assert result.size == 2
    assert result.complete
    assert not result.perfect
    assert not result.saturating


def test_next_step_after_finish():
    graph = BipartiteGraph.from_edges(["a"], ["x"], [("a", "x")])
    driver = MatchingDriver(graph)
    driver.run()
    with pytest.raises(RuntimeError):
        driver.next_step()


def test_step_budget():
    graph = BipartiteGraph.from_edges(
        range(5), range(5, 10), [(u, v) for u in range(5) for v in range(5, 10)]
    )
    with pytest.raises(StepBudgetExceeded):
        saturate_left(graph, max_steps=3)
    result = MatchingDriver(graph, max_steps=1000).run()
    assert result.perfect
    assert 0 < result.steps <= 1000


def test_narration():
    graph = BipartiteGraph.from_edges(["a", "b"], ["x"], [("a", "x"), ("b", "x")])
    log = StepLog()
    saturate_left(graph, log=log)
    text = "\n".join(log.lines)
    assert "[Шаг 1/2] Пытаемся насытить левую вершину a" in text
    assert "Нет увеличивающего пути для b" in text
    assert "Условие Холла нарушено" in text
    assert "Левая доля насыщена: НЕТ" in text


def test_rerun_after_prepare_resets_state():
    graph = BipartiteGraph.from_edges(["a"], ["x"], [("a", "x")])
    driver = MatchingDriver(graph)
    first = driver.run()
    driver.prepare()
    assert driver.matching == Matching.empty()
    assert driver.run() == first

import pytest

from hall_matching.driver import MatchingDriver
from hall_matching.errors import NotBipartiteError
from hall_matching.graph_input import load_graph_text
from hall_matching.samples import EXPECTATIONS, SAMPLES

BIPARTITE_CASES = sorted(name for name, exp in EXPECTATIONS.items() if exp["bipartite"])


def run_to_end(name: str, stop_on_violation: bool):
    """Гоняем драйвер по шагам до конца, как это делала кнопка «Следующий шаг»."""
    graph = load_graph_text(SAMPLES[name], source_name=f"pytest:{name}")
    driver = MatchingDriver(graph, stop_on_violation=stop_on_violation)
    driver.prepare()
    while not driver.finished:
        driver.next_step()
    return graph, driver.finalize()


@pytest.mark.parametrize("name", BIPARTITE_CASES)
def test_builtin_cases_maximum(name):
    exp = EXPECTATIONS[name]
    graph, result = run_to_end(name, stop_on_violation=False)
    assert result.size == exp["size"]
    assert result.complete == exp["complete"]
    assert result.perfect == exp["perfect"]
    assert result.matching.is_valid(graph)


@pytest.mark.parametrize("name", BIPARTITE_CASES)
def test_builtin_cases_saturation(name):
    exp = EXPECTATIONS[name]
    graph, result = run_to_end(name, stop_on_violation=True)
    assert result.saturating == exp["saturating"]
    if exp["deficient"] is None:
        assert result.violation is None
    else:
        assert result.violation.deficient_set == frozenset(exp["deficient"])
        assert result.violation.verify(graph)


def test_not_bipartite():
    with pytest.raises(NotBipartiteError):
        load_graph_text(SAMPLES["5) not_bipartite_triangle_5"])

import os

# рисуем только в файл, даже если в окружении задан интерактивный backend
os.environ.setdefault("MPLBACKEND", "Agg")

import matplotlib  # noqa: E402
import matplotlib.pyplot as plt  # noqa: E402
import pytest  # noqa: E402

from hall_matching.console import EXIT_ERROR, EXIT_OK, EXIT_VIOLATION, main  # noqa: E402
from hall_matching.driver import MatchingDriver  # noqa: E402
from hall_matching.graph_input import load_graph_text  # noqa: E402
from hall_matching.graph_view import BipartiteGraph  # noqa: E402
from hall_matching.render import draw_graph, save_drawing  # noqa: E402
from hall_matching.samples import SAMPLES  # noqa: E402


def test_console_saturating_file(tmp_path, capsys):
    graph_file = tmp_path / "g.txt"
    graph_file.write_text(SAMPLES["1) perfect_6"], encoding="utf-8")
    log_file = tmp_path / "steps.log"
    assert main([str(graph_file), "-o", str(log_file)]) == EXIT_OK
    text = log_file.read_text(encoding="utf-8")
    assert "ИТОГ:" in text
    assert "Левая доля насыщена: ДА" in text
    assert "ИТОГ:" in capsys.readouterr().out


def test_console_violation_sample(tmp_path, capsys):
    log_file = tmp_path / "steps.log"
    code = main(["--sample", "3) hall_violation_8", "-o", str(log_file), "--quiet"])
    assert code == EXIT_VIOLATION
    assert capsys.readouterr().out == ""
    text = log_file.read_text(encoding="utf-8")
    assert "Условие Холла нарушено: S = [0, 1, 2], N(S) = [4, 5]" in text


def test_console_maximum_mode(tmp_path):
    log_file = tmp_path / "steps.log"
    code = main(["--sample", "3) hall_violation_8", "--maximum", "-q", "-o", str(log_file)])
    assert code == EXIT_VIOLATION
    text = log_file.read_text(encoding="utf-8")
    assert "Размер паросочетания |M| = 3" in text
    assert "Ненасыщенные левые вершины: [2, 7]" in text


@pytest.mark.parametrize(
    "args",
    [
        ["--sample", "5) not_bipartite_triangle_5"],
        ["--sample", "7) K5,5_complete_10", "--max-steps", "2"],
        ["--sample", "1) perfect_6", "--max-steps", "-1"],
    ],
)
def test_console_errors(tmp_path, args):
    log_file = tmp_path / "steps.log"
    assert main(args + ["-q", "-o", str(log_file)]) == EXIT_ERROR
    assert "ОШИБКА" in log_file.read_text(encoding="utf-8")


def test_console_missing_file(tmp_path):
    log_file = tmp_path / "steps.log"
    assert main([str(tmp_path / "nope.txt"), "-q", "-o", str(log_file)]) == EXIT_ERROR


@pytest.mark.parametrize(
    "content",
    [
        b"\xff\xfe3\n",            # не UTF-8
        "²\n-\n".encode("utf-8"),  # надстрочная цифра вместо N
    ],
)
def test_console_bad_file_content(tmp_path, content):
    graph_file = tmp_path / "g.txt"
    graph_file.write_bytes(content)
    log_file = tmp_path / "steps.log"
    assert main([str(graph_file), "-q", "-o", str(log_file)]) == EXIT_ERROR
    assert "ОШИБКА" in log_file.read_text(encoding="utf-8")


def test_console_plot(tmp_path):
    png = tmp_path / "result.png"
    code = main(["--sample", "1) perfect_6", "-q", "-o", str(tmp_path / "s.log"), "--plot", str(png)])
    assert code == EXIT_OK
    assert png.exists() and png.stat().st_size > 0


def test_draw_graph_with_violation():
    graph = load_graph_text(SAMPLES["3) hall_violation_8"])
    result = MatchingDriver(graph).run()
    fig, ax = plt.subplots()
    try:
        returned = draw_graph(graph, result.matching, ax=ax, violation=result.violation)
        assert returned is ax
        assert ax.get_title() == "Двудольный граф — паросочетание (|M| = 2)"
        # 7 рёбер графа + 2 ребра паросочетания + 8 вершин
        assert len(ax.lines) == 7 + 2 + 8
    finally:
        plt.close(fig)


def test_draw_path_and_empty_graph(tmp_path):
    graph = BipartiteGraph.from_edges(["a", "b"], ["x", "y"], [("a", "x"), ("a", "y"), ("b", "x")])
    ax = draw_graph(graph, highlight_path=["b", "x", "a", "y"], title="путь")
    assert ax.get_title() == "путь"
    assert len(ax.lines) == 3 + 3 + 4

    empty = BipartiteGraph([], {}, {})
    ax = draw_graph(empty)
    assert ax.texts[0].get_text() == "Граф пуст"

    out = save_drawing(str(tmp_path / "g.png"), graph)
    assert os.path.getsize(out) > 0


def test_drawing_leaves_pyplot_state_alone(tmp_path):
    backend = matplotlib.get_backend()
    figures = plt.get_fignums()
    graph = load_graph_text(SAMPLES["1) perfect_6"])
    draw_graph(graph)
    save_drawing(str(tmp_path / "g.png"), graph)
    assert matplotlib.get_backend() == backend
    assert plt.get_fignums() == figures

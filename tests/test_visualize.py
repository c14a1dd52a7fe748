import pytest

matplotlib = pytest.importorskip("matplotlib")
matplotlib.use("Agg")

from minpath import find_path, write_graph  # noqa: E402
from minpath.visualize import draw_path, main, path_edges  # noqa: E402


def test_path_edges():
    assert path_edges(["a", "b", "c"]) == [("a", "b"), ("b", "c")]
    assert path_edges(["a"]) == []


@pytest.mark.parametrize("layout", ["spring", "shell"])
def test_draw_path(grid3x3, layout):
    ax = draw_path(grid3x3, find_path(grid3x3, "a", "i"), layout=layout, show_weights=True)
    assert ax.get_title() == "a -> d -> e -> f -> i"


def test_unknown_layout(grid3x3):
    with pytest.raises(ValueError):
        draw_path(grid3x3, layout="hexagonal")


def test_main_saves_image(tmp_path, grid3x3):
    graph_file = tmp_path / "grid.json"
    write_graph(grid3x3, graph_file)
    out = tmp_path / "grid.png"
    main([str(graph_file), "a", "i", "--out", str(out)])
    assert out.stat().st_size > 0

import matplotlib

matplotlib.use("Agg")

import pytest

from netstats.builder import read_edge_lines

PATH_LINES = ["0 1", "1 2", "2 3", "3 4"]
CYCLE_LINES = ["0 1", "1 2", "2 3", "3 0"]


@pytest.fixture
def path_graph():
    return read_edge_lines(PATH_LINES)


@pytest.fixture
def cycle_graph():
    return read_edge_lines(CYCLE_LINES)


@pytest.fixture
def star_graph():
    # hub 0 points at 1..5, plus a tail 5 -> 6 -> 7
    return read_edge_lines(["0 1", "0 2", "0 3", "0 4", "0 5", "5 6", "6 7"])


@pytest.fixture
def two_components():
    # 10 -> 11 -> 12 and 20 <-> 21, plus isolated self-loop 30
    return read_edge_lines(["10 11", "11 12", "20 21", "21 20", "30 30"])


@pytest.fixture
def edge_file(tmp_path):
    def write(lines, name="edges.txt"):
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return str(path)
    return write

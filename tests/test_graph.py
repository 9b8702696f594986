import pytest

from condraw.graph import Graph, PathEntry, format_path


def _empty(n=5):
    return [[0] * n for _ in range(n)]


def _undirected(n, edges):
    m = _empty(n)
    for a, b, w in edges:
        m[a][b] = w
        m[b][a] = w
    return m


SAMPLE = _undirected(
    5,
    [(0, 1, 4), (0, 2, 9), (1, 2, 3), (1, 3, 8), (2, 4, 2), (3, 4, 5), (0, 3, 20)],
)


def test_format_path_spells_letters():
    assert format_path([-1, 0, 1, 0, 3], 2) == "A B C"


def test_format_path_of_start_is_its_letter():
    assert format_path([0, -1, 1], 1) == "B"


def test_format_path_rejects_loop():
    with pytest.raises(ValueError):
        format_path([1, 0, -1], 0)


def test_non_square_matrix_rejected():
    with pytest.raises(ValueError):
        Graph([[0, 1], [1]])


def test_empty_matrix_rejected():
    with pytest.raises(ValueError):
        Graph([])


def test_symmetric_matrix_has_no_asymmetric_pairs():
    assert Graph(SAMPLE).asymmetric_pairs() == []


def test_asymmetric_pairs_reports_first_mismatch_per_row():
    m = _empty()
    m[0][1] = 3
    assert Graph(m).asymmetric_pairs() == [(0, 1), (1, 0)]


def test_edges_need_both_directions():
    m = _undirected(5, [(0, 1, 4), (2, 3, 7)])
    m[0][2] = 5
    assert Graph(m).edges() == [(0, 1, 4), (2, 3, 7)]


def test_chain_distance_and_path():
    g = Graph(_undirected(5, [(0, 1, 2), (1, 2, 3)]))
    entry = g.shortest_paths(0)[2]
    assert entry.distance == 2 + 3
    assert entry.previous == 1
    assert entry.path == (0, 1, 2)
    assert entry.name == "C"


def test_indirect_route_beats_heavy_direct_edge():
    g = Graph(_undirected(3, [(0, 2, 10), (0, 1, 1), (1, 2, 1)]))
    entry = g.shortest_paths(0)[2]
    assert entry.distance == 1 + 1
    assert entry.path == (0, 1, 2)


def test_start_entry():
    entries = Graph(SAMPLE).shortest_paths(3)
    assert entries[3] == PathEntry(3, 0, None, (3,))


def test_unreachable_vertex():
    g = Graph(_undirected(5, [(0, 1, 2)]))
    entry = g.shortest_paths(0)[4]
    assert not entry.reachable
    assert entry.distance is None
    assert entry.path == ()


@pytest.mark.parametrize("start", range(5))
def test_shortest_path_invariants(start):
    g = Graph(SAMPLE)
    entries = g.shortest_paths(start)
    dist = {e.vertex: e.distance for e in entries}
    for e in entries:
        assert e.path[0] == start and e.path[-1] == e.vertex
        if e.vertex != start:
            assert e.distance == dist[e.previous] + SAMPLE[e.previous][e.vertex]
            assert e.path[-2] == e.previous
    for a, b, w in g.edges():
        assert dist[b] <= dist[a] + w
        assert dist[a] <= dist[b] + w


def test_start_out_of_range():
    with pytest.raises(IndexError):
        Graph(SAMPLE).shortest_paths(5)


def test_from_file_roundtrip(tmp_path):
    path = tmp_path / "graph.txt"
    path.write_text("\n".join(" ".join(str(w) for w in row) for row in SAMPLE) + "\n")
    assert Graph.from_file(path).matrix == tuple(tuple(row) for row in SAMPLE)


def test_from_file_too_short(tmp_path):
    path = tmp_path / "graph.txt"
    path.write_text("0 1 2\n")
    with pytest.raises(ValueError):
        Graph.from_file(path)


def test_from_file_non_integer(tmp_path):
    path = tmp_path / "graph.txt"
    path.write_text(" ".join(["x"] * 25))
    with pytest.raises(ValueError):
        Graph.from_file(path)
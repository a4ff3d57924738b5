import networkx as nx

from graphlens.builders import graph_to_dot, networkx_args, networkx_to_dot, tree_to_dot


def test_graph_to_dot_nodes_and_edges():
    source = graph_to_dot(["A", "B"], {"A": ["B"], "B": []}.get)
    assert source.lstrip().startswith("digraph")
    assert "node0 [label=A]" in source
    assert "node1 [label=B]" in source
    assert "node0 -> node1" in source


def test_graph_to_dot_ignores_unknown_targets():
    source = graph_to_dot([1, 2], lambda n: [n + 1])
    assert "node0 -> node1" in source
    assert "->" not in source.split("node0 -> node1", 1)[1]


def test_undirected_graph_emits_each_pair_once():
    adjacency = {"a": ["b"], "b": ["a"]}
    source = graph_to_dot(adjacency, adjacency.get, directed=False)
    assert source.lstrip().startswith("graph")
    assert source.count("--") == 1


def test_horizontal_layout_and_options():
    source = graph_to_dot(["x"], lambda _: [], vertical=False, options={"bgcolor": "white"})
    assert "rankdir=LR" in source
    assert "bgcolor=white" in source


def test_descriptors_and_clusters():
    source = graph_to_dot(
        [1, 2, 3],
        lambda n: [n + 1],
        node_descriptor=lambda n: {"shape": "box", "label": f"n{n}"},
        edge_descriptor=lambda a, b: {"label": f"e{a}{b}"},
        node_cluster=lambda n: "odd" if n % 2 else None,
        cluster_descriptor=lambda c: {"color": "gray"},
    )
    assert "subgraph cluster_0" in source
    assert "label=odd" in source
    assert "color=gray" in source
    assert "shape=box" in source
    assert "label=n2" in source
    assert "label=e12" in source


def test_tree_positions_are_distinct_nodes():
    tree = ["root", ["leaf"], ["leaf"]]
    source = tree_to_dot(
        lambda n: isinstance(n, list),
        lambda n: n[1:],
        tree,
        node_descriptor=lambda n: {"label": n[0]},
    )
    assert "node0 -> node1" in source
    assert "node0 -> node2" in source
    assert source.count("label=leaf") == 2


def test_tree_children_only_requested_for_branches():
    requested = []

    def children(n):
        requested.append(n)
        return [n * 2, n * 2 + 1]

    tree_to_dot(lambda n: n < 4, children, 1)
    assert requested == [1, 2, 3]


def test_networkx_directed_graph():
    graph = nx.DiGraph([("A", "B"), ("B", "C")])
    source = networkx_to_dot(graph)
    assert source.lstrip().startswith("digraph")
    assert source.count("->") == 2


def test_networkx_undirected_graph():
    graph = nx.Graph([("A", "B"), ("B", "C")])
    nodes, adjacent = networkx_args(graph)
    assert sorted(nodes) == ["A", "B", "C"]
    assert sorted(adjacent("B")) == ["A", "C"]
    assert networkx_to_dot(graph).count("--") == 2

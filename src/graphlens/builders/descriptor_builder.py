# src/graphlens/builders/descriptor_builder.py
"""
將節點集合與鄰接函式 (或樹的根與子節點函式) 轉換為 Graphviz DOT 原始碼。
"""

# 1. 標準庫導入
from collections.abc import Callable, Hashable, Iterable
from typing import Any

# 2. 第三方庫導入
import graphviz

# 3. 本專案導入
# (無)

Attrs = dict[str, Any]


def _stringify(attrs: Attrs | None) -> dict[str, str]:
    """Graphviz 屬性值必須是字串；None 值會被略過。"""
    if not attrs:
        return {}
    return {str(k): str(v) for k, v in attrs.items() if v is not None}


def _emit_dot(
    node_ids: list[tuple[str, Any]],
    edges: list[tuple[str, str, Any, Any]],
    *,
    directed: bool,
    vertical: bool,
    options: Attrs | None,
    node_descriptor: Callable[[Any], Attrs] | None,
    edge_descriptor: Callable[[Any, Any], Attrs] | None,
    node_cluster: Callable[[Any], Hashable | None] | None,
    cluster_descriptor: Callable[[Any], Attrs] | None,
) -> str:
    """依已編號的節點與邊產生 DOT 原始碼。"""
    dot = graphviz.Digraph() if directed else graphviz.Graph()
    graph_attrs = {} if vertical else {"rankdir": "LR"}
    graph_attrs.update(options or {})
    dot.attr(**_stringify(graph_attrs))

    clusters: dict[Hashable, list[tuple[str, Any]]] = {}
    free_nodes: list[tuple[str, Any]] = []
    for node_id, value in node_ids:
        cluster = node_cluster(value) if node_cluster else None
        if cluster is None:
            free_nodes.append((node_id, value))
        else:
            clusters.setdefault(cluster, []).append((node_id, value))

    def add_node(target: graphviz.Graph | graphviz.Digraph, node_id: str, value: Any):
        attrs: Attrs = {"label": str(value)}
        if node_descriptor:
            attrs.update(node_descriptor(value) or {})
        target.node(node_id, **_stringify(attrs))

    for idx, (cluster, members) in enumerate(clusters.items()):
        with dot.subgraph(name=f"cluster_{idx}") as sg:
            cluster_attrs: Attrs = {"label": str(cluster)}
            if cluster_descriptor:
                cluster_attrs.update(cluster_descriptor(cluster) or {})
            sg.attr(**_stringify(cluster_attrs))
            for node_id, value in members:
                add_node(sg, node_id, value)

    for node_id, value in free_nodes:
        add_node(dot, node_id, value)

    for src_id, dst_id, src, dst in edges:
        attrs = edge_descriptor(src, dst) if edge_descriptor else None
        dot.edge(src_id, dst_id, **_stringify(attrs))

    return dot.source


def graph_to_dot(
    nodes: Iterable[Hashable],
    adjacent: Callable[[Any], Iterable[Hashable]],
    *,
    directed: bool = True,
    vertical: bool = True,
    options: Attrs | None = None,
    node_descriptor: Callable[[Any], Attrs] | None = None,
    edge_descriptor: Callable[[Any, Any], Attrs] | None = None,
    node_cluster: Callable[[Any], Hashable | None] | None = None,
    cluster_descriptor: Callable[[Any], Attrs] | None = None,
) -> str:
    """
    將一般的圖轉換為 DOT 原始碼。

    Args:
        nodes: 節點集合，節點必須可雜湊。
        adjacent: 給定節點，回傳其相鄰節點；不在 `nodes` 中的相鄰節點會被忽略。
        directed: 是否為有向圖。無向圖中每一對節點只會產生一條邊。
        vertical: False 時以由左至右 (rankdir=LR) 佈局。
        options: 額外的圖屬性。
        node_descriptor: 回傳節點屬性字典 (例如 label, color, shape)。
        edge_descriptor: 回傳邊屬性字典。
        node_cluster: 回傳節點所屬的叢集，None 表示不屬於任何叢集。
        cluster_descriptor: 回傳叢集屬性字典。

    Returns:
        DOT 格式的圖形描述字串。
    """
    ordered = list(dict.fromkeys(nodes))
    ids = {node: f"node{i}" for i, node in enumerate(ordered)}

    edges: list[tuple[str, str, Any, Any]] = []
    seen_pairs: set[frozenset] = set()
    for src in ordered:
        for dst in adjacent(src) or ():
            if dst not in ids:
                continue
            if not directed:
                pair = frozenset((src, dst))
                if pair in seen_pairs:
                    continue
                seen_pairs.add(pair)
            edges.append((ids[src], ids[dst], src, dst))

    return _emit_dot(
        [(ids[node], node) for node in ordered],
        edges,
        directed=directed,
        vertical=vertical,
        options=options,
        node_descriptor=node_descriptor,
        edge_descriptor=edge_descriptor,
        node_cluster=node_cluster,
        cluster_descriptor=cluster_descriptor,
    )


def tree_to_dot(
    branch: Callable[[Any], bool],
    children: Callable[[Any], Iterable[Any]],
    root: Any,
    *,
    directed: bool = True,
    vertical: bool = True,
    options: Attrs | None = None,
    node_descriptor: Callable[[Any], Attrs] | None = None,
    edge_descriptor: Callable[[Any, Any], Attrs] | None = None,
    node_cluster: Callable[[Any], Hashable | None] | None = None,
    cluster_descriptor: Callable[[Any], Attrs] | None = None,
) -> str:
    """
    將樹狀結構轉換為 DOT 原始碼。

    樹中的每個位置都是獨立節點，因此相同的值可以出現多次。
    只有 `branch(node)` 為真時才會呼叫 `children(node)`。
    """
    node_ids: list[tuple[str, Any]] = []
    edges: list[tuple[str, str, Any, Any]] = []

    stack: list[tuple[Any, tuple[str, Any] | None]] = [(root, None)]
    while stack:
        value, parent = stack.pop()
        node_id = f"node{len(node_ids)}"
        node_ids.append((node_id, value))
        if parent is not None:
            edges.append((parent[0], node_id, parent[1], value))
        if branch(value):
            kids = list(children(value) or ())
            stack.extend((kid, (node_id, value)) for kid in reversed(kids))

    return _emit_dot(
        node_ids,
        edges,
        directed=directed,
        vertical=vertical,
        options=options,
        node_descriptor=node_descriptor,
        edge_descriptor=edge_descriptor,
        node_cluster=node_cluster,
        cluster_descriptor=cluster_descriptor,
    )

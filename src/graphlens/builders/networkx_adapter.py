# src/graphlens/builders/networkx_adapter.py
"""
讓 NetworkX 圖可以直接交給描述產生器。
"""

# 1. 標準庫導入
from typing import Any

# 2. 第三方庫導入
import networkx as nx

# 3. 本專案導入
from graphlens.builders.descriptor_builder import graph_to_dot


def networkx_args(graph: nx.Graph) -> tuple[list[Any], Any]:
    """回傳 `(nodes, adjacent)`，可直接用於 `graph_to_image`、`view_graph` 等函式。"""
    adjacent = graph.successors if graph.is_directed() else graph.neighbors
    return list(graph.nodes), adjacent


def networkx_to_dot(graph: nx.Graph, **options: Any) -> str:
    """將 NetworkX 圖轉換為 DOT 原始碼；有向與否沿用圖本身的設定。"""
    nodes, adjacent = networkx_args(graph)
    options.setdefault("directed", graph.is_directed())
    return graph_to_dot(nodes, adjacent, **options)

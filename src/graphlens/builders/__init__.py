# src/graphlens/builders/__init__.py
"""
建構器套件，負責將圖或樹的資料結構轉換為 DOT 描述。
"""

from .descriptor_builder import graph_to_dot, tree_to_dot
from .networkx_adapter import networkx_args, networkx_to_dot

__all__ = [
    "graph_to_dot",
    "networkx_args",
    "networkx_to_dot",
    "tree_to_dot",
]

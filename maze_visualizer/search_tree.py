import os

from graphviz import Digraph

from .search import UNSET, ROOT

PATH_EDGE_COLOR = "#f43f5e"
TREE_EDGE_COLOR = "#94a3b8"
ENDPOINT_FILL = "#fbbf24"


def _node_id(cell):
    return str(cell)


def build_search_tree(result, path=None):
    """Builds a Digraph of the parent links recorded by a solve.

    Every discovered cell becomes a node with an edge from its parent.
    Edges and nodes on `path` (the reconstructed solution) are highlighted.
    """
    cols = result.cols
    on_path = set(path or [])
    path_edges = set(zip(path or [], (path or [])[1:]))

    dot = Digraph(name=f"{result.algorithm.lower()}_tree")
    dot.attr(rankdir="TB")
    dot.attr("node", shape="circle", fontsize="9", width="0.3")

    for idx, p in enumerate(result.parent):
        if p == UNSET:
            continue
        cell = divmod(idx, cols)
        attrs = {}
        if cell in (result.start, result.end):
            attrs = {'style': 'filled', 'fillcolor': ENDPOINT_FILL}
        elif cell in on_path:
            attrs = {'color': PATH_EDGE_COLOR}
        dot.node(_node_id(cell), **attrs)
        if p == ROOT:
            continue
        parent = divmod(p, cols)
        if (parent, cell) in path_edges:
            dot.edge(_node_id(parent), _node_id(cell), color=PATH_EDGE_COLOR, penwidth="2")
        else:
            dot.edge(_node_id(parent), _node_id(cell), color=TREE_EDGE_COLOR)
    return dot


def export_search_tree(result, out_path, path=None, fmt="png", view=False):
    """Renders the search tree to `out_path`.<fmt> and returns the written file name."""
    directory = os.path.dirname(out_path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    dot = build_search_tree(result, path)
    return dot.render(out_path, format=fmt, view=view, cleanup=True)

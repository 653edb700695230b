import os
import sys
from typing import Set

from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from npmgraph.graph.models import GraphNode
from npmgraph.graph.traversal import DependencyGraph


def is_ci_environment():
    return (
        os.getenv('CI') is not None or
        os.getenv('GITHUB_ACTIONS') is not None or
        not sys.stdout.isatty()
    )


def get_console() -> Console:
    """Detect environment and create console."""
    if is_ci_environment():
        # CI/automated environment - no colors, no interactive elements
        return Console(force_terminal=False, no_color=True)
    return Console()


def _label(node: GraphNode) -> str:
    label = f"[bold]{escape(node.id or '<unnamed>')}[/bold]@{escape(node.version or '?')}"
    if node.optional:
        label += " [yellow](optional)[/yellow]"
    return label


def render_tree(graph: DependencyGraph) -> Tree:
    """Render the graph as a Rich tree rooted at the root package.

    Each package instance is expanded once; later occurrences are marked
    as deduped.
    """
    root = graph.nodes[graph.root]
    tree = Tree(f"{_label(root)} [dim]{escape(root.path)}[/dim]")
    rendered: Set[str] = {root.path}

    def add_children(branch: Tree, path: str) -> None:
        for child in graph.dependencies_of(path):
            if child.path in rendered:
                branch.add(f"{_label(child)} [dim](deduped)[/dim]")
                continue
            rendered.add(child.path)
            add_children(branch.add(_label(child)), child.path)

    add_children(tree, root.path)
    return tree

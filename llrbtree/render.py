"""Graph renderings of a tree: DOT text and a PNG picture."""

from __future__ import annotations

from os import PathLike

from matplotlib.figure import Figure

from llrbtree.tree import Color, Node, Tree

_RED_STYLE = {"color": "red", "fontcolor": "red", "fillcolor": "#FFDDDD"}
_BLACK_STYLE = {"color": "black", "fontcolor": "black", "fillcolor": "#DDDDDD"}


def _quote(text: str) -> str:
    return '"' + text.replace("\\", "\\\\").replace('"', '\\"') + '"'


def _attrs(items: dict[str, str]) -> str:
    return ", ".join(f"{name}={_quote(value)}" for name, value in items.items())


def tree_to_dot(tree: Tree) -> str:
    """Describe the tree as an undirected DOT graph named LLRB."""
    lines = ["graph LLRB {"]
    counter = 0

    def add(parent_name: str | None, node: Node | None) -> None:
        nonlocal counter
        if node is None:
            return
        name = f"{node.key}_{counter}"
        counter += 1
        red = node.color is Color.RED
        attrs = {"label": f"{node.key}: {node.value}"}
        attrs.update(_RED_STYLE if red else _BLACK_STYLE)
        attrs["style"] = "filled,rounded"
        lines.append(f"  {_quote(name)} [{_attrs(attrs)}];")
        if parent_name is not None:
            edge = {"color": "red" if red else "black", "penwidth": "1.5"}
            lines.append(f"  {_quote(parent_name)} -- {_quote(name)} [{_attrs(edge)}];")
        add(name, node.left)
        add(name, node.right)

    add(None, tree.root)
    lines.append("}")
    return "\n".join(lines) + "\n"


def _layout(root: Node | None) -> dict[int, tuple[float, float]]:
    positions: dict[int, tuple[float, float]] = {}
    column = 0

    def place(node: Node | None, depth: int) -> None:
        nonlocal column
        if node is None:
            return
        place(node.left, depth + 1)
        positions[id(node)] = (float(column), float(-depth))
        column += 1
        place(node.right, depth + 1)

    place(root, 0)
    return positions


def save_tree_png(tree: Tree, path: str | PathLike[str]) -> None:
    """Draw the tree and write it as a PNG image."""
    positions = _layout(tree.root)
    width = max(4.0, 1.2 * len(positions))
    depth = max((-y for _, y in positions.values()), default=0.0)
    fig = Figure(figsize=(width, max(3.0, 1.2 * (depth + 1))))
    ax = fig.subplots()
    ax.set_axis_off()

    def draw(node: Node | None) -> None:
        if node is None:
            return
        x, y = positions[id(node)]
        style = _RED_STYLE if node.color is Color.RED else _BLACK_STYLE
        for child in (node.left, node.right):
            if child is not None:
                cx, cy = positions[id(child)]
                edge_color = "red" if child.color is Color.RED else "black"
                ax.plot([x, cx], [y, cy], color=edge_color, linewidth=1.5, zorder=1)
        ax.text(
            x,
            y,
            f"{node.key}: {node.value}",
            ha="center",
            va="center",
            color=style["fontcolor"],
            zorder=2,
            bbox={
                "boxstyle": "round",
                "facecolor": style["fillcolor"],
                "edgecolor": style["color"],
            },
        )
        draw(node.left)
        draw(node.right)

    draw(tree.root)
    if positions:
        ax.set_xlim(-1, len(positions))
        ax.set_ylim(-depth - 1, 1)
    fig.savefig(path, format="png")
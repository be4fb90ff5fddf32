import sys

from .common import EPSILON

def render(node, indent=1, fill='-'):
    """Returns the lines of an indented dump of the tree under (node), one node
    per line in preorder. A node at depth d is prefixed with (fill) repeated
    (d * indent) times; (node) itself is at depth 0."""
    lines = []
    stack = [(node, 0)]
    while stack:
        current, depth = stack.pop()
        lines.append(fill * (depth * indent) + current.label)
        stack.extend((child, depth + 1) for child in reversed(list(current)))
    return lines

def tree_print(node, file=None, indent=1, fill='-'):
    file = sys.stdout if file is None else file
    for line in render(node, indent, fill):
        print(line, file=file)

def leaves(node):
    """Yields the leaves under (node) from left to right."""
    stack = [node]
    while stack:
        current = stack.pop()
        if current.is_leaf():
            yield current
        else:
            stack.extend(reversed(list(current)))

def derived(node):
    """The string derived by the tree under (node): the concatenation of its
    leaves, where the empty string marker contributes nothing."""
    return ''.join(leaf.label for leaf in leaves(node) if leaf.label != EPSILON)

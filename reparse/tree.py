import logging

from pyllist import dllist

from .common import FanoutError, RollbackError

log = logging.getLogger(__name__)

########################################
# Nodes

class Node:
    """
    A vertex of the parse tree.

    Attributes:
    - label: the matched character for terminals, 'RE' or "RE'" for
      nonterminals, None for a node which was created but not initialized.
    - children: a dllist of the child nodes, in the order they were attached.
      The most recently attached child is (children.last).

    Nodes are created and destroyed through a TreeStore, never directly, so
    that the store can keep count of them.
    """

    __slots__ = ('label', 'children', 'alive')

    def __init__(self):
        self.label = None
        self.children = dllist()
        self.alive = True

    def __len__(self):
        return len(self.children)

    def __iter__(self):
        return iter(self.children)

    def __getitem__(self, i):
        return self.children[i]

    def is_leaf(self):
        return not self.children

    def __repr__(self):
        if self.is_leaf():
            return f'Node({self.label!r})'
        return f'Node({self.label!r}, {list(self.children)!r})'

########################################
# Store

class TreeStore:
    """Creates, links and destroys Nodes. The counters (created, destroyed) let
    the caller check that a tree was released completely: after every node of a
    parse has been destroyed, (live) is back to what it was before."""

    def __init__(self, max_children=None):
        self.max_children = max_children
        self.created = 0
        self.destroyed = 0

    @property
    def live(self):
        return self.created - self.destroyed

    def create(self):
        self.created += 1
        return Node()

    def new(self, label):
        """(create) and (init) in one step."""
        node = self.create()
        self.init(node, label)
        return node

    def init(self, node, label):
        if not isinstance(label, str):
            raise TypeError(f'A node label must be a string, got {label!r}.')
        self._discard_children(node)
        node.label = label

    def add_child(self, node, child):
        self._check_fanout(node)
        node.children.append(child)

    def add_leaf(self, node, label):
        """Creates a childless node labeled (label) and attaches it to (node).
        Nothing is created if (node) has no room for it."""
        self._check_fanout(node)
        leaf = self.new(label)
        node.children.append(leaf)
        return leaf

    def _check_fanout(self, node):
        if self.max_children is not None and len(node) >= self.max_children:
            raise FanoutError(f'Node {node.label!r} already has '
                              f'{self.max_children} children.')

    def mark(self, node):
        """Returns a value which, passed to (truncate), restores the children of
        (node) to what they are now."""
        return len(node)

    def truncate(self, node, length):
        """Destroys the most recently attached children of (node) until only
        (length) remain."""
        children = node.children
        if len(children) < length:
            raise RollbackError(f'Cannot truncate {node.label!r} to {length} '
                                f'children, it has {len(children)}.')
        while len(children) > length:
            self.destroy_subtree(children.pop())

    def rollback_last(self, node, n):
        """Destroys the last (n) children attached to (node)."""
        if n < 0 or n > len(node):
            raise RollbackError(f'Cannot roll back {n} children of '
                                f'{node.label!r}, it has {len(node)}.')
        self.truncate(node, len(node) - n)

    def destroy_children(self, node):
        self.truncate(node, 0)

    def destroy_subtree(self, node):
        """Destroys (node) and all of its descendants. Does nothing when (node)
        is None or was already destroyed."""
        if node is None:
            return
        stack = [node]
        while stack:
            current = stack.pop()
            if not current.alive:
                continue
            stack.extend(current.children)
            current.children = dllist()
            current.label = None
            current.alive = False
            self.destroyed += 1

    def _discard_children(self, node):
        # re-initializing a node releases what it held before
        if node.children:
            log.debug('re-initializing %r drops %d children',
                      node.label, len(node))
            self.destroy_children(node)

"""
A backtracking recursive-descent parser for the regular expression grammar

    RE ::= # | symbol | RE + RE | RE RE | RE * | ( RE )

where '#' stands for the empty string. The grammar is left recursive, so it is
parsed in the equivalent form

    RE  ::= # RE' | symbol RE' | ( RE ) RE' | ( RE ) | # | symbol
    RE' ::= + RE RE' | + RE | * RE' | RE RE' | RE | *

The alternatives of a variable are tried in the order above and the first one
that succeeds is used, even if a later one would consume more input. Longer
alternatives come before those which are prefixes of them.
"""

import logging
import sys

from collections import namedtuple

from .common import RE, RE_PRIME, ROOT, Options, DepthError, ReparseError
from .terminals import terminals
from .tree import TreeStore

log = logging.getLogger(__name__)

GRAMMAR = {
    RE: [
        ('epsilon', RE_PRIME),
        ('symbol', RE_PRIME),
        ('lpar', RE, 'rpar', RE_PRIME),
        ('lpar', RE, 'rpar'),
        ('epsilon',),
        ('symbol',),
    ],
    RE_PRIME: [
        ('plus', RE, RE_PRIME),
        ('plus', RE),
        ('star', RE_PRIME),
        (RE, RE_PRIME),
        (RE,),
        ('star',),
    ],
}

# interpreter frames used by one level of RE/RE' nesting, with room to spare
FRAMES_PER_LEVEL = 5

ParseResult = namedtuple('ParseResult', 'ok root')

def parse(text, options=None):
    """Parses (text) and returns a ParseResult (ok, root). When (ok), (root) is a
    'Root' node whose only child is the RE node of the derivation. Otherwise
    (root) has no children."""
    return Parsing(text, options).run()

class Parsing:
    """
    The state of a single parse.

    Attributes:
    - text: the regular expression being parsed.
    - options: an Options instance.
    - store: the TreeStore which owns every node of the parse.
    - root: the 'Root' node, None before (run) is called.
    - furthest: the largest index at which a terminal was expected but not
      found. Only meaningful after a failed parse.
    """

    def __init__(self, text, options=None, store=None):
        self.text = text
        self.options = Options() if options is None else options
        if store is None:
            store = TreeStore(self.options.max_children)
        self.store = store
        self.root = None
        self.furthest = 0
        self._depth = 0
        self._memo = {}

    def run(self):
        store = self.store
        self.root = root = store.new(ROOT)
        # DepthError, not RecursionError, is what stops a deep parse
        limit = sys.getrecursionlimit()
        sys.setrecursionlimit(limit + self.options.max_depth * FRAMES_PER_LEVEL)
        try:
            end = self.re(0, root)
        except ReparseError:
            store.destroy_children(root)
            raise
        finally:
            sys.setrecursionlimit(limit)
        ok = end == len(self.text)
        if not ok:
            log.debug('no derivation of %r, furthest failure at %d',
                      self.text, self.furthest)
            store.destroy_children(root)
        return ParseResult(ok, root)

    # ----------------------------------------
    # Variables

    def re(self, i, parent):
        return self._variable(RE, i, parent)

    def re_prime(self, i, parent):
        return self._variable(RE_PRIME, i, parent)

    def _variable(self, name, i, parent):
        """Derives the variable (name) starting at (i). On success the new node
        is attached to (parent) and the index after the derivation is
        returned. On failure None is returned and (parent) is unchanged."""
        if self.options.memoize and (name, i) in self._memo:
            return self._recall(name, i, parent)
        if self._depth >= self.options.max_depth:
            raise DepthError(self.options.max_depth, i)
        self._depth += 1
        try:
            end, node = self._derive(name, i)
        finally:
            self._depth -= 1
        if self.options.memoize:
            self._memo[name, i] = None if node is None else (end, _freeze(node))
        if node is None:
            return None
        self._attach(parent, node)
        return end

    def _attach(self, parent, node):
        try:
            self.store.add_child(parent, node)
        except ReparseError:
            self.store.destroy_subtree(node)
            raise

    def _derive(self, name, i):
        """Tries the alternatives of (name) in order. The node is attached to
        nothing while this happens; a failed alternative is undone by cutting
        the node's children back to what they were before it started."""
        store = self.store
        node = store.new(name)
        try:
            for alternative in GRAMMAR[name]:
                mark = store.mark(node)
                end = self._sequence(alternative, i, node)
                if end is not None:
                    return end, node
                store.truncate(node, mark)
        except ReparseError:
            store.destroy_subtree(node)
            raise
        store.destroy_subtree(node)
        return None, None

    def _sequence(self, alternative, i, node):
        for name in alternative:
            i = self._symbol(name, i, node)
            if i is None:
                return None
        return i

    def _symbol(self, name, i, node):
        recognize = terminals.get(name)
        if recognize is None:
            return self._variable(name, i, node)
        end = recognize(self.store, self.text, i, node)
        if end is None and i > self.furthest:
            self.furthest = i
        return end

    def _recall(self, name, i, parent):
        entry = self._memo[name, i]
        if entry is None:
            return None
        end, frozen = entry
        self._attach(parent, _thaw(self.store, frozen))
        return end

# ----------------------------------------
# Frozen subtrees, for the memo table.

def _freeze(node):
    return (node.label, tuple(_freeze(child) for child in node))

def _thaw(store, frozen):
    label, children = frozen
    node = store.new(label)
    for child in children:
        store.add_child(node, _thaw(store, child))
    return node

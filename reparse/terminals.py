"""
The terminal recognizers. Each one looks at the single character (text[i]) and,
if it is the right kind of character, attaches a leaf labeled with it to
(parent) and returns the index of the next character. Otherwise it returns None
and leaves the tree alone.

They all share the signature (store, text, i, parent) so that the grammar can
treat terminals and nonterminals the same way.
"""

import string

from .common import EPSILON

SYMBOLS = frozenset(string.ascii_letters + string.digits + '_')

terminals = {}

def terminal(name, accepts):
    """Makes a recognizer out of the predicate (accepts) and registers it in
    (terminals) under (name)."""
    def recognize(store, text, i, parent):
        if i >= len(text) or not accepts(text[i]):
            return None
        store.add_leaf(parent, text[i])
        return i + 1
    recognize.__name__ = recognize.__qualname__ = name
    terminals[name] = recognize
    return recognize

def _char(c):
    return lambda ch: ch == c

epsilon = terminal('epsilon', _char(EPSILON))
symbol = terminal('symbol', SYMBOLS.__contains__)
lpar = terminal('lpar', _char('('))
rpar = terminal('rpar', _char(')'))
star = terminal('star', _char('*'))
plus = terminal('plus', _char('+'))

from .common import (ROOT, RE, RE_PRIME, EPSILON, Options, ReparseError,
                     DepthError, FanoutError, RollbackError)
from .tree import Node, TreeStore
from .grammar import GRAMMAR, ParseResult, Parsing, parse
from .render import render, tree_print, leaves, derived

def accepts(text, options=None):
    """True if (text) is a regular expression of the grammar."""
    return parse(text, options).ok

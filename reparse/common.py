ROOT = 'Root'
RE = 'RE'
RE_PRIME = "RE'"
EPSILON = '#'

DEFAULT_MAX_DEPTH = 2000

########################################
# Errors

class ReparseError(ValueError):
    """Base class for the errors raised by this package. A string that is not
    in the language is not an error, (parse) reports it through its result."""

class DepthError(ReparseError):
    def __init__(self, depth, index):
        super().__init__(f'Nesting deeper than {depth} levels at index {index}.')
        self.depth = depth
        self.index = index

class FanoutError(ReparseError):
    pass

class RollbackError(ReparseError):
    pass

########################################
# Options

class Options:
    """
    Holds the settings shared by the parts of a single parse. Every attribute
    has a usable default, so (Options()) is the normal way to get one.

    Attributes:
    - max_depth: how deep RE/RE' calls may nest before DepthError is raised.
    - memoize: cache the outcome of each nonterminal at each position. Does
      not change which trees are produced.
    - max_children: None, or the fan-out bound enforced by the TreeStore.
    - indent, fill: the tree is printed with (fill * indent) per level.
    """

    def __init__(self, max_depth=DEFAULT_MAX_DEPTH, memoize=True,
                 max_children=None, indent=1, fill='-'):
        if max_depth < 1:
            raise ValueError(f'max_depth must be positive, got {max_depth}.')
        if indent < 0:
            raise ValueError(f'indent must not be negative, got {indent}.')
        self.max_depth = max_depth
        self.memoize = memoize
        self.max_children = max_children
        self.indent = indent
        self.fill = fill

    def __repr__(self):
        return (f'Options(max_depth={self.max_depth}, memoize={self.memoize}, '
                f'max_children={self.max_children}, indent={self.indent}, '
                f'fill={self.fill!r})')

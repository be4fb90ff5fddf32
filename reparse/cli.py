import argparse
import logging
import sys

from .common import DEFAULT_MAX_DEPTH, Options, ReparseError
from .grammar import Parsing
from .render import tree_print

log = logging.getLogger(__name__)

def build_parser():
    p = argparse.ArgumentParser(
        prog='reparse', allow_abbrev=False,
        description='Check a regular expression and print its parse tree.')
    # counted by hand, a wrong count has its own message and exit status
    p.add_argument('regex', nargs='*', help='the regular expression')
    p.add_argument('--indent', type=int, default=1,
                   help='dashes per tree level (default: 1)')
    p.add_argument('--max-depth', type=int, default=DEFAULT_MAX_DEPTH,
                   help=f'deepest allowed nesting (default: {DEFAULT_MAX_DEPTH})')
    p.add_argument('--no-memo', action='store_true',
                   help='do not cache partial results')
    p.add_argument('-v', '--verbose', action='store_true')
    return p

def main(argv=None, out=None):
    out = sys.stdout if out is None else out
    args, unknown = build_parser().parse_known_args(argv)
    # anything that is not one of our flags is a regex, even with a leading '-'
    regexes = args.regex + unknown
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG,
                            format='%(name)s: %(message)s')
    if len(regexes) != 1:
        print(f'Wrong number of command-line arguments: '
              f'{len(regexes)} arguments found, 1 expected', file=out)
        return 1
    try:
        options = Options(max_depth=args.max_depth, memoize=not args.no_memo,
                          indent=args.indent)
    except ValueError as e:
        print(f'error: {e}', file=sys.stderr)
        return 1

    parsing = Parsing(regexes[0], options)
    try:
        ok, root = parsing.run()
    except ReparseError as e:
        print(f'error: {e}', file=sys.stderr)
        return 2
    if ok:
        # the synthetic root is not printed
        tree_print(root[0], out, options.indent, options.fill)
    else:
        log.debug('furthest failure at index %d', parsing.furthest)
        print('Syntax error', file=out)
    parsing.store.destroy_children(root)
    return 0

if __name__ == '__main__':
    sys.exit(main())

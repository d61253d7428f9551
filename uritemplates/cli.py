"""Command line tool expanding RFC 6570 (level 4) URI templates."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from .term import URITemplateError
from .uritemplate import URITemplate
from .vars import Var, Vars


logger = logging.getLogger('uritemplates')


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='toupee',
        description='Expands RFC 6570 (level 4) URI templates',
    )
    parser.add_argument('template', nargs='*', help='URI template, multiple words are concatenated')
    parser.add_argument('-T', '--param', dest='params', action='append', default=[], metavar='VAR',
                        help='Specify a value used to fill the template, as [type,]name=value')
    parser.add_argument('-t', '--params', dest='vars', action='append', default=[], metavar='EXPR',
                        help='Specify template parameters using abbreviated syntax, or @file to read JSON')
    parser.add_argument('-P', '--partial', action='store_true',
                        help='Partially expand the template by preserving missing variables')
    parser.add_argument('-v', '--verbose', action='store_true', help='Log debug output to stderr')
    return parser


def _configure_logging(verbose: bool) -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter('%(name)s: %(levelname)s: %(message)s'))
    logger.handlers[:] = [handler]
    logger.setLevel(logging.DEBUG if (verbose) else logging.WARNING)
    logger.propagate = False


def _load_vars(ns: argparse.Namespace) -> Vars:
    variables = Vars()
    for param in ns.params:
        variables.add(Var.parse(param))
    for expr in ns.vars:
        if (expr.startswith('@')):
            logger.debug('loading variables from %s', expr[1:])
            with open(expr[1:], encoding='utf8') as fp:
                file_vars = Vars()
                file_vars.load(fp)
            variables.update(file_vars)
        else:
            expr_vars = Vars()
            expr_vars.set(expr)
            variables.update(expr_vars)
    return variables


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line tool, return the exit status."""
    parser = _build_parser()
    ns = parser.parse_args(argv)
    _configure_logging(ns.verbose)

    if (not ns.template):
        parser.print_help()
        return 0

    try:
        template = URITemplate(''.join(ns.template))
        variables = _load_vars(ns)
        logger.debug('expanding %s with %s', template, variables)
        if (ns.partial):
            output = template.partial_expand(variables)
        else:
            output = template.expand(variables)
    except (URITemplateError, OSError) as exc:
        logger.error('%s', exc)
        return 1

    print(output)
    return 0

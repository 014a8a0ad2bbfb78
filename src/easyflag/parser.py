## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import lark

from .types import Kind, check_range, narrow_float
from .errors import FlagValueError


# One start symbol per literal family.  No whitespace is ignored: " 5" is not an integer.
GRAMMAR = r"""
integer: INTEGER
unsigned: UNSIGNED
float: FLOAT
boolean: BOOLEAN

INTEGER: /[+-]?[0-9]+/
UNSIGNED: /\+?[0-9]+/
FLOAT: /[+-]?(?:infinity|inf|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?)/i
BOOLEAN: "true" | "false"
"""

_STARTS = ['integer', 'unsigned', 'float', 'boolean']

_MALFORMED = {
    'integer': "invalid digit found in string",
    'unsigned': "invalid digit found in string",
    'float': "invalid float literal",
    'boolean': "provided string was not `true` or `false`",
}

_EMPTY = {
    'integer': "cannot parse integer from empty string",
    'unsigned': "cannot parse integer from empty string",
    'float': "cannot parse float from empty string",
    'boolean': "provided string was not `true` or `false`",
}

_parser = None

def _literal_parser() -> lark.Lark:
    global _parser
    if _parser is None:
        _parser = lark.Lark(GRAMMAR, start=_STARTS, parser="lalr", lexer="contextual")
    return _parser


def start_symbol(kind: Kind) -> str | None:
    if kind.python is bool: return 'boolean'
    if kind.python is float: return 'float'
    if kind.python is int: return 'integer' if kind.signed else 'unsigned'
    return None


def parse_literal(text: str, kind: Kind):
    """Convert command-line `text` into a Python value of the given kind, or raise FlagValueError.

    Strings are returned verbatim.  Integers are range-checked against the kind's width;
    floats overflow to infinity at the kind's width, as the standard float parsers do.
    """
    if (start := start_symbol(kind)) is None:
        return text
    if text == '':
        raise FlagValueError(_EMPTY[start], kind=kind.name, token=text)

    try:
        tree = _literal_parser().parse(text, start=start)
    except lark.exceptions.UnexpectedInput:
        raise FlagValueError(_MALFORMED[start], kind=kind.name, token=text) from None

    token = tree.children[0]
    if start == 'boolean':
        return token.value == 'true'
    if start == 'float':
        return narrow_float(float(token.value), kind)
    return check_range(int(token.value), kind, token=text)

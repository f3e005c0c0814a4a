from sprig.lexer.lexer import find_column
from sprig.parser.errors import ParseError

# ==============================================================================
#                                 UTILITIES
# ==============================================================================

def p_empty(p):
    "empty :"
    p[0] = None


def p_error(p):
    if p is None:
        raise ParseError(None)
    lexer = getattr(p, "lexer", None)
    column = find_column(lexer.lexdata, p) if lexer is not None else 0
    raise ParseError(p, col_offset=column)

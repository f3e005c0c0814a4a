from sprig.codegen.compiletime.errors import SprigError

TOKEN_MAP = {
    'LPAREN': "'('", 'RPAREN': "')'",
    'LBRACE': "'{'", 'RBRACE': "'}'",
    'SEMICOLON': "';'", 'COLON': "':'", 'COMMA': "','",
    'EQUALS': "'='",
    'IDENTIFIER': "identifier", 'STRING': "string",
    'INTEGER': "integer",
}


def get_friendly_name(token_type):
    return TOKEN_MAP.get(token_type, token_type)


class LexError(SprigError):
    """Raised on the first character the lexer cannot match."""

    def __init__(self, message, lineno=0, col_offset=0):
        super().__init__(message, lineno=lineno, col_offset=col_offset)


class ParseError(SprigError):
    """Raised on the first syntax error. `token` is None at end of input."""

    def __init__(self, token=None, col_offset=0):
        self.token = token
        if token is None:
            message = "unexpected end of file"
            lineno = 0
        else:
            friendly = get_friendly_name(token.type)
            if friendly.startswith("'"):
                message = f"unexpected {friendly}"
            else:
                message = f"unexpected {friendly} '{token.value}'"
            lineno = token.lineno
        super().__init__(message, lineno=lineno, col_offset=col_offset)

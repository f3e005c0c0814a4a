import re

from ply import lex

from sprig.parser.errors import LexError

tokens = (
    'SEMICOLON', 'EQUALS', 'COLON', 'COMMA',
    'LPAREN', 'RPAREN', 'LBRACE', 'RBRACE',
    'INTEGER', 'IDENTIFIER', 'STRING',
)

t_SEMICOLON = r';'
t_EQUALS = r'='
t_COLON = r':'
t_COMMA = r','
t_LPAREN = r'\('
t_RPAREN = r'\)'
t_LBRACE = r'\{'
t_RBRACE = r'\}'

INT_RE = re.compile(r'[0-9]+')
FLOAT_RE = re.compile(r'[0-9]+\.[0-9]+')
I32_MAX = 2**31 - 1


# Names are anything up to a delimiter, so operators like '+' are identifiers too.
# A name made only of digits is an integer.
def t_IDENTIFIER(t):
    r'[^;\s=():{},"]+'
    if INT_RE.fullmatch(t.value):
        t.type = 'INTEGER'
        t.value = int(t.value)
        if t.value > I32_MAX:
            raise LexError(
                f"integer literal {t.value} does not fit in 32 bits",
                t.lexer.lineno,
                find_column(t.lexer.lexdata, t),
            )
    elif FLOAT_RE.fullmatch(t.value):
        raise LexError(
            f"floating point literal '{t.value}' is not supported",
            t.lexer.lineno,
            find_column(t.lexer.lexdata, t),
        )
    return t


def t_STRING(t):
    r'"[^"]+"'
    t.value = t.value[1:-1]
    t.lexer.lineno += t.value.count('\n')
    return t


t_ignore = ' \t\r'


def t_newline(t):
    r'\n+'
    t.lexer.lineno += len(t.value)


def t_error(t):
    raise LexError(
        f"unexpected character '{t.value[0]}'",
        t.lexer.lineno,
        find_column(t.lexer.lexdata, t),
    )


def find_column(input_text, token_or_lexpos):
    """
    Calculates the 1-based column number.
    Accepts either a Token object or a raw integer lexpos.
    """
    lexpos = 0
    if isinstance(token_or_lexpos, int):
        lexpos = token_or_lexpos
    elif hasattr(token_or_lexpos, 'lexpos'):
        lexpos = token_or_lexpos.lexpos
    else:
        return 0

    last_cr = input_text.rfind('\n', 0, lexpos)
    return lexpos - last_cr


def tokenize(code):
    """Returns every token of `code` as a list. Mostly useful for debugging."""
    scanner = lexer.clone()
    scanner.lineno = 1
    scanner.input(code)
    return list(scanner)


lexer = lex.lex()

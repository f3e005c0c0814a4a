from ply import yacc

from sprig.lexer.lexer import tokens
from .program import *
from .expressions import *
from .functions import *
from .utilities import *

start = "program"

parser = yacc.yacc(debug=False, write_tables=False, errorlog=yacc.NullLogger())

from sprig.ast2.nodes import *


# ==============================================================================
#                                 PROGRAM STRUCTURE
# ==============================================================================

def p_program(p):
    "program : expressions"
    p[0] = p[1]


def p_expressions_empty(p):
    "expressions : empty"
    p[0] = []


def p_expressions_single(p):
    "expressions : expression"
    p[0] = [p[1]]


def p_expressions_multiple(p):
    "expressions : expressions SEMICOLON expression"
    p[0] = p[1] + [p[3]]

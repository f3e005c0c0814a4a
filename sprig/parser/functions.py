from sprig.ast2.nodes import *

# ==============================================================================
#                                 FUNCTIONS
# ==============================================================================

def p_expression_function(p):
    "expression : LPAREN parameters LBRACE expressions RBRACE"
    p[0] = Function(params=p[2], body=p[4]).at(p, 1)


def p_parameters_end(p):
    "parameters : RPAREN"
    p[0] = []


def p_parameters_last(p):
    "parameters : IDENTIFIER RPAREN"
    p[0] = [Identifier(p[1]).at(p, 1)]


def p_parameters_multiple(p):
    "parameters : IDENTIFIER COMMA parameters"
    p[0] = [Identifier(p[1]).at(p, 1)] + p[3]

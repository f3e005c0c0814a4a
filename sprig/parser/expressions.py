from sprig.ast2.nodes import *


# ==============================================================================
#                                 EXPRESSIONS
# ==============================================================================

def p_expression_assignment(p):
    "expression : IDENTIFIER EQUALS expression"
    p[0] = Assignment(p[1], p[3]).at(p, 1)


def p_expression_infix(p):
    "expression : atom partial"
    atom, operator = p[1], p[2]
    if isinstance(operator, Empty):
        p[0] = atom
    elif isinstance(operator, Partial):
        # `a + b` arrives as atom `a` followed by Partial(+, b).
        p[0] = Call(operator.name, [atom, operator.right]).located(operator)
    else:
        raise TypeError(f"unexpected operator node {operator!r}")


def p_expression_call(p):
    "expression : IDENTIFIER LPAREN arguments"
    p[0] = Call(p[1], p[3]).at(p, 1)


def p_partial_empty(p):
    "partial : empty"
    p[0] = Empty()


def p_partial(p):
    "partial : IDENTIFIER expression"
    p[0] = Partial(p[1], p[2]).at(p, 1)


def p_atom_identifier(p):
    "atom : IDENTIFIER"
    p[0] = Identifier(p[1]).at(p, 1)


def p_atom_integer(p):
    "atom : INTEGER"
    p[0] = Integer(p[1]).at(p, 1)


def p_atom_string(p):
    "atom : STRING"
    p[0] = StringLiteral(p[1]).at(p, 1)


def p_arguments_end(p):
    "arguments : RPAREN"
    p[0] = []


def p_arguments_last(p):
    "arguments : expression RPAREN"
    p[0] = [p[1]]


def p_arguments_multiple(p):
    "arguments : expression COMMA arguments"
    p[0] = [p[1]] + p[3]

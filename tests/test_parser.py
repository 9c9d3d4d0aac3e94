import pytest

from tinypas.ast import (
    Assign, BinaryOp, Block, Compound, Declaration, IntegerLiteral, NoOp,
    Parameter, Procedure, Program, RealLiteral, TypeSpec, UnaryOp, Var,
    to_source,
)
from tinypas.errors import ParseError
from tinypas.parser import parse_expression, parse_program
from tinypas.tokens import TokenKind
from tinypas.types import BuiltinType

INTEGER = TypeSpec(BuiltinType.INTEGER)
REAL = TypeSpec(BuiltinType.REAL)


def test_empty_program():
    assert parse_program('PROGRAM p; BEGIN END.') == Program('p', Block((), Compound((NoOp(),))))


def test_declarations_expand_identifier_lists():
    program = parse_program('PROGRAM p; VAR a, b : INTEGER; c : REAL; BEGIN END.')
    assert program.block.declarations == (
        Declaration(Var('a'), INTEGER),
        Declaration(Var('b'), INTEGER),
        Declaration(Var('c'), REAL),
    )


def test_var_requires_at_least_one_declaration():
    with pytest.raises(ParseError):
        parse_program('PROGRAM p; VAR BEGIN END.')


def test_procedure_with_and_without_parameters():
    program = parse_program(
        'PROGRAM p; '
        'PROCEDURE A; BEGIN END; '
        'PROCEDURE B(x, y : INTEGER; z : REAL); BEGIN END; '
        'BEGIN END.'
    )
    empty = Block((), Compound((NoOp(),)))
    assert program.block.declarations == (
        Procedure('A', (), empty),
        Procedure('B', (
            Parameter(Var('x'), INTEGER),
            Parameter(Var('y'), INTEGER),
            Parameter(Var('z'), REAL),
        ), empty),
    )


def test_statement_list_with_trailing_semicolon_adds_noop():
    program = parse_program('PROGRAM p; BEGIN a := 1; END.')
    assert program.block.compound_statement.children == (
        Assign(Var('a'), IntegerLiteral(1)),
        NoOp(),
    )


def test_nested_compound_statements():
    program = parse_program('PROGRAM p; BEGIN BEGIN a := 1 END; b := 2 END.')
    assert program.block.compound_statement.children == (
        Compound((Assign(Var('a'), IntegerLiteral(1)),)),
        Assign(Var('b'), IntegerLiteral(2)),
    )


def test_statements_without_separator_fail():
    with pytest.raises(ParseError) as excinfo:
        parse_program('PROGRAM p; BEGIN BEGIN a := 1 END b := 2 END.')
    assert excinfo.value.expected == ';'
    assert excinfo.value.found.value == 'b'


def test_missing_period_fails():
    with pytest.raises(ParseError) as excinfo:
        parse_program('PROGRAM p; BEGIN END')
    assert excinfo.value.expected == '.'
    assert excinfo.value.found.kind is TokenKind.EOF


def test_trailing_content_fails():
    with pytest.raises(ParseError) as excinfo:
        parse_program('PROGRAM p; BEGIN END. x')
    assert excinfo.value.expected == 'EOF'
    assert excinfo.value.stage == 'parse'


def test_assignment_requires_assign_token():
    with pytest.raises(ParseError):
        parse_program('PROGRAM p; VAR a : INTEGER; BEGIN a : 1 END.')


def test_unknown_type_name_fails_to_parse():
    with pytest.raises(ParseError) as excinfo:
        parse_program('PROGRAM p; VAR a : STRING; BEGIN END.')
    assert excinfo.value.expected == 'INTEGER or REAL'


def test_binary_operators_are_left_associative():
    assert parse_expression('1 - 2 - 3') == BinaryOp(
        BinaryOp(IntegerLiteral(1), '-', IntegerLiteral(2)), '-', IntegerLiteral(3))
    assert parse_expression('8 DIV 4 / 2') == BinaryOp(
        BinaryOp(IntegerLiteral(8), 'DIV', IntegerLiteral(4)), '/', IntegerLiteral(2))


def test_multiplication_binds_tighter_than_addition():
    assert parse_expression('1 + 2 * 3') == BinaryOp(
        IntegerLiteral(1), '+', BinaryOp(IntegerLiteral(2), '*', IntegerLiteral(3)))


def test_parentheses_reset_precedence():
    assert parse_expression('(1 + 2) * 3') == BinaryOp(
        BinaryOp(IntegerLiteral(1), '+', IntegerLiteral(2)), '*', IntegerLiteral(3))


def test_unary_binds_tighter_than_binary():
    assert parse_expression('-a * 2') == BinaryOp(UnaryOp('-', Var('a')), '*', IntegerLiteral(2))
    assert parse_expression('- - 5') == UnaryOp('-', UnaryOp('-', IntegerLiteral(5)))


def test_div_keyword_in_lowercase():
    assert parse_expression('7 div 2') == BinaryOp(IntegerLiteral(7), 'DIV', IntegerLiteral(2))


def test_expression_must_span_input():
    with pytest.raises(ParseError):
        parse_expression('1 + 2 )')
    with pytest.raises(ParseError) as excinfo:
        parse_expression('1 +')
    assert excinfo.value.expected == 'expression'


@pytest.mark.parametrize('source', [
    '1 + 2 * 3',
    '(1 + 2) * 3',
    '-a - -b',
    '6 * (3 + 7) / 2',
    'x DIV (y - 1.5) / +z',
    '2.5 * 0.001',
])
def test_printed_expression_reparses_to_same_tree(source):
    tree = parse_expression(source)
    assert parse_expression(to_source(tree)) == tree


def test_to_source_is_fully_parenthesized():
    assert to_source(parse_expression('1 + 2 * -x')) == '(1 + (2 * (-x)))'


def test_to_source_avoids_exponent_notation():
    assert 'e' not in to_source(RealLiteral(1e-07))
    assert parse_expression(to_source(RealLiteral(1e-07))) == RealLiteral(1e-07)
    assert to_source(RealLiteral(1e16)) == '10000000000000000.0'


def test_to_source_rejects_non_finite_reals():
    with pytest.raises(ValueError):
        to_source(RealLiteral(float('inf')))
    with pytest.raises(ValueError):
        to_source(RealLiteral(float('nan')))


def test_to_source_rejects_statements():
    with pytest.raises(TypeError):
        to_source(NoOp())

"""
Tests for the recursive-descent parser.
"""

import pytest

from varlang.modules.ast import (
    BinaryExpression,
    FloatLiteral,
    NumberLiteral,
    Program,
    Variable,
    VariableDeclaration,
)
from varlang.modules.lexer import lex
from varlang.modules.parser import ParseError, Parser, parse


def parse_source(source):
    return parse(lex(source))


def test_declaration():
    program = parse_source("var a: int;")
    assert program == Program(body=[VariableDeclaration(name="a", data_type="int")])


def test_assignment():
    program = parse_source("a = 10;")
    assert program.body == [
        BinaryExpression(left=Variable("a"), operator="=", right=NumberLiteral(10))
    ]


def test_float_literal():
    program = parse_source("q = 2.5;")
    assert program.body[0].right == FloatLiteral(2.5)


def test_chains_nest_to_the_right():
    program = parse_source("x = a - b - c;")
    assert program.body == [
        BinaryExpression(
            Variable("x"),
            "=",
            BinaryExpression(
                Variable("a"),
                "-",
                BinaryExpression(Variable("b"), "-", Variable("c")),
            ),
        )
    ]


def test_semicolons_between_statements_are_skipped():
    program = parse_source(";; var a: int;;; a = 1;;")
    assert len(program.body) == 2


def test_empty_token_list():
    assert parse([]) == Program(body=[])


def test_bare_literals_and_variables_are_statements():
    program = parse_source("5; 1.5; a;")
    assert program.body == [NumberLiteral(5), FloatLiteral(1.5), Variable("a")]


def test_type_tag_is_not_validated():
    program = parse_source("var a: string;")
    assert program.body == [VariableDeclaration("a", "string")]


def test_sample_program_shape(sample_source):
    program = parse_source(sample_source)
    assert len(program.body) == 12
    assert all(isinstance(node, VariableDeclaration) for node in program.body[:6])
    assert program.body[-1] == BinaryExpression(
        Variable("quotient"), "=", BinaryExpression(Variable("a"), "/", Variable("b"))
    )


def test_missing_colon():
    with pytest.raises(ParseError) as excinfo:
        parse_source("var a int;")
    assert excinfo.value.kind is ParseError.Kind.MISSING_COLON
    assert excinfo.value.token == "int"
    assert "int" in str(excinfo.value)


@pytest.mark.parametrize("source, token", [("@", "@"), ("a = = 1;", "="), ("=> x", "=>")])
def test_unexpected_token(source, token):
    with pytest.raises(ParseError) as excinfo:
        parse_source(source)
    assert excinfo.value.kind is ParseError.Kind.UNEXPECTED_TOKEN
    assert excinfo.value.token == token


def test_right_side_cannot_be_empty():
    with pytest.raises(ParseError) as excinfo:
        parse_source("a = ;")
    assert excinfo.value.kind is ParseError.Kind.UNEXPECTED_TOKEN
    assert excinfo.value.token == ";"


def test_right_side_cannot_be_a_declaration():
    with pytest.raises(ParseError) as excinfo:
        parse_source("a = var b: int;")
    assert excinfo.value.token == "var"


@pytest.mark.parametrize("source", ["var", "var a", "var a :", "a =", "a + b -"])
def test_unexpected_end(source):
    with pytest.raises(ParseError) as excinfo:
        parse_source(source)
    assert excinfo.value.kind is ParseError.Kind.UNEXPECTED_END
    assert excinfo.value.token is None


def test_start_logs_the_ast():
    lines = []
    Parser(lex("var a: int;"), lambda *args, **kwargs: lines.extend(args)).start()
    assert any("VariableDeclaration" in line for line in lines)


def test_parsers_do_not_share_state():
    tokens = lex("a = 1;")
    assert parse(tokens) == parse(tokens)


def test_standalone_expressions_are_warned():
    warnings = []
    Parser(lex("var a: int; a; a = 1; a + 1;"), warn_logger=warnings.append).program()
    assert warnings == [
        "[warning] standalone expression at statement 2.",
        "[warning] standalone expression at statement 4.",
    ]


def test_digit_led_word_is_rejected():
    with pytest.raises(ParseError) as excinfo:
        parse_source("x = 10abc;")
    assert excinfo.value.kind is ParseError.Kind.UNEXPECTED_TOKEN
    assert excinfo.value.token == "10abc"


def test_non_ascii_character_is_rejected():
    with pytest.raises(ParseError) as excinfo:
        parse_source("var aé: int;")
    assert excinfo.value.kind is ParseError.Kind.MISSING_COLON
    assert excinfo.value.token == "é"

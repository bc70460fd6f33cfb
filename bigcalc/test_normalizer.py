import pytest

from bigcalc.lexer import Token, TokenType, join_tokens, tokenize
from bigcalc.normalizer import (
    build_pattern,
    collapse_operator,
    conforms,
    count_operands,
    normalize_signs,
)


def normalized(line):
    toks = tokenize(line)
    return join_tokens(normalize_signs(toks, build_pattern(toks)), ' ')


# ---------------------------
# Operator runs
# ---------------------------

@pytest.mark.parametrize("run, expected", [
    ('-', '-'),
    ('--', '+'),
    ('---', '-'),
    ('----', '+'),
    ('-' * 11, '-'),
    ('+', '+'),
    ('+++', '+'),
    ('**', '*'),
    ('//', '/'),
])
def test_collapse_operator(run, expected):
    assert collapse_operator(run) == expected


# ---------------------------
# Patterns
# ---------------------------

def test_count_operands():
    assert count_operands(tokenize("1 + a * 3")) == 3
    assert count_operands(tokenize("(1)")) == 1


def test_pattern_needs_at_least_two_operands():
    pattern = build_pattern(tokenize("5"))
    assert pattern.fullmatch("5") is None
    assert pattern.fullmatch("5+5") is not None


def test_pattern_matches_parenthesized_operands():
    toks = tokenize("((2-----4))")
    assert conforms(toks, build_pattern(toks))


def test_pattern_rejects_identifiers():
    toks = tokenize("a + 1")
    assert not conforms(toks, build_pattern(toks))


def test_pattern_rejects_trailing_operator():
    toks = tokenize("2 +")
    assert not conforms(toks, build_pattern(toks))


def test_pattern_is_sized_by_operand_count():
    toks = tokenize("1 + 2 + 3")
    pattern = build_pattern(toks)
    assert pattern.fullmatch("1+2+3") is not None
    assert pattern.fullmatch("1+2") is None


# ---------------------------
# Normalization
# ---------------------------

def test_normalize_parity():
    assert normalized("2 -- 2") == "2 + 2"
    assert normalized("2 --- 2") == "2 - 2"
    assert normalized("1 +++ 2 ---- 3") == "1 + 2 + 3"


def test_normalize_inside_parentheses():
    assert normalized("(2 -- 2) * 3") == "( 2 + 2 ) * 3"


def test_normalize_leaves_operands_untouched():
    toks = [Token(TokenType.NUMBER, -4), Token(TokenType.OP, '--'), Token(TokenType.NUMBER, 7)]
    result = normalize_signs(toks, build_pattern(toks))
    assert result[0] == Token(TokenType.NUMBER, -4)
    assert result[2] == Token(TokenType.NUMBER, 7)
    assert result[1] == Token(TokenType.OP, '+')


def test_normalize_is_noop_for_nonconforming_input():
    toks = tokenize("a -- 2")
    assert normalize_signs(toks, build_pattern(toks)) is toks

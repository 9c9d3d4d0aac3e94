import pytest

from tinypas.errors import NumberOutOfRange, UnknownCharacter, UnterminatedComment
from tinypas.lexer import Lexer, tokenize
from tinypas.tokens import RESERVED_WORDS, Token, TokenKind


def kinds(text):
    return [token.kind for token in tokenize(text)]


def test_empty_input_yields_single_eof():
    assert tokenize('') == [Token(TokenKind.EOF)]
    assert tokenize('   \n\t ') == [Token(TokenKind.EOF)]


def test_eof_is_repeated_once_input_is_exhausted():
    lexer = Lexer('a')
    assert lexer.next_token() == Token(TokenKind.ID, 'a')
    assert lexer.next_token().kind is TokenKind.EOF
    assert lexer.next_token().kind is TokenKind.EOF


def test_keywords_are_case_insensitive():
    for word in ('PROGRAM', 'program', 'Program', 'pRoGrAm'):
        assert kinds(word) == [TokenKind.PROGRAM, TokenKind.EOF]
    assert kinds('div Div DIV') == [TokenKind.INTEGER_DIV] * 3 + [TokenKind.EOF]


def test_identifiers_keep_their_case():
    assert tokenize('Alpha')[0] == Token(TokenKind.ID, 'Alpha')
    assert tokenize('alpha')[0] == Token(TokenKind.ID, 'alpha')


def test_keyword_prefix_is_an_identifier():
    assert tokenize('beginning')[0] == Token(TokenKind.ID, 'beginning')
    assert tokenize('end2')[0] == Token(TokenKind.ID, 'end2')


def test_identifier_may_start_with_underscore():
    assert tokenize('_a')[0] == Token(TokenKind.ID, '_a')


def test_underscore_after_first_character_starts_a_new_identifier():
    assert tokenize('an_int')[:2] == [Token(TokenKind.ID, 'an'), Token(TokenKind.ID, '_int')]


def test_integer_and_real_literals():
    assert tokenize('42')[0] == Token(TokenKind.INTEGER_CONST, 42)
    assert tokenize('3.14')[0] == Token(TokenKind.REAL_CONST, 3.14)


def test_point_without_following_digit_is_not_consumed():
    assert tokenize('3.') == [
        Token(TokenKind.INTEGER_CONST, 3),
        Token(TokenKind.DOT),
        Token(TokenKind.EOF),
    ]
    assert kinds('3.x') == [TokenKind.INTEGER_CONST, TokenKind.DOT, TokenKind.ID, TokenKind.EOF]


def test_assign_needs_lookahead():
    assert kinds('a := 1') == [TokenKind.ID, TokenKind.ASSIGN, TokenKind.INTEGER_CONST, TokenKind.EOF]
    assert kinds('a : b') == [TokenKind.ID, TokenKind.COLON, TokenKind.ID, TokenKind.EOF]


def test_punctuation():
    assert kinds('+ - * / ( ) ; . : ,') == [
        TokenKind.PLUS, TokenKind.MINUS, TokenKind.MUL, TokenKind.FLOAT_DIV,
        TokenKind.LPAREN, TokenKind.RPAREN, TokenKind.SEMI, TokenKind.DOT,
        TokenKind.COLON, TokenKind.COMMA, TokenKind.EOF,
    ]


def test_comments_are_skipped():
    assert kinds('{ a comment } a {another}') == [TokenKind.ID, TokenKind.EOF]


def test_unterminated_comment():
    with pytest.raises(UnterminatedComment) as excinfo:
        tokenize('a := 1 { never closed')
    assert (excinfo.value.line, excinfo.value.column) == (1, 8)


def test_unknown_character():
    with pytest.raises(UnknownCharacter) as excinfo:
        tokenize('a = 10')
    assert excinfo.value.char == '='
    assert (excinfo.value.line, excinfo.value.column) == (1, 3)
    assert excinfo.value.stage == 'lex'


def test_positions_are_tracked_across_lines():
    tokens = tokenize('BEGIN\n  x := 1\nEND')
    assert [(t.line, t.column) for t in tokens[:4]] == [(1, 1), (2, 3), (2, 5), (2, 8)]
    assert (tokens[4].line, tokens[4].column) == (3, 1)


def test_positions_do_not_affect_equality():
    assert Token(TokenKind.ID, 'a', 1, 1) == Token(TokenKind.ID, 'a', 5, 9)


def test_peek_does_not_consume():
    lexer = Lexer('ab')
    assert lexer.peek() == 'b'
    assert lexer.current_char == 'a'
    lexer.advance()
    assert lexer.peek() is None


def test_reserved_words_are_read_only():
    with pytest.raises(TypeError):
        RESERVED_WORDS['WHILE'] = TokenKind.ID


def test_integer_literal_too_long_to_convert():
    with pytest.raises(NumberOutOfRange) as excinfo:
        tokenize('a := ' + '9' * 5000)
    assert (excinfo.value.line, excinfo.value.column) == (1, 6)
    assert excinfo.value.stage == 'lex'


def test_real_literal_beyond_float_range():
    with pytest.raises(NumberOutOfRange):
        tokenize('1' * 400 + '.0')


@pytest.mark.parametrize('char', ['é', ' ', '٣', '\v'])
def test_only_ascii_letters_digits_and_plain_whitespace(char):
    with pytest.raises(UnknownCharacter) as excinfo:
        tokenize(f'a {char}')
    assert excinfo.value.char == char

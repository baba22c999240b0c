from lox.scanner import Scanner, tokenize
from lox.tokens import TokenType


def scan(source):
    scanner = Scanner(source)
    return scanner.scan_tokens(), scanner


def kinds(tokens):
    return [t.type for t in tokens]


def test_empty_source_yields_only_eof():
    tokens, scanner = scan('')
    assert kinds(tokens) == [TokenType.EOF]
    assert str(tokens[0]) == 'EOF  null'
    assert not scanner.had_error


def test_punctuation_and_maximal_munch():
    tokens, _ = scan('(){},.-+;*/ ! != = == < <= > >=')
    assert kinds(tokens) == [
        TokenType.LEFT_PAREN, TokenType.RIGHT_PAREN, TokenType.LEFT_BRACE,
        TokenType.RIGHT_BRACE, TokenType.COMMA, TokenType.DOT, TokenType.MINUS,
        TokenType.PLUS, TokenType.SEMICOLON, TokenType.STAR, TokenType.SLASH,
        TokenType.BANG, TokenType.BANG_EQUAL, TokenType.EQUAL, TokenType.EQUAL_EQUAL,
        TokenType.LESS, TokenType.LESS_EQUAL, TokenType.GREATER, TokenType.GREATER_EQUAL,
        TokenType.EOF,
    ]


def test_adjacent_equals_are_split_greedily():
    tokens, _ = scan('===')
    assert kinds(tokens) == [TokenType.EQUAL_EQUAL, TokenType.EQUAL, TokenType.EOF]


def test_comment_runs_to_end_of_line():
    tokens, _ = scan('1 // ignored ( "\n2')
    assert kinds(tokens) == [TokenType.NUMBER, TokenType.NUMBER, TokenType.EOF]
    assert tokens[1].line == 2


def test_number_literals():
    tokens, _ = scan('123 45.67 8.')
    assert tokens[0].literal == 123.0
    assert str(tokens[0]) == 'NUMBER 123 123'
    assert str(tokens[1]) == 'NUMBER 45.67 45.67'
    # a trailing dot is not part of the number
    assert kinds(tokens) == [TokenType.NUMBER, TokenType.NUMBER, TokenType.NUMBER,
                             TokenType.DOT, TokenType.EOF]


def test_number_literal_values_match_source():
    for text in ('0', '7', '1234567', '3.5', '0.125', '10.0'):
        tokens, _ = scan(text)
        assert tokens[0].literal == float(text), text


def test_string_literal():
    tokens, _ = scan('"hello world"')
    assert str(tokens[0]) == 'STRING "hello world" hello world'


def test_multiline_string_advances_line():
    tokens, _ = scan('"a\nb"\nx')
    assert tokens[0].literal == 'a\nb'
    assert tokens[1].type == TokenType.IDENTIFIER
    assert tokens[1].line == 3


def test_identifiers_and_keywords():
    tokens, _ = scan('and class else false fun for if nil or print return super this true var while _foo bar9 Var')
    assert kinds(tokens)[:16] == [
        TokenType.AND, TokenType.CLASS, TokenType.ELSE, TokenType.FALSE, TokenType.FUN,
        TokenType.FOR, TokenType.IF, TokenType.NIL, TokenType.OR, TokenType.PRINT,
        TokenType.RETURN, TokenType.SUPER, TokenType.THIS, TokenType.TRUE, TokenType.VAR,
        TokenType.WHILE,
    ]
    # keywords are case sensitive
    assert kinds(tokens)[16:] == [TokenType.IDENTIFIER] * 3 + [TokenType.EOF]
    assert str(tokens[16]) == 'IDENTIFIER _foo null'


def test_unexpected_characters_are_all_reported():
    tokens, scanner = scan(',$(#\n@')
    assert kinds(tokens) == [TokenType.COMMA, TokenType.LEFT_PAREN, TokenType.EOF]
    assert [str(e) for e in scanner.errors] == [
        '[line 1] Error: Unexpected character: $',
        '[line 1] Error: Unexpected character: #',
        '[line 2] Error: Unexpected character: @',
    ]


def test_unterminated_string_reported_at_opening_line():
    tokens, scanner = scan('print\n"abc\ndef')
    assert [str(e) for e in scanner.errors] == ['[line 2] Error: Unterminated string.']
    assert kinds(tokens) == [TokenType.PRINT, TokenType.EOF]
    assert tokens[-1].line == 2


def test_unicode_characters_are_single_elements():
    tokens, scanner = scan('"héllo" é')
    assert tokens[0].literal == 'héllo'
    assert [str(e) for e in scanner.errors] == ['[line 1] Error: Unexpected character: é']


def test_tokenize_writes_errors_to_stderr(capsys):
    tokens, had_error = tokenize('"a')
    assert had_error
    assert kinds(tokens) == [TokenType.EOF]
    assert capsys.readouterr().err == '[line 1] Error: Unterminated string.\n'


def test_tokenize_clean_source(capsys):
    tokens, had_error = tokenize('var x = 1;')
    assert not had_error
    assert [str(t) for t in tokens] == [
        'VAR var null',
        'IDENTIFIER x null',
        'EQUAL = null',
        'NUMBER 1 1',
        'SEMICOLON ; null',
        'EOF  null',
    ]
    assert capsys.readouterr().err == ''


def test_large_number_literal_keeps_its_digits():
    tokens, _ = scan('10000000000000000000000000')
    assert str(tokens[0]) == 'NUMBER 10000000000000000000000000 10000000000000000000000000'

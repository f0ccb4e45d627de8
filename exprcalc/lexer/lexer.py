"""
exprcalc Lexer - turns expression text into tokens, one at a time

Single-character lookahead, cursor only moves forward. The parser pulls
tokens on demand, so there is no separate tokenization pass unless a caller
asks for the whole list via tokenize().
"""

from typing import Iterator, List, Optional

from .tokens import Token, TokenType, SourceLocation, OPERATORS, DIGITS


DEFAULT_FILENAME = "<expression>"


class Lexer:
    """
    exprcalc lexical analyzer.

    Recognises integer literals, + - * / and parentheses. Anything else is
    returned as an INVALID token and lexing carries on past it.
    """

    def __init__(self, source: str, filename: str = DEFAULT_FILENAME):
        """
        Initialize the lexer and prime the lookahead character.

        Args:
            source: Expression text
            filename: Name used in source locations for error reporting
        """
        self.source = source
        self.filename = filename
        self.pos = 0
        self.line = 1
        self.column = 1
        self.current_char: Optional[str] = source[0] if source else None

    def next_token(self) -> Token:
        """
        Scan and return the next token.

        Once the end of input is reached every further call returns EOF.
        """
        self._skip_whitespace()

        location = self._location()

        if self.current_char is None:
            return Token(TokenType.EOF, "", None, location)

        if self.current_char in DIGITS:
            return self._tokenize_number(location)

        char = self.current_char
        self._advance()

        token_type = OPERATORS.get(char)
        if token_type is not None:
            return Token(token_type, char, char, location)

        return Token(TokenType.INVALID, char, f"Invalid character: {char}", location)

    def tokenize(self) -> List[Token]:
        """
        Tokenize the remaining input.

        Returns:
            List of tokens ending with a single EOF token
        """
        return list(self)

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            yield token
            if token.is_eof:
                return

    def _tokenize_number(self, location: SourceLocation) -> Token:
        """Consume the maximal run of digits starting at the cursor."""
        start = self.pos
        while self.current_char is not None and self.current_char in DIGITS:
            self._advance()

        lexeme = self.source[start:self.pos]
        return Token(TokenType.NUMBER, lexeme, lexeme, location)

    def _skip_whitespace(self):
        while self.current_char is not None and self.current_char.isspace():
            self._advance()

    def _advance(self):
        """Advance position by one character, updating line/column."""
        if self.current_char is None:
            return

        if self.current_char == '\n':
            self.line += 1
            self.column = 1
        else:
            self.column += 1

        self.pos += 1
        self.current_char = self.source[self.pos] if self.pos < len(self.source) else None

    def _location(self) -> SourceLocation:
        return SourceLocation(self.filename, self.line, self.column, self.pos)


def tokenize_string(source: str, filename: str = DEFAULT_FILENAME) -> List[Token]:
    """
    Convenience function to tokenize an expression string.

    INVALID tokens are included in the result rather than raised; it is the
    parser's job to reject them.

    Args:
        source: Expression text
        filename: Filename for error reporting

    Returns:
        List of tokens ending with EOF
    """
    return Lexer(source, filename).tokenize()

"""
Error handling for the exprcalc lexer.

The lexer itself never raises: characters outside the token alphabet become
INVALID tokens. The parser turns such a token into a LexerError when it
reaches it, using the helpers below.
"""

from typing import Optional, List
from dataclasses import dataclass

from .tokens import SourceLocation, Token, OPERATORS


@dataclass
class Diagnostic:
    """Base class for pipeline diagnostics (errors, warnings, info)."""
    message: str
    location: SourceLocation
    severity: str  # "error", "warning", "info", "hint"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class LexerError(Exception):
    """
    Exception raised for a character that does not belong to the token alphabet.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        token: Optional[Token] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )
        self.token = token

    @property
    def message(self) -> str:
        return self.diagnostic.message

    @property
    def summary(self) -> str:
        return LEXER_ERROR_CODES.get(self.diagnostic.code, "Lexical error")

    def __str__(self) -> str:
        return str(self.diagnostic)


# Common error codes for categorization
LEXER_ERROR_CODES = {
    "L001": "Invalid character",
}

# ASCII look-alikes people paste in from documents
_LOOKALIKES = {
    "×": "*",
    "÷": "/",
    "−": "-",
    "–": "-",
    "x": "*",
    "X": "*",
    ":": "/",
    "[": "(",
    "]": ")",
    "{": "(",
    "}": ")",
}


def suggest_replacements(char: str) -> List[str]:
    """Suggest an alphabet character for a common look-alike."""
    replacement = _LOOKALIKES.get(char)
    if replacement is None:
        return []
    return [f"Use '{replacement}' instead of '{char}'"]


def create_invalid_character_error(token: Token) -> LexerError:
    """Create an error for an INVALID token reached by the parser."""
    char = token.lexeme
    suggestions = suggest_replacements(char)

    if char.isprintable():
        help_text = (f"The character '{char}' is not valid in an expression; "
                     f"only digits, whitespace and {' '.join(OPERATORS)} are allowed.")
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return LexerError(
        message=token.value,
        location=token.location,
        token=token,
        code="L001",
        help_text=help_text,
        suggestions=suggestions
    )

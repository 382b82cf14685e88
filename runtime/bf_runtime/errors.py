"""
BF Runtime - Error Definitions

Every failure the runtime reports carries a stable code plus a human-readable
message. Compile errors abort compilation before any instruction executes;
nothing fails at runtime except reading from a closed input stream.
"""

from typing import Optional


# ============================================================================
# Error Codes
# ============================================================================

E_UNMATCHED_RIGHT_BRACKET = "E_UNMATCHED_RIGHT_BRACKET"
E_UNMATCHED_LEFT_BRACKET = "E_UNMATCHED_LEFT_BRACKET"
E_INVALID_CONFIG = "E_INVALID_CONFIG"
E_INPUT_EOF = "E_INPUT_EOF"
E_INVALID_INSTRUCTION = "E_INVALID_INSTRUCTION"


class BFError(Exception):
    """Base exception for BF runtime errors"""
    def __init__(self, code: str, message: str):
        self.code = code
        self.message = message
        super().__init__(f"[{code}] {message}")


class BFCompileError(BFError):
    """Bracket structure could not be resolved"""
    def __init__(self, code: str, message: str, pos: Optional[int] = None):
        self.pos = pos
        super().__init__(code, message)


class UnmatchedRightBracket(BFCompileError):
    def __init__(self, pos: Optional[int] = None):
        super().__init__(E_UNMATCHED_RIGHT_BRACKET, "Unmatched right bracket!", pos)


class UnmatchedLeftBracket(BFCompileError):
    def __init__(self, pos: Optional[int] = None):
        super().__init__(E_UNMATCHED_LEFT_BRACKET, "Unmatched left bracket!", pos)


class BFConfigError(BFError):
    def __init__(self, message: str):
        super().__init__(E_INVALID_CONFIG, message)


class BFInputError(BFError):
    """Input stream closed while a read instruction was waiting"""
    def __init__(self, message: str = "Input stream closed"):
        super().__init__(E_INPUT_EOF, message)


__all__ = [
    'E_UNMATCHED_RIGHT_BRACKET',
    'E_UNMATCHED_LEFT_BRACKET',
    'E_INVALID_CONFIG',
    'E_INPUT_EOF',
    'E_INVALID_INSTRUCTION',
    'BFError',
    'BFCompileError',
    'UnmatchedRightBracket',
    'UnmatchedLeftBracket',
    'BFConfigError',
    'BFInputError',
]

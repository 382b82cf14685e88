"""
BF Runtime - Tokenizer

Maps source characters onto the eight command tokens of the language:

    >   move the tape head right
    <   move the tape head left
    +   increment the current cell
    -   decrement the current cell
    .   output the current cell
    ,   read one input byte into the current cell
    [   jump past the matching ] if the current cell is zero
    ]   jump back to the matching [

Every other character is a comment and is dropped.
"""

from typing import Dict, List
from dataclasses import dataclass
import logging

logger = logging.getLogger(__name__)


# ============================================================================
# Token Types
# ============================================================================

class TokenType:
    """Token type constants"""
    MOVE_RIGHT = "MOVE_RIGHT"
    MOVE_LEFT = "MOVE_LEFT"
    INCREMENT = "INCREMENT"
    DECREMENT = "DECREMENT"
    OUTPUT = "OUTPUT"
    INPUT = "INPUT"
    LOOP_OPEN = "LOOP_OPEN"
    LOOP_CLOSE = "LOOP_CLOSE"


SYMBOLS: Dict[str, str] = {
    '>': TokenType.MOVE_RIGHT,
    '<': TokenType.MOVE_LEFT,
    '+': TokenType.INCREMENT,
    '-': TokenType.DECREMENT,
    '.': TokenType.OUTPUT,
    ',': TokenType.INPUT,
    '[': TokenType.LOOP_OPEN,
    ']': TokenType.LOOP_CLOSE,
}


@dataclass(frozen=True)
class Token:
    """Token from BF source"""
    type: str
    pos: int


# ============================================================================
# Tokenizer
# ============================================================================

class BFTokenizer:
    """Tokenize BF source code"""

    def __init__(self, source: str):
        self.source = source
        self.tokens: List[Token] = []

    def tokenize(self) -> List[Token]:
        """Tokenize entire source, skipping comment characters"""
        self.tokens = []
        for pos, ch in enumerate(self.source):
            token_type = SYMBOLS.get(ch)
            if token_type is not None:
                self.tokens.append(Token(type=token_type, pos=pos))

        logger.debug("tokenized %d characters into %d tokens", len(self.source), len(self.tokens))
        return self.tokens


def tokenize(source: str) -> List[Token]:
    """
    Tokenize BF source code (convenience function)

    Example:
        >>> [t.type for t in tokenize('+ comment -')]
        ['INCREMENT', 'DECREMENT']
    """
    return BFTokenizer(source).tokenize()


__all__ = [
    'TokenType',
    'Token',
    'SYMBOLS',
    'BFTokenizer',
    'tokenize',
]

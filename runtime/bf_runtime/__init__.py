"""
BF Runtime - Tape Language Interpreter

This package runs programs written in the eight-symbol tape language:

**Pipeline:**
- Tokenizer: source text -> command tokens (everything else is a comment)
- Compiler: tokens -> instructions with resolved jump targets
- Optimizer: run-length condensing with jump-target remapping
- Interpreter: fetch-decode-execute over a Tape and an InputBuffer

**Machine:**
- Tape: unbounded bidirectional byte tape (numpy arena + signed offset)
- InputBuffer: line-buffered input bytes, blocking refill

Version: 1.0.0
"""

__version__ = '1.0.0'

# ============================================================================
# Errors and Configuration
# ============================================================================

from .errors import (
    E_UNMATCHED_RIGHT_BRACKET, E_UNMATCHED_LEFT_BRACKET,
    E_INVALID_CONFIG, E_INPUT_EOF, E_INVALID_INSTRUCTION,
    BFError, BFCompileError, UnmatchedRightBracket, UnmatchedLeftBracket,
    BFConfigError, BFInputError,
)

from .config import (
    DEFAULT_MAX_RUN_LENGTH, DEFAULT_TAPE_SIZE, DEFAULT_ENCODING,
    RuntimeOptions,
)

# ============================================================================
# Pipeline
# ============================================================================

from .tokenizer import TokenType, Token, BFTokenizer, tokenize
from .compiler import OpCode, Instruction, BFCompiler, compile_tokens
from .optimizer import CondensedInstruction, BFOptimizer, condense
from .interpreter import BFInterpreter, interpret
from .runtime import BFRuntime, execute_bf

# ============================================================================
# Machine
# ============================================================================

from .tape import Tape
from .input_buffer import InputBuffer
from .listing import format_instruction, format_listing


__all__ = [
    '__version__',
    # Errors
    'E_UNMATCHED_RIGHT_BRACKET', 'E_UNMATCHED_LEFT_BRACKET',
    'E_INVALID_CONFIG', 'E_INPUT_EOF', 'E_INVALID_INSTRUCTION',
    'BFError', 'BFCompileError', 'UnmatchedRightBracket', 'UnmatchedLeftBracket',
    'BFConfigError', 'BFInputError',
    # Configuration
    'DEFAULT_MAX_RUN_LENGTH', 'DEFAULT_TAPE_SIZE', 'DEFAULT_ENCODING',
    'RuntimeOptions',
    # Pipeline
    'TokenType', 'Token', 'BFTokenizer', 'tokenize',
    'OpCode', 'Instruction', 'BFCompiler', 'compile_tokens',
    'CondensedInstruction', 'BFOptimizer', 'condense',
    'BFInterpreter', 'interpret',
    'BFRuntime', 'execute_bf',
    # Machine
    'Tape', 'InputBuffer',
    'format_instruction', 'format_listing',
]

"""
BF Runtime - Configuration

Defaults live as module constants; callers override them through
RuntimeOptions, either directly or from BF_* environment variables.
"""

from dataclasses import dataclass, replace
from typing import Mapping, Optional
import os

from .errors import BFConfigError


# Counter width of a condensed instruction (one unsigned byte)
DEFAULT_MAX_RUN_LENGTH = 255

# Initial arena size of a fresh tape; it doubles on demand
DEFAULT_TAPE_SIZE = 64

DEFAULT_ENCODING = "utf-8"

ENV_OPTIMIZE = "BF_OPTIMIZE"
ENV_MAX_RUN = "BF_MAX_RUN"
ENV_TAPE_SIZE = "BF_TAPE_SIZE"

_TRUE_VALUES = {'1', 'true', 'yes', 'on'}
_FALSE_VALUES = {'0', 'false', 'no', 'off'}


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise BFConfigError(f"{name} must be a boolean, got {raw!r}")


def _parse_int(name: str, raw: str) -> int:
    try:
        return int(raw.strip())
    except ValueError:
        raise BFConfigError(f"{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class RuntimeOptions:
    """Knobs for a single BFRuntime"""
    optimize: bool = True
    max_run_length: int = DEFAULT_MAX_RUN_LENGTH
    tape_size: int = DEFAULT_TAPE_SIZE
    encoding: str = DEFAULT_ENCODING

    def validate(self) -> "RuntimeOptions":
        if self.max_run_length < 1:
            raise BFConfigError(f"max_run_length must be at least 1, got {self.max_run_length}")
        if self.tape_size < 1:
            raise BFConfigError(f"tape_size must be at least 1, got {self.tape_size}")
        return self

    def with_overrides(self, **changes) -> "RuntimeOptions":
        """Copy with the non-None keyword values applied"""
        changes = {key: value for key, value in changes.items() if value is not None}
        return replace(self, **changes).validate()

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "RuntimeOptions":
        """
        Build options from BF_OPTIMIZE, BF_MAX_RUN and BF_TAPE_SIZE.

        Unset variables keep their defaults; malformed ones raise BFConfigError.
        """
        environ = os.environ if environ is None else environ
        options = cls()
        overrides = {}

        if ENV_OPTIMIZE in environ:
            overrides['optimize'] = _parse_bool(ENV_OPTIMIZE, environ[ENV_OPTIMIZE])
        if ENV_MAX_RUN in environ:
            overrides['max_run_length'] = _parse_int(ENV_MAX_RUN, environ[ENV_MAX_RUN])
        if ENV_TAPE_SIZE in environ:
            overrides['tape_size'] = _parse_int(ENV_TAPE_SIZE, environ[ENV_TAPE_SIZE])

        return options.with_overrides(**overrides)


__all__ = [
    'DEFAULT_MAX_RUN_LENGTH',
    'DEFAULT_TAPE_SIZE',
    'DEFAULT_ENCODING',
    'RuntimeOptions',
]

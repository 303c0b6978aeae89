# filter_expr/config.py

import os
from dataclasses import dataclass
from typing import Mapping, Optional

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

# /ast nests one JSON object per operator and the response encoder recurses
# through it, so requests stay well below the interpreter recursion limit.
MAX_SYMBOLS_LIMIT = 512


@dataclass(frozen=True)
class ServiceConfig:
    """Settings for the parse service.

    Immutable. Built explicitly or from FILTER_EXPR_* environment variables.
    """

    indent: int = 4
    max_symbols: int = 256
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.indent < 0:
            raise ValueError("indent must be >= 0")
        if not 1 <= self.max_symbols <= MAX_SYMBOLS_LIMIT:
            raise ValueError(f"max_symbols must be between 1 and {MAX_SYMBOLS_LIMIT}")
        if self.log_level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level '{self.log_level}'")

    @property
    def indent_str(self) -> str:
        return " " * self.indent

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ServiceConfig":
        env = os.environ if environ is None else environ
        kwargs = {}
        if "FILTER_EXPR_INDENT" in env:
            kwargs["indent"] = _to_int("FILTER_EXPR_INDENT", env["FILTER_EXPR_INDENT"])
        if "FILTER_EXPR_MAX_SYMBOLS" in env:
            kwargs["max_symbols"] = _to_int("FILTER_EXPR_MAX_SYMBOLS", env["FILTER_EXPR_MAX_SYMBOLS"])
        if "FILTER_EXPR_LOG_LEVEL" in env:
            kwargs["log_level"] = env["FILTER_EXPR_LOG_LEVEL"].upper()
        return cls(**kwargs)


def _to_int(name: str, raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got '{raw}'") from None

"""Configuration for a single transform."""
from __future__ import annotations

import keyword
from dataclasses import dataclass
from typing import ClassVar, Optional

from placebind.emitter import SYNTAXES

SYNTAX_NAMES = tuple(SYNTAXES)


def valid_identifier(x: str) -> bool:
    return x.isidentifier() and not keyword.iskeyword(x)


@dataclass(frozen=True)
class BindSettings:
    """
    * `placeholder`: the token marking an argument to be supplied later.
    * `prefix`: generated parameters are named `prefix + str(index)`.
      Identifiers in the input must not start with it.
    * `syntax`: surface syntax of the emitted callable (see `SYNTAX_NAMES`).
    """
    placeholder: str = "_"
    prefix: str = "__"
    syntax: str = "python"

    _default: ClassVar[Optional["BindSettings"]] = None

    def __post_init__(self) -> None:
        if not valid_identifier(self.placeholder):
            raise ValueError(f"placeholder must be a plain identifier, got {self.placeholder!r}")
        if not valid_identifier(self.prefix + "0"):
            raise ValueError(f"prefix {self.prefix!r} does not form valid parameter names")
        if self.prefix + "0" == self.placeholder:
            raise ValueError("prefix and placeholder collide")
        if self.syntax not in SYNTAX_NAMES:
            raise ValueError(f"Unknown syntax {self.syntax!r}, expected one of {', '.join(SYNTAX_NAMES)}")

    @classmethod
    def default(cls) -> "BindSettings":
        if cls._default is None:
            cls._default = cls()
        return cls._default


__all__ = ["BindSettings", "SYNTAX_NAMES", "valid_identifier"]

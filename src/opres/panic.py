"""Contract violations: unwrapping a container in the wrong variant"""

from __future__ import annotations

import os
import sys
from enum import IntEnum, StrEnum
from typing import NoReturn


# ┏━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┓
# ┃                          Types                           ┃
# ┗━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┛


class ExitCode(IntEnum):
    PANIC = 101


class PanicStrategy(StrEnum):
    RAISE = 'raise'
    ABORT = 'abort'


class Panic(BaseException):
    """Raised when a container is unwrapped in the wrong variant.

    Derives from BaseException so that `except Exception` blocks written
    for recoverable errors do not catch it.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


# ┏━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┓
# ┃                         Globals                          ┃
# ┗━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┛


PANIC_ENV = 'OPRES_PANIC'


# ┏━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┓
# ┃                   Core Implementation                    ┃
# ┗━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┛


def get_panic_strategy() -> PanicStrategy:
    match os.getenv(PANIC_ENV, PanicStrategy.RAISE).strip().lower():
        case PanicStrategy.ABORT:
            return PanicStrategy.ABORT
        case _:
            return PanicStrategy.RAISE


def bail(message: str, code: ExitCode) -> NoReturn:
    print(message, file=sys.stderr)
    raise SystemExit(code.value)


def panic(message: str) -> NoReturn:
    if get_panic_strategy() is PanicStrategy.ABORT:
        bail(message, ExitCode.PANIC)
    raise Panic(message)

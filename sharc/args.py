"""
sharc - Command-line argument parser
Turns the raw argument list into an Args configuration, or into one of the
terminal outcomes (help, version, banner, failure) for the caller to act on.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Callable, ClassVar, Dict, Generic, List, Optional, Sequence, Tuple, TypeVar, Union

from .report import Level

T = TypeVar("T")

DEFAULT_FILE   = "main.shd"
DEFAULT_OUTPUT = "main.asm"
BANNER_WORD    = "shark"


class ErrorKind(Enum):
    DUPLICATE_FLAG        = auto()   # option given more than once
    GROUP_POSITION        = auto()   # value flag not last in -abc
    MISSING_VALUE         = auto()   # value flag at end of argv
    INVALID_VALUE         = auto()   # bad --error-level spelling
    UNRECOGNIZED_ARGUMENT = auto()


class ArgumentError(Exception):
    def __init__(self, kind: ErrorKind, title: str):
        super().__init__(f"[ArgumentError] {title}")
        self.kind = kind
        self.title = title


# ── Settable value ────────────────────────────────────────────────────────────

@dataclass
class Arg(Generic[T]):
    """A configuration value that may be given explicitly at most once."""
    value: T
    is_set: bool = False

    def try_set(self, name: str, value: T) -> None:
        if self.is_set:
            raise ArgumentError(ErrorKind.DUPLICATE_FLAG, f"'{name}' may only be used once")
        self.value = value
        self.is_set = True

    def __repr__(self):
        return repr(self.value)


@dataclass
class Args:
    file: Arg[str]           = field(default_factory=lambda: Arg(DEFAULT_FILE))
    output: Arg[str]         = field(default_factory=lambda: Arg(DEFAULT_OUTPUT))
    debug: Arg[bool]         = field(default_factory=lambda: Arg(False))
    code_context: Arg[bool]  = field(default_factory=lambda: Arg(True))
    level: Arg[Level]        = field(default_factory=lambda: Arg(Level.WARN))
    verbs: List[str]         = field(default_factory=list)


# ── Outcomes ──────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Parsed:
    args: Args


@dataclass(frozen=True)
class ShowHelp:
    full: bool
    exit_code: ClassVar[int] = 0


@dataclass(frozen=True)
class ShowVersion:
    exit_code: ClassVar[int] = 0


@dataclass(frozen=True)
class ShowBanner:
    exit_code: ClassVar[int] = 1


@dataclass(frozen=True)
class Failed:
    error: ArgumentError
    exit_code: ClassVar[int] = 1

    @property
    def kind(self) -> ErrorKind:
        return self.error.kind


Outcome = Union[Parsed, ShowHelp, ShowVersion, ShowBanner, Failed]


# ── Flag tables ───────────────────────────────────────────────────────────────

def _to_level(value: str) -> Level:
    level = Level.from_name(value)
    if level is None:
        raise ArgumentError(ErrorKind.INVALID_VALUE, f"invalid level `{value}`")
    return level


_IMMEDIATE: Dict[str, Outcome] = {
    "-h":        ShowHelp(full=False),
    "--help":    ShowHelp(full=True),
    "-V":        ShowVersion(),
    "--version": ShowVersion(),
}

# flag -> (Args field, constant)
_TOGGLES: Dict[str, Tuple[str, bool]] = {
    "-d":           ("debug", True),
    "--debug":      ("debug", True),
    "--no-context": ("code_context", False),
}

# flag -> (Args field, metavar, converter)
_VALUE_FLAGS: Dict[str, Tuple[str, str, Callable[[str], object]]] = {
    "-f":            ("file",   "FILE",  str),
    "--file":        ("file",   "FILE",  str),
    "-o":            ("output", "FILE",  str),
    "--output":      ("output", "FILE",  str),
    "-l":            ("level",  "LEVEL", _to_level),
    "--error-level": ("level",  "LEVEL", _to_level),
}


def expand_group(token: str) -> List[str]:
    """
    Split a short-flag group into single flags: "-dh" -> ["-d", "-h"].
    Long flags ("--debug") are returned as a single item.
    """
    if token.startswith("--"):
        return [token]
    return [f"-{ch}" for ch in token[1:]]


# ── Driver ────────────────────────────────────────────────────────────────────

class ArgsParser:
    def __init__(self, tokens: Sequence[str]):
        self._tokens = list(tokens)
        self._pos = 0
        self._args = Args()

    # ------------------------------------------------------------------ cursor

    def _at_end(self) -> bool:
        return self._pos >= len(self._tokens)

    def _advance(self) -> str:
        tok = self._tokens[self._pos]
        self._pos += 1
        return tok

    # ------------------------------------------------------------------ public

    def parse(self) -> Outcome:
        try:
            while not self._at_end():
                token = self._advance()

                if token.startswith("-"):
                    outcome = self._handle_group(token)
                    if outcome is not None:
                        return outcome
                    continue

                if token == BANNER_WORD:
                    return ShowBanner()

                self._args.verbs.append(token)
        except ArgumentError as e:
            return Failed(e)

        # Drain anything the cursor has not consumed yet.
        while not self._at_end():
            self._args.verbs.append(self._advance())

        return Parsed(self._args)

    # ------------------------------------------------------------------ flags

    def _handle_group(self, token: str) -> Optional[Outcome]:
        flags = expand_group(token)
        for i, flag in enumerate(flags):
            outcome = self._dispatch(flag, is_last=(i == len(flags) - 1))
            if outcome is not None:
                return outcome
        return None

    def _dispatch(self, flag: str, is_last: bool) -> Optional[Outcome]:
        if flag in _IMMEDIATE:
            return _IMMEDIATE[flag]

        if flag in _TOGGLES:
            name, constant = _TOGGLES[flag]
            getattr(self._args, name).try_set(flag, constant)
            return None

        if flag in _VALUE_FLAGS:
            name, metavar, convert = _VALUE_FLAGS[flag]
            if not is_last:
                raise ArgumentError(
                    ErrorKind.GROUP_POSITION,
                    f"{flag} may only be used at the end of a group",
                )
            if self._at_end():
                raise ArgumentError(ErrorKind.MISSING_VALUE, f"{flag} expected {metavar}")
            value = convert(self._advance())
            getattr(self._args, name).try_set(flag, value)
            return None

        raise ArgumentError(ErrorKind.UNRECOGNIZED_ARGUMENT, f"unrecognized argument {flag}")


def parse(tokens: Sequence[str]) -> Outcome:
    """Parse the argument list (without the program name). Never exits."""
    return ArgsParser(tokens).parse()

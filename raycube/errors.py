"""Error kinds reported while loading a scene or starting the game."""

from __future__ import annotations

from enum import Enum, auto


class ErrorKind(Enum):
    """Every kind of failure the program reports to the user."""

    PROBLEM_ARGUMENTS = auto()
    OPEN_FAILED = auto()
    INVALID_CHARACTER_ON_MAP = auto()
    INVALID_INFO = auto()
    INCORRECT_PLAYER = auto()
    OUT_OF_MEMORY = auto()
    GRAPHICS = auto()
    BAD_EXTENSION = auto()
    EMPTY_FILE = auto()
    INVALID_INPUT = auto()
    TEXTURE = auto()


_DETAILS: dict[ErrorKind, str] = {
    ErrorKind.PROBLEM_ARGUMENTS: "Not enough or too many arguments.",
    ErrorKind.OPEN_FAILED: "Failed to open file",
    ErrorKind.INVALID_CHARACTER_ON_MAP: "Invalid character on map",
    ErrorKind.INVALID_INFO: "Invalid informations in the .cub files",
    ErrorKind.INCORRECT_PLAYER: "Incorrect number of player",
    ErrorKind.OUT_OF_MEMORY: "Error Malloc",
    ErrorKind.GRAPHICS: "Error in MLX",
    ErrorKind.BAD_EXTENSION: "Bad extension",
    ErrorKind.INVALID_INPUT: "Invalid input",
    ErrorKind.EMPTY_FILE: "Empty file",
    ErrorKind.TEXTURE: "Path texture is incorrect",
}


def error_message(kind: ErrorKind) -> str:
    """Return the full text written to standard error for ``kind``."""
    kind = ErrorKind(kind)
    return f"Error\n{_DETAILS[kind]}\n"


class CubError(Exception):
    """Raised when loading or starting fails; carries the error kind."""

    def __init__(self, kind: ErrorKind) -> None:
        self.kind = ErrorKind(kind)
        self.report = error_message(self.kind)
        super().__init__(_DETAILS[self.kind])
"""Intro dialogs typed out character by character with a portrait."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TextIO

from raycub.textutil import atoi, read_lines

logger = logging.getLogger(__name__)


@dataclass
class Dialog:
    """One line of dialog: text colour, speaker portrait name and text."""

    color: int
    character: str
    text: str


@dataclass
class Sprite:
    """A named portrait image and where it is drawn."""

    name: str
    location: str
    x: int = 0
    y: int = 0


def _skip_field(line: str, pos: int) -> int:
    end = line.find(" ", pos)
    if end == -1:
        raise ValueError(f"Malformed dialog line: {line!r}")
    while end < len(line) and line[end] == " ":
        end += 1
    return end


def parse_dialog_line(line: str) -> Dialog:
    """Parse ``<color> <character> <text>`` into a dialog."""
    color = atoi(line)
    pos = _skip_field(line, 0)
    end = line.find(" ", pos)
    if end == -1:
        raise ValueError(f"Malformed dialog line: {line!r}")
    character = line[pos:end]
    pos = _skip_field(line, pos)
    return Dialog(color, character, line[pos:])


def read_dialogs(stream: TextIO) -> list[Dialog]:
    """Read a dialog file: a count line followed by one dialog per line."""
    lines = read_lines(stream)
    first = next(lines, None)
    if first is None:
        raise ValueError("Dialog file is empty.")
    count = atoi(first)
    dialogs = [parse_dialog_line(line) for line in lines]
    if len(dialogs) > count:
        raise ValueError(
            f"Dialog file declares {count} dialogs but holds {len(dialogs)}."
        )
    return dialogs


class SpriteManager:
    """Portrait sprites kept in the order they were added."""

    def __init__(self) -> None:
        self._sprites: list[Sprite] = []

    def __iter__(self) -> Iterator[Sprite]:
        return iter(list(self._sprites))

    def __len__(self) -> int:
        return len(self._sprites)

    def add(self, name: str, location: str) -> bool:
        """Register a sprite; return False if the name is already taken."""
        if any(sprite.name == name for sprite in self._sprites):
            logger.warning("this sprite already added : %s", name)
            return False
        self._sprites.append(Sprite(name, location))
        return True

    def get(self, name: str) -> Sprite | None:
        """Find a sprite by the first character of its name."""
        key = name[:1]
        if key:
            for sprite in self._sprites:
                if sprite.name[:1] == key:
                    return sprite
        logger.warning("image cannot found : %s", name)
        return None


class DialogController:
    """Plays dialogs one character per step, waiting for confirmation."""

    def __init__(
        self, dialogs: Iterable[Dialog], sprites: SpriteManager | None = None
    ) -> None:
        self.dialogs = list(dialogs)
        self.sprites = sprites if sprites is not None else SpriteManager()
        self.index = 0
        self.playing = True
        self.wait = False
        self.finished = False
        self.text = ""
        self.sprite: Sprite | None = None
        self._cursor = 0

    @property
    def current(self) -> Dialog | None:
        """The dialog being played, if any remain."""
        if self.index < len(self.dialogs):
            return self.dialogs[self.index]
        return None

    def step(self) -> bool:
        """Advance one tick; return whether the dialog state advanced.

        Once every dialog has played and been confirmed, ``finished``
        becomes true.
        """
        if self.playing and self.index >= len(self.dialogs):
            self.playing = False
        if not self.playing or self.wait:
            if not self.wait:
                self.wait = True
                self.finished = True
            return False
        dialog = self.dialogs[self.index]
        if self._cursor < len(dialog.text):
            self.sprite = self.sprites.get(dialog.character)
            self.text += dialog.text[self._cursor]
            self._cursor += 1
        else:
            self.wait = True
            self._cursor = 0
            self.text = ""
            self.index += 1
        if self.index >= len(self.dialogs):
            self.playing = False
        return True

    def confirm(self) -> None:
        """Continue past a finished dialog line."""
        self.wait = False
"""A lenient INI reader: sections of key/value options, '#' comments."""

from __future__ import annotations

import os
from typing import Optional, Union

from travcore.util import file_get_content

_BLANK = " \t\r\n"


class _Reader:
    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0
        self.end = len(text)

    def at_end(self) -> bool:
        return self.pos >= self.end

    def peek(self) -> str:
        return self.text[self.pos] if self.pos < self.end else ""

    def skip_blank(self) -> None:
        while self.pos < self.end and self.text[self.pos] in _BLANK:
            self.pos += 1

    def skip_comments(self) -> None:
        while True:
            self.skip_blank()
            if self.peek() != "#":
                return
            while self.pos < self.end and self.text[self.pos] not in "\r\n":
                self.pos += 1

    def section_name(self) -> str:
        self.pos += 1
        stop = self.text.find("]", self.pos)
        if stop < 0:
            stop = self.end
        name = self.text[self.pos:stop]
        self.pos = min(stop + 1, self.end)
        return name

    def option_key(self) -> str:
        start = self.pos
        while self.pos < self.end and self.text[self.pos] not in " \t=":
            self.pos += 1
        key = self.text[start:self.pos]
        self.skip_blank()
        while self.pos < self.end and self.text[self.pos] != "=":
            self.pos += 1
        self.pos = min(self.pos + 1, self.end)
        return key

    def option_value(self) -> str:
        # A run of spaces or tabs swallows the character after it, so blanks
        # right before a line break do not end the value.
        start = self.pos
        while self.pos < self.end:
            run = self.pos
            while run < self.end and self.text[run] in " \t":
                run += 1
            if self.text[self.pos] == "\n":
                value = self.text[start:self.pos]
                self.pos += 1
                return value
            self.pos = run + 1
        self.pos = self.end
        return self.text[start:self.end]


class Ini:
    """Options grouped by section; several sources can be read into one Ini.

    Options that appear before any section header are ignored, and a later
    option with the same key replaces an earlier one.
    """

    def __init__(self) -> None:
        self._sections: dict[str, dict[str, str]] = {}

    def read(self, path: Union[str, os.PathLike]) -> bool:
        """Read options from a file; False if it is missing, unreadable or empty."""
        content = file_get_content(path)
        if content is None:
            return False
        self.read_string(content)
        return True

    def read_string(self, text: str) -> None:
        """Read options from INI text (up to its first NUL)."""
        reader = _Reader(text.split("\0", 1)[0])
        section: Optional[dict[str, str]] = None
        while not reader.at_end():
            reader.skip_comments()
            if reader.at_end():
                break
            if reader.peek() == "[":
                section = self._sections.setdefault(reader.section_name(), {})
                reader.skip_comments()
                if reader.at_end():
                    break
            reader.skip_blank()
            key = reader.option_key()
            reader.skip_blank()
            value = reader.option_value()
            if section is not None:
                section[key] = value

    def get(self, section: str, option: str) -> Optional[str]:
        """The value of an option, or None if the section or option is absent."""
        options = self._sections.get(section)
        if options is None:
            return None
        return options.get(option)

    def sections(self) -> list[str]:
        """Names of the sections read so far, in the order first seen."""
        return list(self._sections)
"""Parsing of the element lines of a scene file: textures, colours, map rows."""

from __future__ import annotations

import os
from typing import Iterable

from .model import Config, CubError
from .textutil import is_blank, is_space, parse_color_component, split_fields, trim

_PATH_KEYS = {"NO ": "no", "SO ": "so", "EA ": "ea", "WE ": "we"}
_COLOR_KEYS = ("F ", "C ")
_MAP_CHARS = frozenset("10NSEW34")
_WHITESPACE = " \t\n\v\f\r"
_PATH_TRIM = " \t\n\r"
_DIGITS = "0123456789"


def is_empty_line(line: str) -> bool:
    """Return True if the line holds only whitespace."""
    return is_blank(line)


def is_path_line(line: str) -> bool:
    """Return True for a texture line (``NO``, ``SO``, ``EA`` or ``WE``)."""
    return line.startswith(tuple(_PATH_KEYS))


def is_color_line(line: str) -> bool:
    """Return True for a floor or ceiling colour line."""
    return line.startswith(_COLOR_KEYS)


def is_map_config_line(line: str) -> bool:
    """Return True for any texture or colour line."""
    return is_path_line(line) or is_color_line(line)


def is_map_desc_line(line: str) -> bool:
    """Return True for a non-blank line made only of map characters."""
    if is_blank(line):
        return False
    return all(ch in _MAP_CHARS or is_space(ch) for ch in line)


def clean_path(text: str) -> str:
    """Return the texture path with surrounding whitespace removed."""
    path = trim(text.lstrip(_WHITESPACE), _PATH_TRIM)
    if not path:
        raise CubError("Error: Empty or invalid texture path")
    return path


def _has_inner_space(field: str) -> bool:
    body = field.strip(_WHITESPACE)
    return any(is_space(ch) for ch in body)


def _is_color_integer(field: str) -> bool:
    return all(ch in _DIGITS or is_space(ch) for ch in field)


def parse_color(text: str) -> int:
    """Parse ``R,G,B`` into a packed ``0xRRGGBB`` integer."""
    fields = split_fields(text, ",")
    if any(_has_inner_space(f) for f in fields):
        raise CubError("Error: invalid Number in the color")
    if len(fields) != 3:
        raise CubError("Map error: Only 3 integers needed for a color!")
    if not all(_is_color_integer(f) for f in fields):
        raise CubError("Map error: Only digits are needed for each color!")
    try:
        red, green, blue = (parse_color_component(f) for f in fields)
    except ValueError:
        raise CubError("Error: Each color need to be between 0 and 255") from None
    return (red << 16) | (green << 8) | blue


def _handle_config_line(config: Config, line: str) -> None:
    if is_path_line(line):
        config.path_seen = True
        attr = _PATH_KEYS[line[:3]]
        if getattr(config, attr) is not None:
            raise CubError("Error: Element configuration line duplicated!")
        setattr(config, attr, clean_path(line[3:]))
        return
    config.color_seen = True
    kind = line[0]
    if (kind == "F" and config.floor_found) or (kind == "C" and config.ceil_found):
        raise CubError("Error: Color configuration line duplicated")
    if kind == "F":
        config.floor_found = True
    else:
        config.ceil_found = True
    value = parse_color(line[2:])
    if kind == "F":
        config.floor_color = value
    else:
        config.ceil_color = value


def parse_elements(config: Config, lines: Iterable[str]) -> None:
    """Read texture, colour and map lines into ``config``.

    Map rows are stored without their trailing newline in ``config.grid``
    and their count in ``config.height``.
    """
    rows: list[str] = []
    first = last = -1
    for index, line in enumerate(lines):
        if is_map_config_line(line):
            _handle_config_line(config, line)
        elif is_map_desc_line(line):
            if not (config.path_seen and config.color_seen):
                raise CubError("Error: the map content must be the last!")
            if first == -1:
                first = index
            last = index
            rows.append(line.removesuffix("\n"))
        elif not is_blank(line):
            raise CubError("Error: Invalid configuration line!")
    if rows and len(rows) != last - first + 1:
        raise CubError("Error: Empty lines inside map description!")
    if not (config.floor_found and config.ceil_found):
        raise CubError("Map error: Color configuration line missing")
    config.grid = rows
    config.height = len(rows)


def validate_textures(config: Config) -> None:
    """Check that all four texture paths are set and can be opened."""
    paths = (config.no, config.so, config.ea, config.we)
    if any(path is None for path in paths):
        raise CubError("Map error: element path missing")
    for path in paths:
        try:
            fd = os.open(path, os.O_RDONLY)
        except OSError:
            raise CubError("Map error: Invalid path; file not found!") from None
        os.close(fd)
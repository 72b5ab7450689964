"""String, table, colour and serialisation helpers used across the interface."""

from __future__ import annotations

import dataclasses
import json
import re
import time
from collections.abc import Iterable, Mapping
from typing import Any

import yaml
from wcwidth import wcswidth, wcwidth

# Terminal colour attributes (SGR codes).
RESET = 0
BOLD = 1
UNDERLINE = 4
FG_BLACK = 30
FG_RED = 31
FG_GREEN = 32
FG_YELLOW = 33
FG_BLUE = 34
FG_MAGENTA = 35
FG_CYAN = 36
FG_WHITE = 37

_ANSI_PATTERN = re.compile(r"\x1B\[([0-9]{1,2}(;[0-9]{1,2})?)?[mK]")

_COLOR_ATTRIBUTES = {
    "default": FG_WHITE,
    "black": FG_BLACK,
    "red": FG_RED,
    "green": FG_GREEN,
    "yellow": FG_YELLOW,
    "blue": FG_BLUE,
    "magenta": FG_MAGENTA,
    "cyan": FG_CYAN,
    "white": FG_WHITE,
    "bold": BOLD,
    "underline": UNDERLINE,
}

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


class MultipleErrors(Exception):
    """Raised when several errors occurred together."""

    def __init__(self, errors: Iterable[BaseException]) -> None:
        self.errors = list(errors)
        super().__init__(str(self))

    def __str__(self) -> str:
        details = "".join(f"\n\t... {error}" for error in self.errors)
        return "encountered multiple errors:" + details


def _display_width(text: str) -> int:
    width = wcswidth(text)
    if width >= 0:
        return width
    return sum(max(wcwidth(ch), 0) for ch in text)


def _go_str(value: Any) -> str:
    if value is True:
        return "true"
    if value is False:
        return "false"
    if value is None:
        return "<nil>"
    return str(value)


def split_lines(multiline_string: str) -> list[str]:
    """Split on newlines, dropping carriage returns and a trailing empty line."""
    multiline_string = multiline_string.replace("\r", "")
    if multiline_string in ("", "\n"):
        return []
    lines = multiline_string.split("\n")
    if lines[-1] == "":
        return lines[:-1]
    return lines


def with_padding(text: str, padding: int) -> str:
    """Pad ``text`` with spaces to ``padding`` display columns, ignoring colour codes."""
    width = _display_width(decolorise(text))
    if padding < width:
        return text
    return text + " " * (padding - width)


def multi_colored_string(text: str, *args: int) -> str:
    """Wrap ``text`` in the given colour attributes."""
    codes = ";".join(str(attribute) for attribute in args)
    return f"\x1b[{codes}m{text}\x1b[{RESET}m"


def colored_string(text: str, color_attribute: int) -> str:
    """Colour ``text``; white is taken to mean the terminal default and left alone."""
    if color_attribute == FG_WHITE:
        return text
    return multi_colored_string(text, color_attribute)


def _wrap(text: str, attribute: int) -> str:
    return f"\x1b[{attribute}m{text}\x1b[{RESET}m"


_YAML_BOOLS = frozenset({"true", "True", "TRUE", "false", "False", "FALSE"})
_YAML_NULLS = frozenset({"null", "Null", "NULL", "~"})
_YAML_NUMBER = re.compile(
    r"[-+]?(?:0x[0-9a-fA-F_]+|0o[0-7_]+|0b[01_]+"
    r"|(?:[0-9][0-9_]*)?\.?[0-9][0-9_]*(?:[eE][-+]?[0-9]+)?)"
)
_YAML_LEAD = re.compile(r"^(\s*)((?:-(?:\s+|$))*)")
_YAML_KEY = re.compile(
    r"^(\"[^\"]*\"|'[^']*'|[^\s#\"'\[\]{},:][^#]*?)(:)(?:(\s+)(.*))?$"
)
_YAML_COMMENT = re.compile(r"\s#")


def _split_scalar(value: str) -> tuple[str, str]:
    if value[:1] in ("'", '"'):
        quote = value[0]
        index = 1
        while index < len(value):
            if quote == '"' and value[index] == "\\":
                index += 2
                continue
            if value[index] == quote:
                return value[: index + 1], value[index + 1 :]
            index += 1
        return value, ""
    match = _YAML_COMMENT.search(value)
    scalar = value if match is None else value[: match.start()]
    stripped = scalar.rstrip()
    return stripped, value[len(stripped) :]


def _color_scalar(value: str) -> str:
    scalar, tail = _split_scalar(value)
    if not scalar or scalar[0] in "#&*!|>[{":
        return value
    if scalar in _YAML_BOOLS:
        colored = _wrap(scalar, FG_MAGENTA)
    elif scalar in _YAML_NULLS:
        colored = scalar
    elif _YAML_NUMBER.fullmatch(scalar):
        colored = _wrap(scalar, FG_YELLOW)
    else:
        colored = _wrap(scalar, FG_GREEN)
    return colored + tail


def colored_yaml_string(text: str) -> str:
    """Colour YAML: keys cyan, booleans magenta, numbers yellow, strings green."""
    output = []
    block_indent: int | None = None
    for line in text.split("\n"):
        lead = _YAML_LEAD.match(line)
        indent, dashes = lead.group(1), lead.group(2)
        rest = line[lead.end() :]

        if block_indent is not None:
            if not line.strip() or len(indent) > block_indent:
                output.append(line)
                continue
            block_indent = None

        if not rest or rest.startswith("#") or rest.startswith("---") or rest.startswith("..."):
            output.append(line)
            continue

        key_match = _YAML_KEY.match(rest)
        if key_match is not None:
            key, colon, space, value = key_match.groups()
            value = value or ""
            colored = indent + dashes + _wrap(key, FG_CYAN) + colon + (space or "")
            if value[:1] in ("|", ">"):
                block_indent = len(indent) + len(dashes)
                colored += value
            else:
                colored += _color_scalar(value)
            output.append(colored)
            continue

        if rest[:1] in ("|", ">"):
            block_indent = len(indent) + len(dashes)
            output.append(line)
            continue
        output.append(indent + dashes + _color_scalar(rest))
    return "\n".join(output)


def normalize_linefeeds(text: str) -> str:
    """Turn Windows line endings into newlines and drop stray carriage returns."""
    return text.replace("\r\n", "\n").replace("\r", "")


def loader() -> str:
    """Return the spinner character for the current moment."""
    characters = "|/-\\"
    index = time.time_ns() // 50_000_000 % len(characters)
    return characters[index]


def resolve_placeholder_string(text: str, arguments: Mapping[str, str]) -> str:
    """Replace every ``{{key}}`` in ``text`` with its value from ``arguments``."""
    for key, value in arguments.items():
        text = text.replace("{{" + key + "}}", value)
    return text


def decolorise(text: str) -> str:
    """Strip colour escape sequences from ``text``."""
    return _ANSI_PATTERN.sub("", text)


def display_arrays_aligned(string_arrays: list[list[str]]) -> bool:
    """Whether every row has as many cells as the first."""
    if not string_arrays:
        return True
    expected = len(string_arrays[0])
    return all(len(row) == expected for row in string_arrays)


def get_pad_widths(rows: list[list[str]]) -> list[int]:
    """Widest display width of each column except the last."""
    if len(rows[0]) <= 1:
        return []
    return [
        max(_display_width(decolorise(row[column])) for row in rows)
        for column in range(len(rows[0]) - 1)
    ]


def get_padded_display_strings(
    rows: list[list[str]], column_pad_widths: list[int]
) -> list[str]:
    """Render each row with its leading columns padded to the given widths."""
    return [
        "".join(
            with_padding(cell, width) + " " for cell, width in zip(row, column_pad_widths)
        )
        + row[len(column_pad_widths)]
        for row in rows
    ]


def render_table(rows: list[list[str]]) -> str:
    """Lay rows out as aligned columns."""
    if not rows:
        return ""
    if not display_arrays_aligned(rows):
        raise ValueError("Each item must return the same number of strings to display")
    return "\n".join(get_padded_display_strings(rows, get_pad_widths(rows)))


def _format_bytes(b: int, base: float, units: list[str]) -> str:
    n = float(b)
    for unit in units:
        if n > base:
            n /= base
        else:
            value = f"{n:.2f}{unit}"
            return "0B" if value == "0.00B" else value
    return "a lot"


def format_binary_bytes(b: int) -> str:
    """Format a byte count with binary (1024-based) units."""
    return _format_bytes(
        b, 2.0**10, ["B", "kiB", "MiB", "GiB", "TiB", "PiB", "EiB", "ZiB", "YiB"]
    )


def format_decimal_bytes(b: int) -> str:
    """Format a byte count with decimal (1000-based) units."""
    return _format_bytes(
        b, 10.0**3, ["B", "kB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB"]
    )


_TEMPLATE_ACTION = re.compile(r"\{\{(.*?)\}\}", re.S)
_TEMPLATE_FIELD = re.compile(r"\.(?:[A-Za-z_]\w*(?:\.[A-Za-z_]\w*)*)?")
_TEMPLATE_COMMENT = re.compile(r"/\*.*\*/", re.S)
_HTML_ESCAPES = {
    "\0": "\ufffd",
    '"': "&#34;",
    "&": "&amp;",
    "'": "&#39;",
    "+": "&#43;",
    "<": "&lt;",
    ">": "&gt;",
}


class _MissingField(Exception):
    pass


def _html_escape(text: str) -> str:
    return "".join(_HTML_ESCAPES.get(ch, ch) for ch in text)


def _resolve_field(obj: Any, path: str) -> Any:
    current = obj
    for name in filter(None, path.split(".")):
        if current is None:
            return None
        if isinstance(current, Mapping):
            current = current.get(name)
        elif hasattr(current, name):
            current = getattr(current, name)
        else:
            raise _MissingField(name)
    return current


def apply_template(text: str, obj: Any) -> str:
    """Fill ``{{ .Field }}`` actions in ``text`` from ``obj``, HTML-escaping the values.

    Raises ValueError for malformed templates; stops at the first field that
    ``obj`` does not have.
    """
    pieces: list[tuple[str, str | None]] = []
    position = 0
    for match in _TEMPLATE_ACTION.finditer(text):
        literal = text[position : match.start()]
        if "{{" in literal:
            raise ValueError("unclosed template action")
        action = match.group(1)
        if action.startswith("-"):
            action = action[1:]
            literal = literal.rstrip()
        if action.endswith("-"):
            action = action[:-1]
        action = action.strip()
        if _TEMPLATE_COMMENT.fullmatch(action):
            pieces.append((literal, None))
        elif _TEMPLATE_FIELD.fullmatch(action):
            pieces.append((literal, action))
        else:
            raise ValueError(f"unsupported template action: {action!r}")
        position = match.end()
    tail = text[position:]
    if "{{" in tail:
        raise ValueError("unclosed template action")

    output = []
    for literal, field in pieces:
        output.append(literal)
        if field is None:
            continue
        try:
            value = _resolve_field(obj, field)
        except _MissingField:
            return "".join(output)
        output.append("" if value is None else _html_escape(_go_str(value)))
    output.append(tail)
    return "".join(output)


def get_color_attribute(key: str) -> int:
    """Map a colour name from the config to a terminal attribute."""
    return _COLOR_ATTRIBUTES.get(key, FG_WHITE)


def with_short_sha(text: str) -> str:
    """Shorten every 64-character word (a full SHA) to its first ten characters."""
    return " ".join(word[:10] if len(word) == 64 else word for word in text.split(" "))


def format_map_item(padding: int, key: str, value: Any) -> str:
    """Render one ``key: value`` line indented by ``padding`` spaces."""
    return f"{' ' * padding}{colored_string(key + ':', FG_YELLOW)} {_go_str(value)}\n"


def format_map(padding: int, mapping: Mapping[str, Any]) -> str:
    """Render a mapping as sorted ``key: value`` lines, or ``none``."""
    if not mapping:
        return "none\n"
    return "\n" + "".join(format_map_item(padding, key, mapping[key]) for key in sorted(mapping))


def close_many(closers: Iterable[Any]) -> None:
    """Close every object, raising MultipleErrors if any of them failed."""
    errors = []
    for closer in closers:
        try:
            closer.close()
        except Exception as error:  # noqa: BLE001 - every failure is collected
            errors.append(error)
    if errors:
        raise MultipleErrors(errors)


def safe_truncate(text: str, limit: int) -> str:
    """Cut ``text`` down to at most ``limit`` characters."""
    return text[:limit] if len(text) > limit else text


def is_valid_hex_value(value: str) -> bool:
    """Whether ``value`` is a ``#rgb`` or ``#rrggbb`` colour."""
    if len(value) not in (4, 7) or value[0] != "#":
        return False
    return all(ch in _HEX_DIGITS for ch in value[1:])


def opens_menu_style(text: str) -> str:
    """Style for menu items that open another menu."""
    return colored_string(f"{text}...", FG_MAGENTA)


def _json_default(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def _sort_nested(value: Any) -> Any:
    if isinstance(value, dict):
        return {key: _sort_nested(value[key]) for key in sorted(value)}
    if isinstance(value, list):
        return [_sort_nested(item) for item in value]
    return value


def marshal_into_format(data: Any, fmt: str) -> bytes:
    """Serialise ``data`` as indented JSON or as YAML keeping the top-level key order."""
    data_json = json.dumps(data, indent=2, ensure_ascii=False, default=_json_default)
    data_json = (
        data_json.replace("<", "\\u003c")
        .replace(">", "\\u003e")
        .replace("&", "\\u0026")
        .replace("\u2028", "\\u2028")
        .replace("\u2029", "\\u2029")
    )
    if fmt == "json":
        return data_json.encode("utf-8")
    if fmt == "yaml":
        mirror = json.loads(data_json)
        if not isinstance(mirror, dict):
            raise ValueError("top-level value must be an object to convert into yaml")
        ordered = {key: _sort_nested(value) for key, value in mirror.items()}
        dumped = yaml.safe_dump(
            ordered,
            sort_keys=False,
            default_flow_style=False,
            allow_unicode=True,
            width=2**31 - 1,
        )
        return dumped.encode("utf-8")
    raise ValueError(f"Unsupported detailization format: {fmt}")


def marshal_into_yaml(data: Any) -> bytes:
    """Serialise ``data`` into YAML by way of its JSON structure."""
    return marshal_into_format(data, "yaml")
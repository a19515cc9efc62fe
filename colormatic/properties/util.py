"""
Read a color properties document into plain dicts.
Supports JSON, YAML and Optifine-style .properties; every mapping key goes
through a remap function and an exclusion predicate while decoding.
"""
from __future__ import annotations

import json
from typing import Any, Callable, Iterator

import yaml

from ..identifier import Identifier


class MalformedDocumentError(ValueError):
    """Document could not be decoded into the expected structure."""


def _identity(key: str) -> str:
    return key


def _never(key: str) -> bool:
    return False


def document_format(id: Identifier) -> str:
    """Format for a resource, by path suffix: "properties", "yaml" or "json"."""
    path = id.path.lower()
    if path.endswith(".properties"):
        return "properties"
    if path.endswith((".yaml", ".yml")):
        return "yaml"
    return "json"


def read_document(
    text: str,
    id: Identifier,
    remap: Callable[[str], str] = _identity,
    exclude: Callable[[str], bool] = _never,
) -> dict[str, Any] | None:
    """
    Decode text to a dict with remapped keys. Empty documents give None.
    Raises MalformedDocumentError on any decode failure.
    """
    fmt = document_format(id)
    try:
        if fmt == "properties":
            data: Any = parse_properties(text)
        elif fmt == "yaml":
            data = yaml.safe_load(text)
        else:
            # Keep digits as text: bare numbers in color files are hex, not decimal
            data = json.loads(text, parse_int=str) if text.strip() else None
    except MalformedDocumentError:
        raise
    except (ValueError, yaml.YAMLError, RecursionError) as e:
        # ValueError covers JSONDecodeError and yaml constructors rejecting tagged/timestamp values
        raise MalformedDocumentError(f"{type(e).__name__}: {e}") from e
    if data is None:
        return None
    if not isinstance(data, dict):
        raise MalformedDocumentError(f"Expected an object at top level, got {type(data).__name__}")
    try:
        return _rekey(data, remap, exclude)
    except RecursionError as e:
        # Self-referencing YAML aliases or absurd nesting
        raise MalformedDocumentError("Document is nested too deeply or refers to itself") from e


def _rekey(value: Any, remap: Callable[[str], str], exclude: Callable[[str], bool]) -> Any:
    if isinstance(value, dict):
        out: dict[str, Any] = {}
        for k, v in value.items():
            key = remap(str(k))
            if exclude(key):
                continue
            out[key] = _rekey(v, remap, exclude)
        return out
    if isinstance(value, list):
        return [_rekey(v, remap, exclude) for v in value]
    return value


def parse_properties(text: str) -> dict[str, Any]:
    """
    Optifine color.properties → nested dict.
    "fog.nether=112233" becomes {"fog": {"nether": "112233"}}; only the first dot nests,
    so namespaced keys like "potion.minecraft:speed" stay whole.

    Follows java.util.Properties for backslash line continuations, escapes
    (\\t, \\n, \\uXXXX, ...) and a bare space as separator, with one difference:
    an unescaped "=" is preferred over ":" because identifiers contain colons.
    """
    data: dict[str, Any] = {}
    for lineno, line in _logical_lines(text):
        sep, width = _separator(line)
        if sep < 0:
            raise MalformedDocumentError(f"Line {lineno}: expected key=value, got {line!r}")
        key = _unescape(line[:sep].rstrip(), lineno)
        value = _unescape(line[sep + width:].lstrip(), lineno)
        if not key:
            raise MalformedDocumentError(f"Line {lineno}: empty key")
        section, dot, sub = key.partition(".")
        if not dot:
            if isinstance(data.get(key), dict):
                raise MalformedDocumentError(f"Line {lineno}: {key!r} is already a section")
            data[key] = value
            continue
        group = data.setdefault(section, {})
        if not isinstance(group, dict):
            raise MalformedDocumentError(f"Line {lineno}: {section!r} is already a value")
        group[sub] = value
    return data


def _ends_with_continuation(line: str) -> bool:
    backslashes = len(line) - len(line.rstrip("\\"))
    return backslashes % 2 == 1


def _logical_lines(text: str) -> Iterator[tuple[int, str]]:
    """(starting line number, joined line) for each non-blank, non-comment entry."""
    pending: list[str] = []
    start = 0
    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.lstrip()
        if not pending:
            if not line or line[0] in "#!":
                continue
            start = lineno
        if _ends_with_continuation(line):
            pending.append(line[:-1])
            continue
        pending.append(line)
        yield start, "".join(pending)
        pending = []
    if pending:
        yield start, "".join(pending)


def _separator(line: str) -> tuple[int, int]:
    """Index and width of the key/value separator, or (-1, 0)."""
    first_eq = first_colon = first_space = -1
    i = 0
    while i < len(line):
        c = line[i]
        if c == "\\":
            i += 2
            continue
        if c == "=" and first_eq < 0:
            first_eq = i
        elif c == ":" and first_colon < 0:
            first_colon = i
        elif c in " \t\f" and first_space < 0:
            first_space = i
        i += 1
    if first_eq >= 0 and (first_space < 0 or _only_blanks(line, first_space, first_eq)):
        return first_eq, 1
    if first_eq < 0 and first_colon >= 0 and (first_space < 0 or _only_blanks(line, first_space, first_colon)):
        return first_colon, 1
    if first_space >= 0:
        # "key value" or "key = value" with spaces before the separator
        return first_space, 1
    return -1, 0


def _only_blanks(line: str, start: int, end: int) -> bool:
    return start > end or not line[start:end].strip(" \t\f")


def _unescape(text: str, lineno: int) -> str:
    out: list[str] = []
    i = 0
    while i < len(text):
        c = text[i]
        if c != "\\" or i + 1 >= len(text):
            out.append(c)
            i += 1
            continue
        nxt = text[i + 1]
        if nxt == "u":
            digits = text[i + 2:i + 6]
            if len(digits) != 4 or any(d not in "0123456789abcdefABCDEF" for d in digits):
                raise MalformedDocumentError(f"Line {lineno}: malformed \\uXXXX escape")
            out.append(chr(int(digits, 16)))
            i += 6
            continue
        out.append({"t": "\t", "n": "\n", "r": "\r", "f": "\f"}.get(nxt, nxt))
        i += 2
    return "".join(out)

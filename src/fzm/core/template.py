"""Logic-less, mustache-style template renderer.

Supported syntax
----------------
* ``{{path.to.value}}`` — dotted lookup, substituted verbatim with
  ``str()``.  No HTML escaping; this is terminal output.
* ``{{#name}}…{{/name}}`` — section.  A list renders the fragment once
  per element with the element as local context; a mapping or object
  renders once with itself as context; ``True`` renders once; falsy or
  missing values render nothing.
* ``{{.}}`` — the current context itself (useful for lists of strings).
* ``{{! comment }}`` — dropped.

A section or comment tag alone on its own line removes the whole line,
so templates can keep ``{{#commands}}`` on a line of its own without
leaving blank lines in the output.

Templates are compiled eagerly.  Malformed syntax raises
:class:`~fzm.exceptions.TemplateSyntaxError` at construction; lookups
that fail at render time render as an empty string and rendering goes
on.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any, Union

from fzm.exceptions import TemplateSyntaxError

logger = logging.getLogger(__name__)

TAG_OPEN: str = "{{"
TAG_CLOSE: str = "}}"

_MISSING = object()


# ---------------------------------------------------------------------------
# Parse tree
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class _Text:
    text: str


@dataclass(frozen=True, slots=True)
class _Variable:
    path: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class _Section:
    path: tuple[str, ...]
    children: tuple[_Node, ...]


_Node = Union[_Text, _Variable, _Section]


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def _line_number(text: str, offset: int) -> int:
    return text.count("\n", 0, offset) + 1


def _split_path(name: str, text: str, offset: int) -> tuple[str, ...]:
    if not name:
        raise TemplateSyntaxError(f"Empty tag on line {_line_number(text, offset)}.")
    if TAG_OPEN[0] in name or TAG_CLOSE[0] in name:
        raise TemplateSyntaxError(
            f"Invalid tag name {name!r} on line {_line_number(text, offset)}.",
            hint="Only double-brace placeholders such as {{app.name}} are supported.",
        )
    if name == ".":
        return (".",)
    parts = tuple(name.split("."))
    if not all(parts):
        raise TemplateSyntaxError(
            f"Invalid dotted name {name!r} on line {_line_number(text, offset)}."
        )
    return parts


def _is_standalone(text: str, pos: int, start: int, after: int) -> tuple[bool, int, int]:
    """Check whether the tag spanning ``start:after`` is alone on its line.

    Returns ``(standalone, line_start, resume)`` where *resume* is the
    offset just past the line's newline.
    """
    line_start = text.rfind("\n", 0, start) + 1
    newline = text.find("\n", after)
    line_end = len(text) if newline == -1 else newline
    if line_start < pos:
        return False, line_start, after
    if text[line_start:start].strip(" \t") or text[after:line_end].strip(" \t\r"):
        return False, line_start, after
    return True, line_start, line_end if newline == -1 else newline + 1


def _parse(text: str) -> tuple[_Node, ...]:
    # Each frame is (path, children, offset of the opening tag).
    root: list[_Node] = []
    stack: list[tuple[tuple[str, ...], list[_Node], int]] = []
    current = root
    pos = 0

    while True:
        start = text.find(TAG_OPEN, pos)
        if start == -1:
            if pos < len(text):
                current.append(_Text(text[pos:]))
            break

        end = text.find(TAG_CLOSE, start + len(TAG_OPEN))
        if end == -1:
            raise TemplateSyntaxError(
                f"Unclosed tag on line {_line_number(text, start)}: missing '{TAG_CLOSE}'."
            )
        raw = text[start + len(TAG_OPEN):end].strip()
        after = end + len(TAG_CLOSE)
        sigil = raw[:1]

        if sigil in ("#", "/", "!"):
            standalone, line_start, resume = _is_standalone(text, pos, start, after)
        else:
            standalone, line_start, resume = False, start, after

        leading = text[pos:line_start] if standalone else text[pos:start]
        if leading:
            current.append(_Text(leading))
        pos = resume

        if sigil == "!":
            continue
        if sigil == "#":
            path = _split_path(raw[1:].strip(), text, start)
            stack.append((path, current, start))
            current = []
            continue
        if sigil == "/":
            path = _split_path(raw[1:].strip(), text, start)
            if not stack:
                raise TemplateSyntaxError(
                    f"Closing tag {{{{/{'.'.join(path)}}}}} on line "
                    f"{_line_number(text, start)} has no matching section."
                )
            open_path, parent, _ = stack.pop()
            if open_path != path:
                raise TemplateSyntaxError(
                    f"Section '{'.'.join(open_path)}' closed by "
                    f"'{'.'.join(path)}' on line {_line_number(text, start)}."
                )
            parent.append(_Section(open_path, tuple(current)))
            current = parent
            continue

        current.append(_Variable(_split_path(raw, text, start)))

    if stack:
        open_path, _, offset = stack[-1]
        raise TemplateSyntaxError(
            f"Section '{'.'.join(open_path)}' opened on line "
            f"{_line_number(text, offset)} is never closed."
        )
    return tuple(root)


# ---------------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------------

def _get(context: Any, key: str) -> Any:
    if isinstance(context, Mapping):
        return context.get(key, _MISSING)
    if key.startswith("_"):
        return _MISSING
    return getattr(context, key, _MISSING)


def _resolve(path: tuple[str, ...], stack: list[Any]) -> Any:
    if path == (".",):
        return stack[-1]
    value = _MISSING
    for context in reversed(stack):
        value = _get(context, path[0])
        if value is not _MISSING:
            break
    for key in path[1:]:
        if value is _MISSING:
            break
        value = _get(value, key)
    return value


def _stringify(value: Any, path: tuple[str, ...]) -> str:
    if value is _MISSING:
        logger.debug("Template value %r is not defined", ".".join(path))
        return ""
    if value is None:
        return ""
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    try:
        return str(value)
    except Exception:  # noqa: BLE001
        logger.debug("Template value %r could not be rendered", ".".join(path), exc_info=True)
        return ""


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def _emit(nodes: tuple[_Node, ...], stack: list[Any]) -> Iterator[str]:
    for node in nodes:
        if isinstance(node, _Text):
            yield node.text
        elif isinstance(node, _Variable):
            yield _stringify(_resolve(node.path, stack), node.path)
        else:
            yield from _emit_section(node, stack)


def _emit_section(node: _Section, stack: list[Any]) -> Iterator[str]:
    value = _resolve(node.path, stack)
    if value is _MISSING:
        return
    try:
        truthy = bool(value)
    except Exception:  # noqa: BLE001
        logger.debug("Section %r has no truth value", ".".join(node.path), exc_info=True)
        return
    if not truthy:
        return
    if value is True:
        yield from _emit(node.children, stack)
        return
    if isinstance(value, (Mapping, str, bytes, bytearray)) or not isinstance(value, Iterable):
        items: Iterable[Any] = (value,)
    else:
        items = value
    for item in items:
        stack.append(item)
        try:
            yield from _emit(node.children, stack)
        finally:
            stack.pop()


class Template:
    """A compiled template.

    Parameters
    ----------
    text:
        Template source.  Compiled immediately.

    Raises
    ------
    TemplateSyntaxError
        When *text* is malformed.
    """

    def __init__(self, text: str) -> None:
        self.text: str = text
        self._nodes: tuple[_Node, ...] = _parse(text)

    def chunks(self, bindings: Any) -> Iterator[str]:
        """Yield rendered pieces in order, without building the whole output."""
        return _emit(self._nodes, [bindings])

    def render(self, bindings: Any) -> bytes:
        """Render to UTF-8 bytes."""
        return "".join(self.chunks(bindings)).encode("utf-8")

    def __repr__(self) -> str:
        preview = self.text if len(self.text) <= 30 else f"{self.text[:27]}..."
        return f"Template({preview!r})"


def render(text: str, bindings: Any) -> bytes:
    """Compile *text* and render it with *bindings* in one step."""
    return Template(text).render(bindings)

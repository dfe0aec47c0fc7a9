from __future__ import annotations

"""Typed access to YAML config sections.

Every error message names the dotted key (``server.port``) so a bad override
file points straight at the offending line.
"""

from typing import Any, Mapping, TypeVar

T = TypeVar("T", str, bool, int, float)

_MISSING: Any = object()

_TYPE_NAMES = {str: "a string", bool: "a boolean", int: "an integer", float: "a number"}


def read_section(raw: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    """Return the top-level section `name`.

    Raises:
        ValueError: If the section is missing.
        TypeError: If the section is not a mapping.
    """
    section = raw.get(name)
    if section is None:
        raise ValueError(f"Missing required config: {name}")
    if not isinstance(section, Mapping):
        raise TypeError(f"{name} must be an object")
    return section


def _coerce(value: Any, kind: type[T], key: str) -> T:
    # bool is an int subclass; YAML `true` must not pass as a port or timeout.
    if kind is not bool and isinstance(value, bool):
        raise TypeError(f"{key} must be {_TYPE_NAMES[kind]}")
    if kind is float and isinstance(value, int):
        return float(value)
    if not isinstance(value, kind):
        raise TypeError(f"{key} must be {_TYPE_NAMES[kind]}")
    return value


def require(section: Mapping[str, Any], name: str, field: str, kind: type[T], default: Any = _MISSING) -> T:
    """Read `field` from section `name` as `kind`.

    Args:
        section: Section mapping returned by `read_section`.
        name: Section name, used to build the dotted key.
        field: Key inside the section.
        kind: One of str, bool, int, float. Integers are accepted as float.
        default: Value used when the key is absent; omit to make it required.

    Raises:
        ValueError: If a required key is missing.
        TypeError: If the value has the wrong type.
    """
    key = f"{name}.{field}"
    if field not in section:
        if default is _MISSING:
            raise ValueError(f"Missing required config: {key}")
        return default
    return _coerce(section[field], kind, key)

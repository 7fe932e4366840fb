"""Recursive ${ENV_VAR} substitution over parsed YAML data."""

import os
import re
from collections.abc import Callable

_ENV_REFERENCE = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")

type RawValue = (
    str | int | float | bool | None | list["RawValue"] | dict[str, "RawValue"]
)


def collect_missing_vars(data: RawValue) -> list[str]:
    """Return every referenced variable that is unset, in first-seen order."""
    missing: list[str] = []
    _walk_strings(data, lambda text: _note_missing(text, missing))
    return missing


def _note_missing(text: str, missing: list[str]) -> None:
    for name in _ENV_REFERENCE.findall(text):
        if name not in os.environ and name not in missing:
            missing.append(name)


def _walk_strings(data: RawValue, visit: Callable[[str], None]) -> None:
    match data:
        case str():
            visit(data)
        case list():
            for item in data:
                _walk_strings(item, visit)
        case dict():
            for value in data.values():
                _walk_strings(value, visit)


def interpolate(data: RawValue) -> RawValue:
    """Return a copy of data with each ${ENV_VAR} replaced by its value.

    Every referenced variable must be set; check with collect_missing_vars first.
    Mapping keys are left untouched.
    """
    match data:
        case str():
            return _ENV_REFERENCE.sub(lambda m: os.environ[m.group(1)], data)
        case list():
            return [interpolate(item) for item in data]
        case dict():
            return {key: interpolate(value) for key, value in data.items()}
        case _:
            return data

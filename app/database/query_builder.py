import re
from typing import Any

_NAMED_PARAM = re.compile(r"(?<!:):(\w+)")


def bind_named(query: str, params: dict[str, Any]) -> tuple[str, list[Any]]:
    """
    Rewrite ``:name`` placeholders as asyncpg ``$n`` positional parameters.

    Each distinct name is bound once, so a name used twice in the query
    shares one slot. ``::type`` casts are left untouched.
    """
    positions: dict[str, int] = {}
    values: list[Any] = []

    def _replace(match: re.Match[str]) -> str:
        name = match.group(1)
        if name not in params:
            raise ValueError(f"Missing parameter: {name}")
        if name not in positions:
            values.append(params[name])
            positions[name] = len(values)
        return f"${positions[name]}"

    return _NAMED_PARAM.sub(_replace, query), values

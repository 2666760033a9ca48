"""
Row values handed to ``Flycatcher.insert``.

A plain list or tuple under an untagged column name fans the row out, one
row per element. Column names ending in ``(JSON)`` or ``(SERIALIZE)`` mark
values the client encodes itself, so they are never fanned out. The
explicit wrappers below say the same thing without touching the column
name.
"""
from dataclasses import dataclass
from typing import Any, Dict, Iterator, Tuple

JSON_TAG = "(JSON)"
SERIALIZE_TAG = "(SERIALIZE)"


@dataclass(frozen=True)
class Scalar:
    value: Any


@dataclass(frozen=True)
class PreEncodedJson:
    value: Any


@dataclass(frozen=True)
class PreEncodedOpaque:
    value: Any


@dataclass(frozen=True)
class FanOut:
    values: Tuple[Any, ...]

    def __init__(self, values):
        object.__setattr__(self, "values", tuple(values))


def isTagged(columnName: str) -> bool:
    return JSON_TAG in columnName or SERIALIZE_TAG in columnName


def isFanOut(columnName: str, value: Any) -> bool:
    if isTagged(columnName):
        return False
    return isinstance(value, (list, tuple, FanOut))


def members(value):
    if isinstance(value, FanOut):
        return value.values
    return value


def cleanRow(row: Dict[str, Any]) -> Dict[str, Any]:
    """Strip (SERIALIZE) markers and unwrap explicit values for the client."""
    cleaned = {}
    for columnName, value in row.items():
        if isinstance(value, PreEncodedJson):
            if JSON_TAG not in columnName:
                columnName += JSON_TAG
            value = value.value
        elif isinstance(value, (PreEncodedOpaque, Scalar)):
            value = value.value
        elif isinstance(value, FanOut):
            # only reachable under a tagged name, hand over the literal list
            value = list(value.values)
        cleaned[columnName.replace(SERIALIZE_TAG, "")] = value
    return cleaned


def expandRow(row: Dict[str, Any]) -> Iterator[Dict[str, Any]]:
    """
    Yield the rows ``row`` fans out to, depth first.

    Only the first fan-out column is expanded here; the copies carry any
    later fan-out columns into the recursive call, so two columns of sizes
    2 and 3 give six rows with the first column as the outer loop.
    """
    for columnName, value in row.items():
        if isFanOut(columnName, value):
            for member in members(value):
                relational = dict(row)
                relational[columnName] = member
                yield from expandRow(relational)
            return
    yield cleanRow(row)

"""Request and outcome values exchanged by the dispatch facade.

A ``Request`` is the classification of one intercepted access; an
``Outcome`` is what resolving it produced. Both are short-lived.
"""
from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Optional, Tuple, Union

if TYPE_CHECKING:
    from .configuration import Configuration

SEPARATOR = "."


class RequestKind(enum.Enum):
    PROPERTY_GET = "property_get"
    METHOD_CALL = "method_call"


@dataclass(frozen=True)
class Request:
    name: str
    kind: RequestKind = RequestKind.PROPERTY_GET
    type_argument: Optional[type] = None
    arguments: Tuple[Any, ...] = field(default_factory=tuple)

    @classmethod
    def property_get(cls, name: str) -> "Request":
        return cls(name=name)

    @classmethod
    def method_call(
        cls, name: str, arguments: Tuple[Any, ...] = (), type_argument: Optional[type] = None
    ) -> "Request":
        return cls(
            name=name,
            kind=RequestKind.METHOD_CALL,
            type_argument=type_argument,
            arguments=tuple(arguments),
        )


@dataclass(frozen=True)
class Value:
    value: Any


@dataclass(frozen=True)
class Absent:
    pass


@dataclass(frozen=True)
class Namespace:
    configuration: "Configuration"


Outcome = Union[Value, Absent, Namespace]

ABSENT = Absent()


def join_key(prefix: Optional[str], name: str) -> str:
    """Compose the store key for ``name`` under ``prefix``."""
    return f"{prefix}{SEPARATOR}{name}" if prefix else name


__all__ = [
    "SEPARATOR",
    "RequestKind",
    "Request",
    "Value",
    "Absent",
    "Namespace",
    "Outcome",
    "ABSENT",
    "join_key",
]

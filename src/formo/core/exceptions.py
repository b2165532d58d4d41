from __future__ import annotations

from typing import Any, Dict, Mapping


class FormoError(Exception):
    """Base exception for Formo."""

    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        if context is not None:
            # Store a shallow copy to avoid accidental mutation.
            self.context = dict(context)
        else:
            self.context = {}

    def to_json_error(self) -> Dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {
            "message": str(self),
            "code": self.__class__.__name__,
            "context": self.context,
        }


class ConversionError(FormoError, ValueError):
    """Raised when a stored value cannot be parsed as the requested type.

    Carries the raw text, the target type name and the locale that was used,
    plus the settings key when the failure happened during a lookup.
    """

    def __init__(
        self,
        raw: str,
        type_name: str,
        locale: str,
        *,
        key: str | None = None,
        details: str | None = None,
    ) -> None:
        self.raw = raw
        self.type_name = type_name
        self.locale = locale
        self.key = key
        ctx: Dict[str, Any] = {"raw": raw, "type_name": type_name, "locale": locale}
        if key:
            ctx["key"] = key
        if details:
            ctx["details"] = details
        subject = f"setting '{key}' value {raw!r}" if key else repr(raw)
        message = f"Cannot convert {subject} to {type_name} using locale '{locale}'"
        if details:
            message = f"{message}: {details}"
        FormoError.__init__(self, message, context=ctx)
        ValueError.__init__(self, message)

    def with_key(self, key: str) -> "ConversionError":
        """Return a copy of this error that names the settings key."""
        return ConversionError(
            self.raw,
            self.type_name,
            self.locale,
            key=key,
            details=self.context.get("details"),
        )


class KeyNotFoundError(FormoError, KeyError, AttributeError):
    """Raised when a member below the root matches neither a leaf nor a namespace.

    Also an ``AttributeError`` so ``hasattr`` and ``getattr(obj, name, default)``
    work on namespace facades.
    """

    def __init__(self, path: str, *, prefix: str = "") -> None:
        self.path = path
        self.prefix = prefix
        message = f"Configuration key '{path}' was not found"
        if prefix:
            message = f"{message} in namespace '{prefix}'"
        FormoError.__init__(self, message, context={"path": path, "prefix": prefix})
        KeyError.__init__(self, message)

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return str(self.args[0]) if self.args else ""


class SectionNotFoundError(FormoError, KeyError):
    """Raised when a named settings section does not exist in a store."""

    def __init__(self, section: str, *, source: str | None = None) -> None:
        self.section = section
        message = f"Settings section '{section}' was not found"
        if source:
            message = f"{message} in {source}"
        ctx: Dict[str, Any] = {"section": section}
        if source:
            ctx["source"] = source
        FormoError.__init__(self, message, context=ctx)
        KeyError.__init__(self, message)

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class SettingsFileError(FormoError, ValueError):
    """Raised when a settings file is missing, malformed or fails schema validation."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        FormoError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


__all__ = [
    "FormoError",
    "ConversionError",
    "KeyNotFoundError",
    "SectionNotFoundError",
    "SettingsFileError",
]

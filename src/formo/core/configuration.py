"""Dynamic configuration facade.

``Configuration`` turns attribute access into settings lookups::

    config = Configuration()
    config.ApiKey                              # stored text, or None
    config.ThirdPartyApi.Key                   # namespace descent
    config.get("weird:key")                    # keys that are not identifiers
    config.get("NumberOfRetries", int)         # typed escape hatch

Method-style lookups go through the ``call`` view, where a member is a
callable taking default values and an optional type argument::

    config.call.ApiKey("fallback")             # defaults, first non-None wins
    config.call.NumberOfRetries[int]()         # typed conversion
    config.call.Namespace().MissingThing(Decimal("99.99"))

Every access is classified into a ``Request`` and answered by
``Configuration.resolve_request``. A missing leaf at the root is ``None``;
a missing leaf below the root raises ``KeyNotFoundError`` naming the full
dotted path. A missing first segment followed by more segments
(``config.Nope.Key``) therefore fails on ``None`` with the interpreter's
own ``AttributeError``.

Public members of the facade (``get``, ``call``, ``keys``, ``items``,
``locale``, ``prefix``, ``store``, ``with_locale``, ``resolve_request``)
shadow settings of the same name; ``get`` still reaches those settings.
"""
from __future__ import annotations

from typing import Any, Iterator, List, Optional, Tuple

from babel import Locale

from .conversion import TypeConverter
from .defaults import default_store
from .exceptions import KeyNotFoundError
from .locale import LocaleLike, parse_locale
from .navigator import NamespaceNavigator, NodeKind
from .request import SEPARATOR, Absent, Namespace, Outcome, Request, Value, join_key
from .resolver import KeyResolver
from .stores.base import SettingsStore, under_prefix


class Configuration:
    """Immutable view of a settings store rooted at a dotted prefix.

    Args:
        section: Named settings section of the store to expose instead of
            its default section.
        locale: Locale for number and date conversion (``babel.Locale`` or an
            identifier such as ``"de"``). Defaults to ``store.current_locale()``.
        store: Settings store. Defaults to the process-wide default store
            (environment overrides over the settings file).
        prefix: Namespace this facade is rooted at (empty for the root).
    """

    __slots__ = ("_store", "_prefix", "_locale", "_resolver", "_navigator")

    def __init__(
        self,
        section: Optional[str] = None,
        locale: Optional[LocaleLike] = None,
        *,
        store: Optional[SettingsStore] = None,
        prefix: str = "",
    ) -> None:
        backing = store if store is not None else default_store()
        if section:
            backing = backing.section(section)
        resolved = parse_locale(locale) if locale is not None else backing.current_locale()
        object.__setattr__(self, "_store", backing)
        object.__setattr__(self, "_prefix", prefix or "")
        object.__setattr__(self, "_locale", resolved)
        object.__setattr__(self, "_resolver", KeyResolver(backing, TypeConverter(resolved)))
        object.__setattr__(self, "_navigator", NamespaceNavigator(backing))

    # ========== Facade state ==========

    @property
    def store(self) -> SettingsStore:
        return self._store

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def locale(self) -> Locale:
        return self._locale

    @property
    def call(self) -> "MethodView":
        """Method-style view: members are callables taking defaults and a type."""
        return MethodView(self)

    def with_locale(self, locale: LocaleLike) -> "Configuration":
        """Return a facade over the same store and prefix using ``locale``."""
        return Configuration(locale=locale, store=self._store, prefix=self._prefix)

    def _child(self, prefix: str) -> "Configuration":
        return Configuration(locale=self._locale, store=self._store, prefix=prefix)

    # ========== Resolution ==========

    def resolve_request(self, request: Request) -> Outcome:
        """Answer one classified access.

        Namespace descent takes priority; otherwise the name is a leaf looked
        up with the request's type argument and default arguments.

        Raises:
            KeyNotFoundError: The leaf is missing below the root and no
                default applies.
            ConversionError: The stored text does not parse as the type argument.
        """
        if self._navigator.describe(self._prefix, request.name) is NodeKind.NAMESPACE:
            return Namespace(self._navigator.descend(self, request.name))

        path = join_key(self._prefix, request.name)
        outcome = self._resolver.resolve(path, request.type_argument, request.arguments)
        if isinstance(outcome, Absent) and self._prefix:
            raise KeyNotFoundError(path, prefix=self._prefix)
        return outcome

    def get(self, key: str, target: Optional[type] = None, default: Any = None) -> Any:
        """Look up ``key`` under this facade's prefix without member dispatch.

        Works for keys that are not identifiers (``"weird:key"``) and for keys
        shadowed by facade members. Missing keys give ``default`` (``None``
        unless supplied) at any depth.
        """
        outcome = self._resolver.resolve(join_key(self._prefix, key), target, (default,))
        return outcome.value if isinstance(outcome, Value) else None

    # ========== Introspection ==========

    def keys(self) -> List[str]:
        """Stored keys below this facade's prefix, relative to it."""
        return [relative for relative, _ in self._relative_keys()]

    def items(self) -> Iterator[Tuple[str, str]]:
        """Yield ``(relative_key, raw_text)`` pairs below this facade's prefix."""
        for relative, key in self._relative_keys():
            raw = self._store.get_raw(key)
            if raw is not None:
                yield relative, raw

    def _relative_keys(self) -> List[Tuple[str, str]]:
        if not self._prefix:
            return [(key, key) for key in self._store.iter_keys()]
        start = len(self._prefix) + len(SEPARATOR)
        return [
            (key[start:], key)
            for key in self._store.iter_keys(self._prefix)
            if key != self._prefix and under_prefix(key, self._prefix)
        ]

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        path = join_key(self._prefix, name)
        return (
            self._store.get_raw(path) is not None
            or self._store.has_descendants(path)
            or self._store.declares_namespace(path)
        )

    def __dir__(self) -> List[str]:
        members = {relative.split(SEPARATOR, 1)[0] for relative in self.keys()}
        return sorted(set(super().__dir__()) | {m for m in members if m.isidentifier()})

    # ========== Dynamic dispatch ==========

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        return _unwrap(self.resolve_request(Request.property_get(name)))

    def __call__(self, *defaults: Any) -> "Configuration":
        # A namespace read as a zero-argument call is the namespace itself.
        return self

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable; cannot set '{name}'")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable; cannot delete '{name}'")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Configuration):
            return NotImplemented
        return (
            self._store is other._store
            and self._prefix == other._prefix
            and str(self._locale) == str(other._locale)
        )

    def __hash__(self) -> int:
        return hash((id(self._store), self._prefix, str(self._locale)))

    def __repr__(self) -> str:
        return f"Configuration(prefix={self._prefix!r}, locale='{self._locale}')"


class MethodView:
    """Method-style access to a ``Configuration``.

    ``view.Name`` is a ``Member`` for leaves and another ``MethodView`` for
    namespaces. Calling a namespace view (with or without arguments) returns
    the view itself, so ``view.Namespace().Key(default)`` and
    ``view.Namespace.Key(default)`` are the same lookup.
    """

    __slots__ = ("_configuration",)

    def __init__(self, configuration: Configuration) -> None:
        object.__setattr__(self, "_configuration", configuration)

    @property
    def configuration(self) -> Configuration:
        return self._configuration

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        config = self._configuration
        if config._navigator.describe(config.prefix, name) is NodeKind.NAMESPACE:
            return MethodView(config._navigator.descend(config, name))
        return Member(config, name)

    def __call__(self, *defaults: Any) -> "MethodView":
        return self

    def __getitem__(self, target: type) -> "MethodView":
        return self

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable; cannot set '{name}'")

    def __repr__(self) -> str:
        return f"MethodView({self._configuration!r})"


class Member:
    """A leaf reached through ``MethodView``; call it to resolve.

    ``member(*defaults)`` looks the leaf up with a default-fallback chain,
    ``member[T](*defaults)`` additionally converts a stored value to ``T``.
    """

    __slots__ = ("_configuration", "_name", "_type")

    def __init__(self, configuration: Configuration, name: str, target: Optional[type] = None) -> None:
        object.__setattr__(self, "_configuration", configuration)
        object.__setattr__(self, "_name", name)
        object.__setattr__(self, "_type", target)

    @property
    def path(self) -> str:
        return join_key(self._configuration.prefix, self._name)

    def __getitem__(self, target: type) -> "Member":
        return Member(self._configuration, self._name, target)

    def __call__(self, *defaults: Any) -> Any:
        request = Request.method_call(self._name, defaults, self._type)
        outcome = self._configuration.resolve_request(request)
        if isinstance(outcome, Namespace):
            return MethodView(outcome.configuration)
        return _unwrap(outcome)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_") or not self._configuration.prefix:
            raise AttributeError(f"{type(self).__name__} '{self.path}' has no attribute '{name}'")
        # Below the root a leaf is never a namespace; report the broken link.
        if self.path in self._configuration.store:
            raise KeyNotFoundError(join_key(self.path, name), prefix=self.path)
        raise KeyNotFoundError(self.path, prefix=self._configuration.prefix)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable; cannot set '{name}'")

    def __repr__(self) -> str:
        suffix = f"[{self._type.__name__}]" if self._type is not None else ""
        return f"Member({self.path!r}){suffix}"


def _unwrap(outcome: Outcome) -> Any:
    if isinstance(outcome, Value):
        return outcome.value
    if isinstance(outcome, Namespace):
        return outcome.configuration
    return None


__all__ = ["Configuration", "MethodView", "Member"]

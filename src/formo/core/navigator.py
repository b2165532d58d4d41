"""Leaf-versus-namespace decisions for dotted member access."""
from __future__ import annotations

import enum
from typing import TYPE_CHECKING, Optional

from .request import join_key
from .stores.base import SettingsStore

if TYPE_CHECKING:
    from .configuration import Configuration


class NodeKind(enum.Enum):
    LEAF = "leaf"
    NAMESPACE = "namespace"


class NamespaceNavigator:
    """Decide what ``prefix.name`` denotes in a store.

    A path holding a stored value is a leaf. A path without a value is a
    namespace when some key lies below it or the store declares it;
    anything else is a leaf (which may resolve to a default or to nothing).
    """

    def __init__(self, store: SettingsStore) -> None:
        self.store = store

    def describe(self, prefix: Optional[str], name: str) -> NodeKind:
        path = join_key(prefix, name)
        if self.store.get_raw(path) is not None:
            return NodeKind.LEAF
        if self.store.has_descendants(path) or self.store.declares_namespace(path):
            return NodeKind.NAMESPACE
        return NodeKind.LEAF

    def descend(self, configuration: "Configuration", name: str) -> "Configuration":
        """Child facade scoped to ``configuration.prefix`` plus ``name``."""
        return configuration._child(join_key(configuration.prefix, name))


__all__ = ["NodeKind", "NamespaceNavigator"]

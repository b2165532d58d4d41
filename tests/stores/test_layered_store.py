from __future__ import annotations

import pytest

from formo.core import (
    Configuration,
    ConversionError,
    EnvironmentStore,
    LayeredStore,
    MappingStore,
    SectionNotFoundError,
)


@pytest.fixture
def layered() -> LayeredStore:
    env = EnvironmentStore("FORMO_", {"FORMO_ApiKey": "from-env", "FORMO_Db__Port": "6543"})
    base = MappingStore(
        {"ApiKey": "from-file", "Db": {"Host": "localhost", "Port": "5432"}, "Flag": True, "Empty": {}},
        sections={"staging": {"ApiKey": "staging"}},
    )
    return LayeredStore(env, base)


def test_first_store_wins(layered: LayeredStore) -> None:
    assert layered.get_raw("ApiKey") == "from-env"
    assert layered.get_raw("Db.Port") == "6543"
    assert layered.get_raw("Db.Host") == "localhost"
    assert layered.get_raw("Missing") is None


def test_keys_are_the_sorted_union(layered: LayeredStore) -> None:
    assert list(layered.iter_keys()) == ["ApiKey", "Db.Host", "Db.Port", "Flag"]
    assert list(layered.iter_keys("Db")) == ["Db.Host", "Db.Port"]


def test_namespaces_from_any_layer(layered: LayeredStore) -> None:
    assert layered.has_descendants("Db")
    assert layered.declares_namespace("Empty")
    assert not layered.declares_namespace("ApiKey")


def test_typed_bool_is_answered_by_owning_layer() -> None:
    env = EnvironmentStore("FORMO_", {"FORMO_Flag": "nope"})
    layered = LayeredStore(MappingStore({"Flag": True}), env)
    assert layered.get_typed("Flag", bool) is True

    overridden = LayeredStore(env, MappingStore({"Flag": True}))
    with pytest.raises(ConversionError):
        overridden.get_typed("Flag", bool)
    assert overridden.get_typed("Missing", bool) is None


def test_section_layers_the_stores_that_have_it(layered: LayeredStore) -> None:
    staging = layered.section("staging")
    assert staging.get_raw("ApiKey") == "staging"
    with pytest.raises(SectionNotFoundError):
        layered.section("production")


def test_facade_over_layers(layered: LayeredStore) -> None:
    config = Configuration(locale="en_US", store=layered)
    assert config.ApiKey == "from-env"
    assert config.call.Db.Port[int]() == 6543
    assert config.call.Flag[bool]() is True


def test_requires_a_store() -> None:
    with pytest.raises(ValueError):
        LayeredStore()

from datetime import datetime, timezone

import pytest

from phpgen import FixedClock, TypeDocument

FROZEN_AT = datetime(2026, 10, 19, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def clock():
    return FixedClock(FROZEN_AT)


@pytest.fixture(autouse=True)
def _no_hash_override(monkeypatch):
    # environment must not change the hash algorithm under test
    monkeypatch.delenv("PHPGEN_HASH_ALGO", raising=False)


@pytest.fixture
def user_doc(clock):
    """Class with every kind of member, built in a fixed order."""
    return (
        TypeDocument("App\\Models\\User", strict=True, clock=clock)
        .add_import("App\\Contracts\\HasName", "App\\Base\\Model")
        .add_superclass("Model")
        .add_interface("HasName")
        .add_trait("Timestamps")
        .add_constant("TABLE", "users")
        .add_property("name", "string", default="")
        .add_method("label", "\t\treturn $this->name;", returns="string")
    )

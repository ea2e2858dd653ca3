"""Collection Registry — idempotent creation and lookups without side effects."""

from docstore.core.registry import CollectionRegistry


class _Built:
    def __init__(self, name):
        self.name = name


def _registry():
    built = []

    def builder(name):
        built.append(name)
        return _Built(name)

    return CollectionRegistry(builder), built


def test_get_missing_returns_none_without_building():
    registry, built = _registry()
    assert registry.get("users") is None
    assert built == []
    assert "users" not in registry


def test_get_or_create_is_idempotent():
    registry, built = _registry()
    first = registry.get_or_create("users")
    second = registry.get_or_create("users")
    assert first is second
    assert built == ["users"]
    assert len(registry) == 1


def test_remove_is_silent_for_missing_names():
    registry, _ = _registry()
    registry.get_or_create("users")
    registry.remove("users")
    registry.remove("users")
    assert registry.get("users") is None
    assert registry.names() == []


def test_names_preserve_creation_order():
    registry, _ = _registry()
    for name in ("b", "a", "c"):
        registry.get_or_create(name)
    assert registry.names() == ["b", "a", "c"]
    assert [c.name for c in registry] == ["b", "a", "c"]

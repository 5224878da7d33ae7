from __future__ import annotations

import operator

import pytest

from lockstep import MAP_DOC, MapCombinator, TypeDefinition, TypeRegistry, builtin_registry


class TestTypeDefinition:
    def test_defaults_to_iterator_slots(self):
        definition = TypeDefinition(name="map")
        assert definition.slots == ("__new__", "__next__", "__iter__")
        assert definition.doc == ""


class TestTypeRegistry:
    def test_builtin_registry_has_map(self):
        registry = builtin_registry()
        assert "map" in registry
        assert registry.names() == ["map"]
        assert registry.get("map") is MapCombinator

    def test_map_doc(self):
        registry = builtin_registry()
        doc = registry.doc("map")
        assert doc == MAP_DOC
        assert doc.startswith("map(func, *iterables) --> map object")
        assert "shortest iterable is exhausted" in doc

    def test_new_constructs_through_entry_point(self):
        registry = builtin_registry()

        m = registry.new("map", operator.add, [1, 2], [3, 4])

        assert isinstance(m, MapCombinator)
        assert list(m) == [4, 6]

    def test_next_and_iter_entry_points(self):
        registry = builtin_registry()
        m = registry.new("map", operator.neg, [1, 2])
        next_fn = registry.slot("map", "__next__")
        iter_fn = registry.slot("map", "__iter__")

        assert iter_fn(m) is m
        assert next_fn(m) == -1
        assert next_fn(m) == -2
        with pytest.raises(StopIteration):
            next_fn(m)

    def test_unknown_type(self):
        registry = TypeRegistry()
        with pytest.raises(KeyError):
            registry.get("map")
        with pytest.raises(KeyError):
            registry.new("map", operator.add)
        with pytest.raises(KeyError):
            registry.doc("map")
        assert registry.get_definition("map") is None

    def test_unknown_slot(self):
        registry = builtin_registry()
        with pytest.raises(KeyError, match="no slot '__len__'"):
            registry.slot("map", "__len__")

    def test_register_rejects_missing_slot(self):
        registry = TypeRegistry()

        class NotAnIterator:
            pass

        with pytest.raises(ValueError, match="missing slot '__next__'"):
            registry.register(TypeDefinition(name="broken"), NotAnIterator)
        assert "broken" not in registry

    def test_register_subclass(self):
        class Tagged(MapCombinator):
            pass

        registry = TypeRegistry()
        registry.register(TypeDefinition(name="tagged", doc="tagged map"), Tagged)

        m = registry.new("tagged", operator.add, [1], [2])
        assert type(m) is Tagged
        assert list(m) == [3]
        assert registry.doc("tagged") == "tagged map"

    def test_doc_comes_from_registration_not_class(self):
        class Undocumented(MapCombinator):
            pass

        registry = TypeRegistry()
        registry.register(TypeDefinition(name="plain", doc=MAP_DOC), Undocumented)

        assert Undocumented.__doc__ is None
        assert registry.doc("plain") == MAP_DOC

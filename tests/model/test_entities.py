# Copyright 2026 Annogen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for annotated classes, properties, and class sets."""

from annogen.model.context import ModelContext
from annogen.model.entities import AnnotatedClass, AnnotatedClassSet, find_getter, getter_name
from annogen.model.types import PlainTypeRef, TargetTypeName
from annogen.reflection.facade import Modifier
from annogen.reflection.memory import InMemoryFacade
from annogen.reflection.schema import parse_declarations
from annogen.translation.translator import NULLABLE_ANNOTATION, TypeTranslator

# ###############
# Helpers
# ###############

_DECLARATIONS = f"""\
classes:
  - name: com.example.Person
    fields:
      - name: age
        type: {{kind: plain, name: int}}
        modifiers: [private]
      - name: name
        type: {{kind: plain, name: java.lang.String}}
        annotations:
          - kind: com.example.Column
            values: {{name: full_name}}
      - name: tags
        type:
          kind: parameterized
          name: java.util.List
          arguments: [{{kind: plain, name: java.lang.String}}]
      - name: attributes
        type:
          kind: parameterized
          name: java.util.Map
          arguments:
            - {{kind: plain, name: java.lang.String}}
            - {{kind: plain, name: com.example.Address}}
      - name: INSTANCES
        type: {{kind: plain, name: int}}
        modifiers: [private, static]
      - name: cache
        type: {{kind: plain, name: java.lang.Object}}
        modifiers: [transient]
      - name: nickname
        type: {{kind: plain, name: java.lang.String}}
    constructors:
      - parameters:
          - name: age
            type: {{kind: plain, name: int}}
          - name: nickname
            type: {{kind: plain, name: java.lang.String}}
            annotations:
              - kind: {NULLABLE_ANNOTATION}
      - parameters:
          - name: name
            type: {{kind: plain, name: java.lang.String}}
    methods:
      - name: getAge
        return-type: {{kind: plain, name: int}}
        modifiers: [public]
      - name: getName
        return-type: {{kind: plain, name: java.lang.String}}
        modifiers: [private]
        annotations:
          - kind: com.example.Column
            values: {{name: from_getter}}
          - kind: com.example.JsonName
      - name: setAge
        parameters:
          - name: age
            type: {{kind: plain, name: int}}
  - name: com.example.Address
    namespace: com.example.geo
"""


def _facade() -> InMemoryFacade:
    return InMemoryFacade(parse_declarations(_DECLARATIONS))


def _person(facade: InMemoryFacade | None = None, internal: bool = False) -> AnnotatedClass:
    facade = facade or _facade()
    element = facade.type_element("com.example.Person")
    return AnnotatedClass(ModelContext.for_facade(facade), element, internal)


def _property(name: str):
    return next(p for p in _person().properties() if p.name == name)


def _access(prop) -> str:
    return prop.reference(lambda: "accessor", lambda: "direct")


# ###############
# Getter convention
# ###############


def test_getter_name_capitalises_first_character() -> None:
    assert getter_name("age") == "getAge"
    assert getter_name("URL") == "getURL"
    assert getter_name("x") == "getX"


def test_find_getter_ignores_non_methods() -> None:
    facade = _facade()
    person = facade.type_element("com.example.Person")
    getter = find_getter(facade, person, "age")
    assert getter is not None
    assert facade.simple_name_of(getter) == "getAge"
    assert find_getter(facade, person, "tags") is None


# ###############
# AnnotatedClass
# ###############


class TestAnnotatedClass:
    def test_names_and_namespace(self) -> None:
        person = _person()
        assert person.simple_name == "Person"
        assert person.qualified_name == "com.example.Person"
        assert person.namespace == "com.example"

    def test_properties_skip_unsupported_modifiers(self) -> None:
        names = [p.name for p in _person().properties()]
        assert names == ["age", "name", "tags", "attributes", "nickname"]

    def test_properties_with_custom_unsupported_modifiers(self) -> None:
        facade = _facade()
        context = ModelContext(
            facade=facade,
            translator=TypeTranslator(facade),
            unsupported_modifiers=frozenset({Modifier.PRIVATE}),
        )
        person = AnnotatedClass(context, facade.type_element("com.example.Person"))
        assert [p.name for p in person.properties()] == ["name", "tags", "attributes", "cache", "nickname"]

    def test_properties_selector(self) -> None:
        selected = _person().properties(lambda p: p.is_collection or p.is_map)
        assert [p.name for p in selected] == ["tags", "attributes"]

    def test_properties_are_stable(self) -> None:
        person = _person()
        assert [p.name for p in person.properties()] == [p.name for p in person.properties()]

    def test_equality_delegates_to_declaration(self) -> None:
        facade = _facade()
        assert _person(facade) == _person(facade, internal=True)
        assert hash(_person(facade)) == hash(_person(facade, internal=True))

    def test_equals_raw_declaration(self) -> None:
        facade = _facade()
        assert _person(facade) == facade.type_element("com.example.Person")
        assert _person(facade) != facade.type_element("com.example.Address")

    def test_repr(self) -> None:
        assert repr(_person(internal=True)) == "Annotated(element=com.example.Person, internal=True)"

    def test_property_reference_by_name(self) -> None:
        person = _person()
        assert person.property_reference("age", lambda: "accessor", lambda: "direct") == "direct"
        assert person.property_reference("name", lambda: "accessor", lambda: "direct") == "accessor"
        assert person.property_reference("tags", lambda: "accessor", lambda: "direct") == "direct"


# ###############
# AnnotatedProperty
# ###############


class TestAnnotatedProperty:
    def test_age_links_getter_and_parameter(self) -> None:
        """A field with a public getter and a constructor parameter resolves both links."""
        age = _property("age")
        assert age.getter is not None
        assert age.parameter is not None
        assert age.type == TargetTypeName(name="kotlin.Int")
        assert age.modifiers == frozenset({Modifier.PRIVATE})
        assert _access(age) == "direct"

    def test_private_getter_selects_accessor(self) -> None:
        assert _access(_property("name")) == "accessor"

    def test_missing_getter_selects_direct(self) -> None:
        tags = _property("tags")
        assert tags.getter is None
        assert _access(tags) == "direct"

    def test_only_first_constructor_is_linked(self) -> None:
        assert _property("name").parameter is None

    def test_exactly_one_handler_runs(self) -> None:
        calls: list[str] = []

        def private() -> str:
            calls.append("private")
            return "p"

        def direct() -> str:
            calls.append("direct")
            return "d"

        assert _property("name").reference(private, direct) == "p"
        assert calls == ["private"]

    def test_property_and_class_reference_agree(self) -> None:
        """The property-level decision matches the class-level one for every property."""
        person = _person()
        for prop in person.properties():
            assert _access(prop) == person.property_reference(prop, lambda: "accessor", lambda: "direct")

    def test_parameter_marker_makes_property_nullable(self) -> None:
        nickname = _property("nickname")
        assert nickname.type == TargetTypeName(name="kotlin.String", nullable=True)

    def test_collection_and_map(self) -> None:
        tags = _property("tags")
        attributes = _property("attributes")
        assert tags.is_collection and not tags.is_map
        assert attributes.is_map and not attributes.is_collection
        assert str(tags.type) == "kotlin.collections.List<kotlin.String>"

    def test_source_and_reflected_type(self) -> None:
        age = _property("age")
        assert age.source_type == PlainTypeRef(name="int")
        assert age.reflected_type.type == TargetTypeName(name="kotlin.Int")

    def test_type_arguments(self) -> None:
        attributes = _property("attributes")
        assert attributes.type_argument_ref(1) == PlainTypeRef(name="com.example.Address")
        assert attributes.type_argument(0) == TargetTypeName(name="kotlin.String")
        assert attributes.type_argument(2) is None
        assert _property("age").type_argument() is None

    def test_type_argument_declaration(self) -> None:
        declaration = _property("attributes").type_argument_declaration(1)
        assert declaration is not None
        assert repr(declaration) == "com.example.Address"
        assert _property("age").type_argument_declaration() is None

    def test_annotation_field_first(self) -> None:
        column = _property("name").annotation("com.example.Column")
        assert column is not None
        assert column.values == {"name": "full_name"}

    def test_annotation_falls_back_to_getter(self) -> None:
        name = _property("name")
        assert name.has_annotation("com.example.JsonName")
        assert not name.has_annotation("com.example.Missing")


# ###############
# AnnotatedClassSet
# ###############


class TestAnnotatedClassSet:
    def _classes(self) -> tuple[AnnotatedClass, AnnotatedClass]:
        facade = _facade()
        context = ModelContext.for_facade(facade)
        return (
            AnnotatedClass(context, facade.type_element("com.example.Person")),
            AnnotatedClass(context, facade.type_element("com.example.Address"), internal=True),
        )

    def test_empty_set(self) -> None:
        classes = AnnotatedClassSet()
        assert not classes.is_not_empty()
        assert len(classes) == 0
        assert classes.to_list() == []

    def test_add_deduplicates_first_wins(self) -> None:
        person, _ = self._classes()
        duplicate = AnnotatedClass(ModelContext.for_facade(_facade()), person.element, internal=True)
        classes = AnnotatedClassSet()
        assert classes.add(person)
        assert not classes.add(duplicate)
        assert len(classes) == 1
        assert classes.to_list()[0].internal is False

    def test_insertion_order(self) -> None:
        person, address = self._classes()
        assert AnnotatedClassSet([address, person]).to_list() == [address, person]

    def test_contains_accepts_declarations_and_classes(self) -> None:
        person, address = self._classes()
        classes = AnnotatedClassSet([person])
        assert classes.contains(person)
        assert classes.contains(person.element)
        assert person.element in classes
        assert not classes.contains(address)
        assert not classes.contains(None)

    def test_unhashable_operand_is_not_contained(self) -> None:
        person, _ = self._classes()
        classes = AnnotatedClassSet([person])
        assert [person.element] not in classes
        assert {"element": person.element} not in classes

    def test_get(self) -> None:
        person, address = self._classes()
        classes = AnnotatedClassSet([person])
        assert classes.get(person.element) is person
        assert classes.get(address.element) is None

    def test_filter_returns_independent_set(self) -> None:
        person, address = self._classes()
        classes = AnnotatedClassSet([person, address])
        internal = classes.filter(lambda c: c.internal)
        assert internal.to_list() == [address]
        internal.add(person)
        assert len(classes) == 2
        assert len(internal) == 2

    def test_for_each_visits_snapshot(self) -> None:
        person, address = self._classes()
        classes = AnnotatedClassSet([person])
        visited: list[AnnotatedClass] = []

        def visit(annotated: AnnotatedClass) -> None:
            visited.append(annotated)
            classes.add(address)

        classes.for_each(visit)
        assert visited == [person]
        assert len(classes) == 2

    def test_iteration_tolerates_mutation(self) -> None:
        person, address = self._classes()
        classes = AnnotatedClassSet([person])
        for _ in classes:
            classes.add(address)
        assert len(classes) == 2

    def test_repr_lists_classes(self) -> None:
        person, _ = self._classes()
        assert repr(AnnotatedClassSet([person])) == "[Annotated(element=com.example.Person, internal=False)]"

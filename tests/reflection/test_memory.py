# Copyright 2026 Annogen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the in-memory reflection host."""

from pathlib import Path

import pytest

from annogen.model.types import ArrayTypeRef, ParameterizedTypeRef, PlainTypeRef
from annogen.reflection.facade import ElementKind, Modifier
from annogen.reflection.memory import InMemoryFacade, InMemoryRoundEnvironment
from annogen.reflection.schema import parse_declarations

# ###############
# Helpers
# ###############

_DECLARATIONS = """\
classes:
  - name: com.example.Person
    annotations:
      - kind: com.example.Model
    fields:
      - name: age
        type: {kind: plain, name: int}
        modifiers: [private]
      - name: nickname
        type: {kind: plain, name: java.lang.String}
        annotations:
          - kind: com.example.Column
    constructors:
      - parameters:
          - name: age
            type: {kind: plain, name: int}
            annotations:
              - kind: com.example.Column
    methods:
      - name: getAge
        return-type: {kind: plain, name: int}
        modifiers: [public]
  - name: com.example.Outer.Inner
  - name: com.example.Registry
    namespace: com.example.registry
    annotations:
      - kind: com.example.Models
        values: {value: [com.example.Outer.Inner]}
"""


def _facade(include_jdk: bool = True) -> InMemoryFacade:
    return InMemoryFacade(parse_declarations(_DECLARATIONS), include_jdk=include_jdk)


def _by_name(facade: InMemoryFacade, qualified_name: str):
    element = facade.type_element(qualified_name)
    assert element is not None
    return element


# ###############
# Facade queries
# ###############


class TestInMemoryFacade:
    def test_classes_in_file_order(self) -> None:
        facade = _facade()
        assert [facade.qualified_name_of(c) for c in facade.classes] == [
            "com.example.Person",
            "com.example.Outer.Inner",
            "com.example.Registry",
        ]

    def test_names_and_kind(self) -> None:
        facade = _facade()
        person = _by_name(facade, "com.example.Person")
        assert facade.kind_of(person) is ElementKind.CLASS
        assert facade.simple_name_of(person) == "Person"
        assert facade.qualified_name_of(person) == "com.example.Person"

    def test_members_are_fields_then_constructors_then_methods(self) -> None:
        facade = _facade()
        members = facade.enclosed_members_of(_by_name(facade, "com.example.Person"))
        assert [(facade.kind_of(m), facade.simple_name_of(m)) for m in members] == [
            (ElementKind.FIELD, "age"),
            (ElementKind.FIELD, "nickname"),
            (ElementKind.CONSTRUCTOR, "<init>"),
            (ElementKind.METHOD, "getAge"),
        ]

    def test_member_queries(self) -> None:
        facade = _facade()
        age, _, constructor, getter = facade.enclosed_members_of(_by_name(facade, "com.example.Person"))
        assert facade.modifiers_of(age) == frozenset({Modifier.PRIVATE})
        assert facade.type_of(age) == PlainTypeRef(name="int")
        assert facade.type_of(getter) == PlainTypeRef(name="int")
        (parameter,) = facade.parameters_of(constructor)
        assert facade.kind_of(parameter) is ElementKind.PARAMETER
        assert facade.annotations_of(parameter)[0].kind == "com.example.Column"

    def test_type_of_class_is_its_own_name(self) -> None:
        facade = _facade()
        assert facade.type_of(_by_name(facade, "com.example.Person")) == PlainTypeRef(name="com.example.Person")

    def test_namespace_defaults_to_lower_case_prefix(self) -> None:
        facade = _facade()
        assert facade.enclosing_namespace_of(_by_name(facade, "com.example.Outer.Inner")) == "com.example"

    def test_explicit_namespace_wins(self) -> None:
        facade = _facade()
        assert facade.enclosing_namespace_of(_by_name(facade, "com.example.Registry")) == "com.example.registry"

    def test_members_share_the_class_namespace(self) -> None:
        facade = _facade()
        age = facade.enclosed_members_of(_by_name(facade, "com.example.Person"))[0]
        assert facade.enclosing_namespace_of(age) == "com.example"

    def test_unknown_type_element_is_none(self) -> None:
        assert _facade().type_element("com.example.Missing") is None

    def test_jdk_types_are_preloaded(self) -> None:
        facade = _facade()
        array_list = _by_name(facade, "java.util.ArrayList")
        assert facade.enclosing_namespace_of(array_list) == "java.util"
        assert PlainTypeRef(name="java.util.List") in facade.supertypes_of(array_list)

    def test_jdk_types_can_be_excluded(self) -> None:
        assert _facade(include_jdk=False).type_element("java.util.List") is None

    def test_declared_class_replaces_jdk_type(self) -> None:
        facade = InMemoryFacade(parse_declarations("classes:\n  - name: java.util.List\n    kind: interface\n"))
        assert facade.supertypes_of(_by_name(facade, "java.util.List")) == []

    def test_foreign_handle_is_rejected(self) -> None:
        with pytest.raises(TypeError):
            _facade().kind_of("com.example.Person")

    def test_from_file(self, tmp_path: Path) -> None:
        path = tmp_path / "declarations.yaml"
        path.write_text(_DECLARATIONS, encoding="utf-8")
        assert len(InMemoryFacade.from_file(path).classes) == 3


class TestFacadeDefaults:
    def test_type_arguments_of_parameterized(self) -> None:
        ref = ParameterizedTypeRef(name="java.util.List", arguments=[PlainTypeRef(name="java.lang.String")])
        assert _facade().type_arguments_of(ref) == [PlainTypeRef(name="java.lang.String")]

    def test_type_arguments_of_other_shapes_are_empty(self) -> None:
        assert _facade().type_arguments_of(PlainTypeRef(name="int")) == []

    def test_declaration_of_declared_type(self) -> None:
        facade = _facade()
        ref = ParameterizedTypeRef(name="com.example.Person")
        assert facade.declaration_of(ref) is _by_name(facade, "com.example.Person")

    def test_declaration_of_array_is_none(self) -> None:
        assert _facade().declaration_of(ArrayTypeRef(component_type=PlainTypeRef(name="int"))) is None

    def test_find_annotation(self) -> None:
        facade = _facade()
        person = _by_name(facade, "com.example.Person")
        assert facade.find_annotation(person, "com.example.Model") is not None
        assert facade.find_annotation(person, "com.example.Other") is None


# ###############
# Round environment
# ###############


class TestInMemoryRoundEnvironment:
    def test_annotated_classes(self) -> None:
        facade = _facade()
        found = InMemoryRoundEnvironment(facade).elements_annotated_with("com.example.Model")
        assert found == [_by_name(facade, "com.example.Person")]

    def test_annotated_members_and_parameters_in_source_order(self) -> None:
        facade = _facade()
        found = InMemoryRoundEnvironment(facade).elements_annotated_with("com.example.Column")
        assert [facade.kind_of(e) for e in found] == [ElementKind.FIELD, ElementKind.PARAMETER]

    def test_unused_annotation_finds_nothing(self) -> None:
        assert InMemoryRoundEnvironment(_facade()).elements_annotated_with("com.example.Unused") == []

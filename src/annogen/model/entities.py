# Copyright 2026 Annogen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Annotated entity model: classes, their properties, and sets of classes."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Iterator
from typing import TypeVar

from annogen.model.context import ModelContext
from annogen.model.descriptor import ReflectedType, type_argument_ref
from annogen.model.types import AnnotationMirror, SourceTypeRef, TargetType, TargetTypeName
from annogen.reflection.facade import Element, ElementKind, Modifier, ReflectionFacade

T = TypeVar("T")

# ###############
# Public Interface
# ###############


def getter_name(property_name: str) -> str:
    """Return the accessor name for a property: ``age`` -> ``getAge``."""
    return "get" + property_name[:1].upper() + property_name[1:]


def find_getter(facade: ReflectionFacade, class_element: Element, property_name: str) -> Element | None:
    """Return the first method of *class_element* named after the getter convention."""
    expected = getter_name(property_name)
    for member in facade.enclosed_members_of(class_element):
        if facade.kind_of(member) is ElementKind.METHOD and facade.simple_name_of(member) == expected:
            return member
    return None


class AnnotatedProperty:
    """A field of an :class:`AnnotatedClass`, linked to its getter and constructor parameter.

    The getter and parameter links are resolved once, when the owning class
    lists its properties.
    """

    def __init__(
        self,
        context: ModelContext,
        owner: Element,
        element: Element,
        getter: Element | None,
        parameter: Element | None,
    ) -> None:
        self._context = context
        self._facade = context.facade
        self._owner = owner
        self.element = element
        self.getter = getter
        self.parameter = parameter

    @property
    def name(self) -> str:
        return self._facade.simple_name_of(self.element)

    @property
    def modifiers(self) -> frozenset[Modifier]:
        return self._facade.modifiers_of(self.element)

    @property
    def source_type(self) -> SourceTypeRef:
        """The declared (untranslated) type of the field."""
        return self._facade.type_of(self.element)

    @property
    def reflected_type(self) -> ReflectedType:
        return ReflectedType(self._context, self.source_type)

    @property
    def type(self) -> TargetType:
        """The translated type of the property.

        Nullable when the type occurrence is, or when the field, its getter or
        its constructor parameter carries a nullability marker.
        """
        target = self._context.translator.translate(self.source_type)
        if isinstance(target, TargetTypeName) and self._declared_nullable():
            return target.with_nullable()
        return target

    @property
    def is_collection(self) -> bool:
        """True if the property type is a Collection."""
        return self.reflected_type.is_collection

    @property
    def is_map(self) -> bool:
        """True if the property type is a Map."""
        return self.reflected_type.is_map

    def annotation(self, kind: str) -> AnnotationMirror | None:
        """Return the annotation of *kind* from the field, else the getter, else the parameter."""
        for element in (self.element, self.getter, self.parameter):
            if element is None:
                continue
            found = self._facade.find_annotation(element, kind)
            if found is not None:
                return found
        return None

    def has_annotation(self, kind: str) -> bool:
        """Return True if the property is annotated with *kind*."""
        return self.annotation(kind) is not None

    def type_argument_ref(self, index: int = 0) -> SourceTypeRef | None:
        """Return the raw type argument at *index* of the property type, if any."""
        return type_argument_ref(self.source_type, index)

    def type_argument(self, index: int = 0) -> TargetType | None:
        """Return the translated type argument at *index*, if the property type is generic."""
        target = self.type
        if not isinstance(target, TargetTypeName) or not 0 <= index < len(target.arguments):
            return None
        return target.arguments[index]

    def type_argument_declaration(self, index: int = 0) -> Element | None:
        """Return the declaration of the raw type argument at *index*, if any."""
        argument = self.type_argument_ref(index)
        if argument is None:
            return None
        return self._facade.declaration_of(argument)

    def reference(self, private_handler: Callable[[], T], direct_handler: Callable[[], T]) -> T:
        """Choose between accessor-based and direct access for this property.

        The getter is looked up again on every call. *private_handler* is
        invoked when the getter exists and is private; *direct_handler* is
        invoked otherwise. Exactly one handler runs and its result is returned.
        """
        owner = AnnotatedClass(self._context, self._owner)
        return owner.property_reference(self.name, private_handler, direct_handler)

    def _declared_nullable(self) -> bool:
        translator = self._context.translator
        for element in (self.element, self.getter, self.parameter):
            if element is not None and translator.has_nullable_marker(self._facade.annotations_of(element)):
                return True
        return False

    def __repr__(self) -> str:
        return f"AnnotatedProperty(name={self.name!r}, getter={self.getter is not None}, parameter={self.parameter is not None})"


class AnnotatedClass:
    """An annotated class declaration.

    Equality and hashing delegate to the underlying declaration, so the same
    declaration wrapped twice is one logical entity. An annotated class also
    compares equal to its bare declaration.
    """

    def __init__(self, context: ModelContext, element: Element, internal: bool = False) -> None:
        self._context = context
        self._facade = context.facade
        self.element = element
        self.internal = internal

    @property
    def simple_name(self) -> str:
        return self._facade.simple_name_of(self.element)

    @property
    def qualified_name(self) -> str:
        return self._facade.qualified_name_of(self.element)

    @property
    def namespace(self) -> str:
        """The namespace (package) enclosing the class."""
        return self._facade.enclosing_namespace_of(self.element)

    def properties(self, selector: Callable[[AnnotatedProperty], bool] | None = None) -> list[AnnotatedProperty]:
        """Return the supported fields of the class as properties, in declaration order.

        Fields with an unsupported modifier are dropped first; *selector*, when
        given, filters the rest.
        """
        members = self._facade.enclosed_members_of(self.element)
        constructor = next((m for m in members if self._facade.kind_of(m) is ElementKind.CONSTRUCTOR), None)
        parameters = list(self._facade.parameters_of(constructor)) if constructor is not None else []

        result: list[AnnotatedProperty] = []
        for member in members:
            if self._facade.kind_of(member) is not ElementKind.FIELD:
                continue
            if self._facade.modifiers_of(member) & self._context.unsupported_modifiers:
                continue
            name = self._facade.simple_name_of(member)
            prop = AnnotatedProperty(
                self._context,
                self.element,
                member,
                find_getter(self._facade, self.element, name),
                next((p for p in parameters if self._facade.simple_name_of(p) == name), None),
            )
            if selector is None or selector(prop):
                result.append(prop)
        return result

    def find_getter(self, property_name: str) -> Element | None:
        """Return the getter of *property_name*, if the class declares one."""
        return find_getter(self._facade, self.element, property_name)

    def property_reference(
        self,
        prop: AnnotatedProperty | str,
        private_handler: Callable[[], T],
        direct_handler: Callable[[], T],
    ) -> T:
        """Class-level form of :meth:`AnnotatedProperty.reference`, addressed by property or name."""
        name = prop if isinstance(prop, str) else prop.name
        getter = self.find_getter(name)
        if getter is not None and Modifier.PRIVATE in self._facade.modifiers_of(getter):
            return private_handler()
        return direct_handler()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, AnnotatedClass):
            return self.element == other.element
        return self.element == other

    def __hash__(self) -> int:
        return hash(self.element)

    def __repr__(self) -> str:
        return f"Annotated(element={self.element!r}, internal={self.internal})"


class AnnotatedClassSet:
    """An insertion-ordered set of :class:`AnnotatedClass`, keyed by declaration.

    Adding a class whose declaration is already present keeps the existing
    entry. Iteration and :meth:`for_each` work on a snapshot.
    """

    def __init__(self, classes: Iterable[AnnotatedClass] = ()) -> None:
        self._classes: dict[Element, AnnotatedClass] = {}
        for annotated in classes:
            self.add(annotated)

    def add(self, annotated: AnnotatedClass) -> bool:
        """Add *annotated* unless its declaration is already present; return True if added."""
        if annotated.element in self._classes:
            return False
        self._classes[annotated.element] = annotated
        return True

    def contains(self, element: Element | AnnotatedClass | None) -> bool:
        """Return True if the set holds a class for *element* (a declaration or annotated class)."""
        if element is None:
            return False
        if isinstance(element, AnnotatedClass):
            element = element.element
        return element in self._classes

    def get(self, element: Element) -> AnnotatedClass | None:
        """Return the annotated class held for *element*, if any."""
        return self._classes.get(element)

    def filter(self, predicate: Callable[[AnnotatedClass], bool]) -> AnnotatedClassSet:
        """Return a new independent set with the classes matching *predicate*."""
        return AnnotatedClassSet(c for c in self.to_list() if predicate(c))

    def for_each(self, action: Callable[[AnnotatedClass], object]) -> None:
        """Apply *action* to every class of a snapshot of the set."""
        for annotated in self.to_list():
            action(annotated)

    def to_list(self) -> list[AnnotatedClass]:
        return list(self._classes.values())

    def is_not_empty(self) -> bool:
        return bool(self._classes)

    def __contains__(self, element: object) -> bool:
        if not isinstance(element, Hashable):
            return False
        return self.contains(element)

    def __iter__(self) -> Iterator[AnnotatedClass]:
        return iter(self.to_list())

    def __len__(self) -> int:
        return len(self._classes)

    def __repr__(self) -> str:
        return repr(self.to_list())

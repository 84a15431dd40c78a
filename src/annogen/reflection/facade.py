# Copyright 2026 Annogen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Query surface over the host's compile-time element and type information.

The core never reaches into host objects directly: declarations are opaque
handles that a :class:`ReflectionFacade` knows how to answer questions about.
Handles must be stable for the duration of a processing round and compare by
identity, since entity sets deduplicate on them.
"""

from __future__ import annotations

import abc
from collections.abc import Hashable, Sequence
from enum import Enum

from annogen.model.types import AnnotationMirror, ParameterizedTypeRef, SourceTypeRef, erased_name

# ###############
# Public Interface
# ###############

# An opaque declaration handle owned by the host.
Element = Hashable


class ElementKind(Enum):
    """Kinds of declarations the core distinguishes."""

    CLASS = "class"
    INTERFACE = "interface"
    ENUM = "enum"
    FIELD = "field"
    METHOD = "method"
    CONSTRUCTOR = "constructor"
    PARAMETER = "parameter"


class Modifier(Enum):
    """Declaration modifiers of the source type system."""

    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"
    ABSTRACT = "abstract"
    DEFAULT = "default"
    STATIC = "static"
    FINAL = "final"
    TRANSIENT = "transient"
    VOLATILE = "volatile"
    SYNCHRONIZED = "synchronized"
    NATIVE = "native"


class ReflectionFacade(abc.ABC):
    """Read-only access to declarations and types of one compilation."""

    @abc.abstractmethod
    def kind_of(self, element: Element) -> ElementKind:
        """Return the kind of *element*."""

    @abc.abstractmethod
    def simple_name_of(self, element: Element) -> str:
        """Return the unqualified name of *element*."""

    @abc.abstractmethod
    def qualified_name_of(self, element: Element) -> str:
        """Return the qualified name of a type declaration (simple name otherwise)."""

    @abc.abstractmethod
    def modifiers_of(self, element: Element) -> frozenset[Modifier]:
        """Return the modifiers declared on *element*."""

    @abc.abstractmethod
    def enclosed_members_of(self, element: Element) -> Sequence[Element]:
        """Return the members of a type declaration in declaration order."""

    @abc.abstractmethod
    def parameters_of(self, element: Element) -> Sequence[Element]:
        """Return the parameters of a method or constructor in declaration order."""

    @abc.abstractmethod
    def type_of(self, element: Element) -> SourceTypeRef:
        """Return the declared type of a field or parameter (return type for methods)."""

    @abc.abstractmethod
    def annotations_of(self, element: Element) -> Sequence[AnnotationMirror]:
        """Return the annotations present on a declaration."""

    @abc.abstractmethod
    def enclosing_namespace_of(self, element: Element) -> str:
        """Return the namespace (package) enclosing *element*."""

    @abc.abstractmethod
    def type_element(self, qualified_name: str) -> Element | None:
        """Return the type declaration named *qualified_name*, if the host knows it."""

    @abc.abstractmethod
    def supertypes_of(self, element: Element) -> Sequence[SourceTypeRef]:
        """Return the direct supertypes of a type declaration."""

    def type_arguments_of(self, type_ref: SourceTypeRef) -> Sequence[SourceTypeRef]:
        """Return the type arguments of a parameterized type, empty for other shapes."""
        if isinstance(type_ref, ParameterizedTypeRef):
            return list(type_ref.arguments)
        return []

    def type_annotations_of(self, type_ref: SourceTypeRef) -> Sequence[AnnotationMirror]:
        """Return the type-use annotations on one type occurrence."""
        return list(type_ref.annotations)

    def declaration_of(self, type_ref: SourceTypeRef) -> Element | None:
        """Return the declaration a declared type resolves to, None for arrays and wildcards."""
        name = erased_name(type_ref)
        if name is None:
            return None
        return self.type_element(name)

    def find_annotation(self, element: Element, kind: str) -> AnnotationMirror | None:
        """Return the first annotation of *kind* on *element*, if any."""
        for annotation in self.annotations_of(element):
            if annotation.kind == kind:
                return annotation
        return None


class RoundEnvironment(abc.ABC):
    """The declarations visible to one processing round."""

    @abc.abstractmethod
    def elements_annotated_with(self, kind: str) -> Sequence[Element]:
        """Return every element carrying an annotation of *kind*, in source order."""

# Copyright 2026 Annogen Contributors
# SPDX-License-Identifier: Apache-2.0

"""In-memory reflection host built from a declarations file.

Each declaration of the file becomes one :class:`Declaration` handle. Handles
compare by identity, so the same class reached through two routes is the same
handle.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from annogen.model.types import AnnotationMirror, PlainTypeRef, SourceTypeRef
from annogen.reflection.facade import Element, ElementKind, Modifier, ReflectionFacade, RoundEnvironment
from annogen.reflection.jdk import JDK_TYPES
from annogen.reflection.schema import (
    ClassDecl,
    ConstructorDecl,
    Declarations,
    FieldDecl,
    MethodDecl,
    ParameterDecl,
    load_declarations,
)

# ###############
# Public Interface
# ###############


@dataclass(eq=False)
class Declaration:
    """A declaration handle of the in-memory host."""

    kind: ElementKind
    name: str
    qualified_name: str
    namespace: str
    modifiers: frozenset[Modifier] = frozenset()
    annotations: tuple[AnnotationMirror, ...] = ()
    type: SourceTypeRef | None = None
    members: list[Declaration] = field(default_factory=list)
    parameters: list[Declaration] = field(default_factory=list)
    supertypes: list[SourceTypeRef] = field(default_factory=list)

    def __repr__(self) -> str:
        return self.qualified_name


class InMemoryFacade(ReflectionFacade):
    """A :class:`ReflectionFacade` over a parsed :class:`Declarations` model.

    Well-known JDK types are preloaded unless *include_jdk* is False; a class of
    the declarations file with the same name replaces the preloaded one.
    """

    def __init__(self, declarations: Declarations, *, include_jdk: bool = True) -> None:
        self._types: dict[str, Declaration] = {}
        if include_jdk:
            for name, (kind, supertypes) in JDK_TYPES.items():
                self._types[name] = Declaration(
                    kind=ElementKind(kind),
                    name=_simple_name(name),
                    qualified_name=name,
                    namespace=_default_namespace(name),
                    modifiers=frozenset({Modifier.PUBLIC}),
                    supertypes=[PlainTypeRef(name=s) for s in supertypes],
                )
        self._classes: list[Declaration] = []
        for class_decl in declarations.classes:
            handle = _build_class(class_decl)
            self._types[handle.qualified_name] = handle
            self._classes.append(handle)

    @classmethod
    def from_file(cls, path: Path, *, include_jdk: bool = True) -> InMemoryFacade:
        """Load a declarations file and build a facade over it."""
        return cls(load_declarations(path), include_jdk=include_jdk)

    @property
    def classes(self) -> list[Declaration]:
        """Classes of the declarations file, in file order."""
        return list(self._classes)

    def kind_of(self, element: Element) -> ElementKind:
        return _handle(element).kind

    def simple_name_of(self, element: Element) -> str:
        return _handle(element).name

    def qualified_name_of(self, element: Element) -> str:
        return _handle(element).qualified_name

    def modifiers_of(self, element: Element) -> frozenset[Modifier]:
        return _handle(element).modifiers

    def enclosed_members_of(self, element: Element) -> Sequence[Element]:
        return list(_handle(element).members)

    def parameters_of(self, element: Element) -> Sequence[Element]:
        return list(_handle(element).parameters)

    def type_of(self, element: Element) -> SourceTypeRef:
        handle = _handle(element)
        if handle.type is None:
            return PlainTypeRef(name=handle.qualified_name)
        return handle.type

    def annotations_of(self, element: Element) -> Sequence[AnnotationMirror]:
        return list(_handle(element).annotations)

    def enclosing_namespace_of(self, element: Element) -> str:
        return _handle(element).namespace

    def type_element(self, qualified_name: str) -> Element | None:
        return self._types.get(qualified_name)

    def supertypes_of(self, element: Element) -> Sequence[SourceTypeRef]:
        return list(_handle(element).supertypes)


class InMemoryRoundEnvironment(RoundEnvironment):
    """Round environment listing the annotated declarations of an :class:`InMemoryFacade`."""

    def __init__(self, facade: InMemoryFacade) -> None:
        self._facade = facade

    def elements_annotated_with(self, kind: str) -> Sequence[Element]:
        found: list[Element] = []
        for handle in self._facade.classes:
            for element in _walk(handle):
                if any(a.kind == kind for a in element.annotations):
                    found.append(element)
        return found


# ################
# Implementation
# ################


def _handle(element: Element) -> Declaration:
    if not isinstance(element, Declaration):
        raise TypeError(f"Not a declaration of the in-memory host: {element!r}")
    return element


def _simple_name(qualified_name: str) -> str:
    return qualified_name.rsplit(".", 1)[-1]


def _default_namespace(qualified_name: str) -> str:
    """Return the leading lower-case segments of a qualified name."""
    segments: list[str] = []
    for segment in qualified_name.split(".")[:-1]:
        if segment[:1].isupper():
            break
        segments.append(segment)
    return ".".join(segments)


def _walk(handle: Declaration) -> list[Declaration]:
    """Return *handle* followed by its members and their parameters, depth first."""
    result = [handle]
    for member in handle.members:
        result.append(member)
        result.extend(member.parameters)
    return result


def _build_class(decl: ClassDecl) -> Declaration:
    namespace = decl.namespace if decl.namespace is not None else _default_namespace(decl.name)
    handle = Declaration(
        kind=ElementKind(decl.kind),
        name=_simple_name(decl.name),
        qualified_name=decl.name,
        namespace=namespace,
        modifiers=frozenset(decl.modifiers),
        annotations=tuple(decl.annotations),
        supertypes=list(decl.supertypes),
    )
    handle.members.extend(_build_field(f, namespace) for f in decl.fields)
    handle.members.extend(_build_constructor(c, handle) for c in decl.constructors)
    handle.members.extend(_build_method(m, namespace) for m in decl.methods)
    return handle


def _build_field(decl: FieldDecl, namespace: str) -> Declaration:
    return Declaration(
        kind=ElementKind.FIELD,
        name=decl.name,
        qualified_name=decl.name,
        namespace=namespace,
        modifiers=frozenset(decl.modifiers),
        annotations=tuple(decl.annotations),
        type=decl.type,
    )


def _build_parameter(decl: ParameterDecl, namespace: str) -> Declaration:
    return Declaration(
        kind=ElementKind.PARAMETER,
        name=decl.name,
        qualified_name=decl.name,
        namespace=namespace,
        modifiers=frozenset(decl.modifiers),
        annotations=tuple(decl.annotations),
        type=decl.type,
    )


def _build_constructor(decl: ConstructorDecl, owner: Declaration) -> Declaration:
    return Declaration(
        kind=ElementKind.CONSTRUCTOR,
        name="<init>",
        qualified_name="<init>",
        namespace=owner.namespace,
        modifiers=frozenset(decl.modifiers),
        annotations=tuple(decl.annotations),
        type=PlainTypeRef(name=owner.qualified_name),
        parameters=[_build_parameter(p, owner.namespace) for p in decl.parameters],
    )


def _build_method(decl: MethodDecl, namespace: str) -> Declaration:
    return Declaration(
        kind=ElementKind.METHOD,
        name=decl.name,
        qualified_name=decl.name,
        namespace=namespace,
        modifiers=frozenset(decl.modifiers),
        annotations=tuple(decl.annotations),
        type=decl.return_type,
        parameters=[_build_parameter(p, namespace) for p in decl.parameters],
    )

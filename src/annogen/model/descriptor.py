# Copyright 2026 Annogen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type descriptor: one reflected type occurrence with derived queries."""

from __future__ import annotations

from annogen.model.context import COLLECTION_ANCHOR, MAP_ANCHOR, ModelContext
from annogen.model.types import ParameterizedTypeRef, SourceTypeRef, TargetType, erased_name
from annogen.reflection.facade import Element, ReflectionFacade

# ###############
# Public Interface
# ###############


class ReflectedType:
    """Wraps a source type reference.

    Exposes its translation, collection and map predicates, and positional
    access to nested type arguments.
    """

    __slots__ = ("_context", "_type_ref")

    def __init__(self, context: ModelContext, type_ref: SourceTypeRef) -> None:
        self._context = context
        self._type_ref = type_ref

    @property
    def source(self) -> SourceTypeRef:
        """The wrapped source type reference."""
        return self._type_ref

    @property
    def shape(self) -> str:
        """The shape discriminator: ``plain``, ``parameterized``, ``wildcard`` or ``array``."""
        return self._type_ref.kind

    @property
    def type(self) -> TargetType:
        """The translated target type."""
        return self._context.translator.translate(self._type_ref)

    @property
    def declaration(self) -> Element | None:
        """The declaration this type resolves to, if it is a known declared type."""
        return self._context.facade.declaration_of(self._type_ref)

    @property
    def is_collection(self) -> bool:
        """True if the erased type is assignable to ``java.util.Collection``."""
        return is_assignable(self._context.facade, self._type_ref, COLLECTION_ANCHOR)

    @property
    def is_map(self) -> bool:
        """True if the erased type is assignable to ``java.util.Map``."""
        return is_assignable(self._context.facade, self._type_ref, MAP_ANCHOR)

    def type_argument_ref(self, index: int = 0) -> SourceTypeRef | None:
        """Return the raw type argument at *index*, or None if absent or not parameterized."""
        return type_argument_ref(self._type_ref, index)

    def type_argument(self, index: int = 0) -> ReflectedType | None:
        """Return the type argument at *index* as a descriptor, if any."""
        argument = self.type_argument_ref(index)
        if argument is None:
            return None
        return ReflectedType(self._context, argument)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ReflectedType):
            return NotImplemented
        return self._type_ref == other._type_ref

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ReflectedType({self._type_ref!r})"


def type_argument_ref(type_ref: SourceTypeRef, index: int = 0) -> SourceTypeRef | None:
    """Return the argument at *index* of a parameterized type, None for other shapes."""
    if not isinstance(type_ref, ParameterizedTypeRef):
        return None
    if 0 <= index < len(type_ref.arguments):
        return type_ref.arguments[index]
    return None


def is_assignable(facade: ReflectionFacade, type_ref: SourceTypeRef, anchor: str) -> bool:
    """Return True if the erasure of *type_ref* is a nominal subtype of *anchor*.

    Only declared types (plain or parameterized) can be assignable; arrays and
    wildcards never are. Supertype edges come from the facade, so types the
    host does not know are assignable only to themselves.
    """
    name = erased_name(type_ref)
    if name is None:
        return False
    seen: set[str] = set()
    pending = [name]
    while pending:
        current = pending.pop()
        if current == anchor:
            return True
        if current in seen:
            continue
        seen.add(current)
        declaration = facade.type_element(current)
        if declaration is None:
            continue
        for supertype in facade.supertypes_of(declaration):
            supertype_name = erased_name(supertype)
            if supertype_name is not None:
                pending.append(supertype_name)
    return False

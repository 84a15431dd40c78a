# Copyright 2026 Annogen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Translation of reflected source types into target type names.

The translator is a recursive structural mapping over the four source type
shapes:

* **Plain** - renamed through the renaming table, or passed through unchanged.
* **Parameterized** - raw name renamed as Plain, arguments translated in order.
  ``Array<Byte>`` collapses to the specialised ``ByteArray``.
* **Wildcard** - the bound is translated and wrapped in a producer (``out``)
  or consumer (``in``) projection. Producer bounds become nullable.
* **Array** - translated as a single-argument ``kotlin.Array``.

Every declared-type occurrence then receives the nullability overlay: it is
nullable when a nullability marker annotates the occurrence itself or, failing
that, the declaration the occurrence resolves to.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence

from annogen.model.types import (
    AnnotationMirror,
    ArrayTypeRef,
    ParameterizedTypeRef,
    PlainTypeRef,
    SourceTypeRef,
    TargetType,
    TargetTypeName,
    Variance,
    WildcardTargetType,
    WildcardTypeRef,
)
from annogen.reflection.facade import Element, ReflectionFacade
from annogen.translation.renaming import (
    DEFAULT_RENAMING,
    TARGET_ARRAY,
    TARGET_BYTE,
    TARGET_BYTE_ARRAY,
)

# ###############
# Public Interface
# ###############

NULLABLE_ANNOTATION = "org.jetbrains.annotations.Nullable"

DebugHook = Callable[[Callable[[], object]], None]


class StructuralMismatchError(Exception):
    """Raised when a source type does not have the structure its shape requires.

    The host is expected never to produce such types; the error aborts the one
    translation call that encountered it.
    """


class TypeTranslator:
    """Maps source type references to target type descriptors.

    Args:
        facade: Reflection facade used to resolve declarations for the
            nullability overlay.
        renaming: Source-name to target-name table. Defaults to
            :data:`~annogen.translation.renaming.DEFAULT_RENAMING`.
        nullable_annotations: Qualified names of the nullability markers.
        debug: Optional lazy trace hook; receives a zero-argument callable
            producing the message.
    """

    def __init__(
        self,
        facade: ReflectionFacade,
        *,
        renaming: Mapping[str, str] | None = None,
        nullable_annotations: Iterable[str] | None = None,
        debug: DebugHook | None = None,
    ) -> None:
        self._facade = facade
        self._renaming = renaming if renaming is not None else DEFAULT_RENAMING
        self._nullable_annotations = frozenset(
            nullable_annotations if nullable_annotations is not None else (NULLABLE_ANNOTATION,)
        )
        self._debug = debug

    @property
    def nullable_annotations(self) -> frozenset[str]:
        return self._nullable_annotations

    def translate(self, type_ref: SourceTypeRef) -> TargetType:
        """Translate one source type occurrence.

        Raises:
            StructuralMismatchError: If a wildcard carries no bound or the
                reference is not one of the known shapes.
        """
        if isinstance(type_ref, WildcardTypeRef):
            return self._translate_wildcard(type_ref)
        target = self._translate_declared(type_ref)
        if self.is_nullable(type_ref):
            target = target.with_nullable()
        self._trace(lambda: f"{_describe(type_ref)} -> {target}")
        return target

    def translate_element(self, element: Element) -> TargetType:
        """Translate the declared type of a field, parameter or method."""
        return self.translate(self._facade.type_of(element))

    def rename(self, name: str) -> str:
        """Return the target name for a source name, or *name* when unmapped."""
        return self._renaming.get(name, name)

    def is_nullable(self, type_ref: SourceTypeRef) -> bool:
        """Return True if a nullability marker applies to this occurrence."""
        if self.has_nullable_marker(self._facade.type_annotations_of(type_ref)):
            return True
        declaration = self._facade.declaration_of(type_ref)
        if declaration is None:
            return False
        return self.has_nullable_marker(self._facade.annotations_of(declaration))

    def has_nullable_marker(self, annotations: Iterable[AnnotationMirror]) -> bool:
        """Return True if any of *annotations* is a nullability marker."""
        return any(a.kind in self._nullable_annotations for a in annotations)

    # ################
    # Implementation
    # ################

    def _translate_declared(self, type_ref: SourceTypeRef) -> TargetTypeName:
        if isinstance(type_ref, PlainTypeRef):
            return TargetTypeName(name=self.rename(type_ref.name))
        if isinstance(type_ref, ParameterizedTypeRef):
            return self._translate_parameterized(self.rename(type_ref.name), type_ref.arguments)
        if isinstance(type_ref, ArrayTypeRef):
            return self._translate_parameterized(TARGET_ARRAY, [type_ref.component_type])
        raise StructuralMismatchError(f"Unsupported source type shape: {type_ref!r}")

    def _translate_parameterized(self, raw_name: str, arguments: Sequence[SourceTypeRef]) -> TargetTypeName:
        translated = tuple(self.translate(argument) for argument in arguments)
        if raw_name == TARGET_ARRAY and len(translated) == 1 and _is_plain_byte(translated[0]):
            return TargetTypeName(name=TARGET_BYTE_ARRAY)
        return TargetTypeName(name=raw_name, arguments=translated)

    def _translate_wildcard(self, type_ref: WildcardTypeRef) -> WildcardTargetType:
        if type_ref.bound is None:
            raise StructuralMismatchError(f"Wildcard ({type_ref.variance.value}) has no bound")
        bound = self.translate(type_ref.bound)
        if isinstance(bound, WildcardTargetType):
            raise StructuralMismatchError("Wildcard bound must not itself be a wildcard")
        if type_ref.variance is Variance.PRODUCER:
            self._trace(lambda: f"out: {bound}")
            return WildcardTargetType(variance=Variance.PRODUCER, bound=bound.with_nullable())
        self._trace(lambda: f"in: {bound}")
        return WildcardTargetType(variance=Variance.CONSUMER, bound=bound)

    def _trace(self, message: Callable[[], object]) -> None:
        if self._debug is not None:
            self._debug(message)


def _is_plain_byte(target: TargetType) -> bool:
    return isinstance(target, TargetTypeName) and target.name == TARGET_BYTE and not target.nullable


def _describe(type_ref: SourceTypeRef) -> str:
    if isinstance(type_ref, ArrayTypeRef):
        return f"{_describe(type_ref.component_type)}[]"
    if isinstance(type_ref, ParameterizedTypeRef):
        return f"{type_ref.name}<{', '.join(_describe(a) for a in type_ref.arguments)}>"
    if isinstance(type_ref, WildcardTypeRef):
        keyword = "extends" if type_ref.variance is Variance.PRODUCER else "super"
        bound = _describe(type_ref.bound) if type_ref.bound is not None else "<none>"
        return f"? {keyword} {bound}"
    return type_ref.name

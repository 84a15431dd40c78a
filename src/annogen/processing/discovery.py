# Copyright 2026 Annogen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Discovery of annotated classes for one processing round.

Classes are found two ways:

* **Direct** - every type declaration carrying the direct annotation. Its
  ``internal`` attribute (default ``False``) becomes the provenance flag.
* **Registry** - every class listed in the ``value`` attribute of a registry
  annotation, wherever that annotation appears. The registry annotation's own
  ``internal`` attribute applies to every listed class.

Direct classes are inserted first, then registry classes; a declaration found
more than once keeps its first entry, so direct discovery wins over registry
discovery when the two disagree on the provenance flag.
"""

from __future__ import annotations

from collections.abc import Callable

from annogen.model.context import ModelContext
from annogen.model.entities import AnnotatedClass, AnnotatedClassSet
from annogen.model.types import AnnotationMirror
from annogen.processing.diagnostics import Messager
from annogen.reflection.facade import Element, ElementKind, ReflectionFacade, RoundEnvironment

# ###############
# Public Interface
# ###############

INTERNAL_ATTRIBUTE = "internal"
VALUE_ATTRIBUTE = "value"

# Only type declarations become annotated classes.
TYPE_KINDS = frozenset({ElementKind.CLASS, ElementKind.INTERFACE, ElementKind.ENUM})


class DiscoveryError(Exception):
    """Raised when an annotation needed for discovery is missing or malformed."""


def discover(
    round_env: RoundEnvironment,
    direct_kind: str,
    registry_kind: str | None,
    context: ModelContext,
    messager: Messager | None = None,
    *,
    debug: Callable[[Callable[[], object]], None] | None = None,
) -> AnnotatedClassSet:
    """Collect the annotated classes of one round.

    Args:
        round_env: The round to inspect.
        direct_kind: Qualified name of the direct marker annotation.
        registry_kind: Qualified name of the registry annotation, or None to
            skip registry discovery.
        context: Model context used to wrap discovered declarations.
        messager: Receives the discovery summary when classes were found.
        debug: Optional lazy trace hook.

    Returns:
        The deduplicated set of annotated classes, direct ones first.

    Raises:
        DiscoveryError: If a registry annotation has no ``value`` attribute or
            lists a class the host cannot resolve.
    """
    direct = [
        AnnotatedClass(context, element, has_internal_modifier(context.facade, element, direct_kind))
        for element in round_env.elements_annotated_with(direct_kind)
        if context.facade.kind_of(element) in TYPE_KINDS
    ]
    registry = registry_classes(round_env, registry_kind, context) if registry_kind is not None else []

    if debug is not None:
        debug(lambda: registry)
        debug(lambda: direct)

    result = AnnotatedClassSet([*direct, *registry])
    if result.is_not_empty() and messager is not None:
        messager.info(f"Found {_simple_name(direct_kind)} classes: {result}")
    return result


def has_internal_modifier(facade: ReflectionFacade, element: Element, kind: str) -> bool:
    """Return the ``internal`` attribute of the *kind* annotation on *element* (False if unset).

    Raises:
        DiscoveryError: If *element* does not carry an annotation of *kind*.
    """
    return _internal_flag(_require_annotation(facade, element, kind))


def registry_classes(round_env: RoundEnvironment, registry_kind: str, context: ModelContext) -> list[AnnotatedClass]:
    """Return the classes listed by every registry annotation of the round, in listing order.

    Raises:
        DiscoveryError: If a registry annotation is malformed or lists an
            unknown class.
    """
    facade = context.facade
    result: list[AnnotatedClass] = []
    for element in round_env.elements_annotated_with(registry_kind):
        annotation = _require_annotation(facade, element, registry_kind)
        internal = _internal_flag(annotation)
        for class_name in _listed_classes(annotation, element):
            declaration = facade.type_element(class_name)
            if declaration is None:
                raise DiscoveryError(
                    f"{_simple_name(registry_kind)} on {element!r} lists unknown class '{class_name}'"
                )
            result.append(AnnotatedClass(context, declaration, internal))
    return result


# ################
# Implementation
# ################


def _simple_name(kind: str) -> str:
    return kind.rsplit(".", 1)[-1]


def _require_annotation(facade: ReflectionFacade, element: Element, kind: str) -> AnnotationMirror:
    annotation = facade.find_annotation(element, kind)
    if annotation is None:
        raise DiscoveryError(f"{element!r} is not annotated with {kind}")
    return annotation


def _internal_flag(annotation: AnnotationMirror) -> bool:
    value = annotation.values.get(INTERNAL_ATTRIBUTE)
    return value if isinstance(value, bool) else False


def _listed_classes(annotation: AnnotationMirror, element: Element) -> list[str]:
    if VALUE_ATTRIBUTE not in annotation.values:
        raise DiscoveryError(f"{annotation.simple_name} on {element!r} has no '{VALUE_ATTRIBUTE}' attribute")
    value = annotation.values[VALUE_ATTRIBUTE]
    # A single class reference may be written without the surrounding list.
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise DiscoveryError(
            f"{annotation.simple_name} on {element!r}: '{VALUE_ATTRIBUTE}' must list class names"
        )
    return value

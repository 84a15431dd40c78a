# Copyright 2026 Annogen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Base class for generators that turn annotated classes into source files.

A generator owns the collaborators of one run: the reflection facade, the
configuration, the translator, and the messager receiving diagnostics.
Subclasses implement :meth:`Generator.process` and use the helpers here to
discover classes, translate types and write files.
"""

from __future__ import annotations

import abc
import traceback
from collections.abc import Callable
from pathlib import Path

from annogen.model.context import COLLECTION_ANCHOR, DEFAULT_UNSUPPORTED_MODIFIERS, MAP_ANCHOR, ModelContext
from annogen.model.descriptor import ReflectedType, is_assignable, type_argument_ref
from annogen.model.entities import AnnotatedClass, AnnotatedClassSet
from annogen.model.types import ArrayTypeRef, SourceTypeRef, TargetType, TargetTypeName
from annogen.processing import discovery
from annogen.processing.config import GeneratorConfig
from annogen.processing.diagnostics import Messager
from annogen.reflection.facade import Element, Modifier, ReflectionFacade, RoundEnvironment
from annogen.translation.renaming import build_renaming
from annogen.translation.translator import TypeTranslator

# ###############
# Public Interface
# ###############


class GeneratorError(Exception):
    """Raised when a generator helper is asked about a type it cannot resolve."""


class Generator(abc.ABC):
    """Base class for annotation-driven generators.

    Subclasses may override :attr:`unsupported_modifiers`; a configuration
    that sets ``unsupported_modifiers`` takes precedence over the class value.
    """

    unsupported_modifiers: frozenset[Modifier] = DEFAULT_UNSUPPORTED_MODIFIERS

    def __init__(
        self,
        facade: ReflectionFacade,
        config: GeneratorConfig | None = None,
        messager: Messager | None = None,
    ) -> None:
        self.facade = facade
        self.config = config if config is not None else GeneratorConfig()
        self.messager = messager if messager is not None else Messager()
        if self.config.unsupported_modifiers is not None:
            self.unsupported_modifiers = self.config.unsupported_modifiers
        self.translator = TypeTranslator(
            facade,
            renaming=build_renaming(self.config.renaming),
            nullable_annotations=self.config.nullable_annotations,
            debug=self.debug,
        )
        # Same overlay rules, no renaming: renders source names.
        self._source_namer = TypeTranslator(
            facade,
            renaming={},
            nullable_annotations=self.config.nullable_annotations,
        )
        self.context = ModelContext(
            facade=facade,
            translator=self.translator,
            unsupported_modifiers=frozenset(self.unsupported_modifiers),
        )

    @abc.abstractmethod
    def process(self, round_env: RoundEnvironment) -> bool:
        """Process one round; return True if the round's annotations were claimed."""

    # -------- discovery --------

    def get_annotated_classes(
        self,
        round_env: RoundEnvironment,
        direct_kind: str,
        registry_kind: str | None = None,
    ) -> AnnotatedClassSet:
        """Return the classes annotated with *direct_kind* or listed by *registry_kind*."""
        return discovery.discover(
            round_env,
            direct_kind,
            registry_kind,
            self.context,
            self.messager,
            debug=self.debug,
        )

    def has_internal_modifier(self, element: Element, kind: str) -> bool:
        return discovery.has_internal_modifier(self.facade, element, kind)

    def get_registry_classes(self, round_env: RoundEnvironment, registry_kind: str) -> list[AnnotatedClass]:
        return discovery.registry_classes(round_env, registry_kind, self.context)

    def annotated_class(self, element: Element, internal: bool = False) -> AnnotatedClass:
        """Wrap a class declaration in this generator's model context."""
        return AnnotatedClass(self.context, element, internal)

    # -------- types --------

    def target_type(self, element: Element) -> TargetType:
        """Translate the declared type of a field, parameter or method."""
        return self.translator.translate_element(element)

    def target_type_of(self, type_ref: SourceTypeRef) -> TargetType:
        """Translate a source type reference."""
        return self.translator.translate(type_ref)

    def type_name_of(self, element: Element) -> TargetType:
        """Render the declared type of *element* with source names.

        The result is nullable when *element* itself carries a nullability marker.
        """
        type_name = self._source_namer.translate_element(element)
        if isinstance(type_name, TargetTypeName) and self._source_namer.has_nullable_marker(
            self.facade.annotations_of(element)
        ):
            return type_name.with_nullable()
        return type_name

    def type_name_of_type(self, type_ref: SourceTypeRef) -> TargetType:
        """Render a source type reference with source names and the nullability overlay."""
        return self._source_namer.translate(type_ref)

    def reflected_type(self, type_ref: SourceTypeRef) -> ReflectedType:
        return ReflectedType(self.context, type_ref)

    def is_collection(self, type_ref: SourceTypeRef) -> bool:
        """True if the type is a Collection."""
        return is_assignable(self.facade, type_ref, COLLECTION_ANCHOR)

    def is_map(self, type_ref: SourceTypeRef) -> bool:
        """True if the type is a Map."""
        return is_assignable(self.facade, type_ref, MAP_ANCHOR)

    def type_argument_declaration(self, element: Element, index: int = 0) -> Element | None:
        """Returns the declaration of the type argument at *index* of *element*'s type, if any."""
        argument = type_argument_ref(self.facade.type_of(element), index)
        return self.facade.declaration_of(argument) if argument is not None else None

    def type_argument_reflected(self, type_ref: SourceTypeRef, index: int = 0) -> ReflectedType | None:
        """Returns the type argument at *index* as a :class:`ReflectedType`, if any."""
        return self.reflected_type(type_ref).type_argument(index)

    def enclosed_collection_namespace(self, type_ref: SourceTypeRef) -> str:
        """Return the namespace of an array's component type or a collection's element type.

        Raises:
            GeneratorError: If the element type is missing or not a known declaration.
        """
        if isinstance(type_ref, ArrayTypeRef):
            element_type: SourceTypeRef | None = type_ref.component_type
        else:
            element_type = type_argument_ref(type_ref, 0)
        return self._namespace_of(element_type, "element")

    def enclosed_value_map_namespace(self, type_ref: SourceTypeRef) -> str:
        """Return the namespace of a map's value type.

        Raises:
            GeneratorError: If the value type is missing or not a known declaration.
        """
        return self._namespace_of(type_argument_ref(type_ref, 1), "map value")

    def map_key_type(self, type_ref: SourceTypeRef, annotated_map: bool) -> TargetType | None:
        """Return the source-named key type of a map when *annotated_map* is set, else None."""
        if not annotated_map:
            return None
        key = type_argument_ref(type_ref, 0)
        if key is None:
            raise GeneratorError("Map type has no key type argument")
        return self.type_name_of_type(key)

    # -------- diagnostics --------

    def debug(self, message: Callable[[], object]) -> None:
        """Log the value produced by *message* when debug is enabled; never evaluated otherwise."""
        if self.config.debug:
            self.log(message())

    def log(self, value: object) -> None:
        self.messager.info(str(value))

    def log_exception(self, exc: BaseException) -> None:
        """Report an exception with its traceback as an informational diagnostic."""
        self.messager.info(_format_exception(exc))

    def warn(self, value: object) -> None:
        self.messager.warning(str(value))

    def error(self, exc: BaseException) -> None:
        """Report an exception with its traceback as an error diagnostic."""
        self.messager.error(_format_exception(exc))

    # -------- output --------

    def write_file(
        self,
        output_directory: str,
        file: str,
        content: str,
        *,
        fail_on_error: bool = True,
    ) -> Path | None:
        """Write *content* to ``<config.output_directory>/<output_directory>/<file>``.

        Write failures are reported, never raised: as an error diagnostic, or
        as a warning when *fail_on_error* is False. Content that cannot be
        encoded is rejected before the file is created.

        Returns:
            The written path, or None if writing failed.
        """
        try:
            directory = Path(self.config.output_directory) / output_directory
            self.debug(lambda: directory)
            directory.mkdir(parents=True, exist_ok=True)
            output_path = directory / file
            self.debug(lambda: output_path)
            data = content.encode("utf-8")
            output_path.write_bytes(data)
        except (OSError, ValueError) as exc:
            self.log(f"Error writing {file} in {output_directory}:\n{content}")
            if fail_on_error:
                self.error(exc)
            else:
                self.warn(_format_exception(exc))
            return None
        return output_path

    # ################
    # Implementation
    # ################

    def _namespace_of(self, type_ref: SourceTypeRef | None, role: str) -> str:
        if type_ref is None:
            raise GeneratorError(f"Type has no {role} type")
        declaration = self.facade.declaration_of(type_ref)
        if declaration is None:
            raise GeneratorError(f"The {role} type {type_ref!r} is not a known declaration")
        return self.facade.enclosing_namespace_of(declaration)


def _format_exception(exc: BaseException) -> str:
    return "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))

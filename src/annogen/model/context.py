# Copyright 2026 Annogen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Shared collaborators of the annotated entity model."""

from __future__ import annotations

from dataclasses import dataclass

from annogen.reflection.facade import Modifier, ReflectionFacade
from annogen.translation.translator import TypeTranslator

# ###############
# Public Interface
# ###############

DEFAULT_UNSUPPORTED_MODIFIERS: frozenset[Modifier] = frozenset({Modifier.STATIC, Modifier.TRANSIENT})

COLLECTION_ANCHOR = "java.util.Collection"
MAP_ANCHOR = "java.util.Map"


@dataclass(frozen=True)
class ModelContext:
    """Everything classes, properties and type descriptors need to answer queries.

    Attributes:
        facade: The reflection facade of the current compilation.
        translator: Translator producing target types.
        unsupported_modifiers: Fields carrying any of these modifiers are never
            listed as properties.
    """

    facade: ReflectionFacade
    translator: TypeTranslator
    unsupported_modifiers: frozenset[Modifier] = DEFAULT_UNSUPPORTED_MODIFIERS

    @classmethod
    def for_facade(cls, facade: ReflectionFacade) -> ModelContext:
        """Build a context with a default translator over *facade*."""
        return cls(facade=facade, translator=TypeTranslator(facade))

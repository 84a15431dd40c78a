# Copyright 2026 Annogen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Reflection facade and the in-memory host used by tools and tests."""

from annogen.reflection.facade import (
    Element,
    ElementKind,
    Modifier,
    ReflectionFacade,
    RoundEnvironment,
)
from annogen.reflection.memory import Declaration, InMemoryFacade, InMemoryRoundEnvironment
from annogen.reflection.schema import (
    ClassDecl,
    ConstructorDecl,
    Declarations,
    DeclarationsError,
    FieldDecl,
    MethodDecl,
    ParameterDecl,
    load_declarations,
    parse_declarations,
)

__all__ = [
    # Facade
    "Element",
    "ElementKind",
    "Modifier",
    "ReflectionFacade",
    "RoundEnvironment",
    # In-memory host
    "Declaration",
    "InMemoryFacade",
    "InMemoryRoundEnvironment",
    # Declarations file
    "ClassDecl",
    "ConstructorDecl",
    "Declarations",
    "DeclarationsError",
    "FieldDecl",
    "MethodDecl",
    "ParameterDecl",
    "load_declarations",
    "parse_declarations",
]

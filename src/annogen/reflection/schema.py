# Copyright 2026 Annogen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Declarations file model: a YAML description of the classes visible to a round."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from annogen.model.types import AnnotationMirror, PlainTypeRef, SourceTypeRef
from annogen.reflection.facade import Modifier

# ###############
# Public Interface
# ###############


class DeclarationsError(Exception):
    """Raised when a declarations file cannot be read or does not match the schema."""


class ParameterDecl(BaseModel):
    """A method or constructor parameter."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    name: str
    type: SourceTypeRef
    modifiers: list[Modifier] = Field(default_factory=list)
    annotations: list[AnnotationMirror] = Field(default_factory=list)


class FieldDecl(BaseModel):
    """A field of a class."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    name: str
    type: SourceTypeRef
    modifiers: list[Modifier] = Field(default_factory=list)
    annotations: list[AnnotationMirror] = Field(default_factory=list)


class MethodDecl(BaseModel):
    """A method of a class."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    name: str
    return_type: SourceTypeRef = Field(alias="return-type", default_factory=lambda: PlainTypeRef(name="void"))
    parameters: list[ParameterDecl] = Field(default_factory=list)
    modifiers: list[Modifier] = Field(default_factory=list)
    annotations: list[AnnotationMirror] = Field(default_factory=list)


class ConstructorDecl(BaseModel):
    """A constructor of a class."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    parameters: list[ParameterDecl] = Field(default_factory=list)
    modifiers: list[Modifier] = Field(default_factory=list)
    annotations: list[AnnotationMirror] = Field(default_factory=list)


class ClassDecl(BaseModel):
    """A class, interface or enum declaration.

    ``name`` is the qualified name. ``namespace`` defaults to the leading
    lower-case segments of ``name`` (``com.example.Outer.Inner`` lives in
    ``com.example``).
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    name: str
    kind: Literal["class", "interface", "enum"] = "class"
    namespace: str | None = None
    modifiers: list[Modifier] = Field(default_factory=list)
    annotations: list[AnnotationMirror] = Field(default_factory=list)
    supertypes: list[SourceTypeRef] = Field(default_factory=list)
    fields: list[FieldDecl] = Field(default_factory=list)
    constructors: list[ConstructorDecl] = Field(default_factory=list)
    methods: list[MethodDecl] = Field(default_factory=list)


class Declarations(BaseModel):
    """Top-level model of a declarations file."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    classes: list[ClassDecl] = Field(default_factory=list)


def load_declarations(path: Path) -> Declarations:
    """Load and validate a declarations file.

    Args:
        path: Path to the YAML declarations file.

    Returns:
        A validated Declarations instance. An empty file yields no classes.

    Raises:
        DeclarationsError: If the file cannot be read, contains invalid YAML,
            or does not conform to the schema.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise DeclarationsError(f"Cannot read declarations file '{path}': {exc}") from exc

    return parse_declarations(raw, source_label=str(path))


def parse_declarations(text: str, source_label: str = "<string>") -> Declarations:
    """Parse declarations YAML text.

    Raises:
        DeclarationsError: If the YAML is invalid or does not match the schema.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise DeclarationsError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        data = {}

    try:
        return Declarations.model_validate(data)
    except ValidationError as exc:
        raise DeclarationsError(f"Invalid declarations in {source_label}: {exc}") from exc

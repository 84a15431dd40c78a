# Copyright 2026 Annogen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type representations for the source (reflected) and target type systems."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class Variance(Enum):
    """Variance of a wildcard type."""

    PRODUCER = "producer"
    CONSUMER = "consumer"


class AnnotationMirror(BaseModel):
    """An annotation occurrence: its qualified kind and its attribute values."""

    kind: str
    values: dict[str, Any] = _Field(default_factory=dict)

    @property
    def simple_name(self) -> str:
        return self.kind.rsplit(".", 1)[-1]


class PlainTypeRef(BaseModel):
    """Reference to a named type without type arguments (including primitives)."""

    kind: Literal["plain"] = "plain"
    name: str
    annotations: list[AnnotationMirror] = _Field(default_factory=list)


class ParameterizedTypeRef(BaseModel):
    """Reference to a generic type applied to an ordered list of arguments."""

    kind: Literal["parameterized"] = "parameterized"
    name: str
    arguments: list[SourceTypeRef] = _Field(default_factory=list)
    annotations: list[AnnotationMirror] = _Field(default_factory=list)


class WildcardTypeRef(BaseModel):
    """Reference to a wildcard: ``? extends bound`` or ``? super bound``.

    The bound is optional only so that malformed host data can be represented;
    translating a wildcard without a bound is an error.
    """

    kind: Literal["wildcard"] = "wildcard"
    variance: Variance
    bound: SourceTypeRef | None = None
    annotations: list[AnnotationMirror] = _Field(default_factory=list)


class ArrayTypeRef(BaseModel):
    """Reference to an array of a component type."""

    kind: Literal["array"] = "array"
    component_type: SourceTypeRef
    annotations: list[AnnotationMirror] = _Field(default_factory=list)


# A reflected type occurrence. The `kind` discriminator selects the shape.
SourceTypeRef = Annotated[
    PlainTypeRef | ParameterizedTypeRef | WildcardTypeRef | ArrayTypeRef,
    _Field(discriminator="kind"),
]


class TargetTypeName(BaseModel):
    """A named type of the target type system, possibly generic and nullable."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["class"] = "class"
    name: str
    arguments: tuple[TargetType, ...] = ()
    nullable: bool = False

    @property
    def simple_name(self) -> str:
        return self.name.rsplit(".", 1)[-1]

    @property
    def package_name(self) -> str:
        return self.name.rpartition(".")[0]

    def with_nullable(self, nullable: bool = True) -> TargetTypeName:
        """Return a copy with the nullability flag set to *nullable*."""
        if self.nullable == nullable:
            return self
        return self.model_copy(update={"nullable": nullable})

    def __str__(self) -> str:
        text = self.name
        if self.arguments:
            text += "<" + ", ".join(str(a) for a in self.arguments) + ">"
        return text + "?" if self.nullable else text


class WildcardTargetType(BaseModel):
    """A use-site variance projection of the target type system (``out T`` / ``in T``)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["wildcard"] = "wildcard"
    variance: Variance
    bound: TargetType

    def __str__(self) -> str:
        keyword = "out" if self.variance is Variance.PRODUCER else "in"
        return f"{keyword} {self.bound}"


# A translated type. Nullability lives on TargetTypeName, never in the name.
TargetType = Annotated[
    TargetTypeName | WildcardTargetType,
    _Field(discriminator="kind"),
]


def erased_name(type_ref: SourceTypeRef) -> str | None:
    """Return the raw type name of a declared type, or None for arrays and wildcards."""
    if isinstance(type_ref, (PlainTypeRef, ParameterizedTypeRef)):
        return type_ref.name
    return None


# Resolve forward references for self-referential models.
ParameterizedTypeRef.model_rebuild()
WildcardTypeRef.model_rebuild()
ArrayTypeRef.model_rebuild()
TargetTypeName.model_rebuild()
WildcardTargetType.model_rebuild()

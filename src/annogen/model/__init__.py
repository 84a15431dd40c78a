# Copyright 2026 Annogen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type model shared by the reflection facade, the translator and the entity model.

The annotated entity model lives in :mod:`annogen.model.entities` and
:mod:`annogen.model.descriptor`; it is not re-exported here because it depends
on the reflection facade, which itself depends on this type model.
"""

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
    erased_name,
)

__all__ = [
    # Source type system
    "AnnotationMirror",
    "PlainTypeRef",
    "ParameterizedTypeRef",
    "WildcardTypeRef",
    "ArrayTypeRef",
    "SourceTypeRef",
    "Variance",
    "erased_name",
    # Target type system
    "TargetTypeName",
    "WildcardTargetType",
    "TargetType",
]

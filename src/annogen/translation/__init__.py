# Copyright 2026 Annogen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Source-to-target type translation."""

from annogen.translation.renaming import (
    DEFAULT_RENAMING,
    TARGET_ARRAY,
    TARGET_BYTE,
    TARGET_BYTE_ARRAY,
    build_renaming,
)
from annogen.translation.translator import NULLABLE_ANNOTATION, StructuralMismatchError, TypeTranslator

__all__ = [
    "DEFAULT_RENAMING",
    "NULLABLE_ANNOTATION",
    "StructuralMismatchError",
    "TARGET_ARRAY",
    "TARGET_BYTE",
    "TARGET_BYTE_ARRAY",
    "TypeTranslator",
    "build_renaming",
]

# Copyright 2026 Annogen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Standard-library renaming table from source type names to target type names.

Collection interfaces map to their read-only target counterparts. Names absent
from the table are assumed to be valid target identifiers already.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

# ###############
# Public Interface
# ###############

TARGET_ARRAY = "kotlin.Array"
TARGET_BYTE = "kotlin.Byte"
TARGET_BYTE_ARRAY = "kotlin.ByteArray"

_PRIMITIVES = {
    "boolean": "kotlin.Boolean",
    "byte": TARGET_BYTE,
    "short": "kotlin.Short",
    "int": "kotlin.Int",
    "long": "kotlin.Long",
    "char": "kotlin.Char",
    "float": "kotlin.Float",
    "double": "kotlin.Double",
    "void": "kotlin.Unit",
}

_JAVA_LANG = {
    "java.lang.Object": "kotlin.Any",
    "java.lang.String": "kotlin.String",
    "java.lang.CharSequence": "kotlin.CharSequence",
    "java.lang.Throwable": "kotlin.Throwable",
    "java.lang.Cloneable": "kotlin.Cloneable",
    "java.lang.Number": "kotlin.Number",
    "java.lang.Comparable": "kotlin.Comparable",
    "java.lang.Enum": "kotlin.Enum",
    "java.lang.annotation.Annotation": "kotlin.Annotation",
    "java.lang.Deprecated": "kotlin.Deprecated",
    "java.lang.Boolean": "kotlin.Boolean",
    "java.lang.Byte": TARGET_BYTE,
    "java.lang.Short": "kotlin.Short",
    "java.lang.Integer": "kotlin.Int",
    "java.lang.Long": "kotlin.Long",
    "java.lang.Character": "kotlin.Char",
    "java.lang.Float": "kotlin.Float",
    "java.lang.Double": "kotlin.Double",
    "java.lang.Void": "kotlin.Unit",
    "java.lang.Iterable": "kotlin.collections.Iterable",
}

_JAVA_UTIL = {
    "java.util.Iterator": "kotlin.collections.Iterator",
    "java.util.ListIterator": "kotlin.collections.ListIterator",
    "java.util.Collection": "kotlin.collections.Collection",
    "java.util.List": "kotlin.collections.List",
    "java.util.Set": "kotlin.collections.Set",
    "java.util.Map": "kotlin.collections.Map",
    "java.util.Map.Entry": "kotlin.collections.Map.Entry",
}

DEFAULT_RENAMING: Mapping[str, str] = MappingProxyType({**_PRIMITIVES, **_JAVA_LANG, **_JAVA_UTIL})


def build_renaming(extra: Mapping[str, str] | None = None) -> Mapping[str, str]:
    """Return the default table with *extra* entries layered on top."""
    if not extra:
        return DEFAULT_RENAMING
    return MappingProxyType({**DEFAULT_RENAMING, **extra})

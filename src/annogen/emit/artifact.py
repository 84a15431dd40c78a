# Copyright 2026 Annogen Contributors
# SPDX-License-Identifier: Apache-2.0

"""JSON class-model artifacts.

An artifact records what a code emitter needs for one annotated class: its
namespace, provenance, and per property the translated type, collection and
map predicates, and the access strategy. The format is versioned so future
schema changes can be detected.
"""

from __future__ import annotations

import json
from typing import Any

from annogen.model.entities import AnnotatedClass, AnnotatedProperty
from annogen.model.types import TargetType, TargetTypeName, Variance, WildcardTargetType

# ###############
# Public Interface
# ###############

MODEL_FORMAT_VERSION = "1"
MODEL_SUFFIX = ".model.json"

ACCESS_ACCESSOR = "accessor"
ACCESS_DIRECT = "direct"


def serialize_class(annotated: AnnotatedClass) -> str:
    """Serialize the model of *annotated* to a compact JSON string."""
    return json.dumps(class_to_dict(annotated), separators=(",", ":"))


def deserialize_class(data: str) -> dict[str, Any]:
    """Decode a class-model artifact, turning encoded types back into target types.

    Raises:
        ValueError: If the artifact format version is not recognised.
    """
    obj = json.loads(data)
    version = obj.get("v")
    if version != MODEL_FORMAT_VERSION:
        raise ValueError(f"Unsupported model format version: {version!r}")
    for prop in obj.get("properties", []):
        prop["type"] = target_type_from_dict(prop["type"])
    return obj


def class_to_dict(annotated: AnnotatedClass) -> dict[str, Any]:
    return {
        "v": MODEL_FORMAT_VERSION,
        "name": annotated.qualified_name,
        "namespace": annotated.namespace,
        "internal": annotated.internal,
        "properties": [property_to_dict(p) for p in annotated.properties()],
    }


def property_to_dict(prop: AnnotatedProperty) -> dict[str, Any]:
    return {
        "name": prop.name,
        "type": target_type_to_dict(prop.type),
        "collection": prop.is_collection,
        "map": prop.is_map,
        "access": prop.reference(lambda: ACCESS_ACCESSOR, lambda: ACCESS_DIRECT),
        "getter": prop.getter is not None,
        "parameter": prop.parameter is not None,
    }


def target_type_to_dict(target: TargetType) -> dict[str, Any]:
    """Encode a TargetType as a tagged dict with compact keys."""
    if isinstance(target, WildcardTargetType):
        return {"k": "wildcard", "v": target.variance.value, "b": target_type_to_dict(target.bound)}
    assert isinstance(target, TargetTypeName)
    d: dict[str, Any] = {"k": "class", "n": target.name}
    if target.arguments:
        d["a"] = [target_type_to_dict(a) for a in target.arguments]
    if target.nullable:
        d["null"] = True
    return d


def target_type_from_dict(obj: dict[str, Any]) -> TargetType:
    """Decode a TargetType from a tagged dict."""
    kind = obj["k"]
    if kind == "class":
        return TargetTypeName(
            name=obj["n"],
            arguments=tuple(target_type_from_dict(a) for a in obj.get("a", [])),
            nullable=obj.get("null", False),
        )
    if kind == "wildcard":
        return WildcardTargetType(variance=Variance(obj["v"]), bound=target_type_from_dict(obj["b"]))
    raise ValueError(f"Unknown target type kind: {kind!r}")

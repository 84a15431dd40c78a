# Copyright 2026 Annogen Contributors
# SPDX-License-Identifier: Apache-2.0

"""JSON class-model artifacts and the generator that writes them."""

from annogen.emit.artifact import (
    MODEL_FORMAT_VERSION,
    MODEL_SUFFIX,
    class_to_dict,
    deserialize_class,
    serialize_class,
    target_type_from_dict,
    target_type_to_dict,
)
from annogen.emit.dump import ModelDumpGenerator

__all__ = [
    "MODEL_FORMAT_VERSION",
    "MODEL_SUFFIX",
    "ModelDumpGenerator",
    "class_to_dict",
    "deserialize_class",
    "serialize_class",
    "target_type_from_dict",
    "target_type_to_dict",
]

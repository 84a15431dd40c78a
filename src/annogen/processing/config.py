# Copyright 2026 Annogen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the generator configuration file."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from annogen.reflection.facade import Modifier
from annogen.translation.translator import NULLABLE_ANNOTATION

# ###############
# Public Interface
# ###############

DEBUG_ENV_VAR = "ANNOGEN_DEBUG"

DEFAULT_OUTPUT_DIRECTORY = "build/generated"


class GeneratorConfigError(Exception):
    """Raised when a generator configuration file is invalid or cannot be loaded."""


@dataclass(frozen=True)
class GeneratorConfig:
    """Configuration of one generator run, fixed before the first round.

    Attributes:
        debug: Emit verbose trace diagnostics.
        output_directory: Root directory for generated files.
        unsupported_modifiers: Modifiers that exclude a field from the
            property list; None keeps the generator's own default.
        nullable_annotations: Qualified names of nullability markers.
        renaming: Extra source-name to target-name entries layered over the
            standard renaming table.
    """

    debug: bool = False
    output_directory: str = DEFAULT_OUTPUT_DIRECTORY
    unsupported_modifiers: frozenset[Modifier] | None = None
    nullable_annotations: tuple[str, ...] = (NULLABLE_ANNOTATION,)
    renaming: Mapping[str, str] = field(default_factory=dict)


def debug_from_environment(environ: Mapping[str, str] | None = None) -> bool:
    """Return True if the ``ANNOGEN_DEBUG`` environment variable is ``"true"``."""
    env = os.environ if environ is None else environ
    return env.get(DEBUG_ENV_VAR) == "true"


def load_generator_config(path: Path, environ: Mapping[str, str] | None = None) -> GeneratorConfig:
    """Load and parse a generator configuration file.

    Args:
        path: Path to the YAML configuration file.
        environ: Environment used to seed the debug flag when the file does
            not set ``debug``. Defaults to the process environment.

    Returns:
        A GeneratorConfig instance populated from the file.

    Raises:
        GeneratorConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise GeneratorConfigError(f"Generator config file not found: {path}") from None
    except OSError as exc:
        raise GeneratorConfigError(f"Cannot read generator config file: {exc}") from exc

    return parse_generator_config(text, source_label=str(path), environ=environ)


def parse_generator_config(
    text: str,
    source_label: str = "<string>",
    environ: Mapping[str, str] | None = None,
) -> GeneratorConfig:
    """Parse generator config YAML text into a GeneratorConfig.

    Raises:
        GeneratorConfigError: If the YAML is invalid or a field has the wrong type.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise GeneratorConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise GeneratorConfigError(f"{source_label}: generator config must be a YAML mapping")

    if "debug" in data:
        debug = data["debug"]
        if not isinstance(debug, bool):
            raise GeneratorConfigError(f"{source_label}: 'debug' must be a boolean")
    else:
        debug = debug_from_environment(environ)

    output_directory = DEFAULT_OUTPUT_DIRECTORY
    if "output-directory" in data:
        output_directory = data["output-directory"]
        if not isinstance(output_directory, str):
            raise GeneratorConfigError(f"{source_label}: 'output-directory' must be a string")

    unsupported_modifiers = None
    if "unsupported-modifiers" in data:
        unsupported_modifiers = frozenset(
            _parse_modifier(value, source_label)
            for value in _require_string_list(data, "unsupported-modifiers", source_label)
        )

    nullable_annotations: tuple[str, ...] = (NULLABLE_ANNOTATION,)
    if "nullable-annotations" in data:
        nullable_annotations = tuple(_require_string_list(data, "nullable-annotations", source_label))

    renaming: dict[str, str] = {}
    if "renaming" in data:
        raw_renaming = data["renaming"]
        if not isinstance(raw_renaming, dict):
            raise GeneratorConfigError(f"{source_label}: 'renaming' must be a mapping")
        for source_name, target_name in raw_renaming.items():
            if not isinstance(source_name, str) or not isinstance(target_name, str):
                raise GeneratorConfigError(f"{source_label}: 'renaming' entries must map strings to strings")
            renaming[source_name] = target_name

    return GeneratorConfig(
        debug=debug,
        output_directory=output_directory,
        unsupported_modifiers=unsupported_modifiers,
        nullable_annotations=nullable_annotations,
        renaming=renaming,
    )


# ################
# Implementation
# ################


def _require_string_list(mapping: dict[str, object], key: str, source_label: str) -> list[str]:
    """Extract a list of strings, raising GeneratorConfigError on any other shape."""
    value = mapping[key]
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise GeneratorConfigError(f"{source_label}: '{key}' must be a list of strings")
    return value


def _parse_modifier(value: str, source_label: str) -> Modifier:
    try:
        return Modifier(value)
    except ValueError:
        raise GeneratorConfigError(f"{source_label}: unknown modifier '{value}'") from None

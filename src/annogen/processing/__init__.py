# Copyright 2026 Annogen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Round processing: configuration, diagnostics, discovery, and the generator base class."""

from annogen.processing.config import (
    DEBUG_ENV_VAR,
    GeneratorConfig,
    GeneratorConfigError,
    debug_from_environment,
    load_generator_config,
    parse_generator_config,
)
from annogen.processing.diagnostics import Diagnostic, Messager, Severity
from annogen.processing.discovery import DiscoveryError, discover, has_internal_modifier, registry_classes
from annogen.processing.generator import Generator, GeneratorError

__all__ = [
    # Configuration
    "DEBUG_ENV_VAR",
    "GeneratorConfig",
    "GeneratorConfigError",
    "debug_from_environment",
    "load_generator_config",
    "parse_generator_config",
    # Diagnostics
    "Diagnostic",
    "Messager",
    "Severity",
    # Discovery
    "DiscoveryError",
    "discover",
    "has_internal_modifier",
    "registry_classes",
    # Generator
    "Generator",
    "GeneratorError",
]

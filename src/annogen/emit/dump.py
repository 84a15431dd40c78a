# Copyright 2026 Annogen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Generator writing one JSON class-model artifact per discovered class."""

from __future__ import annotations

from pathlib import Path

from annogen.emit.artifact import MODEL_SUFFIX, serialize_class
from annogen.processing.config import GeneratorConfig
from annogen.processing.diagnostics import Messager
from annogen.processing.generator import Generator
from annogen.reflection.facade import ReflectionFacade, RoundEnvironment

# ###############
# Public Interface
# ###############


class ModelDumpGenerator(Generator):
    """Writes ``<namespace path>/<SimpleName>.model.json`` for each annotated class.

    Args:
        facade: Reflection facade of the compilation.
        direct_kind: Qualified name of the direct marker annotation.
        registry_kind: Qualified name of the registry annotation, if any.
        config: Generator configuration (output directory, debug, ...).
        messager: Receives diagnostics.
        fail_on_error: Report write failures as errors (True) or as
            informational diagnostics (False).
    """

    def __init__(
        self,
        facade: ReflectionFacade,
        direct_kind: str,
        registry_kind: str | None = None,
        config: GeneratorConfig | None = None,
        messager: Messager | None = None,
        *,
        fail_on_error: bool = True,
    ) -> None:
        super().__init__(facade, config, messager)
        self.direct_kind = direct_kind
        self.registry_kind = registry_kind
        self.fail_on_error = fail_on_error
        self.written: list[Path] = []

    def process(self, round_env: RoundEnvironment) -> bool:
        classes = self.get_annotated_classes(round_env, self.direct_kind, self.registry_kind)
        for annotated in classes:
            path = self.write_file(
                annotated.namespace.replace(".", "/"),
                annotated.simple_name + MODEL_SUFFIX,
                serialize_class(annotated),
                fail_on_error=self.fail_on_error,
            )
            if path is not None:
                self.written.append(path)
        return classes.is_not_empty()

# Copyright 2026 Annogen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the JSON model dump generator."""

from pathlib import Path

from annogen.emit.artifact import deserialize_class
from annogen.emit.dump import ModelDumpGenerator
from annogen.processing.config import GeneratorConfig
from annogen.reflection.memory import InMemoryFacade, InMemoryRoundEnvironment
from annogen.reflection.schema import parse_declarations

# ###############
# Helpers
# ###############

_MODEL = "com.example.Model"
_MODELS = "com.example.Models"

_DECLARATIONS = f"""\
classes:
  - name: com.example.Person
    annotations:
      - kind: {_MODEL}
    fields:
      - name: name
        type: {{kind: plain, name: java.lang.String}}
  - name: com.example.geo.Address
  - name: com.example.Registry
    annotations:
      - kind: {_MODELS}
        values: {{value: [com.example.geo.Address], internal: true}}
"""


def _run(tmp_path: Path, declarations: str = _DECLARATIONS, **kwargs) -> tuple[ModelDumpGenerator, bool]:
    facade = InMemoryFacade(parse_declarations(declarations))
    generator = ModelDumpGenerator(
        facade,
        _MODEL,
        _MODELS,
        GeneratorConfig(output_directory=str(tmp_path / "out")),
        **kwargs,
    )
    return generator, generator.process(InMemoryRoundEnvironment(facade))


# ###############
# Public Interface
# ###############


def test_writes_one_file_per_class(tmp_path: Path) -> None:
    generator, claimed = _run(tmp_path)

    assert claimed
    assert generator.written == [
        tmp_path / "out" / "com" / "example" / "Person.model.json",
        tmp_path / "out" / "com" / "example" / "geo" / "Address.model.json",
    ]
    person = deserialize_class(generator.written[0].read_text(encoding="utf-8"))
    assert person["internal"] is False
    assert str(person["properties"][0]["type"]) == "kotlin.String"
    address = deserialize_class(generator.written[1].read_text(encoding="utf-8"))
    assert address["internal"] is True
    assert address["properties"] == []


def test_nothing_to_do(tmp_path: Path) -> None:
    generator, claimed = _run(tmp_path, "classes:\n  - name: com.example.Plain\n")

    assert not claimed
    assert generator.written == []
    assert not (tmp_path / "out").exists()


def test_write_failure_is_reported(tmp_path: Path) -> None:
    (tmp_path / "out").write_text("blocker", encoding="utf-8")

    generator, _ = _run(tmp_path)

    assert generator.written == []
    assert len(generator.messager.errors) == 2


def test_write_failure_keep_going(tmp_path: Path) -> None:
    (tmp_path / "out").write_text("blocker", encoding="utf-8")

    generator, _ = _run(tmp_path, fail_on_error=False)

    assert generator.written == []
    assert not generator.messager.has_errors
    assert len(generator.messager.warnings) == 2

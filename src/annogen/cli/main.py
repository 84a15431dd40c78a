# Copyright 2026 Annogen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the annogen command-line interface."""

import argparse
import dataclasses
import logging
import sys
from pathlib import Path

from yachalk import chalk

from annogen.emit.dump import ModelDumpGenerator
from annogen.model.entities import AnnotatedClass
from annogen.processing.config import GeneratorConfig, GeneratorConfigError, load_generator_config
from annogen.processing.discovery import DiscoveryError
from annogen.processing.generator import Generator
from annogen.reflection.facade import RoundEnvironment
from annogen.reflection.memory import InMemoryFacade, InMemoryRoundEnvironment
from annogen.reflection.schema import DeclarationsError
from annogen.translation.translator import StructuralMismatchError

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the annogen CLI."""
    parser = argparse.ArgumentParser(
        prog="annogen",
        description="annogen - annotated class model and type translation",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # inspect subcommand
    inspect_parser = subparsers.add_parser(
        "inspect",
        help="Print the discovered classes and their translated properties",
        description="Discover annotated classes in a declarations file and print their model.",
    )
    _add_common_arguments(inspect_parser)

    # dump subcommand
    dump_parser = subparsers.add_parser(
        "dump",
        help="Write a JSON model file per discovered class",
        description="Discover annotated classes and write one <Class>.model.json per class.",
    )
    _add_common_arguments(dump_parser)
    dump_parser.add_argument(
        "--output",
        help="Output directory (default: output-directory of the config, or build/generated)",
    )
    dump_parser.add_argument(
        "--keep-going",
        action="store_true",
        help="Report write failures as warnings instead of errors",
    )

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


class _InspectGenerator(Generator):
    """Collects the discovered classes of a round without writing anything."""

    def __init__(self, facade: InMemoryFacade, config: GeneratorConfig, direct: str, registry: str | None) -> None:
        super().__init__(facade, config)
        self.direct = direct
        self.registry = registry
        self.classes: list[AnnotatedClass] = []

    def process(self, round_env: RoundEnvironment) -> bool:
        found = self.get_annotated_classes(round_env, self.direct, self.registry)
        self.classes = found.to_list()
        return found.is_not_empty()


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("declarations", help="YAML declarations file describing the classes")
    parser.add_argument(
        "--direct",
        required=True,
        help="Qualified name of the annotation marking classes directly",
    )
    parser.add_argument(
        "--registry",
        default=None,
        help="Qualified name of the annotation listing classes in its 'value' attribute",
    )
    parser.add_argument("--config", default=None, help="Generator configuration YAML file")
    parser.add_argument("--debug", action="store_true", help="Print verbose trace diagnostics")


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "inspect":
        return _cmd_inspect(args)
    if args.command == "dump":
        return _cmd_dump(args)
    return 0


def _load(args: argparse.Namespace) -> tuple[InMemoryFacade, GeneratorConfig] | None:
    """Load the declarations and configuration, printing an error and returning None on failure."""
    declarations = Path(args.declarations)
    if not declarations.exists():
        print(f"Error: declarations file '{declarations}' does not exist.", file=sys.stderr)
        return None

    config = GeneratorConfig()
    if args.config is not None:
        try:
            config = load_generator_config(Path(args.config))
        except GeneratorConfigError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return None
    if args.debug:
        config = dataclasses.replace(config, debug=True)

    logging.basicConfig(
        level=logging.DEBUG if config.debug else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    try:
        facade = InMemoryFacade.from_file(declarations)
    except DeclarationsError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return None
    return facade, config


def _cmd_inspect(args: argparse.Namespace) -> int:
    """Handle the inspect subcommand."""
    loaded = _load(args)
    if loaded is None:
        return 1
    facade, config = loaded

    generator = _InspectGenerator(facade, config, args.direct, args.registry)
    try:
        generator.process(InMemoryRoundEnvironment(facade))
        if not generator.classes:
            print("No annotated classes found.")
            return 0
        for annotated in generator.classes:
            _print_class(annotated)
    except (DiscoveryError, StructuralMismatchError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 1 if generator.messager.has_errors else 0


def _cmd_dump(args: argparse.Namespace) -> int:
    """Handle the dump subcommand."""
    loaded = _load(args)
    if loaded is None:
        return 1
    facade, config = loaded
    if args.output is not None:
        config = dataclasses.replace(config, output_directory=args.output)

    generator = ModelDumpGenerator(
        facade,
        args.direct,
        args.registry,
        config,
        fail_on_error=not args.keep_going,
    )
    try:
        generator.process(InMemoryRoundEnvironment(facade))
    except (DiscoveryError, StructuralMismatchError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    for path in generator.written:
        print(f"  wrote {path}")
    if generator.messager.has_errors:
        print(chalk.red(f"Failed: {len(generator.messager.errors)} error(s)."), file=sys.stderr)
        return 1
    print(chalk.green(f"Wrote {len(generator.written)} model file(s)."))
    return 0


def _print_class(annotated: AnnotatedClass) -> None:
    provenance = "internal" if annotated.internal else "external"
    print(f"{chalk.bold(annotated.qualified_name)} [{provenance}] (namespace: {annotated.namespace})")
    properties = annotated.properties()
    if not properties:
        print("  (no properties)")
    for prop in properties:
        access = prop.reference(lambda: "accessor", lambda: "direct")
        tags = [t for t, on in (("collection", prop.is_collection), ("map", prop.is_map)) if on]
        suffix = f" {', '.join(tags)}" if tags else ""
        print(f"  {prop.name}: {chalk.blue(str(prop.type))} ({access}){suffix}")

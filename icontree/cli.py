"""Command line entry point.

    icontree build --svg-dir svg --output-dir build/icons --theme outline
    icontree tree svg/outline/close.svg
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from dotenv import load_dotenv

from icontree.config import Settings, configure_logging
from icontree.engine.config import BuildConfig
from icontree.engine.manifest import build_manifest
from icontree.engine.output import PathRole, clear_outputs, write_manifest, write_theme_pass
from icontree.engine.pipeline import create_builder
from icontree.errors import SvgValidationError
from icontree.models.theme import ThemeVariant
from icontree.svg.parser import parse_svg_file
from icontree.svg.serializer import serialize_svg
from icontree.svg.tree import generate_abstract_tree


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="icontree", description=__doc__.splitlines()[0])
    sub = parser.add_subparsers(dest="command", required=True)

    build = sub.add_parser("build", help="Build trees and name maps for every theme")
    build.add_argument("--svg-dir", type=Path, help="Source root: <svg-dir>/<theme>/<name>.svg")
    build.add_argument("--output-dir", type=Path, help="Where tree JSON files are written")
    build.add_argument("--manifest", type=Path, help="Manifest JSON path")
    build.add_argument(
        "--theme",
        action="append",
        choices=[t.value for t in ThemeVariant],
        help="Theme to build (repeatable, default: all)",
    )
    build.add_argument("--workers", type=int, help="Thread pool size")
    build.add_argument("--clear", action="store_true", help="Delete previous outputs first")

    tree = sub.add_parser("tree", help="Validate one SVG file and print its tree")
    tree.add_argument("path", type=Path)
    tree.add_argument("--svg", action="store_true", help="Print normalized SVG instead of JSON")
    return parser


def _cmd_build(args: argparse.Namespace, settings: Settings) -> int:
    config = BuildConfig.from_settings(settings)
    if args.svg_dir:
        config.svg_dir = args.svg_dir
    if args.workers:
        config.max_workers = max(1, args.workers)
    output_dir = args.output_dir or settings.output_dir
    manifest_path = args.manifest or settings.manifest_output

    builder = create_builder(config)
    if args.clear:
        clear_outputs(
            {PathRole.ICON_OUTPUT_DIR: output_dir, PathRole.MANIFEST_OUTPUT: manifest_path},
            reporter=builder.reporter,
        )

    write_manifest(build_manifest(config.svg_dir, config.themes), manifest_path)

    failed = 0
    for result in builder.run(args.theme):
        write_theme_pass(result, output_dir)
        for name, error in result.errors.items():
            print(f"{result.theme.value}/{name}: {error}", file=sys.stderr)
        failed += len(result.errors)
        builder.reporter.info(f"{result.theme.value}: {len(result.icons)} built, {len(result.errors)} failed.")
    return 1 if failed else 0


def _cmd_tree(args: argparse.Namespace) -> int:
    label = args.path.stem
    try:
        tree = generate_abstract_tree(parse_svg_file(args.path, label), label)
    except SvgValidationError as e:
        print(str(e), file=sys.stderr)
        return 1
    print(serialize_svg(tree) if args.svg else tree.model_dump_json(indent=2))
    return 0


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    settings = Settings()
    configure_logging(settings.log_level)
    args = _build_parser().parse_args(argv)
    if args.command == "build":
        return _cmd_build(args, settings)
    return _cmd_tree(args)


if __name__ == "__main__":
    sys.exit(main())

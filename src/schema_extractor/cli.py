"""Command line entry point: ``schema-extract`` and ``schema-extract init``."""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from schema_extractor.config import ExtractConfig, find_config, load_config, render_template
from schema_extractor.exceptions import BootstrapError, SchemaExtractorError
from schema_extractor.extractor import extract_schemas
from schema_extractor.models.options import ExtractOptions
from schema_extractor.output import write_outputs
from schema_extractor.renderers.registry import RAW_FORMAT
from schema_extractor.settings import settings
from schema_extractor.utils.logging import logger


def init_config(directory: Path) -> Path:
    """Write the config template into a directory.

    Raises:
        SchemaExtractorError: If a config file already exists there
    """
    target = directory / settings.config_file_name
    if target.exists():
        raise SchemaExtractorError(f"{settings.config_file_name} already exists")
    target.write_text(render_template(), encoding="utf-8")
    logger.info(f"Created {settings.config_file_name}")
    return target


def run_bootstrap(config: ExtractConfig):
    """Call the config bootstrap and check that it produced models."""
    try:
        models = config.bootstrap()
    except Exception as e:
        raise BootstrapError(f"Bootstrap failed: {e}") from e
    if models is None:
        raise BootstrapError("Bootstrap function must return a model registry, model classes or a mapping of models")
    return models


def run_extract(directory: Path, config_path: Optional[Path] = None) -> List[Path]:
    """Load the config, extract every model and write the configured outputs."""
    config = load_config(config_path or find_config(directory))
    models = run_bootstrap(config)

    options = ExtractOptions(**{**config.options.model_dump(), "format": RAW_FORMAT})
    schemas = extract_schemas(models, options)
    logger.info(f"Extracted {len(schemas)} model(s)")

    generated = write_outputs(schemas, directory / config.output.path, config.output.formats, config.output.file_name)
    for path in generated:
        logger.info(f"Generated: {path}")
    return generated


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="schema-extract", description="Extract model schemas into compact, typed and documented formats")
    subparsers = parser.add_subparsers(dest="command")
    extract_parser = subparsers.add_parser("extract", help="Extract schemas using the config file (default)")
    extract_parser.add_argument("--config", type=Path, default=argparse.SUPPRESS, help="Path to the config file")
    subparsers.add_parser("init", help=f"Create {settings.config_file_name} in the current directory")
    parser.add_argument("--config", type=Path, help="Path to the config file")

    args = parser.parse_args(argv)
    directory = Path.cwd()

    try:
        if args.command == "init":
            init_config(directory)
        else:
            run_extract(directory, args.config)
    except SchemaExtractorError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

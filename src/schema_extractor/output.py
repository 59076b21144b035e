"""Writing rendered schemas to files."""

from pathlib import Path
from typing import Callable, Dict, List, NamedTuple

from schema_extractor.extractor import ExtractedSchemas
from schema_extractor.renderers import format_compact, format_graphql, format_human, format_json, format_typescript
from schema_extractor.utils.logging import logger

HEADER_LINES = ("Auto-generated by schema-extractor", "Run 'schema-extract' to regenerate")


class OutputFormat(NamedTuple):
    """File layout of one output format."""

    suffix: str
    renderer: Callable[[ExtractedSchemas], str]
    comment: str


OUTPUT_FORMATS: Dict[str, OutputFormat] = {
    "json": OutputFormat(".json", format_json, ""),
    "llm-compact": OutputFormat(".llm-compact.txt", format_compact, "//"),
    "typescript": OutputFormat(".d.ts", format_typescript, "//"),
    "graphql": OutputFormat(".graphql", format_graphql, "#"),
    "human": OutputFormat(".txt", format_human, "//"),
}

FORMAT_ALIASES = {"compact": "llm-compact"}


def header_block(comment: str) -> str:
    """Generated-file header in the target language's comment syntax."""
    if not comment:
        return ""
    return "".join(f"{comment} {line}\n" for line in HEADER_LINES) + "\n"


def write_outputs(schemas: ExtractedSchemas, directory: Path, formats: List[str], file_name: str) -> List[Path]:
    """Render and write schemas in every requested format.

    Args:
        schemas: Plain schemas keyed by model name
        directory: Output directory, created if missing
        formats: Format names to write, unknown names are skipped
        file_name: Base name of the written files

    Returns:
        Paths of the written files
    """
    directory.mkdir(parents=True, exist_ok=True)
    generated: List[Path] = []

    for requested in formats:
        name = FORMAT_ALIASES.get(requested, requested)
        output_format = OUTPUT_FORMATS.get(name)
        if output_format is None:
            logger.warning(f"Unknown format: {requested}")
            continue
        target = directory / f"{file_name}{output_format.suffix}"
        target.write_text(header_block(output_format.comment) + output_format.renderer(schemas), encoding="utf-8")
        generated.append(target)

    return generated

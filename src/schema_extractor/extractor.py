"""Extraction entry points: source resolution, option resolution and dispatch."""

import inspect
from typing import Any, Dict, List, Mapping, Optional, Set, Union

from schema_extractor.exceptions import SchemaInputError
from schema_extractor.models.options import ExtractOptions
from schema_extractor.models.relationship import Relationship, RelationshipType
from schema_extractor.models.types import FieldKind
from schema_extractor.renderers.registry import RAW_FORMAT, render
from schema_extractor.utils.logging import logger
from schema_extractor.walker.walker import ModelSchema, extract_model

ExtractedSchemas = Dict[str, ModelSchema]


def _is_model_class(candidate: Any) -> bool:
    return inspect.isclass(candidate) and hasattr(candidate, "model_fields")


def resolve_models(source: Any) -> Dict[str, Any]:
    """Normalize the accepted source shapes to a name -> model mapping.

    Accepts an object exposing a ``models`` mapping, a single model class, a
    list or tuple of model classes, or a mapping of name to model class.

    Raises:
        SchemaInputError: If the source is missing or has an unsupported shape
    """
    if source is None:
        raise SchemaInputError("Input is required - provide a model registry, a model class, or a mapping of models")

    if _is_model_class(source):
        return {source.__name__: source}

    registry_models = getattr(source, "models", None)
    if isinstance(registry_models, Mapping):
        return dict(registry_models)

    if isinstance(source, (list, tuple)):
        models = {model.__name__: model for model in source if _is_model_class(model)}
        if not models:
            raise SchemaInputError("Input sequence contains no model classes")
        return models

    if isinstance(source, Mapping):
        return dict(source)

    raise SchemaInputError(f"Invalid input type '{type(source).__name__}' - expected a model registry, a model class, or a mapping of models")


def _coerce_options(options: Optional[Union[ExtractOptions, Dict[str, Any]]], overrides: Dict[str, Any]) -> ExtractOptions:
    if isinstance(options, ExtractOptions):
        return ExtractOptions(**{**options.model_dump(), **overrides}) if overrides else options
    return ExtractOptions(**{**(options or {}), **overrides})


def extract_schemas(
    source: Any,
    options: Optional[Union[ExtractOptions, Dict[str, Any]]] = None,
    *,
    shared_visited: bool = True,
    **overrides: Any,
) -> Union[ExtractedSchemas, Any]:
    """Extract schemas from model classes and optionally render them.

    Args:
        source: Model registry, model class, sequence or mapping of models
        options: Extraction options, as a model or a plain dict
        shared_visited: Share one visited set across all models, which also
            stops cycles that run through several models
        **overrides: Individual option overrides, e.g. ``format="compact"``

    Returns:
        The plain schema mapping for the raw format, otherwise the rendered output

    Raises:
        SchemaInputError: If the source is not a usable model collection
    """
    opts = _coerce_options(options, overrides)
    flags = opts.to_flags()
    models = resolve_models(source)

    visited: Set[type] = set()
    schemas: ExtractedSchemas = {}
    for model_name, model in models.items():
        if not _is_model_class(model):
            logger.debug(f"Skipping '{model_name}': no field registry")
            continue
        schemas[model_name] = extract_model(model, flags, visited if shared_visited else set())

    logger.debug(f"Extracted {len(schemas)} model schema(s)")

    if not opts.format or opts.format == RAW_FORMAT:
        return schemas
    return render(schemas, opts.format)


def _relationship(field: str, rel_type: RelationshipType, target: str, info: Mapping[str, Any]) -> Dict[str, Any]:
    return Relationship(field=field, type=rel_type, target=target, required=bool(info.get("required"))).model_dump(mode="json")


def extract_relationships(source: Any, options: Optional[Union[ExtractOptions, Dict[str, Any]]] = None) -> Dict[str, List[Dict[str, Any]]]:
    """List the references each model holds to other models.

    Models without any reference are left out of the result.
    """
    schemas = extract_schemas(source, options, format=RAW_FORMAT)
    relationships: Dict[str, List[Dict[str, Any]]] = {}

    for model_name, fields in schemas.items():
        rels = []
        for field_name, info in fields.items():
            if not isinstance(info, Mapping):
                continue
            if info.get("ref") and info.get("type") != FieldKind.VIRTUAL.value:
                rels.append(_relationship(field_name, RelationshipType.REFERENCE, info["ref"], info))
            items = info.get("items")
            if info.get("type") == FieldKind.ARRAY.value and isinstance(items, Mapping) and items.get("ref") and items.get("type") != FieldKind.VIRTUAL.value:
                rels.append(_relationship(field_name, RelationshipType.ARRAY_REFERENCE, items["ref"], info))
            for nested_name, nested in (info.get("properties") or {}).items():
                if nested.get("ref"):
                    rels.append(_relationship(f"{field_name}.{nested_name}", RelationshipType.NESTED_REFERENCE, nested["ref"], nested))
        if rels:
            relationships[model_name] = rels

    return relationships

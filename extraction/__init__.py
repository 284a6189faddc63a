"""
Declaration Extraction Engine

Tree-sitter-based C# parser and declaration extractor.
Extracts classes, interfaces, enums and their public members into a
language-agnostic declaration model for skeleton generation.
"""

from extraction.models import (
    ModifierKind,
    SourceModel,
    ClassModel,
    InterfaceModel,
    EnumModel,
    PropertyModel,
    MethodModel,
    ConstructorModel,
    ParameterModel,
    EnumValueModel,
)
from extraction.nodes import DeclarationNode, Initializer, NodeKind
from extraction.modifiers import resolve_modifier
from extraction.visibility import filter_visible, is_visible
from extraction.options import ExtractionOptions, load_extraction_options
from extraction.parser import create_parser, parse_file, parse_bytes, count_error_nodes
from extraction.syntax import TreeSitterNode, wrap_tree
from extraction.traversal import (
    build_source_model,
    collect_type_declarations,
    extract_model_from_tree,
)
from extraction.extractor import (
    extract_file,
    extract_directory,
    extract_to_dict_list,
    iter_extract_models,
    iter_extract_to_dict_list,
    discover_csharp_files,
    ExtractionStats,
)

__all__ = [
    # Data models
    "ModifierKind",
    "SourceModel",
    "ClassModel",
    "InterfaceModel",
    "EnumModel",
    "PropertyModel",
    "MethodModel",
    "ConstructorModel",
    "ParameterModel",
    "EnumValueModel",
    "ExtractionStats",
    "ExtractionOptions",
    # Node interface
    "DeclarationNode",
    "Initializer",
    "NodeKind",
    "TreeSitterNode",
    "wrap_tree",
    # Engine passes
    "resolve_modifier",
    "filter_visible",
    "is_visible",
    "collect_type_declarations",
    "build_source_model",
    # Low-level parsing
    "create_parser",
    "parse_file",
    "parse_bytes",
    "count_error_nodes",
    # High-level orchestration
    "extract_model_from_tree",
    "extract_file",
    "extract_directory",
    "extract_to_dict_list",
    "iter_extract_models",
    "iter_extract_to_dict_list",
    "discover_csharp_files",
    "load_extraction_options",
]

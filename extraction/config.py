"""
Configuration constants for C# declaration extraction.

Defines the tree-sitter node type strings, modifier keywords and sentinel
values used by the extraction engine.
"""

from typing import Dict, FrozenSet, Set

# Type declaration node types
CLASS_NODE: str = "class_declaration"
INTERFACE_NODE: str = "interface_declaration"
ENUM_NODE: str = "enum_declaration"

# Type declarations that are not modelled but still scope their members
STRUCT_NODE: str = "struct_declaration"
RECORD_NODE: str = "record_declaration"
RECORD_STRUCT_NODE: str = "record_struct_declaration"

# Member declaration node types
PROPERTY_NODE: str = "property_declaration"
METHOD_NODE: str = "method_declaration"
CONSTRUCTOR_NODE: str = "constructor_declaration"
PARAMETER_NODE: str = "parameter"
ENUM_MEMBER_NODE: str = "enum_member_declaration"

# Untyped lambda parameter (x => x)
IMPLICIT_PARAMETER_NODE: str = "implicit_parameter"

# Nodes that never contain type or member declarations. Their bodies are
# skipped unless legacy scoping asks for every descendant.
OPAQUE_NODES: Set[str] = {
    "field_declaration",
    "event_field_declaration",
    "event_declaration",
    "indexer_declaration",
    "operator_declaration",
    "conversion_operator_declaration",
    "destructor_declaration",
    "delegate_declaration",
    "attribute_list",
    "global_attribute",
}

# Modifier keyword node type (public, static, ...)
MODIFIER_NODE: str = "modifier"

# Error node type emitted by tree-sitter recovery
ERROR_NODE: str = "ERROR"

# Older grammars wrap enum initializers in an equals clause
EQUALS_VALUE_CLAUSE: str = "equals_value_clause"

# Expression node types treated as simple literals for enum values
LITERAL_NODE_TYPES: Set[str] = {
    "integer_literal",
    "real_literal",
    "boolean_literal",
    "character_literal",
    "string_literal",
    "verbatim_string_literal",
    "raw_string_literal",
    "null_literal",
}

# Accessibility and storage keywords
STATIC_KEYWORD: str = "static"
PUBLIC_KEYWORD: str = "public"
INTERNAL_KEYWORD: str = "internal"
PROTECTED_KEYWORD: str = "protected"

# Visibility rules: keywords that make a member eligible
PROPERTY_VISIBILITY: FrozenSet[str] = frozenset(
    {PUBLIC_KEYWORD, INTERNAL_KEYWORD, PROTECTED_KEYWORD}
)
METHOD_VISIBILITY: FrozenSet[str] = frozenset({PUBLIC_KEYWORD})
CONSTRUCTOR_VISIBILITY: FrozenSet[str] = frozenset({PUBLIC_KEYWORD})

# Substitutes for values the source does not spell out
MISSING_TYPE: str = "any"
MISSING_ENUM_VALUE: str = "no-value"

# Language tag stamped on every type model
LANGUAGE_TAG: str = "csharp"

# C# file extensions
CSHARP_EXTENSIONS: Set[str] = {
    ".cs",
}

# Directories never descended into during discovery
EXCLUDED_DIRS: Set[str] = {
    "bin",
    "obj",
    "packages",
    "node_modules",
    "TestResults",
    "__pycache__",
}

# Config file section and environment variable names
CONFIG_SECTION: str = "extraction"
CONFIG_PATH_ENV: str = "SKELETON_CONFIG"
LEGACY_SCOPING_ENV: str = "SKELETON_LEGACY_SCOPING"

# Extraction policy defaults
DEFAULT_LEGACY_SCOPING: bool = False

# Grammar field names that carry identifiers and types, per node type
NAME_FIELD: str = "name"
TYPE_FIELDS: Dict[str, tuple] = {
    PROPERTY_NODE: ("type",),
    METHOD_NODE: ("returns", "type"),
    PARAMETER_NODE: ("type",),
}
PARAMETERS_FIELD: str = "parameters"

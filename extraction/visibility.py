"""
Visibility filtering of member declarations.
"""

import logging
from typing import Dict, FrozenSet, List, Sequence

from extraction.config import (
    PROPERTY_VISIBILITY,
    METHOD_VISIBILITY,
    CONSTRUCTOR_VISIBILITY,
)
from extraction.nodes import DeclarationNode, NodeKind

logger = logging.getLogger(__name__)

# Member kind -> keywords of which at least one must be present.
# Kinds absent from the map (types) are always included.
VISIBILITY_RULES: Dict[NodeKind, FrozenSet[str]] = {
    NodeKind.PROPERTY: PROPERTY_VISIBILITY,
    NodeKind.METHOD: METHOD_VISIBILITY,
    NodeKind.CONSTRUCTOR: CONSTRUCTOR_VISIBILITY,
}


def is_visible(node: DeclarationNode) -> bool:
    """Check whether a declaration passes the rule for its kind.

    Implicit accessibility is never promoted: a member without an explicit
    accepted keyword is excluded.
    """
    required = VISIBILITY_RULES.get(node.kind)
    if required is None:
        return True
    return not required.isdisjoint(node.modifiers)


def filter_visible(nodes: Sequence[DeclarationNode]) -> List[DeclarationNode]:
    """Keep only the declarations passing their kind's visibility rule.

    Args:
        nodes: Candidate declarations, order preserved.

    Returns:
        Eligible declarations in input order.
    """
    visible = []
    for node in nodes:
        if is_visible(node):
            visible.append(node)
        else:
            logger.debug(
                f"Skipping {node.kind.value} '{node.identifier}' "
                f"with modifiers {sorted(node.modifiers)}"
            )
    return visible

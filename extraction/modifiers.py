"""
Modifier resolution.

Collapses a declaration's modifier keywords into one ``ModifierKind``.
"""

from typing import Callable, FrozenSet, Iterable, Tuple

from extraction.config import (
    STATIC_KEYWORD,
    PUBLIC_KEYWORD,
    INTERNAL_KEYWORD,
    PROTECTED_KEYWORD,
)
from extraction.models import ModifierKind

ModifierPredicate = Callable[[FrozenSet[str]], bool]


def _has(keyword: str) -> ModifierPredicate:
    return lambda modifiers: keyword in modifiers


# Evaluated top to bottom; the first matching rule wins.
MODIFIER_RULES: Tuple[Tuple[ModifierPredicate, ModifierKind], ...] = (
    (_has(STATIC_KEYWORD), ModifierKind.STATIC),
    (_has(PUBLIC_KEYWORD), ModifierKind.PUBLIC),
    (_has(INTERNAL_KEYWORD), ModifierKind.INTERNAL),
    (_has(PROTECTED_KEYWORD), ModifierKind.PROTECTED),
)

FALLBACK_MODIFIER: ModifierKind = ModifierKind.PRIVATE


def resolve_modifier(modifiers: Iterable[str]) -> ModifierKind:
    """Resolve a set of modifier keywords to a single classification.

    Static outranks every accessibility keyword, so ``public static`` is
    Static. A declaration without any recognised keyword is Private.

    Args:
        modifiers: Raw modifier keywords of the declaration.

    Returns:
        The first ``ModifierKind`` whose rule matches.
    """
    tokens = frozenset(modifiers)
    for predicate, result in MODIFIER_RULES:
        if predicate(tokens):
            return result
    return FALLBACK_MODIFIER

"""
Model resolution and catalog lookups.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

from openai_model_catalog.model_info import MODEL_INFO
from openai_model_catalog.types import FAMILIES, ModelFamily, ModelInfo, ModelType, Other

logger = logging.getLogger(__name__)

_family_by_enum: dict[type, str] = {enum_cls: tag for tag, enum_cls in FAMILIES.items()}

_model_info_registry: dict[tuple[str, str], ModelInfo] = {}

# Initialize metadata registry from MODEL_INFO on module load
for info in MODEL_INFO:
    _model_info_registry[(info.family, info.id)] = info


def resolve(model_type: ModelType) -> str:
    """
    Resolve a model selector to the identifier the API expects.

    Args:
        model_type: A member of one of the model family enums, or ``Other``

    Returns:
        The model identifier. For ``Other`` this is the wrapped name, unchanged.

    Raises:
        TypeError: If ``model_type`` is not a model selector. Plain strings
            must be wrapped in ``Other`` first.
    """
    if isinstance(model_type, Other):
        return model_type.name
    if isinstance(model_type, Enum) and type(model_type) in _family_by_enum:
        return model_type.value
    raise TypeError(f"Not a model selector: {model_type!r}")


def family_of(model_type: ModelType) -> ModelFamily:
    """Get the family tag of a model selector."""
    if isinstance(model_type, Other):
        return "other"
    family = _family_by_enum.get(type(model_type))
    if family is None:
        raise TypeError(f"Not a model selector: {model_type!r}")
    return family  # type: ignore


def get_families() -> list[ModelFamily]:
    """Get all family tags, closed families first and ``"other"`` last."""
    return [*FAMILIES.keys(), "other"]  # type: ignore


def get_models(family: ModelFamily) -> list[ModelType]:
    """
    Get the canonical members of a family in declaration order.

    Aliases are not included. The open ``"other"`` family has no members.

    Raises:
        ValueError: If the family tag is unknown.
    """
    if family == "other":
        return []
    enum_cls = FAMILIES.get(family)
    if enum_cls is None:
        raise ValueError(f"Unknown model family: {family}")
    return list(enum_cls)


def parse_model_type(family: ModelFamily | str, name: str) -> ModelType:
    """
    Rebuild a model selector from a family tag and model identifier.

    Args:
        family: The family tag (e.g., "chat", "gpt4", "other")
        name: The model identifier (e.g., "gpt-4-32k-0613")

    Returns:
        The matching family member, or ``Other(name)`` for the ``"other"`` family.

    Raises:
        ValueError: If the family is unknown or the identifier is not a member
            of the named family.
    """
    if family == "other":
        return Other(name)
    enum_cls = FAMILIES.get(family)
    if enum_cls is None:
        raise ValueError(f"Unknown model family: {family}")
    try:
        return enum_cls(name)
    except ValueError:
        raise ValueError(f"Model {name!r} not found in family {family}") from None


def find_models(name: str) -> list[ModelType]:
    """
    Find every catalog member whose identifier equals ``name``.

    The same identifier may appear in more than one family, so several
    members can match. Returns an empty list when nothing matches.
    """
    matches: list[ModelType] = []
    for enum_cls in FAMILIES.values():
        try:
            matches.append(enum_cls(name))
        except ValueError:
            continue
    if not matches:
        logger.debug("No catalog member for %r; wrap it in Other to use it", name)
    return matches


def get_model_info(model_type: ModelType) -> Optional[ModelInfo]:
    """
    Get descriptive metadata for a model selector.

    Returns:
        The metadata record, or None for ``Other`` selectors.
    """
    family = family_of(model_type)
    if family == "other":
        return None
    return _model_info_registry.get((family, resolve(model_type)))


def is_deprecated(model_type: ModelType) -> bool:
    """
    Check whether the catalog marks a model as deprecated.

    Informational only; deprecated members still resolve normally.
    """
    info = get_model_info(model_type)
    return info.deprecated if info else False


def models_are_equal(a: Optional[ModelType], b: Optional[ModelType]) -> bool:
    """
    Check if two selectors are equal by comparing both family and identifier.

    ``Chat.CHATGPT4`` and ``GPT4.GPT4`` share an identifier but are different
    selectors. Returns False if either side is None.
    """
    if a is None or b is None:
        return False
    return family_of(a) == family_of(b) and resolve(a) == resolve(b)

"""
Environment variable model selection.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from openai_model_catalog.models import parse_model_type
from openai_model_catalog.types import ModelType, Other

logger = logging.getLogger(__name__)

MODEL_ENV_VAR = "OPENAI_MODEL"
MODEL_FAMILY_ENV_VAR = "OPENAI_MODEL_FAMILY"


def get_env_model(default: Optional[ModelType] = None) -> Optional[ModelType]:
    """
    Get the model selected through environment variables.

    ``OPENAI_MODEL`` holds the identifier. If ``OPENAI_MODEL_FAMILY`` is also
    set, the identifier must belong to that family; otherwise it is passed
    through as ``Other``.

    Args:
        default: Returned when ``OPENAI_MODEL`` is not set

    Returns:
        The selected model, or ``default``.

    Raises:
        ValueError: If ``OPENAI_MODEL_FAMILY`` names an unknown family or the
            identifier is not in that family.
    """
    name = os.environ.get(MODEL_ENV_VAR)
    if name is None:
        return default

    family = os.environ.get(MODEL_FAMILY_ENV_VAR)
    if family:
        logger.debug("Using %s=%r from family %s", MODEL_ENV_VAR, name, family)
        return parse_model_type(family, name)

    logger.debug("Using %s=%r as a custom model", MODEL_ENV_VAR, name)
    return Other(name)

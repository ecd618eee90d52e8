"""Translate legacy verification key documents to Multikey."""

import logging
from typing import Any

from ..core.errors import UnsupportedContextError, UnsupportedKeyTypeError
from .registry import KEY_PAIR_TRANSLATIONS

logger = logging.getLogger(__name__)


def to_multikey(key_pair: dict[str, Any]) -> dict[str, Any]:
    """Translate a legacy key document into a Multikey document.

    A document without ``@context`` is treated as carrying the context
    registered for its type. The input document is not modified.

    Args:
        key_pair: Legacy key document with a ``type`` property

    Returns:
        Multikey document

    Raises:
        UnsupportedKeyTypeError: If no translation is registered for the type
        UnsupportedContextError: If the context does not match the type
    """
    key_type = key_pair.get("type")
    translation = None
    if isinstance(key_type, str):
        translation = KEY_PAIR_TRANSLATIONS.get(key_type)
    if translation is None:
        raise UnsupportedKeyTypeError(f'Unsupported key type "{key_type}".')

    context = key_pair.get("@context")
    if context is None or context == "":
        context = translation.context_url
    if not includes_context(context, translation.context_url):
        raise UnsupportedContextError(f'Context not supported "{context}".')

    logger.debug("Translating %s key %s to Multikey", key_type, key_pair.get("id"))
    return translation.translate({**key_pair, "@context": context})


def includes_context(context: Any, context_url: str) -> bool:
    """Check if a context equals, or is a list containing, ``context_url``."""
    return context == context_url or (
        isinstance(context, list) and context_url in context
    )

"""Legacy verification key translation."""

from .registry import KEY_PAIR_TRANSLATIONS, KeyPairTranslation
from .translator import includes_context, to_multikey

__all__ = [
    "KEY_PAIR_TRANSLATIONS",
    "KeyPairTranslation",
    "includes_context",
    "to_multikey",
]

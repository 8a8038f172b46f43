"""
Uid Translation
===============

This package provides:
- Process-unique ids (Uid) compared by an integer id, with an optional display name
- A strict bidirectional dictionary between Uids and user-defined keys
- Helpers that apply such a dictionary to polars DataFrames

Typical use: create Uids once, register them with a UidKeyTranslator next to
the keys used at the application's boundaries, then translate in either
direction.
"""

from .exceptions import TranslationError
from .uid import Uid
from .key_translator import UidKeyTranslator
from .frame_adapter import FrameAdapter

__all__ = [
    'TranslationError',
    'Uid',
    'UidKeyTranslator',
    'FrameAdapter'
]

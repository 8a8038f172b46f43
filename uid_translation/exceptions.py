"""
Translator Exceptions
=====================
"""


class TranslationError(Exception):
    """
    Raised when a Uid/key translation or a dictionary insertion cannot be performed.
    """

"""
Frame Adapter Module
====================

This module translates tabular data held in polars DataFrames through a
UidKeyTranslator, replacing external key columns with numeric Uid ids and
back again.
"""

import logging
from typing import Any, Dict, Optional

import polars as pl

from .key_translator import UidKeyTranslator

_NATIVE_KEY_TYPES = (str, int, float, bool)


def _column_value(key):
    return key if isinstance(key, _NATIVE_KEY_TYPES) else str(key)


class FrameAdapter:
    """
    Applies a translator's dictionary to polars DataFrames.
    """

    def __init__(self, translator: UidKeyTranslator):
        self.translator = translator

    def to_frame(self) -> pl.DataFrame:
        """
        Get the translator's dictionary as a DataFrame, in insertion order.

        Returns:
            DataFrame with columns uid_id (Int64), uid_name (Utf8) and key.
            str, int, float and bool keys are kept as-is so the key column can
            be passed back to add_uid_column, other keys are written as str(key).
        """
        uid_ids = []
        uid_names = []
        keys = []
        for uid, key in self.translator.items():
            uid_ids.append(uid.id)
            uid_names.append(uid.name)
            keys.append(_column_value(key))

        return pl.DataFrame([
            pl.Series('uid_id', uid_ids, dtype=pl.Int64),
            pl.Series('uid_name', uid_names, dtype=pl.Utf8),
            pl.Series('key', keys, strict=False) if keys else pl.Series('key', [], dtype=pl.Utf8),
        ])

    def add_uid_column(self, df: pl.DataFrame, key_column: str,
                       uid_column: Optional[str] = None) -> pl.DataFrame:
        """
        Add a column with the numeric Uid id of every value in `key_column`.

        Args:
            df: Input data
            key_column: Column holding translator keys
            uid_column: Name of the new column, defaults to '<key_column>_uid_id'

        Returns:
            New DataFrame with the Uid id column added

        Raises:
            TranslationError: If any key is not in the dictionary
        """
        uid_column = uid_column or f"{key_column}_uid_id"

        # Resolve every distinct key before building the new column
        key_to_id: Dict[Any, int] = {}
        for key in df[key_column].unique(maintain_order=True).to_list():
            if key is None:
                continue
            key_to_id[key] = self.translator.to_uid(key).id

        ids = [None if key is None else key_to_id[key] for key in df[key_column].to_list()]
        result = df.with_columns(pl.Series(uid_column, ids, dtype=pl.Int64))
        logging.debug(f"Added {uid_column} for {len(key_to_id)} distinct keys to {len(df)} rows")
        return result

    def add_key_column(self, df: pl.DataFrame, uid_column: str, key_column: str = 'key') -> pl.DataFrame:
        """
        Add a column with the translator key of every numeric Uid id in `uid_column`.

        Keys that are not str, int, float or bool are written as str(key).

        Args:
            df: Input data
            uid_column: Column holding numeric Uid ids
            key_column: Name of the new column

        Returns:
            New DataFrame with the key column added

        Raises:
            TranslationError: If any id does not belong to a Uid in the dictionary
        """
        id_to_key: Dict[int, Any] = {}
        for id_val in df[uid_column].unique(maintain_order=True).to_list():
            if id_val is None:
                continue
            key = self.translator.from_uid(self.translator.uid_for_id(id_val))
            id_to_key[id_val] = _column_value(key)

        keys = [None if id_val is None else id_to_key[id_val] for id_val in df[uid_column].to_list()]
        result = df.with_columns(pl.Series(key_column, keys, strict=False))
        logging.debug(f"Added {key_column} for {len(id_to_key)} distinct ids to {len(df)} rows")
        return result

"""
Uid Key Translator Module
=========================

This module manages a strict bidirectional mapping between Uid instances and
user-defined keys (enum members, strings, integers, ...). It is useful when an
application uses unique ids internally but needs a different data type at its
boundaries.

The dictionary only grows. Every batch added to it is validated as a whole
before anything is committed, so a rejected batch leaves the translator
exactly as it was.
"""

import logging
from collections.abc import Mapping
from typing import Any, Dict, Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar, Union

import config

from .exceptions import TranslationError
from .uid import Uid

T = TypeVar('T')
V = TypeVar('V')

Pairs = Union[Mapping, Iterable[Tuple[Uid, Any]]]


def _is_hashable(key) -> bool:
    try:
        hash(key)
    except TypeError:
        return False
    return True


class _KeyIndex:
    """
    Key -> Uid lookup table. Hashable keys live in a dict, unhashable keys are
    kept in insertion order and matched by equality.
    """

    def __init__(self):
        self.hashed: Dict[Any, Uid] = {}
        self.unhashed: List[Tuple[Any, Uid]] = []

    def __len__(self):
        return len(self.hashed) + len(self.unhashed)

    def find(self, key) -> Optional[Uid]:
        if _is_hashable(key):
            uid = self.hashed.get(key)
            if uid is not None:
                return uid
        else:
            # Unhashable keys can equal hashable ones, e.g. set and frozenset
            for stored_key, uid in self.hashed.items():
                if stored_key == key:
                    return uid
        for stored_key, uid in self.unhashed:
            if stored_key == key:
                return uid
        return None

    def add(self, key, uid: Uid):
        if _is_hashable(key):
            self.hashed[key] = uid
        else:
            self.unhashed.append((key, uid))


class UidKeyTranslator(Generic[T]):
    """
    Maps Uid instances to user-defined keys and translates between the two.

    Args:
        pairs: Optional initial batch, either a mapping of Uid to key or an
            iterable of (Uid, key) pairs
        use_reverse_index: Maintain a key -> Uid index for constant-time
            reverse lookups. Defaults to config.REVERSE_INDEX_ENABLED.
    """

    def __init__(self, pairs: Optional[Pairs] = None, use_reverse_index: Optional[bool] = None):
        if use_reverse_index is None:
            use_reverse_index = config.REVERSE_INDEX_ENABLED

        self._dictionary: Dict[Uid, T] = {}
        self._uids_by_id: Dict[int, Uid] = {}
        self._key_index: Optional[_KeyIndex] = _KeyIndex() if use_reverse_index else None

        if pairs is not None:
            self.add_to_dictionary(pairs)

    # ------------------------------------------------------------------
    # Insertion
    # ------------------------------------------------------------------

    def add_to_dictionary(self, pairs: Pairs):
        """
        Add a batch of Uid-key pairs to the dictionary.

        The batch is rejected as a whole if any Uid is not a Uid instance or is
        already present, if any key is None or not equal to itself (NaN), or if
        any key is already mapped, either in the dictionary or earlier in the
        same batch.

        Args:
            pairs: Mapping of Uid to key, or an iterable of (Uid, key) pairs

        Raises:
            TranslationError: If the batch violates any of the rules above
        """
        try:
            batch = self._validate_batch(pairs)
        except TranslationError as e:
            logging.warning(f"Rejected dictionary batch: {e}")
            raise

        for uid, key in batch:
            self._dictionary[uid] = key
            self._uids_by_id[uid.id] = uid
            if self._key_index is not None:
                self._key_index.add(key, uid)

        if batch:
            logging.debug(f"Added {len(batch)} entries to dictionary, size is now {len(self._dictionary)}")

    def _validate_batch(self, pairs: Pairs) -> List[Tuple[Uid, T]]:
        items = pairs.items() if isinstance(pairs, Mapping) else pairs
        if items is None:
            raise TranslationError("Cannot add None to the dictionary")

        batch: List[Tuple[Uid, T]] = []
        batch_uids = set()
        batch_keys = _KeyIndex()

        try:
            for uid, key in items:
                if not isinstance(uid, Uid):
                    raise TranslationError(f"Expected a Uid instance, got {type(uid).__name__}: {uid!r}")
                if key is None:
                    raise TranslationError(f"The key for {uid} cannot be None")
                if not key == key:
                    raise TranslationError(f"The key for {uid} must be equal to itself, got {key!r}")
                if uid in self._dictionary:
                    raise TranslationError(f"{uid} is already present in the dictionary")
                if uid in batch_uids:
                    raise TranslationError(f"{uid} appears more than once in the batch")
                if self._find_uid(key) is not None:
                    raise TranslationError(f"Key {key!r} is already present in the dictionary")
                if batch_keys.find(key) is not None:
                    raise TranslationError(f"Key {key!r} appears more than once in the batch")

                batch.append((uid, key))
                batch_uids.add(uid)
                batch_keys.add(key, uid)
        except (TypeError, ValueError) as e:
            raise TranslationError(f"Dictionary batch must contain (Uid, key) pairs: {e}") from e

        return batch

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def from_uid(self, uid: Uid) -> T:
        """
        Get the key that is mapped to the given Uid.

        Raises:
            TranslationError: If the Uid is not in the dictionary
        """
        if isinstance(uid, Uid) and uid in self._dictionary:
            return self._dictionary[uid]

        raise TranslationError(f"Requested Uid {uid!r} is not in the dictionary")

    def to_uid(self, key: T) -> Uid:
        """
        Get the Uid that is mapped to the given key, matched by equality.

        Raises:
            TranslationError: If no key in the dictionary equals the given key
        """
        uid = self._find_uid(key)
        if uid is None:
            raise TranslationError(f"Requested key {key!r} is not in the dictionary")

        return uid

    def get_key(self, uid: Uid, default: Optional[T] = None) -> Optional[T]:
        """
        Get the key for the given Uid, or `default` if it is not in the dictionary.
        """
        if not isinstance(uid, Uid):
            return default

        return self._dictionary.get(uid, default)

    def get_uid(self, key: T, default: Optional[Uid] = None) -> Optional[Uid]:
        """
        Get the Uid for the given key, or `default` if it is not in the dictionary.
        """
        uid = self._find_uid(key)
        return default if uid is None else uid

    def uid_for_id(self, id_val: int) -> Uid:
        """
        Get the Uid in the dictionary whose numeric id is `id_val`.

        Raises:
            TranslationError: If no such Uid is in the dictionary
        """
        uid = self._uids_by_id.get(id_val)
        if uid is None:
            raise TranslationError(f"No Uid with id {id_val!r} is in the dictionary")

        return uid

    def has_key(self, key: T) -> bool:
        return self._find_uid(key) is not None

    def _find_uid(self, key) -> Optional[Uid]:
        if key is None:
            return None

        if self._key_index is not None:
            return self._key_index.find(key)

        for uid, stored_key in self._dictionary.items():
            if stored_key == key:
                return uid
        return None

    # ------------------------------------------------------------------
    # Map translation
    # ------------------------------------------------------------------

    def from_uid_map(self, mapping: Mapping) -> Dict[T, V]:
        """
        Replace the Uids of `mapping` with their keys.

        Args:
            mapping: Mapping of Uid to arbitrary values

        Returns:
            New dict of key to value, in the iteration order of `mapping`

        Raises:
            TranslationError: If any Uid is not in the dictionary
        """
        return {self.from_uid(uid): value for uid, value in mapping.items()}

    def to_uid_map(self, mapping: Mapping) -> Dict[Uid, V]:
        """
        Replace the keys of `mapping` with their Uids.

        Args:
            mapping: Mapping of key to arbitrary values

        Returns:
            New dict of Uid to value, in the iteration order of `mapping`

        Raises:
            TranslationError: If any key is not in the dictionary
        """
        return {self.to_uid(key): value for key, value in mapping.items()}

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def items(self):
        return self._dictionary.items()

    def get_stats(self) -> Dict[str, Any]:
        """
        Get diagnostic information about the dictionary.
        """
        stats = {
            'size': len(self._dictionary),
            'reverse_index_enabled': self._key_index is not None,
            'indexed_keys': 0,
            'unindexed_keys': len(self._dictionary),
        }
        if self._key_index is not None:
            stats['indexed_keys'] = len(self._key_index.hashed)
            stats['unindexed_keys'] = len(self._key_index.unhashed)
        return stats

    def render(self) -> str:
        """
        Render the dictionary as `{Uid{1}=key, ...}` in insertion order.

        For diagnostics only, the output is not meant to be parsed.
        """
        entries = (f"{uid}={key}" for uid, key in self._dictionary.items())
        return '{' + config.RENDER_SEPARATOR.join(entries) + '}'

    def __str__(self):
        return self.render()

    def __repr__(self):
        return f"{type(self).__name__}({self.render()})"

    def __len__(self):
        return len(self._dictionary)

    def __contains__(self, uid):
        return isinstance(uid, Uid) and uid in self._dictionary

    def __iter__(self) -> Iterator[Uid]:
        return iter(self._dictionary)

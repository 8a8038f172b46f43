"""
Test Frame Adapter
==================

Tests for translating polars DataFrame columns through a UidKeyTranslator.
"""

import unittest
from enum import Enum

import polars as pl

from uid_translation import FrameAdapter, TranslationError, Uid, UidKeyTranslator


class Region(Enum):
    NORTH = 'north'
    SOUTH = 'south'


class TestFrameAdapter(unittest.TestCase):
    """Test cases for FrameAdapter."""

    def setUp(self):
        """Set up a translator with string keys."""
        self.uid_a = Uid.create('a')
        self.uid_b = Uid.create()
        self.uid_c = Uid.create('c')
        self.translator = UidKeyTranslator([
            (self.uid_a, '000001.SZ'),
            (self.uid_b, '600000.SH'),
            (self.uid_c, '300750.SZ'),
        ])
        self.adapter = FrameAdapter(self.translator)

    def test_to_frame(self):
        """The dictionary is exported in insertion order."""
        df = self.adapter.to_frame()

        self.assertEqual(df.columns, ['uid_id', 'uid_name', 'key'])
        self.assertEqual(df['uid_id'].dtype, pl.Int64)
        self.assertEqual(df['uid_id'].to_list(), [self.uid_a.id, self.uid_b.id, self.uid_c.id])
        self.assertEqual(df['uid_name'].to_list(), ['a', None, 'c'])
        self.assertEqual(df['key'].to_list(), ['000001.SZ', '600000.SH', '300750.SZ'])

    def test_to_frame_empty(self):
        df = FrameAdapter(UidKeyTranslator()).to_frame()

        self.assertEqual(len(df), 0)
        self.assertEqual(df.columns, ['uid_id', 'uid_name', 'key'])

    def test_add_uid_column(self):
        """Key columns gain a numeric Uid id column."""
        data = pl.DataFrame({
            'ts_code': ['000001.SZ', '300750.SZ', '000001.SZ', None],
            'close': [10.0, 15.0, 11.0, 12.0],
        })

        result = self.adapter.add_uid_column(data, 'ts_code')

        self.assertIn('ts_code_uid_id', result.columns)
        self.assertEqual(result['ts_code_uid_id'].dtype, pl.Int64)
        self.assertEqual(result['ts_code_uid_id'].to_list(),
                         [self.uid_a.id, self.uid_c.id, self.uid_a.id, None])
        self.assertEqual(result['close'].to_list(), data['close'].to_list())
        self.assertNotIn('ts_code_uid_id', data.columns)

    def test_add_uid_column_custom_name(self):
        data = pl.DataFrame({'ts_code': ['600000.SH']})

        result = self.adapter.add_uid_column(data, 'ts_code', uid_column='stock_id')

        self.assertEqual(result['stock_id'].to_list(), [self.uid_b.id])

    def test_add_uid_column_unknown_key(self):
        """An unknown key fails without producing a frame."""
        data = pl.DataFrame({'ts_code': ['000001.SZ', 'UNKNOWN.SZ']})

        with self.assertRaises(TranslationError):
            self.adapter.add_uid_column(data, 'ts_code')

    def test_add_key_column(self):
        """Numeric Uid ids are translated back to keys."""
        data = pl.DataFrame({'uid_id': [self.uid_c.id, self.uid_b.id, None]})

        result = self.adapter.add_key_column(data, 'uid_id', key_column='ts_code')

        self.assertEqual(result['ts_code'].to_list(), ['300750.SZ', '600000.SH', None])

    def test_add_key_column_unknown_id(self):
        data = pl.DataFrame({'uid_id': [self.uid_a.id, Uid.create().id]})

        with self.assertRaises(TranslationError):
            self.adapter.add_key_column(data, 'uid_id')

    def test_round_trip(self):
        """Adding ids and then keys restores the original column."""
        data = pl.DataFrame({'ts_code': ['300750.SZ', '000001.SZ', '600000.SH']})

        with_ids = self.adapter.add_uid_column(data, 'ts_code')
        restored = self.adapter.add_key_column(with_ids, 'ts_code_uid_id', key_column='restored')

        self.assertEqual(restored['restored'].to_list(), data['ts_code'].to_list())

    def test_to_frame_int_keys_round_trip(self):
        """Native scalar keys keep their type so the frame can be translated back."""
        one, two = Uid.create(), Uid.create()
        adapter = FrameAdapter(UidKeyTranslator([(one, 1), (two, 2)]))

        exported = adapter.to_frame()
        result = adapter.add_uid_column(exported, 'key')

        self.assertEqual(exported['key'].to_list(), [1, 2])
        self.assertEqual(result['key_uid_id'].to_list(), exported['uid_id'].to_list())

    def test_to_frame_enum_keys_as_strings(self):
        north = Uid.create()
        adapter = FrameAdapter(UidKeyTranslator({north: Region.NORTH}))

        self.assertEqual(adapter.to_frame()['key'].to_list(), [str(Region.NORTH)])

    def test_add_key_column_enum_keys(self):
        """Keys that are not polars scalars are written as strings."""
        north, south = Uid.create(), Uid.create()
        adapter = FrameAdapter(UidKeyTranslator({north: Region.NORTH, south: Region.SOUTH}))
        data = pl.DataFrame({'region_id': [south.id, north.id]})

        result = adapter.add_key_column(data, 'region_id', key_column='region')

        self.assertEqual(result['region'].to_list(), [str(Region.SOUTH), str(Region.NORTH)])


if __name__ == '__main__':
    unittest.main()

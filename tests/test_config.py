"""Tests for WalkConfig, PathType and option normalization."""

import unittest

import pytest

from crosslinkutils import (
    InvalidConfigError,
    InvalidPathTypeError,
    PathType,
    WalkConfig,
    walk_object,
)


class TestPathType(unittest.TestCase):

    def test_parse_names_and_aliases(self):
        self.assertIs(PathType.parse(None), PathType.SEGMENTED)
        self.assertIs(PathType.parse('segmented'), PathType.SEGMENTED)
        self.assertIs(PathType.parse('array'), PathType.SEGMENTED)
        self.assertIs(PathType.parse('flattened'), PathType.FLATTENED)
        self.assertIs(PathType.parse('nestedProperty'), PathType.FLATTENED)
        self.assertIs(PathType.parse('nested_property'), PathType.FLATTENED)
        self.assertIs(PathType.parse(PathType.FLATTENED), PathType.FLATTENED)

    def test_parse_unknown(self):
        with self.assertRaises(InvalidPathTypeError) as ctx:
            PathType.parse('dotted')
        self.assertIn('unrecognized pathType', str(ctx.exception))

        with self.assertRaises(ValueError):
            PathType.parse(3)


class TestWalkConfig(unittest.TestCase):

    def test_defaults(self):
        config = WalkConfig()

        self.assertFalse(config.walk_arrays)
        self.assertEqual(config.walk_arrays_matching_keys, frozenset())
        self.assertIs(config.path_type, PathType.SEGMENTED)
        self.assertEqual(config.validate(), [])

    def test_all_arrays(self):
        config = WalkConfig.all_arrays()

        self.assertTrue(config.walk_arrays)
        self.assertIs(config.path_type, PathType.SEGMENTED)

    def test_flattened(self):
        config = WalkConfig.flattened(matching_keys=['transforms'])

        self.assertIs(config.path_type, PathType.FLATTENED)
        self.assertEqual(config.walk_arrays_matching_keys, frozenset({'transforms'}))

    def test_from_options_none(self):
        self.assertEqual(WalkConfig.from_options(None), WalkConfig())

    def test_from_options_camel_case(self):
        config = WalkConfig.from_options({
            'walkArrays': True,
            'walkArraysMatchingKeys': ['a', 'b'],
            'pathType': 'nestedProperty',
        })

        self.assertEqual(config, WalkConfig(
            walk_arrays=True,
            walk_arrays_matching_keys=frozenset({'a', 'b'}),
            path_type=PathType.FLATTENED,
        ))

    def test_from_options_overrides_win(self):
        base = WalkConfig(walk_arrays=True)
        config = WalkConfig.from_options(base, walk_arrays=False, path_type='flattened')

        self.assertFalse(config.walk_arrays)
        self.assertIs(config.path_type, PathType.FLATTENED)
        self.assertTrue(base.walk_arrays)

    def test_from_options_normalizes_config_object(self):
        """A hand-built config with a string path type is parsed."""
        config = WalkConfig.from_options(WalkConfig(path_type='flattened'))

        self.assertIs(config.path_type, PathType.FLATTENED)

    def test_unknown_option(self):
        with self.assertRaises(InvalidConfigError) as ctx:
            WalkConfig.from_options({'walkArray': True})
        self.assertIn('walkArray', str(ctx.exception))

    def test_bad_config_type(self):
        with self.assertRaises(InvalidConfigError):
            WalkConfig.from_options(['walk_arrays'])

    def test_string_matching_keys_rejected(self):
        with self.assertRaises(InvalidConfigError):
            WalkConfig.from_options(walk_arrays_matching_keys='transforms')

    def test_non_bool_walk_arrays_rejected(self):
        with self.assertRaises(InvalidConfigError) as ctx:
            WalkConfig.from_options(walk_arrays='yes')
        self.assertIn("walk_arrays must be a boolean", str(ctx.exception))

    def test_unhashable_matching_keys_rejected(self):
        with self.assertRaises(InvalidConfigError):
            WalkConfig.from_options(walk_arrays_matching_keys=[['a']])

    def test_validate_reports_problems(self):
        config = WalkConfig(walk_arrays='yes', walk_arrays_matching_keys=['a'], path_type='x')

        errors = config.validate()

        self.assertEqual(len(errors), 3)
        self.assertIn("walk_arrays must be a boolean", errors)


def test_invalid_path_type_fails_before_visiting():
    calls = []

    with pytest.raises(InvalidPathTypeError):
        walk_object({'a': 1}, lambda *args: calls.append(args), path_type='bogus')

    assert calls == []


def test_unknown_keyword_option():
    with pytest.raises(InvalidConfigError):
        walk_object({}, lambda *args: None, walkarrays=True)

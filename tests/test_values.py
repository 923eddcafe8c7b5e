from __future__ import annotations

import unittest

from nested_array import Settings, ValueKind, is_array_like, kind_of, load_settings, shape


class _LyingLength:
    def __len__(self) -> int:
        return 3

    def __getitem__(self, index):
        raise IndexError(index)


class _Sequence:
    def __init__(self, *items) -> None:
        self._items = items

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index):
        return self._items[index]


class ArrayLikePredicateTests(unittest.TestCase):
    def test_lists_and_tuples_are_nodes(self) -> None:
        for value in ([], [1], [[1], 2], (), (1, 2)):
            with self.subTest(value=value):
                self.assertTrue(is_array_like(value))

    def test_atomic_values_are_leaves(self) -> None:
        for value in (None, 0, 1.5, "", "abc", b"ab", bytearray(b"ab"), {0: "a"}, {1, 2}, object()):
            with self.subTest(value=value):
                self.assertFalse(is_array_like(value))

    def test_generic_sequences_need_a_readable_last_item(self) -> None:
        self.assertTrue(is_array_like(range(3)))
        self.assertTrue(is_array_like(range(0)))
        self.assertTrue(is_array_like(_Sequence("a", "b")))
        self.assertTrue(is_array_like(_Sequence()))
        self.assertFalse(is_array_like(_LyingLength()))

    def test_strings_stay_leaves_during_traversal(self) -> None:
        self.assertEqual(shape(["ab", "cd"]), [2])
        self.assertEqual(shape([("a", "b"), ("c", "d")]), [2, 2])
        self.assertEqual(shape([_Sequence(1, 2, 3)]), [1, 3])

    def test_tuple_leaf_setting(self) -> None:
        settings = Settings(tuples_as_leaves=True)
        self.assertFalse(is_array_like((1, 2), settings))
        self.assertTrue(is_array_like([1, 2], settings))

    def test_kind_of(self) -> None:
        self.assertEqual(kind_of([1]), ValueKind.ARRAY)
        self.assertEqual(kind_of((1,)), ValueKind.ARRAY_LIKE)
        self.assertEqual(kind_of("x"), ValueKind.LEAF)
        self.assertEqual(kind_of((1,), Settings(tuples_as_leaves=True)), ValueKind.LEAF)


class SettingsTests(unittest.TestCase):
    def test_defaults(self) -> None:
        settings = load_settings({})
        self.assertFalse(settings.tuples_as_leaves)
        self.assertFalse(settings.jax_arrays_as_leaves)

    def test_flags_parse_common_spellings(self) -> None:
        for raw, want in (("1", True), ("TRUE", True), (" yes ", True), ("on", True), ("0", False), ("off", False), ("", False)):
            with self.subTest(raw=raw):
                settings = load_settings({"NESTED_ARRAY_TUPLES_AS_LEAVES": raw})
                self.assertIs(settings.tuples_as_leaves, want)

    def test_unrecognised_flag_warns_and_uses_default(self) -> None:
        with self.assertLogs("nested_array.config", level="WARNING") as logs:
            settings = load_settings({"NESTED_ARRAY_JAX_ARRAYS_AS_LEAVES": "maybe"})
        self.assertFalse(settings.jax_arrays_as_leaves)
        self.assertIn("NESTED_ARRAY_JAX_ARRAYS_AS_LEAVES", logs.output[0])


if __name__ == "__main__":
    unittest.main()

"""
Chaining Hash Table Tests
=========================
put / get / remove / contains, in-place update, growth and rehash,
NULL handling, chain collisions, bulk export, diagnostics.
"""

import unittest

from hypothesis import given, settings, strategies as st

from indexing.hash_function import hash_key
from indexing.hash_table import DEFAULT_CAPACITY, MAX_LOAD_FACTOR, HashTable


class HashTableTestBase(unittest.TestCase):

    def setUp(self):
        self.table = HashTable()


# ═══════════════════════════════════════════════════════════════════════════
# Basic Operations
# ═══════════════════════════════════════════════════════════════════════════

class TestHashTableBasics(HashTableTestBase):

    def test_defaults(self):
        self.assertEqual(self.table.capacity, DEFAULT_CAPACITY)
        self.assertEqual(self.table.size, 0)
        self.assertTrue(self.table.is_empty())
        self.assertEqual(self.table.load_factor, 0.0)

    def test_put_and_get(self):
        self.table.put("مفعول", "Pattern1")
        self.table.put("فاعل", "Pattern2")
        self.assertEqual(self.table.get("مفعول"), "Pattern1")
        self.assertEqual(self.table.get("فاعل"), "Pattern2")
        self.assertIsNone(self.table.get("غير موجود"))

    def test_update_replaces_value_in_place(self):
        self.table.put("مفعول", "Pattern1")
        self.table.put("مفعول", "UpdatedPattern")
        self.assertEqual(self.table.get("مفعول"), "UpdatedPattern")
        self.assertEqual(self.table.size, 1)

    def test_put_get_remove_scenario(self):
        """put A, put B, get A, remove A → size 1."""
        a, b = object(), object()
        self.table.put("فاعل", a)
        self.table.put("مفعول", b)
        self.assertIs(self.table.get("فاعل"), a)
        self.assertIs(self.table.remove("فاعل"), a)
        self.assertEqual(self.table.size, 1)
        self.assertIsNone(self.table.get("فاعل"))
        self.assertIs(self.table.get("مفعول"), b)

    def test_remove_missing(self):
        self.table.put("مفعول", "Pattern1")
        self.assertIsNone(self.table.remove("غير موجود"))
        self.assertEqual(self.table.size, 1)

    def test_contains(self):
        self.table.put("مفعول", "Pattern1")
        self.assertTrue(self.table.contains("مفعول"))
        self.assertIn("مفعول", self.table)
        self.assertFalse(self.table.contains("غير موجود"))

    def test_keys_and_values(self):
        self.table.put("مفعول", "Pattern1")
        self.table.put("فاعل", "Pattern2")
        self.assertCountEqual(self.table.keys(), ["مفعول", "فاعل"])
        self.assertCountEqual(self.table.values(), ["Pattern1", "Pattern2"])
        self.assertCountEqual(self.table.items(),
                              [("مفعول", "Pattern1"), ("فاعل", "Pattern2")])

    def test_export_order_stable_without_mutation(self):
        for i in range(10):
            self.table.put(f"k{i}", i)
        self.assertEqual(self.table.keys(), self.table.keys())
        self.assertEqual(list(self.table), self.table.keys())
        # keys and values come from the same walk
        self.assertEqual(
            [self.table.get(k) for k in self.table.keys()], self.table.values())

    def test_load_factor(self):
        self.table.put("مفعول", "Pattern1")
        self.assertFalse(self.table.is_empty())
        self.assertAlmostEqual(self.table.load_factor, 1.0 / self.table.capacity)

    def test_clear_keeps_capacity(self):
        for i in range(20):
            self.table.put(f"Key{i}", i)
        capacity = self.table.capacity
        self.table.clear()
        self.assertEqual(self.table.size, 0)
        self.assertEqual(self.table.capacity, capacity)
        self.assertIsNone(self.table.get("Key1"))
        self.table.put("Key1", 1)
        self.assertEqual(self.table.get("Key1"), 1)


# ═══════════════════════════════════════════════════════════════════════════
# Growth
# ═══════════════════════════════════════════════════════════════════════════

class TestHashTableGrowth(HashTableTestBase):

    def test_sixteen_keys_double_capacity(self):
        for i in range(16):
            self.table.put(f"Key{i}", f"Value{i}")
        self.assertEqual(self.table.capacity, 32)
        self.assertEqual(self.table.size, 16)
        for i in range(16):
            self.assertEqual(self.table.get(f"Key{i}"), f"Value{i}")

    def test_growth_triggers_at_threshold(self):
        # 11 entries in 16 buckets; the 12th would reach 0.75
        for i in range(11):
            self.table.put(f"Key{i}", i)
        self.assertEqual(self.table.capacity, 16)
        self.table.put("Key11", 11)
        self.assertEqual(self.table.capacity, 32)
        self.assertLess(self.table.load_factor, MAX_LOAD_FACTOR)

    def test_update_never_grows(self):
        for i in range(11):
            self.table.put(f"Key{i}", i)
        self.table.put("Key0", "updated")
        self.assertEqual(self.table.capacity, 16)
        self.assertEqual(self.table.get("Key0"), "updated")

    def test_growth_preserves_associations(self):
        for i in range(11):
            self.table.put(f"Key{i}", i * 10)
        before = {k: self.table.get(k) for k in self.table.keys()}
        self.table.put("trigger", -1)
        after = {k: self.table.get(k) for k in before}
        self.assertEqual(before, after)
        self.assertEqual(self.table.verify_structure(), [])

    def test_repeated_growth(self):
        for i in range(200):
            self.table.put(f"Key{i}", i)
        self.assertEqual(self.table.capacity, 512)
        self.assertEqual(self.table.size, 200)
        self.assertEqual(self.table.verify_structure(), [])

    def test_capacity_one(self):
        table = HashTable(capacity=1)
        table.put("a", 1)
        self.assertEqual(table.capacity, 2)
        table.put("b", 2)
        self.assertEqual(table.capacity, 4)
        self.assertEqual(table.get("a"), 1)
        self.assertEqual(table.get("b"), 2)

    def test_invalid_capacity(self):
        for bad in (0, -4, 2.5):
            with self.assertRaises(ValueError):
                HashTable(capacity=bad)


# ═══════════════════════════════════════════════════════════════════════════
# NULL handling
# ═══════════════════════════════════════════════════════════════════════════

class TestHashTableNull(HashTableTestBase):

    def test_put_none_key_rejected(self):
        with self.assertRaisesRegex(ValueError, "NULL"):
            self.table.put(None, "x")
        self.assertEqual(self.table.size, 0)

    def test_put_none_value_rejected(self):
        self.table.put("k", "v")
        with self.assertRaises(ValueError):
            self.table.put("k", None)
        self.assertEqual(self.table.get("k"), "v")

    def test_reads_with_none_key(self):
        self.table.put("k", "v")
        self.assertIsNone(self.table.get(None))
        self.assertFalse(self.table.contains(None))
        self.assertIsNone(self.table.remove(None))
        self.assertEqual(self.table.size, 1)


# ═══════════════════════════════════════════════════════════════════════════
# Collisions
# ═══════════════════════════════════════════════════════════════════════════

class TestHashTableChains(unittest.TestCase):
    """Integer keys k, k+64, k+128 share a bucket in a 64-bucket table."""

    def setUp(self):
        self.table = HashTable(capacity=64)
        for key in (0, 64, 128):
            self.table.put(key, str(key))

    def test_same_bucket(self):
        self.assertEqual(len({hash_key(k, 64) for k in (0, 64, 128)}), 1)
        stats = self.table.stats()
        self.assertEqual(stats["longest_chain"], 3)
        self.assertEqual(stats["used_buckets"], 1)
        self.assertEqual(stats["empty_buckets"], 63)

    def test_remove_middle_of_chain(self):
        self.assertEqual(self.table.remove(64), "64")
        self.assertEqual(self.table.get(0), "0")
        self.assertEqual(self.table.get(128), "128")
        self.assertEqual(self.table.size, 2)
        self.assertEqual(self.table.verify_structure(), [])

    def test_remove_chain_head_and_tail(self):
        # New keys are prepended: 128 is the head, 0 the tail
        self.assertEqual(self.table.remove(128), "128")
        self.assertEqual(self.table.remove(0), "0")
        self.assertEqual(self.table.keys(), [64])

    def test_update_inside_chain(self):
        self.table.put(64, "sixty-four")
        self.assertEqual(self.table.get(64), "sixty-four")
        self.assertEqual(self.table.size, 3)


# ═══════════════════════════════════════════════════════════════════════════
# Diagnostics
# ═══════════════════════════════════════════════════════════════════════════

class TestHashTableDiagnostics(HashTableTestBase):

    def test_stats_empty(self):
        stats = self.table.stats()
        self.assertEqual(stats["size"], 0)
        self.assertEqual(stats["capacity"], 16)
        self.assertEqual(stats["longest_chain"], 0)
        self.assertEqual(stats["avg_chain_length"], 0.0)

    def test_verify_detects_misplaced_node(self):
        self.table.put("فاعل", 1)
        index = hash_key("فاعل", self.table.capacity)
        wrong = (index + 1) % self.table.capacity
        self.table._buckets[wrong] = self.table._buckets[index]
        self.table._buckets[index] = None
        issues = self.table.verify_structure()
        self.assertTrue(any("expected" in i for i in issues))

    def test_verify_detects_size_mismatch(self):
        self.table.put("a", 1)
        self.table._size = 3
        self.assertTrue(any("Size mismatch" in i for i in self.table.verify_structure()))


# ═══════════════════════════════════════════════════════════════════════════
# Randomized model check
# ═══════════════════════════════════════════════════════════════════════════

table_ops = st.lists(
    st.tuples(st.sampled_from(["put", "remove"]),
              st.text(min_size=1, max_size=3),
              st.integers()),
    max_size=150,
)


class TestHashTableProperties(unittest.TestCase):

    @settings(max_examples=150, deadline=None)
    @given(ops=table_ops)
    def test_matches_dict_model(self, ops):
        table = HashTable()
        model = {}
        for op, key, value in ops:
            if op == "put":
                capacity = table.capacity
                grows = key not in model and (len(model) + 1) / capacity >= MAX_LOAD_FACTOR
                table.put(key, value)
                model[key] = value
                self.assertEqual(table.capacity, capacity * 2 if grows else capacity)
            else:
                self.assertEqual(table.remove(key), model.pop(key, None))

            self.assertEqual(table.size, len(model))
            self.assertEqual(table.verify_structure(), [])

        for key, value in model.items():
            self.assertEqual(table.get(key), value)
        self.assertCountEqual(table.keys(), list(model))

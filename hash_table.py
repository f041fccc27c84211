import sys
from typing import Generic, TypeVar

import numpy as np


FNV_OFFSET_BASIS = 2166136261
FNV_PRIME = 16777619
TABLE_SIZE = 100000

T = TypeVar("T")


def fnv1_hash(key: str) -> int:
    """ Hashes a key into a 32 bit unsigned integer, one byte at a time.
    Each byte is xor'd in first and then multiplied by the FNV prime, this ordering has to stay as is
    """
    value = FNV_OFFSET_BASIS
    # surrogateescape gives back the raw bytes of names read from non UTF-8 files
    for b in key.encode("utf-8", "surrogateescape"):
        value ^= b
        value = (value * FNV_PRIME) & 0xFFFFFFFF
    return value


class Entry:
    def __init__(self, data, key, next=None):
        self.data = data
        self.key = key
        self.next = next


class HashTable(Generic[T]):
    def __init__(self, size=TABLE_SIZE, hash_func=fnv1_hash):
        if size < 1:
            raise ValueError("A hash table needs at least one bucket")
        self.size = size
        # Swappable so collisions can be forced on purpose
        self.hash_func = hash_func
        self.supress_prints = False
        self.table = []
        self.count = 0
        self.clear()

    def clear(self):
        """ Unlinks every entry, then leaves all of the buckets empty"""
        for head in self.table:
            while head is not None:
                head.next, head = None, head.next
        self.table = [None] * self.size
        self.count = 0

    def index_of(self, key):
        return self.hash_func(key) % self.size

    def not_found(self, key):
        if not self.supress_prints:
            print(f"{key} not found in the table", file=sys.stderr)

    def insert(self, key: str, data: T) -> Entry:
        index = self.index_of(key)
        # New entries always go on the front of the chain, duplicates included
        entry = Entry(data, key, self.table[index])
        self.table[index] = entry
        self.count += 1
        return entry

    def lookup(self, key: str):
        entry = self.table[self.index_of(key)]
        while entry is not None and entry.key != key:
            entry = entry.next

        if entry is None:
            self.not_found(key)
        return entry

    def delete(self, key: str):
        """ Removes the most recently inserted entry for key and returns it, or None if there wasn't one.
        Only the chain the key hashes to gets searched
        """
        index = self.index_of(key)
        prev = None
        entry = self.table[index]
        while entry is not None and entry.key != key:
            prev = entry
            entry = entry.next

        if entry is None:
            self.not_found(key)
            return None

        if prev is None:
            self.table[index] = entry.next
        else:
            # The head stays where it is, we just skip over the removed entry
            prev.next = entry.next
        entry.next = None
        self.count -= 1
        return entry

    def traverse(self):
        """ Yields (bucket index, data) for every entry, buckets in ascending order and each chain head first"""
        for index, entry in enumerate(self.table):
            while entry is not None:
                yield index, entry.data
                entry = entry.next

    def print_table(self, print_data_func, out=None):
        out = sys.stdout if out is None else out
        current = None
        for index, data in self.traverse():
            if index != current:
                if current is not None:
                    out.write("\n")
                out.write(f"{index}: ")
                current = index
            print_data_func(data, out)
        if current is not None:
            out.write("\n")

    def chain_lengths(self):
        lengths = np.zeros(self.size, dtype=np.int64)
        for index, entry in enumerate(self.table):
            while entry is not None:
                lengths[index] += 1
                entry = entry.next
        return lengths

    def collision_rate(self) -> float:
        """ Percentage of the occupied buckets that hold more than one entry.
        An empty table has nothing to collide, so it reports 0.0 rather than dividing by zero
        """
        lengths = self.chain_lengths()
        collided = np.count_nonzero(lengths > 1)
        alone = np.count_nonzero(lengths == 1)
        if collided + alone == 0:
            return 0.0
        return float(collided / (collided + alone) * 100)

    def distribution(self):
        lengths = self.chain_lengths()
        occupied = lengths[lengths > 0]
        return {
            "entries": int(lengths.sum()),
            "buckets": self.size,
            "occupied": int(occupied.size),
            "collided": int(np.count_nonzero(occupied > 1)),
            "load_factor": float(lengths.sum() / self.size),
            "longest_chain": int(lengths.max()),
            "mean_chain": float(occupied.mean()) if occupied.size else 0.0,
        }

    def __len__(self):
        return self.count

    def __contains__(self, key):
        # Membership checks shouldn't spam the not found message
        quiet, self.supress_prints = self.supress_prints, True
        try:
            return self.lookup(key) is not None
        finally:
            self.supress_prints = quiet

    def __getitem__(self, key):
        entry = self.table[self.index_of(key)]
        while entry is not None:
            if entry.key == key:
                return entry.data
            entry = entry.next
        raise KeyError(f"{key} is not in the Hash Table")

    def __iter__(self):
        return self.traverse()

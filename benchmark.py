import sys
import time
from random import choice, randint
from string import ascii_lowercase

from hash_table import HashTable, TABLE_SIZE


def generate_random_word():
    return "".join([choice(ascii_lowercase) for _ in range(randint(1, 15))])


def run(count=10000, size=TABLE_SIZE):
    """ Times loading count random words into a fresh table, returns (seconds, collision rate)"""
    words = [generate_random_word() for _ in range(count)]
    table = HashTable(size)

    strt = time.perf_counter()
    for i, word in enumerate(words):
        table.insert(word, i)
    elapsed = time.perf_counter() - strt

    return elapsed, table.collision_rate()


if __name__ == "__main__":
    count = int(sys.argv[1]) if len(sys.argv) > 1 else 10000
    size = int(sys.argv[2]) if len(sys.argv) > 2 else TABLE_SIZE
    elapsed, rate = run(count, size)
    print(f"Inserted {count} words in {elapsed} seconds")
    print(f"Collision Rate = {rate:.2f}%")
    with open("Times.txt", "a") as f:
        f.write(f"{count},{size},{elapsed}\n")

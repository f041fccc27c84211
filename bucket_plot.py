import sys

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np

from hash_table import HashTable
from phonebook import load_file


def plot_distribution(table, output="buckets.png"):
    """ Saves a bar chart of how many buckets hold each chain length. Empty buckets are left off,
    with 100000 of them they'd flatten everything else
    """
    lengths = table.chain_lengths()
    counts = np.bincount(lengths)
    sizes = np.arange(counts.size)[1:]

    fig, ax = plt.subplots()
    ax.bar(sizes, counts[1:], label="Buckets")
    ax.set_xlabel("Chain length")
    ax.set_ylabel("Number of buckets")
    ax.set_title(f"Collision Rate = {table.collision_rate():.2f}%")
    ax.legend()
    fig.savefig(output)
    plt.close(fig)
    return counts


def main(argv=None):
    args = sys.argv[1:] if argv is None else argv
    if len(args) not in (1, 2):
        print("No filename", file=sys.stderr)
        return 1

    table = HashTable()
    try:
        load_file(args[0], table)
    except OSError:
        print("Failed to open file", file=sys.stderr)
        return 1

    for name, value in table.distribution().items():
        print(f"{name}: {value}")
    plot_distribution(table, *args[1:])
    return 0


if __name__ == "__main__":
    sys.exit(main())

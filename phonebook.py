import sys
from collections import namedtuple

from hash_table import HashTable


SEPARATOR = "########################"

Record = namedtuple("Record", "name number")


def parse_line(line):
    """ Splits a "name - number" line on the first dash, returns None if there isn't one"""
    name, dash, number = line.partition("-")
    if not dash:
        print("Dash not found in the input string.")
        return None
    return Record(name.strip(), number.strip())


def load_records(lines, table):
    """ Parses every line and inserts the good ones, keyed by name. Returns how many were stored"""
    stored = 0
    for line in lines:
        record = parse_line(line)
        if record is None:
            continue
        table.insert(record.name, record)
        stored += 1
    return stored


def load_file(filename, table):
    with open(filename, "r", encoding="utf-8", errors="surrogateescape") as file:
        return load_records(file, table)


def print_phonebook_data(record, out):
    out.write(f"|{record.name}, {record.number}| -> ")


def report(table, out=None):
    out = sys.stdout if out is None else out
    table.print_table(print_phonebook_data, out)
    rate = table.collision_rate()
    out.write(SEPARATOR + "\n")
    out.write(f"Collision Rate = {rate:.2f}%\n")


def main(argv=None):
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print("No filename", file=sys.stderr)
        return 1

    # Names are echoed back byte for byte, whatever their encoding
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(errors="surrogateescape")

    table = HashTable()
    try:
        load_file(args[0], table)
    except OSError:
        print("Failed to open file", file=sys.stderr)
        return 1

    report(table)
    table.clear()
    return 0


if __name__ == "__main__":
    sys.exit(main())

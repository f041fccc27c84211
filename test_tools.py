import benchmark
import bucket_plot
from hash_table import HashTable


def test_plot_distribution_saves_chart(tmp_path):
    table = HashTable(2, hash_func=lambda key: len(key))
    for key in ["a", "b", "c", "dd"]:
        table.insert(key, key)
    output = tmp_path / "buckets.png"
    counts = bucket_plot.plot_distribution(table, output)
    assert output.exists()
    # bucket 0 holds "dd", bucket 1 holds the other three
    assert list(counts) == [0, 1, 0, 1]


def test_bucket_plot_main(tmp_path, capsys):
    path = tmp_path / "phonebook.txt"
    path.write_text("Alice - 12345\nBob - 67890\n", encoding="utf-8")
    output = tmp_path / "out.png"
    assert bucket_plot.main([str(path), str(output)]) == 0
    out = capsys.readouterr().out
    assert "entries: 2" in out
    assert "buckets: 100000" in out
    assert output.exists()


def test_bucket_plot_main_errors(tmp_path, capsys):
    assert bucket_plot.main([]) == 1
    assert capsys.readouterr().err == "No filename\n"
    assert bucket_plot.main([str(tmp_path / "missing.txt")]) == 1
    assert capsys.readouterr().err == "Failed to open file\n"


def test_benchmark_run():
    elapsed, rate = benchmark.run(200, size=64)
    assert elapsed >= 0
    # 200 keys into 64 buckets can't avoid collisions
    assert 0 < rate <= 100


def test_generate_random_word():
    word = benchmark.generate_random_word()
    assert 1 <= len(word) <= 15
    assert word.isalpha() and word.islower()

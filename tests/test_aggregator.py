import threading

import pytest

import textify
from textify import ConversionError, OutputAggregator, RunStatistics


def test_append_and_flush(tmp_path):
    out = tmp_path / "out.txt"
    with OutputAggregator(out) as aggregator:
        aggregator.append(b"first\n")
        aggregator.append(b"second\n")
        aggregator.flush()
    assert out.read_bytes() == b"first\nsecond\n"


def test_flush_only_once(tmp_path):
    with OutputAggregator(tmp_path / "out.txt") as aggregator:
        aggregator.flush()
        with pytest.raises(ConversionError):
            aggregator.flush()


def test_uncreatable_output_is_fatal(tmp_path):
    with pytest.raises(ConversionError, match="Cannot create output file"):
        OutputAggregator(tmp_path / "missing" / "out.txt")


def test_write_after_close_is_fatal(tmp_path):
    aggregator = OutputAggregator(tmp_path / "out.txt")
    aggregator.close()
    with pytest.raises(ConversionError, match="Failed to write"):
        aggregator.append(b"late")


def test_concurrent_appends_never_interleave(tmp_path):
    out = tmp_path / "out.txt"
    threads_count, per_thread = 8, 50

    with OutputAggregator(out) as aggregator:

        def writer(tag):
            for i in range(per_thread):
                line = f"<{tag}:{i}:" + tag * 2000 + ">\n"
                aggregator.append(line.encode("utf-8"))

        threads = [
            threading.Thread(target=writer, args=(chr(ord("a") + n),))
            for n in range(threads_count)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        aggregator.flush()

    lines = out.read_text(encoding="utf-8").splitlines()
    assert len(lines) == threads_count * per_thread
    for line in lines:
        tag = line[1]
        assert line.endswith(tag * 2000 + ">")
        assert set(line.split(":", 2)[2][:-1]) == {tag}


def test_run_statistics_concurrent_increments():
    stats = RunStatistics()

    def bump():
        for _ in range(1000):
            stats.increment_processed()
            stats.increment_skipped()

    threads = [threading.Thread(target=bump) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert stats.processed == 8000
    assert stats.skipped == 8000
    assert stats.total == 16000

import threading

import pytest
from tokenplot.services.history import SentenceHistory, get_history


@pytest.mark.parametrize("n", [0, 1, 4, 5, 6, 12])
def test_length_is_bounded(n):
    h = SentenceHistory()
    for i in range(n):
        h.record(f"s{i}")
    assert len(h.snapshot()) == min(n, 5)
    assert len(h) == min(n, 5)


def test_fifo_eviction():
    h = SentenceHistory()
    for s in ["s1", "s2", "s3", "s4", "s5", "s6"]:
        h.record(s)
    assert h.snapshot() == ["s2", "s3", "s4", "s5", "s6"]


def test_seven_sentences_keep_last_five_oldest_first():
    h = SentenceHistory()
    sentences = [f"sentence number {i}" for i in range(1, 8)]
    for s in sentences:
        h.record(s)
    assert h.snapshot() == sentences[2:]


def test_duplicates_are_kept():
    h = SentenceHistory(capacity=3)
    for s in ["a", "a", "b"]:
        h.record(s)
    assert h.snapshot() == ["a", "a", "b"]


def test_snapshot_is_a_copy():
    h = SentenceHistory()
    h.record("one")
    snap = h.snapshot()
    snap.append("two")
    assert h.snapshot() == ["one"]


def test_record_and_snapshot_includes_new_sentence():
    h = SentenceHistory(capacity=2)
    h.record("old")
    h.record("older")
    assert h.record_and_snapshot("new") == ["older", "new"]


@pytest.mark.parametrize("bad", [0, -1, 2.5, None, True])
def test_rejects_bad_capacity(bad):
    with pytest.raises(ValueError):
        SentenceHistory(capacity=bad)


def test_concurrent_records_stay_bounded():
    h = SentenceHistory()
    seen_lengths = []

    def worker(k):
        for i in range(200):
            seen_lengths.append(len(h.record_and_snapshot(f"{k}-{i}")))

    threads = [threading.Thread(target=worker, args=(k,)) for k in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(h.snapshot()) == 5
    assert max(seen_lengths) <= 5


def test_default_capacity_is_five():
    assert SentenceHistory().capacity == 5


def test_app_config_owns_history():
    h = get_history()
    assert isinstance(h, SentenceHistory)
    assert h.capacity == 5
    assert get_history() is h

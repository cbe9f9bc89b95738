import io
from pathlib import Path

import pytest

from hangman.datasets import WordIndex, WordListError, MAX_WORD_LENGTH
from hangman.harness import SAMPLE_WORDS, TEST_WORD
from conftest import FIXTURE_WORDS, ENDS_IN_E


def test_none_source_is_a_configuration_error():
    with pytest.raises(ValueError):
        WordIndex(None, "E")


def test_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        WordIndex(str(tmp_path / "words-aint-there.txt"), "E")


def test_unreadable_file_reports_read_phase(tmp_path: Path):
    p = tmp_path / "bad.txt"
    p.write_bytes(b"cattle\n\xff\xfe\xfa\n")
    with pytest.raises(WordListError) as exc:
        WordIndex(str(p), "E")
    assert exc.value.phase == "read"
    assert isinstance(exc.value, OSError)


def test_directory_instead_of_file_reports_read_phase(tmp_path: Path):
    with pytest.raises(WordListError) as exc:
        WordIndex(str(tmp_path), "E")
    assert exc.value.phase == "read"
    assert exc.value.path == str(tmp_path)


class _FailingClose(io.StringIO):
    """In-memory word file whose first close() fails."""

    def close(self):
        if not getattr(self, "_failed", False):
            self._failed = True
            raise OSError("device went away")
        super().close()


def test_close_failure_reports_close_phase(tmp_path: Path, monkeypatch):
    monkeypatch.setattr(Path, "open", lambda self, *a, **kw: _FailingClose("cattle\nsettle\n"))
    with pytest.raises(WordListError) as exc:
        WordIndex(str(tmp_path / "words.txt"), "E")
    monkeypatch.undo()
    assert exc.value.phase == "close"
    assert isinstance(exc.value.__cause__, OSError)


@pytest.mark.parametrize("line", ["cat-tle", "don't", "café", "x" * (MAX_WORD_LENGTH + 1)])
def test_invalid_words_rejected_at_load(line):
    with pytest.raises(ValueError):
        WordIndex(["cattle", line], "E")


@pytest.mark.parametrize("letter", ["", "EE", "3", None])
def test_bad_index_letter(letter):
    with pytest.raises(ValueError):
        WordIndex(["cattle"], letter)


def test_word_count_and_membership(index: WordIndex):
    # every fixture word is distinct, so the count matches the line count
    assert index.word_count() == len(FIXTURE_WORDS)
    assert len(index) == len(FIXTURE_WORDS)
    assert index.contains(TEST_WORD)
    assert index.contains(TEST_WORD.lower())
    for word in SAMPLE_WORDS:
        assert index.contains(word), f"Does not contain: {word}"
    assert "cattle" in index
    assert not index.contains("ZEBRA")
    assert not index.contains("X" * (MAX_WORD_LENGTH + 5))


def test_get_candidates(index: WordIndex):
    candidates = index.candidates("-----E")
    assert TEST_WORD in candidates
    assert candidates == frozenset(ENDS_IN_E)

    # a secret word is its own pattern once fully revealed
    for word in SAMPLE_WORDS:
        assert word in index.candidates(word)


def test_bucket_completeness(index: WordIndex):
    for word in FIXTURE_WORDS:
        pos = word.find("E")
        pattern = "".join("E" if i == pos else "-" for i in range(len(word)))
        assert word in index.candidates(pattern)


def test_buckets_hold_first_occurrence_only(index: WordIndex):
    # SETTLE and BEETLE both have their first 'E' at 1
    bucket = index.candidates("-E----")
    assert {"SETTLE", "METTLE", "BEETLE", "HELMET"} <= bucket
    assert not bucket & frozenset(ENDS_IN_E)

    # no 'E' at all
    absent = index.candidates("------")
    assert "TOXICS" in absent
    assert all("E" not in w for w in absent)


def test_lookup_miss_is_empty(index: WordIndex):
    assert index.candidates("-" * 20) == frozenset()
    assert index.candidates("E" + "-" * 20) == frozenset()
    assert index.candidates("-" * (MAX_WORD_LENGTH + 1)) == frozenset()
    assert index.candidates("") == frozenset()


def test_lookup_is_case_insensitive(index: WordIndex):
    assert index.candidates("-----e") == index.candidates("-----E")


def test_bucket_sizes_add_up(index: WordIndex):
    sizes = index.bucket_sizes()
    assert sum(sizes.values()) == index.word_count()
    assert sizes[(6, 5)] == len(ENDS_IN_E)
    assert sorted(index.words()) == sorted(FIXTURE_WORDS)


def test_blank_lines_skipped_and_case_folded():
    idx = WordIndex(["Cattle", "", "  ", "battle\n"], "e")
    assert idx.index_letter == "E"
    assert idx.word_count() == 2
    assert idx.candidates("-----E") == frozenset({"CATTLE", "BATTLE"})


def test_index_letter_is_configurable():
    idx = WordIndex(["cattle", "settle", "toxics"], "T")
    assert idx.candidates("--T---") == frozenset({"CATTLE", "SETTLE"})
    assert idx.candidates("T-----") == frozenset({"TOXICS"})

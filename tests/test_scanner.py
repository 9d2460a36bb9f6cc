"""Tests for the directory scan"""
import os

import pytest

from fastq_manifest.exceptions import TokenCountError
from fastq_manifest.scanner import ManifestEntry, SampleScanner, iter_files


class TestIterFiles:

    def test_lists_every_regular_file(self, read_tree):
        found = {os.path.join(os.path.relpath(d, read_tree), f) for d, f in iter_files(read_tree)}
        assert found == {
            os.path.join("run1", "sample_buno_ABCD123_L001_R1_001.fastq.gz"),
            os.path.join("run1", "sample_buno_ABCD123_L001_R2_001.fastq.gz"),
            os.path.join("run1", "notes.txt"),
            os.path.join("run1", "sample_buno_ABCD123_L001_R1_001.fastq"),
            os.path.join("run2", "nested", "patient_07_XYZ_lane002-read1.fq.gzip"),
            os.path.join("run2", "readme.md"),
        }

    def test_symlinks_are_not_files(self, read_tree):
        target = read_tree / "run1" / "sample_buno_ABCD123_L001_R1_001.fastq.gz"
        os.symlink(target, read_tree / "link_L001_R1_001.fastq.gz")
        names = [f for _, f in iter_files(read_tree)]
        assert "link_L001_R1_001.fastq.gz" not in names

    def test_skip_hidden(self, tmp_path, make_tree):
        make_tree(tmp_path, {
            ".cache/s_a_b_L001_R1.fastq.gz": "",
            ".s_a_b_L001_R2.fastq.gz": "",
            "s_a_b_L001_R1.fastq.gz": "",
        })
        assert len(list(iter_files(tmp_path))) == 3
        assert [f for _, f in iter_files(tmp_path, skip_hidden=True)] == ["s_a_b_L001_R1.fastq.gz"]


class TestSampleScanner:

    def test_entries_for_matching_reads(self, read_tree):
        scanner = SampleScanner(read_tree, token_count=3, separator="_")
        entries = list(scanner.scan())

        run1 = os.path.realpath(read_tree / "run1")
        nested = os.path.realpath(read_tree / "run2" / "nested")
        assert sorted(entries) == sorted([
            ManifestEntry("sample_buno_ABCD123", run1),
            ManifestEntry("sample_buno_ABCD123", run1),
            ManifestEntry("patient_07_XYZ", nested),
        ])
        assert scanner.stats == {"total_files": 6, "matched_files": 3, "skipped_files": 0}

    def test_directories_are_absolute(self, read_tree, monkeypatch):
        monkeypatch.chdir(read_tree)
        entries = list(SampleScanner(".", token_count=2).scan())
        assert entries
        for entry in entries:
            assert os.path.isabs(entry.directory)
            assert not entry.directory.endswith(os.sep)

    def test_too_few_tokens_aborts(self, read_tree):
        scanner = SampleScanner(read_tree, token_count=4)
        with pytest.raises(TokenCountError):
            list(scanner.scan())

    def test_skip_invalid_keeps_going(self, read_tree):
        scanner = SampleScanner(read_tree, token_count=4, skip_invalid=True)
        entries = list(scanner.scan())
        assert [e.sample_id for e in entries] == ["sample_buno_ABCD123_L001"] * 2
        assert scanner.stats["skipped_files"] == 1

    def test_missing_root_dir(self, tmp_path):
        with pytest.raises(ValueError, match="Root directory"):
            SampleScanner(tmp_path / "nope")

    def test_bad_options_rejected_up_front(self, read_tree):
        with pytest.raises(ValueError):
            SampleScanner(read_tree, token_count=0)
        with pytest.raises(ValueError):
            SampleScanner(read_tree, separator="__")

    def test_empty_directory(self, tmp_path):
        assert list(SampleScanner(tmp_path).scan()) == []

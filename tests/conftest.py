"""Shared fixtures: small read directory trees built under tmp_path."""
import os

import pytest


READ_FILES = {
    "run1/sample_buno_ABCD123_L001_R1_001.fastq.gz": "",
    "run1/sample_buno_ABCD123_L001_R2_001.fastq.gz": "",
    "run1/notes.txt": "",
    "run1/sample_buno_ABCD123_L001_R1_001.fastq": "",
    "run2/nested/patient_07_XYZ_lane002-read1.fq.gzip": "",
    "run2/readme.md": "",
}


def _make_tree(root, files):
    for rel_path, content in files.items():
        path = root / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
    return root


@pytest.fixture
def make_tree():
    """Build a tree from a {relative path: content} mapping"""
    return _make_tree


@pytest.fixture
def read_tree(tmp_path):
    """Directory tree with matching and non-matching files"""
    return _make_tree(tmp_path / "reads", READ_FILES)


@pytest.fixture
def undecodable_tree(tmp_path):
    """Tree holding a matching read whose name and directory are not valid UTF-8"""
    root = tmp_path / "raw"
    root.mkdir()
    run_dir = bytes(root) + b"/run\xff"
    try:
        os.mkdir(run_dir)
        with open(run_dir + b"/s\xff_a_b_L001_R1_001.fastq.gz", "wb"):
            pass
    except OSError:
        pytest.skip("filesystem rejects non-UTF-8 names")
    return root

"""
Read filename recognition.

A sequencing read file carries a lane token (lane/l + 3 digits) directly
followed by a read token (read/r + 1 digit), each preceded by '_' or '-',
and somewhere after that a gz/gzip suffix, e.g.

    sample_buno_clean_l001_read1_001.fastq.gz
"""
import os
import re

# Compiled once at import; shared read-only by every caller
READ_PATTERN = re.compile(
    r'(_|-)(?i:(lane|l)\d{3})(_|-)(?i:(read|r)\d{1})(?:.*)(gz|gzip)'
)


def matches(filename):
    """Return True if the filename follows the lane/read convention and is gzipped."""
    if not filename or not isinstance(filename, str):
        return False
    return READ_PATTERN.search(filename) is not None


def is_read_file(path):
    """Apply matches() to the leaf component of a path."""
    if not path:
        return False
    return matches(os.path.basename(os.fspath(path)))

"""
FASTQ Manifest Builder

Walks a directory tree, picks out gzipped sequencing reads that follow the
lane/read naming convention, and writes a manifest of sample IDs and the
directories holding them.
"""

from fastq_manifest.exceptions import ManifestError, TokenCountError
from fastq_manifest.patterns import READ_PATTERN, matches, is_read_file
from fastq_manifest.sample_id import build_id
from fastq_manifest.scanner import ManifestEntry, SampleScanner, iter_files
from fastq_manifest.manifest import write_manifest, default_output_name

__version__ = "0.1.0"

"""
Directory scan for sequencing reads.

Walks the tree under a root directory, keeps the files whose names follow the
lane/read convention, and turns each into a manifest entry holding the
sample ID and the absolute path of the directory the file lives in.
"""
import os
import time
import logging
from collections import namedtuple

from fastq_manifest.exceptions import TokenCountError
from fastq_manifest.patterns import matches
from fastq_manifest.sample_id import build_id, validate_options

logger = logging.getLogger(__name__)

DEFAULT_TOKEN_COUNT = 3
DEFAULT_SEPARATOR = "_"

ManifestEntry = namedtuple("ManifestEntry", ["sample_id", "directory"])


def _log_walk_error(error):
    logger.warning(f"Error accessing {error.filename}: {error.strerror}")


def iter_files(root_dir, skip_hidden=False):
    """
    Yield (directory, filename) for every regular file under root_dir.

    Symbolic links are not followed and symlinked files are not reported.
    Directories that cannot be listed are logged and skipped.
    """
    for current_dir, dirs, files in os.walk(root_dir, onerror=_log_walk_error):
        if skip_hidden:
            dirs[:] = [d for d in dirs if not d.startswith('.')]

        for filename in files:
            if skip_hidden and filename.startswith('.'):
                continue
            filepath = os.path.join(current_dir, filename)
            if os.path.islink(filepath) or not os.path.isfile(filepath):
                continue
            yield current_dir, filename


class SampleScanner:
    def __init__(self, root_dir, token_count=DEFAULT_TOKEN_COUNT,
                 separator=DEFAULT_SEPARATOR, skip_invalid=False,
                 skip_hidden=False):
        """
        Initialize the scanner.

        Args:
            root_dir: Root directory to scan
            token_count: Number of leading filename tokens forming the sample ID
            separator: Character splitting filenames into tokens
            skip_invalid: Log and skip files with too few tokens instead of
                aborting the scan
            skip_hidden: Ignore dot-files and dot-directories
        """
        if not os.path.isdir(root_dir):
            raise ValueError(f"Root directory does not exist or is not accessible: {root_dir}")
        validate_options(separator, token_count)

        self.root_dir = root_dir
        self.token_count = token_count
        self.separator = separator
        self.skip_invalid = skip_invalid
        self.skip_hidden = skip_hidden

        self.stats = {
            "total_files": 0,
            "matched_files": 0,
            "skipped_files": 0,
        }

    def scan(self):
        """Yield a ManifestEntry for each matching read file, in walk order."""
        start_time = time.time()
        logger.info(f"Starting scan of {os.path.abspath(self.root_dir)}")

        for current_dir, filename in iter_files(self.root_dir, skip_hidden=self.skip_hidden):
            self.stats["total_files"] += 1
            if not matches(filename):
                continue

            try:
                sample_id = build_id(filename, self.separator, self.token_count)
            except TokenCountError as e:
                if not self.skip_invalid:
                    raise
                logger.warning(f"Skipping {os.path.join(current_dir, filename)}: {e}")
                self.stats["skipped_files"] += 1
                continue

            self.stats["matched_files"] += 1
            directory = os.path.realpath(current_dir)
            logger.debug(f"Matched {filename} -> {sample_id}")
            yield ManifestEntry(sample_id, directory)

        elapsed = time.time() - start_time
        logger.info(f"Scan completed in {elapsed:.1f}s: "
                    f"{self.stats['matched_files']:,} reads matched out of "
                    f"{self.stats['total_files']:,} files "
                    f"({self.stats['skipped_files']:,} skipped)")

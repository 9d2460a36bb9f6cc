#!/usr/bin/env python3
"""
Build a sample manifest from a directory of FASTQ reads.

Usage:
  fastq-manifest /path/to/raw_reads --len 3 --sep _
  fastq-manifest /path/to/raw_reads --csv -o samples.csv

Notes:
- Only gzipped reads named like *_L001_R1_*.fastq.gz (lane/l + 3 digits,
  read/r + 1 digit, '_' or '-' before each) are picked up.
- A file with too few tokens for --len aborts the run unless --skip-invalid.
"""
import os
import sys
import argparse
import logging

from fastq_manifest.exceptions import ManifestError
from fastq_manifest.manifest import default_output_name, write_manifest
from fastq_manifest.scanner import DEFAULT_SEPARATOR, DEFAULT_TOKEN_COUNT, SampleScanner
from fastq_manifest.summary import duplicate_ids, save_summary, summarize

logger = logging.getLogger(__name__)


def setup_logging(log_file=None, verbose=False):
    """Log to stderr, and to log_file as well when given."""
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, errors='backslashreplace'))
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=handlers,
        force=True,
    )


def _fail(error):
    logger.error(str(error))
    print(f"Error: {error}", file=sys.stderr)
    return 1


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Build a sample manifest from sequencing reads')
    parser.add_argument('root_dir', help='Directory to search for read files')
    parser.add_argument('--len', '-n', dest='token_count', type=int, default=DEFAULT_TOKEN_COUNT,
                        help='Number of leading filename tokens forming the sample ID')
    parser.add_argument('--sep', '-s', dest='separator', default=DEFAULT_SEPARATOR,
                        help='Character separating filename tokens')
    parser.add_argument('--csv', action='store_true',
                        help='Write a CSV (id,new_name) instead of a [seqs] config')
    parser.add_argument('--output', '-o', default=None,
                        help='Output file (default: yap-qc_input.conf/.csv in the current directory)')
    parser.add_argument('--summary', default=None,
                        help='Also save a per-directory summary as TSV')
    parser.add_argument('--skip-invalid', action='store_true',
                        help='Skip files with too few tokens instead of aborting')
    parser.add_argument('--skip-hidden', action='store_true',
                        help='Ignore dot-files and dot-directories')
    parser.add_argument('--log-file', default=None,
                        help='Also write the log to this file')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Log every matched file')
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    try:
        setup_logging(args.log_file, args.verbose)
    except OSError as e:
        print(f"Error: cannot open log file: {e}", file=sys.stderr)
        return 1

    fmt = "csv" if args.csv else "config"
    output_file = os.path.abspath(args.output or default_output_name(fmt))

    try:
        scanner = SampleScanner(
            args.root_dir,
            token_count=args.token_count,
            separator=args.separator,
            skip_invalid=args.skip_invalid,
            skip_hidden=args.skip_hidden,
        )
        # Scan everything before opening the output so an abort leaves no manifest
        entries = list(scanner.scan())
    except (ManifestError, ValueError) as e:
        return _fail(e)

    if not entries:
        logger.warning(f"No read files matched under {args.root_dir}")

    shared = duplicate_ids(entries)
    if shared:
        logger.info(f"{len(shared):,} sample IDs are shared by more than one file")

    try:
        write_manifest(entries, output_file, fmt)
    except OSError as e:
        return _fail(e)

    if args.summary:
        summary_df = summarize(entries)
        try:
            save_summary(summary_df, args.summary)
        except OSError as e:
            return _fail(e)
        logger.info(f"Summary of {len(summary_df):,} directories saved to {args.summary}")

    print(f"Done! The result is saved as {output_file}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""
Manifest output.

Two layouts are supported:

    csv     id,new_name         config  [seqs]
            <id>                        <id>:<absolute_directory>/

The new_name column of the CSV is left for whoever renames samples later.
"""
import os
import logging

logger = logging.getLogger(__name__)

OUTPUT_STEM = "yap-qc_input"
MANIFEST_ENCODING = "utf-8"
FORMATS = {
    "csv": ".csv",
    "config": ".conf",
}


def _check_format(fmt):
    if fmt not in FORMATS:
        raise ValueError(f"Unknown manifest format '{fmt}', expected one of: {', '.join(FORMATS)}")


def default_output_name(fmt):
    """File name used when no output path is given."""
    _check_format(fmt)
    return OUTPUT_STEM + FORMATS[fmt]


def format_header(fmt):
    _check_format(fmt)
    if fmt == "csv":
        return "id,new_name\n"
    return "[seqs]\n"


def format_entry(fmt, entry):
    _check_format(fmt)
    if fmt == "csv":
        return f"{entry.sample_id}\n"
    return f"{entry.sample_id}:{entry.directory}/\n"


def write_manifest(entries, output_path, fmt="config"):
    """
    Write the header and one line per entry, replacing any existing file.

    The whole manifest is rendered before the file is opened. Names that are
    not valid UTF-8 keep their original bytes (surrogateescape), so the
    directories in a config manifest still resolve.

    Args:
        entries: Iterable of ManifestEntry
        output_path: Destination file
        fmt (str): 'csv' or 'config'

    Returns:
        int: Number of entries written
    """
    _check_format(fmt)
    lines = [format_header(fmt)]
    for entry in entries:
        lines.append(format_entry(fmt, entry))
    count = len(lines) - 1

    data = "".join(lines).encode(MANIFEST_ENCODING, errors='surrogateescape')
    with open(output_path, 'wb') as f:
        f.write(data)

    logger.info(f"Wrote {count:,} entries to {os.path.abspath(output_path)}")
    return count

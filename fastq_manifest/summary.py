"""
Per-directory summary of a scan.

Counts matched read files and distinct sample IDs in each directory, and
reports IDs that more than one file collapsed into. Nothing is deduplicated;
the manifest still carries every entry.
"""
from collections import Counter

import pandas as pd

SUMMARY_COLUMNS = ["directory", "files", "samples"]


def summarize(entries):
    """Return a DataFrame with one row per directory holding matched reads."""
    df = pd.DataFrame(list(entries), columns=["sample_id", "directory"])
    if df.empty:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)

    summary_df = (
        df.groupby("directory", sort=True)
        .agg(files=("sample_id", "size"), samples=("sample_id", "nunique"))
        .reset_index()
    )
    return summary_df[SUMMARY_COLUMNS]


def duplicate_ids(entries):
    """Sample IDs shared by more than one read file, in first-seen order."""
    counts = Counter(entry.sample_id for entry in entries)
    return [sample_id for sample_id, count in counts.items() if count > 1]


def save_summary(summary_df, output_file):
    """Save the summary as a tab-separated file."""
    summary_df.to_csv(output_file, sep='\t', index=False,
                      encoding='utf-8', errors='surrogateescape')

"""
Sample ID derivation.

The sample ID is the first N separator-delimited tokens of a filename, with
the separators between them kept. The filename must have at least one token
past the ID so the read/suffix part is never folded into it.
"""
from fastq_manifest.exceptions import TokenCountError


def validate_options(separator, token_count):
    """
    Check the ID options before any filename is touched.

    Raises:
        ValueError: separator is not a single character or token_count < 1
    """
    if not isinstance(separator, str) or len(separator) != 1:
        raise ValueError(f"Separator must be a single character, got {separator!r}")
    if isinstance(token_count, bool) or not isinstance(token_count, int) or token_count < 1:
        raise ValueError(f"Token count must be a positive integer, got {token_count!r}")


def build_id(filename, separator, token_count):
    """
    Collapse a filename into its sample ID.

    Args:
        filename (str): Leaf name of the read file
        separator (str): Single character used to split the filename
        token_count (int): Number of leading tokens that make up the ID

    Returns:
        str: The first token_count tokens joined by separator

    Raises:
        TokenCountError: The filename does not split into more than
            token_count tokens
    """
    validate_options(separator, token_count)

    # Naive split, empty tokens between repeated separators are kept
    tokens = filename.split(separator)
    if len(tokens) <= token_count:
        raise TokenCountError(filename, token_count, len(tokens))

    return separator.join(tokens[:token_count])

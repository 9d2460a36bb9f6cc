import sys

from fastq_manifest.cli import main

if __name__ == "__main__":
    sys.exit(main())

"""Solutions to classic programming exercises, one function per module."""

__version__ = "0.1.0"

__all__ = [
    "arraycombinations",
    "encryptthis",
    "findwithinarray",
    "mixbonacci",
    "mostfrequentdays",
    "multiplicationtable",
    "orderedcount",
    "uniq",
    "vowelharmony",
]
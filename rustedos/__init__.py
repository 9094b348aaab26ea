"""A simulated teaching kernel: paging, frame and heap allocation, ELF decoding, scheduling and shell text utilities."""

__version__ = "0.1.0"
"""Binary-search algorithms over sorted sequences and matrices: membership, order statistics, peaks, row ranking, occurrence ranges and the journey problem."""

__version__ = "0.1.0"
"""Unknown word modeling for lexicalized parsers: word signatures and smoothed
scores for words that were rare or unseen in training."""

__version__ = '1.0'

"""Text normalization and syllable matching."""

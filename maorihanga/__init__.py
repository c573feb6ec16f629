"""Māori to Māorihanga (Hangul Jamo) transliteration."""

from maorihanga.phonemes import PhonemeLookupError
from maorihanga.translate import analyze, translate, translate_to_maorihanga


__all__ = ["PhonemeLookupError", "analyze", "translate", "translate_to_maorihanga"]

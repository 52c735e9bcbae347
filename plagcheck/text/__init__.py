from plagcheck.text.normalizer import TextNormalizer
from plagcheck.text.stopwords import STOP_WORDS

__all__ = ["STOP_WORDS", "TextNormalizer"]

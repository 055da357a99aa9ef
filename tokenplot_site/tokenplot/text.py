from typing import List

from nltk.tokenize import RegexpTokenizer

# Runs of word characters; punctuation and whitespace are dropped.
_word_tokenizer = RegexpTokenizer(r"\w+")


def tokenize_words(text: str) -> List[str]:
    """
    Split text into word tokens, in source order:
    - no lowercasing or other normalization
    - apostrophes and hyphens split words ("don't" -> "don", "t")
    - only whitespace/punctuation -> []
    """
    return _word_tokenizer.tokenize(text)

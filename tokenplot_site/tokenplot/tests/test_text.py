from tokenplot.text import tokenize_words


def test_splits_words_in_order():
    assert tokenize_words("The quick brown fox") == ["The", "quick", "brown", "fox"]


def test_drops_punctuation_and_keeps_case():
    assert tokenize_words("Hello, World! It's 2024.") == ["Hello", "World", "It", "s", "2024"]


def test_only_punctuation_gives_no_tokens():
    assert tokenize_words("  ?!... ,, ") == []


def test_same_input_same_tokens():
    text = "a rose is a rose is a rose"
    assert tokenize_words(text) == tokenize_words(text)


def test_accented_letters_stay_in_words():
    assert tokenize_words("café au lait, naïve") == ["café", "au", "lait", "naïve"]

from puzzlekit.keyboard import are_similar, fix_sticky_text


def test_doubled_letter_is_similar():
    assert are_similar("hello", "helllo")
    assert are_similar("hello", "helloo")


def test_dropped_letter_is_similar():
    assert are_similar("helllo", "hello")
    assert are_similar("hello", "hllo")


def test_different_words_are_not_similar():
    assert not are_similar("cat", "cart")
    assert not are_similar("cat", "dog")
    assert not are_similar("cat", "cat")


def test_two_doubled_letters_are_not_similar():
    assert not are_similar("hello", "hhelloo"[:6] + "x")
    assert not are_similar("ab", "abcd")


def test_rare_variant_is_replaced():
    text = "hello hello helllo\n"
    assert fix_sticky_text(text) == text.replace("helllo", "hello")


def test_equal_counts_are_kept():
    text = "hello helllo\n"
    assert fix_sticky_text(text) == text


def test_only_whole_words_are_replaced():
    text = "helllo helllox hello hello\n"
    result = fix_sticky_text(text)
    assert result == "hello helllox hello hello\n".replace("hello helllox", "hello helllox")
    assert "helllox" in result
    assert result.split().count("hello") == 3


def test_punctuation_and_lines_survive():
    text = "The cat sat.\nThe cat ran, the caat hid.\n"
    result = fix_sticky_text(text)
    assert result == text.replace("caat", "cat")
    assert result.count("\n") == text.count("\n")
from wolfcaster.words import split_words


def test_splits_map_line():
    assert split_words("1, 0, 1\n", ", \n") == ["1", "0", "1"]


def test_empty_text_has_no_words():
    assert split_words("", ", \n") == []


def test_only_separators_has_no_words():
    assert split_words(" ,, \n ,", ", \n") == []


def test_consecutive_separators_collapse():
    assert split_words("ab,,,cd  ef", ", ") == ["ab", "cd", "ef"]


def test_word_at_end_without_separator():
    assert split_words("first second", " ") == ["first", "second"]


def test_no_separators_keeps_whole_text():
    assert split_words("abc def", "") == ["abc def"]


def test_words_never_contain_separators():
    text = "3,1 ,\n2, 77 ,x,, y"
    separators = ", \n"
    words = split_words(text, separators)
    assert all(words)
    assert not any(c in separators for word in words for c in word)
    assert split_words(" ".join(words), " ") == words
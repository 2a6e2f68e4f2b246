import pytest

from puzzlekit.names import couple_names, format_couple


def test_famous_couple():
    assert format_couple("Brad", "Angelina") == "Brad plus Angelina = Angelinad Brangelina"


def test_identical_names_have_no_blend():
    assert couple_names("abc", "abc") == ["NONE"]


def test_names_without_common_letters():
    assert couple_names("Ann", "Bob") == ["NONE"]
    assert format_couple("Ann", "Bob") == "Ann plus Bob = NONE"


@pytest.mark.parametrize(
    "name1, name2",
    [("Brad", "Angelina"), ("Kim", "Kanye"), ("Ben", "Jennifer"), ("Will", "Kate")],
)
def test_blends_are_valid(name1, name2):
    results = couple_names(name1, name2)
    assert results == sorted(results)
    if results != ["NONE"]:
        for blend in results:
            assert blend == blend.lower()
            assert len(blend) >= min(len(name1), len(name2))
            assert not name1.lower().startswith(blend)
            assert not name2.lower().startswith(blend)


def test_case_does_not_matter():
    assert couple_names("BRAD", "angelina") == couple_names("brad", "ANGELINA")


def test_formatted_line_capitalises_blends():
    line = format_couple("Brad", "Angelina")
    prefix = "Brad plus Angelina = "
    assert line.startswith(prefix)
    for word in line[len(prefix):].split():
        assert word[0].isupper()
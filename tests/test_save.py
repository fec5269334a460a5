import pytest

from wolfcaster.save import SaveData, SaveError, load_save, write_save


def test_write_format(tmp_path):
    path = tmp_path / "game.save"
    write_save(SaveData(hp=3, score=10, x=1.5, y=2.25), path)
    assert path.read_text(encoding="utf-8") == "#hp 3\n#score 10\n#position 1.50 2.25\n"


def test_round_trip(tmp_path):
    path = tmp_path / "game.save"
    data = SaveData(hp=2, score=40, x=96.0, y=288.0)
    write_save(data, path)
    assert load_save(path) == data


def test_position_rounded_to_two_decimals(tmp_path):
    path = tmp_path / "game.save"
    write_save(SaveData(hp=1, score=0, x=1.234, y=5.678), path)
    loaded = load_save(path)
    assert loaded.x == pytest.approx(1.23)
    assert loaded.y == pytest.approx(5.68)


def test_missing_file(tmp_path):
    with pytest.raises(SaveError):
        load_save(tmp_path / "absent.save")


@pytest.mark.parametrize(
    "text",
    [
        "",
        "#life 3\n#score 1\n#position 1 2\n",
        "#hp x\n#score 1\n#position 1 2\n",
        "#hp 3\n#points 1\n#position 1 2\n",
        "#hp 3\n#score 1\n#position 1\n",
        "#hp 3\n#score 1\n#pos 1 2\n",
    ],
)
def test_malformed_save(tmp_path, text):
    path = tmp_path / "game.save"
    path.write_text(text, encoding="utf-8")
    with pytest.raises(SaveError):
        load_save(path)


def test_whitespace_is_flexible(tmp_path):
    path = tmp_path / "game.save"
    path.write_text("#hp   3 #score\n7\n\n#position 4.5\t6.5 trailing", encoding="utf-8")
    assert load_save(path) == SaveData(hp=3, score=7, x=4.5, y=6.5)


def test_write_to_unwritable_path(tmp_path):
    with pytest.raises(SaveError):
        write_save(SaveData(hp=3, score=0, x=0.0, y=0.0), tmp_path / "missing" / "game.save")
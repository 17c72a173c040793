import pytest

from wordreduce.reducer import ReduceBase, WordReducer, parse_grouped


@pytest.mark.parametrize("count", [1, 2, 5, 40])
def test_parse_grouped_counts_ones(count):
    assert parse_grouped(f"word {'1' * count}") == ("word", count)


def test_parse_grouped_key_ends_at_first_space():
    key, count = parse_grouped("alpha 1 1")
    assert key == "alpha"
    assert count == len("1 1")


def test_parse_grouped_leading_space_gives_empty_key_and_zero():
    assert parse_grouped(" 1") == ("", 0)


def test_parse_grouped_without_space_raises():
    with pytest.raises(ValueError):
        parse_grouped("word")


def test_parse_grouped_empty_raises():
    with pytest.raises(ValueError):
        parse_grouped("")


def test_reduce_base_is_abstract():
    with pytest.raises(TypeError):
        ReduceBase()


def test_reduce_appends_to_given_path(tmp_path):
    target = tmp_path / "part.txt"
    reducer = WordReducer(tmp_path)
    assert reducer.reduce("the 111", target) == ("the", 3)
    assert reducer.reduce("fox 1", target) == ("fox", 1)
    assert target.read_text(encoding="utf-8") == "the 3\nfox 1\n"
    assert not (tmp_path / "SUCCESS.txt").exists()


def test_reduce_default_writes_output_and_success(tmp_path):
    reducer = WordReducer(tmp_path)
    reducer.reduce("dog 11")
    reducer.reduce("cat 1")
    assert (tmp_path / "output.txt").read_text(encoding="utf-8") == "dog 2\ncat 1\n"
    assert (tmp_path / "SUCCESS.txt").read_text(encoding="utf-8") == "SUCCESS\n"


def test_success_file_is_overwritten_not_appended(tmp_path):
    reducer = WordReducer(tmp_path)
    for grouped in ["a 1", "b 11", "c 111"]:
        reducer.reduce(grouped)
    lines = (tmp_path / "SUCCESS.txt").read_text(encoding="utf-8").splitlines()
    assert lines == ["SUCCESS"]


def test_export_writes_record(tmp_path):
    target = tmp_path / "out.txt"
    WordReducer(tmp_path).export("word", 7, target)
    assert target.read_text(encoding="utf-8") == "word 7\n"


def test_reduce_invalid_record_writes_nothing(tmp_path):
    target = tmp_path / "out.txt"
    reducer = WordReducer(tmp_path)
    with pytest.raises(ValueError):
        reducer.reduce("nospace", target)
    assert not target.exists()


def test_output_paths_are_inside_output_dir(tmp_path):
    reducer = WordReducer(tmp_path)
    assert reducer.output_path == str(tmp_path / "output.txt")
    assert reducer.success_path == str(tmp_path / "SUCCESS.txt")
import pytest

from sample_app.value import (
    SampleID,
    SampleName,
    create_random_sample_id,
    sample_ids_to_strings,
)


def test_create_random_sample_id_is_random():
    ids = [create_random_sample_id() for _ in range(10)]
    assert len(set(ids)) == 10
    assert all(isinstance(i, SampleID) and len(i) > 0 for i in ids)


def test_new_sample_id():
    assert SampleID("1") == "1"


def test_new_sample_id_empty_raises():
    with pytest.raises(ValueError, match="greater than 0"):
        SampleID("")


def test_sample_id_single_character_is_valid():
    assert SampleID("x") == "x"


def test_sample_id_to_string():
    result = str(SampleID("x"))
    assert result == "x"
    assert type(result) is str


def test_sample_ids_to_strings():
    ids = [SampleID("x"), SampleID("y"), SampleID("z")]
    result = sample_ids_to_strings(ids)
    assert result == ["x", "y", "z"]
    assert all(type(s) is str for s in result)


def test_new_sample_name():
    assert SampleName("name") == "name"


def test_new_sample_name_empty_raises():
    with pytest.raises(ValueError, match="must not be empty"):
        SampleName("")


def test_sample_name_space_is_valid():
    assert SampleName(" ") == " "


def test_sample_name_to_string():
    assert str(SampleName("name")) == "name"
import numpy as np
import pandas as pd
import pytest

from oddly.data_processing import DataFormatError, center, load_sample, sample_from_frame


def _write(tmp_path, text, name="sample.tsv"):
    path = tmp_path / name
    path.write_text(text)
    return str(path)


def test_load_sample_reads_tab_separated_file(tmp_path):
    path = _write(tmp_path, "birthyear\tis_happy\n1900\t1\n1950\t0\n1999\t1\n")
    sample = load_sample(path)
    assert len(sample) == 3
    assert np.array_equal(sample.x, [1900.0, 1950.0, 1999.0])
    assert sample.y.tolist() == [True, False, True]
    assert list(sample) == [(1900.0, True), (1950.0, False), (1999.0, True)]


def test_sample_is_read_only(tmp_path):
    sample = load_sample(_write(tmp_path, "birthyear\tis_happy\n1900\t1\n1901\t0\n"))
    with pytest.raises(ValueError):
        sample.x[0] = 2000.0
    with pytest.raises(AttributeError):
        sample.x = np.array([1.0, 2.0])


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError, match="nope.tsv"):
        load_sample(str(tmp_path / "nope.tsv"))


def test_empty_file_raises(tmp_path):
    with pytest.raises(DataFormatError, match="empty"):
        load_sample(_write(tmp_path, ""))


def test_header_only_file_raises(tmp_path):
    with pytest.raises(DataFormatError, match="no data rows"):
        load_sample(_write(tmp_path, "birthyear\tis_happy\n"))


def test_wrong_header_raises(tmp_path):
    with pytest.raises(DataFormatError, match="Expected columns"):
        load_sample(_write(tmp_path, "year\thappy\n1900\t1\n"))


def test_comma_separated_file_is_rejected(tmp_path):
    with pytest.raises(DataFormatError, match="Expected columns"):
        load_sample(_write(tmp_path, "birthyear,is_happy\n1900,1\n"))


def test_extra_field_raises(tmp_path):
    with pytest.raises(DataFormatError):
        load_sample(_write(tmp_path, "birthyear\tis_happy\n1900\t1\n1901\t0\t7\n"))


def test_extra_field_on_every_row_raises(tmp_path):
    text = "birthyear\tis_happy\n7\t1950\t0\n8\t1960\t1\n9\t1970\t1\n"
    with pytest.raises(DataFormatError):
        load_sample(_write(tmp_path, text))


def test_missing_field_raises(tmp_path):
    with pytest.raises(DataFormatError, match="row 2"):
        load_sample(_write(tmp_path, "birthyear\tis_happy\n1900\t1\n1901\n"))


def test_non_numeric_predictor_raises(tmp_path):
    with pytest.raises(DataFormatError, match="'nineteen'"):
        load_sample(_write(tmp_path, "birthyear\tis_happy\n1900\t1\nnineteen\t0\n"))


def test_non_binary_outcome_raises(tmp_path):
    with pytest.raises(DataFormatError, match="must be 0 or 1"):
        load_sample(_write(tmp_path, "birthyear\tis_happy\n1900\t1\n1901\t2\n"))


def test_error_message_names_the_file(tmp_path):
    path = _write(tmp_path, "birthyear\tis_happy\n1900\tyes\n", name="bad.tsv")
    with pytest.raises(DataFormatError, match="bad.tsv"):
        load_sample(path)


def test_sample_from_frame_keeps_row_order():
    df = pd.DataFrame({"birthyear": [1950, 1900], "is_happy": [0, 1]})
    sample = sample_from_frame(df)
    assert sample.x.tolist() == [1950.0, 1900.0]
    assert sample.y.tolist() == [False, True]


def test_center_subtracts_mean():
    centered, mean = center([1.0, 2.0, 6.0])
    assert mean == pytest.approx(3.0)
    assert np.allclose(centered, [-2.0, -1.0, 3.0])
    assert centered.mean() == pytest.approx(0.0)
    with pytest.raises(ValueError):
        center([])

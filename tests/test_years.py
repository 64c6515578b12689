import logging

import pandas as pd

from fars import Failed, InvalidYearWarning, Loaded, fars_read_years


def test_valid_and_invalid_year(in_data_dir):
    result = fars_read_years([2013, 9999])

    assert len(result) == 2
    assert isinstance(result[0], Loaded)
    assert isinstance(result[1], Failed)
    assert result[1].year == 9999

    assert len(result.warnings) == 1
    assert isinstance(result.warnings[0], InvalidYearWarning)
    assert result.warnings[0].year == 9999
    assert "9999" in str(result.warnings[0])


def test_loaded_table_is_month_and_year(data_dir):
    result = fars_read_years([2014], data_dir=data_dir)
    table = result[0].table

    assert list(table.columns) == ['MONTH', 'year']
    assert len(table) == 4
    assert (table['year'] == 2014).all()


def test_order_follows_input(data_dir):
    result = fars_read_years([2014, 1900, 2013], data_dir=data_dir)

    assert [slot.year for slot in result] == [2014, 1900, 2013]
    assert result.failed_years == [1900]
    assert [len(f) for f in result.frames()] == [4, 6]


def test_float_year_tagged_as_int(data_dir):
    result = fars_read_years([2013.0], data_dir=data_dir)
    assert result[0].year == 2013
    assert result[0].table['year'].unique().tolist() == [2013]


def test_corrupt_file_is_invalid_year(data_dir):
    (data_dir / "accident_2015.csv.bz2").write_bytes(b"definitely not bzip2")

    result = fars_read_years([2015, 2013], data_dir=data_dir)

    assert isinstance(result[0], Failed)
    assert isinstance(result[1], Loaded)
    assert [w.year for w in result.warnings] == [2015]


def test_file_without_month_column_is_invalid_year(tmp_path):
    pd.DataFrame({'STATE': [1]}).to_csv(tmp_path / "accident_2016.csv.bz2", index=False)

    result = fars_read_years([2016], data_dir=tmp_path)

    assert isinstance(result[0], Failed)
    assert "MONTH" in result[0].reason


def test_warning_is_logged(data_dir, caplog):
    caplog.set_level(logging.WARNING, logger="fars")

    fars_read_years([2013, 9999], data_dir=data_dir)

    records = [r for r in caplog.records if r.name.startswith("fars")]
    assert [r.getMessage() for r in records] == ["invalid year: 9999"]
    assert records[0].year == "9999"


def test_empty_input():
    result = fars_read_years([])
    assert len(result) == 0
    assert result.warnings == []

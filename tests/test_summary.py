import pandas as pd
import pytest

from fars import FarsYearWarning, fars_read_years, fars_summarize_years
from fars.analysis import (
    combine_year_tables,
    month_year_table,
    summarize_month_counts,
)

from conftest import ACCIDENTS_2013, ACCIDENTS_2014, write_fars_file


# ---------------------------------------------------------------------------
# Functional core
# ---------------------------------------------------------------------------

def test_month_year_table_projects_and_leaves_input_untouched():
    original = ACCIDENTS_2013.copy()

    table = month_year_table(ACCIDENTS_2013, 2013)

    assert list(table.columns) == ['MONTH', 'year']
    assert (table['year'] == 2013).all()
    pd.testing.assert_frame_equal(ACCIDENTS_2013, original)


def test_month_year_table_requires_month():
    with pytest.raises(KeyError):
        month_year_table(pd.DataFrame({'STATE': [1]}), 2013)


def test_combine_year_tables_skips_none():
    a = month_year_table(ACCIDENTS_2013, 2013)
    b = month_year_table(ACCIDENTS_2014, 2014)

    combined = combine_year_tables([a, None, b])

    assert len(combined) == len(a) + len(b)
    assert combined.index.tolist() == list(range(len(combined)))


def test_combine_year_tables_all_none_is_empty():
    combined = combine_year_tables([None, None])
    assert combined.empty
    assert list(combined.columns) == ['MONTH', 'year']


def test_summarize_month_counts_pivots_years_to_columns():
    df = pd.DataFrame({'MONTH': [2, 1, 1, 2], 'year': [2014, 2013, 2014, 2014]})

    summary = summarize_month_counts(df)

    assert list(summary.columns) == ['MONTH', 2013, 2014]
    assert summary['MONTH'].tolist() == [1, 2]
    assert summary[2014].tolist() == [1, 2]
    assert summary[2013].iloc[0] == 1
    assert pd.isna(summary[2013].iloc[1])
    assert str(summary[2013].dtype) == 'Int64'


# ---------------------------------------------------------------------------
# fars_summarize_years
# ---------------------------------------------------------------------------

def test_summarize_years_shape_and_counts(fars_dir):
    summary = fars_summarize_years([2013, 2014], data_dir=fars_dir)

    assert list(summary.columns) == ['MONTH', 2013, 2014]
    assert summary['MONTH'].tolist() == [1, 2, 3, 5]

    by_month = summary.set_index('MONTH')
    assert by_month.loc[1, 2013] == 2
    assert by_month.loc[3, 2013] == 2
    assert by_month.loc[1, 2014] == 1
    assert by_month.loc[5, 2014] == 2
    assert pd.isna(by_month.loc[5, 2013])
    assert pd.isna(by_month.loc[2, 2014])


def test_summarize_years_total_equals_loaded_rows(fars_dir):
    years = [2013, 2014]
    tables = fars_read_years(years, data_dir=fars_dir)

    summary = fars_summarize_years(years, data_dir=fars_dir)

    assert int(summary[years].sum().sum()) == sum(len(t) for t in tables)


def test_summarize_single_year_keeps_wide_shape(fars_dir):
    summary = fars_summarize_years([2014], data_dir=fars_dir)

    assert list(summary.columns) == ['MONTH', 2014]
    assert summary[2014].tolist() == [1, 2]


def test_summarize_skips_failed_year(fars_dir):
    with pytest.warns(FarsYearWarning, match='invalid year: 2016'):
        summary = fars_summarize_years([2013, 2016], data_dir=fars_dir)

    assert list(summary.columns) == ['MONTH', 2013]


def test_summarize_all_failed_is_empty(fars_dir):
    with pytest.warns(FarsYearWarning):
        summary = fars_summarize_years([2016, 2017], data_dir=fars_dir)

    assert summary.empty
    assert list(summary.columns) == ['MONTH']


def test_summarize_duplicate_years_share_one_column(fars_dir):
    summary = fars_summarize_years([2014, 2014], data_dir=fars_dir)

    assert list(summary.columns) == ['MONTH', 2014]
    assert summary[2014].tolist() == [2, 4]


def test_summarize_month_counts_keeps_blank_months():
    df = pd.DataFrame({'MONTH': [1.0, None, 2.0], 'year': [2013, 2013, 2013]})

    summary = summarize_month_counts(df)

    assert int(summary[2013].sum()) == 3
    assert summary[2013].tolist() == [1, 1, 1]
    assert summary['MONTH'].iloc[:2].tolist() == [1.0, 2.0]
    assert pd.isna(summary['MONTH'].iloc[2])


def test_summarize_month_counts_only_blank_months():
    df = pd.DataFrame({'MONTH': [None, None], 'year': [2014, 2014]})

    summary = summarize_month_counts(df)

    assert list(summary.columns) == ['MONTH', 2014]
    assert summary[2014].tolist() == [2]


def test_summarize_years_counts_rows_with_blank_month(tmp_path):
    df = pd.DataFrame({'STATE': [1, 1, 1], 'MONTH': [1, None, 2]})
    write_fars_file(tmp_path, 2015, df)

    summary = fars_summarize_years([2015, 2015], data_dir=tmp_path)

    assert int(summary[2015].sum()) == 6

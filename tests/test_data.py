import asyncio

import pandas as pd
import pytest

from pct_chart.config.defaults import DEFAULT_CONFIG
from pct_chart.core.data import Dataset, format_data, load_dataset
from pct_chart.core.errors import DataFormatError, DataLoadError, EmptyDatasetError


def test_format_data_converts_counts_and_keeps_order():
    dataset = format_data([
        {'pct_change': '5', 'count': '12'},
        {'pct_change': '-5', 'count': ' 3 '},
        {'pct_change': '0', 'count': '7.5'},
    ])

    assert dataset.labels == ('5', '-5', '0')
    assert [r.count for r in dataset] == [12, 3, 7.5]
    assert isinstance(dataset.records[0].count, int)


def test_format_data_accepts_dataframe():
    frame = pd.DataFrame({'pct_change': ['0', '10'], 'count': ['1', '2']})
    dataset = format_data(frame)

    assert len(dataset) == 2
    assert list(dataset.values) == [1.0, 2.0]


def test_format_data_leaves_labels_untouched():
    dataset = format_data([
        {'pct_change': '10', 'count': '1', 'extra': 'x'},
        {'pct_change': ' 15 ', 'count': '2', 'extra': 'y'},
    ])
    assert dataset.labels == ('10', ' 15 ')


@pytest.mark.parametrize('bad', ['abc', '', 'inf', '1,5'])
def test_format_data_rejects_non_numeric_count(bad):
    rows = [
        {'pct_change': '0', 'count': '4'},
        {'pct_change': '5', 'count': bad},
    ]
    with pytest.raises(DataFormatError, match='第 2 行'):
        format_data(rows)


def test_format_data_rejects_missing_column():
    with pytest.raises(DataFormatError, match='count'):
        format_data([{'pct_change': '0', 'value': '1'}])


def test_format_data_rejects_empty_input():
    with pytest.raises(EmptyDatasetError):
        format_data([])


def test_distinct_labels_keep_first_occurrence():
    dataset = format_data([
        {'pct_change': '0', 'count': '1'},
        {'pct_change': '5', 'count': '1'},
        {'pct_change': '0', 'count': '2'},
    ])
    assert dataset.distinct_labels == ('0', '5')


def test_load_dataset_reads_csv(csv_file):
    dataset = asyncio.run(load_dataset(str(csv_file)))

    assert isinstance(dataset, Dataset)
    assert dataset.labels == ('-10', '0', '10')
    assert [r.count for r in dataset] == [-30, 0, 45]


def test_load_dataset_reads_bundled_data():
    dataset = asyncio.run(load_dataset(DEFAULT_CONFIG.data_path))
    assert len(dataset) > 0
    assert dataset.labels[0] == '-15'


def test_load_dataset_missing_file(tmp_path):
    with pytest.raises(DataLoadError):
        asyncio.run(load_dataset(str(tmp_path / 'missing.csv')))


def test_load_dataset_empty_file(tmp_path):
    path = tmp_path / 'empty.csv'
    path.write_text('', encoding='utf-8')
    with pytest.raises(EmptyDatasetError):
        asyncio.run(load_dataset(str(path)))


def test_load_dataset_header_only(tmp_path):
    path = tmp_path / 'header.csv'
    path.write_text('pct_change,count\n', encoding='utf-8')
    with pytest.raises(EmptyDatasetError):
        asyncio.run(load_dataset(str(path)))


def test_load_dataset_bad_count(tmp_path):
    path = tmp_path / 'bad.csv'
    path.write_text('pct_change,count\n0,1\n5,lots\n', encoding='utf-8')
    with pytest.raises(DataFormatError):
        asyncio.run(load_dataset(str(path)))

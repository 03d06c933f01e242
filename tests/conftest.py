import pytest

from pct_chart.core.data import format_data


@pytest.fixture
def mixed_dataset():
    """含负值的数据集"""
    return format_data([
        {'pct_change': '-10', 'count': '-30'},
        {'pct_change': '0', 'count': '0'},
        {'pct_change': '10', 'count': '45'},
    ])


@pytest.fixture
def positive_dataset():
    return format_data([
        {'pct_change': '0', 'count': '5'},
        {'pct_change': '10', 'count': '20'},
    ])


@pytest.fixture
def csv_file(tmp_path):
    path = tmp_path / 'pct_change_distribution.csv'
    path.write_text("pct_change,count\n-10,-30\n0,0\n10,45\n", encoding='utf-8')
    return path

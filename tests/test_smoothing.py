import pytest
from scipy import stats

from specfun.smoothing import quickselect, trimmed_mean, trimmed_sum, windowed_trimmed_mean

SAMPLE = [5.0, 3.0, 9.0, 1.0, 7.0, 3.0, 8.0, 2.0, 6.0, 4.0, 0.5]


@pytest.mark.parametrize("k", range(len(SAMPLE)))
def test_quickselect_gives_order_statistic(k):
    assert quickselect(SAMPLE, k) == sorted(SAMPLE)[k]


def test_quickselect_leaves_input_alone():
    data = list(SAMPLE)
    quickselect(data, 4)
    assert data == SAMPLE


def test_quickselect_rejects_bad_index():
    with pytest.raises(IndexError):
        quickselect([1.0, 2.0], 2)
    with pytest.raises(ValueError):
        quickselect([], 0)


@pytest.mark.parametrize("k", [0, 1, 2, 3])
def test_trimmed_mean_matches_reference(k):
    n = len(SAMPLE)
    expected = stats.trim_mean(SAMPLE, (k + 0.5) / n)
    assert trimmed_mean(SAMPLE, k) == pytest.approx(expected, rel=1e-12)


def test_trimmed_sum_without_trimming_is_total():
    assert trimmed_sum(SAMPLE, 0) == pytest.approx(sum(SAMPLE))


def test_trimmed_mean_shares_ties():
    assert trimmed_mean([1.0, 1.0, 1.0, 5.0], 1) == pytest.approx(1.0)


def test_trimmed_mean_ignores_outliers():
    assert trimmed_mean([1.0, 2.0, 3.0, 4.0, 100.0], 1) == pytest.approx(3.0)


def test_trimmed_mean_rejects_overtrimming():
    with pytest.raises(ValueError):
        trimmed_mean([1.0, 2.0, 3.0], 2)
    with pytest.raises(ValueError):
        trimmed_sum([1.0, 2.0, 3.0], -1)


def test_windowed_trimmed_mean_edges_and_interior():
    data = [4.0] * 10
    result = windowed_trimmed_mean(data, 2, 0.2)
    assert len(result) == len(data)
    assert list(result[:2]) == [0.0, 0.0]
    assert list(result[-2:]) == [0.0, 0.0]
    assert all(v == pytest.approx(4.0) for v in result[2:-2])


def test_windowed_trimmed_mean_uses_each_window():
    result = windowed_trimmed_mean(SAMPLE, 2, 0.2)
    for i in range(2, len(SAMPLE) - 2):
        assert result[i] == pytest.approx(trimmed_mean(SAMPLE[i - 2 : i + 3], 1))


def test_windowed_trimmed_mean_rejects_large_clip():
    with pytest.raises(ValueError):
        windowed_trimmed_mean(SAMPLE, 1, 0.7)
import copy

import pytest

from psolve.grid import ripening_days


def test_all_ripe():
    assert ripening_days([[[1, 1], [1, 1]]]) == 0


def test_line_spreads_one_per_day():
    row = [1, 0, 0, 0]
    assert ripening_days([[row]]) == len(row) - 1


def test_spreads_between_layers():
    boxes = [[[1]], [[0]], [[0]]]
    assert ripening_days(boxes) == len(boxes) - 1


def test_blocked_by_empty_cell():
    assert ripening_days([[[1, -1, 0]]]) == -1


def test_diagonal_is_not_adjacent():
    assert ripening_days([[[1, -1], [-1, 0]]]) == -1


def test_no_ripe_source():
    assert ripening_days([[[0]]]) == -1


def test_spread_from_both_ends_meets_in_middle():
    one_end = ripening_days([[[1, 0, 0, 0, 0]]])
    both_ends = ripening_days([[[1, 0, 0, 0, 1]]])
    assert both_ends < one_end


def test_input_is_not_modified():
    boxes = [[[1, 0], [0, 0]], [[0, -1], [0, 0]]]
    before = copy.deepcopy(boxes)
    ripening_days(boxes)
    assert boxes == before


def test_ragged_grid_rejected():
    with pytest.raises(ValueError):
        ripening_days([[[1, 0], [0]]])


def test_bad_cell_rejected():
    with pytest.raises(ValueError):
        ripening_days([[[2]]])
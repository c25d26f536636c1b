import pytest

from aimdtools.standard_grid import (
    GridScheme,
    standard_grid_angular_point_num,
    standard_grid_point_num,
    standard_grid_radial_point_num,
    standard_grid_shells,
)

ALL_Z = range(0, 119)
SCHEMES = [GridScheme.SG2, GridScheme.SG3]


def test_hydrogen_sg2_shells_match_table():
    assert standard_grid_shells(1, GridScheme.SG2) == (
        (35, 6), (12, 110), (16, 302), (7, 86), (5, 26),
    )


def test_oxygen_sg3_shells_match_table():
    assert standard_grid_shells(8, GridScheme.SG3) == (
        (40, 6), (14, 110), (2, 194), (2, 302), (24, 590),
        (1, 302), (1, 194), (8, 146), (7, 50),
    )


@pytest.mark.parametrize("z", [0, 2, 10, 18, 26, 118])
def test_default_entries(z):
    assert standard_grid_shells(z, GridScheme.SG2) == ((75, 302),)
    assert standard_grid_shells(z, GridScheme.SG3) == ((99, 590),)


@pytest.mark.parametrize("scheme", SCHEMES)
@pytest.mark.parametrize("z", ALL_Z)
def test_point_num_consistent_with_angular_lookup(z, scheme):
    n_radial = standard_grid_radial_point_num(z, scheme)
    total = sum(standard_grid_angular_point_num(z, scheme, i) for i in range(n_radial))
    assert total == standard_grid_point_num(z, scheme)


@pytest.mark.parametrize("scheme", SCHEMES)
@pytest.mark.parametrize("z", ALL_Z)
def test_angular_zero_past_last_radial_point(z, scheme):
    n_radial = standard_grid_radial_point_num(z, scheme)
    assert standard_grid_angular_point_num(z, scheme, n_radial - 1) > 0
    assert standard_grid_angular_point_num(z, scheme, n_radial) == 0


@pytest.mark.parametrize("scheme", SCHEMES)
@pytest.mark.parametrize("z", [1, 6, 8, 15])
def test_shell_boundaries(z, scheme):
    start = 0
    for n_radial, n_angular in standard_grid_shells(z, scheme):
        assert standard_grid_angular_point_num(z, scheme, start) == n_angular
        assert standard_grid_angular_point_num(z, scheme, start + n_radial - 1) == n_angular
        start += n_radial


def test_default_radial_counts():
    assert standard_grid_radial_point_num(2, GridScheme.SG2) == 75
    assert standard_grid_radial_point_num(2, GridScheme.SG3) == 99


def test_scheme_accepts_value_string():
    assert standard_grid_shells(1, "sg2") == standard_grid_shells(1, GridScheme.SG2)


def test_unknown_scheme_raises():
    with pytest.raises(ValueError):
        standard_grid_point_num(1, "sg9")


@pytest.mark.parametrize("z", [-1, 119])
def test_atomic_number_out_of_range_raises(z):
    with pytest.raises(ValueError):
        standard_grid_point_num(z, GridScheme.SG2)
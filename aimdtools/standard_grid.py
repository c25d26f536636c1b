"""Standard integration grids SG-2 and SG-3 for atoms up to Z = 118.

Each grid is a sequence of shells ``(n_radial, n_angular)``: ``n_radial``
consecutive radial points that all use an angular grid of ``n_angular`` points.
"""

from enum import Enum

MAX_ATOMIC_NUMBER = 118

Shells = tuple[tuple[int, int], ...]


class GridScheme(Enum):
    """Available standard grid schemes."""

    SG2 = "sg2"
    SG3 = "sg3"


_SG2_DEFAULT: Shells = ((75, 302),)
_SG3_DEFAULT: Shells = ((99, 590),)

_SG2_LI: Shells = ((35, 6), (12, 110), (17, 302), (7, 86), (4, 50))
_SG2_B: Shells = ((35, 6), (12, 110), (17, 302), (7, 146), (4, 26))
_SG2_F: Shells = ((26, 6), (16, 110), (19, 302), (8, 110), (6, 50))
_SG2_P: Shells = ((30, 6), (14, 110), (17, 302), (7, 146), (7, 38))

_SG2_SPECIAL: dict[int, Shells] = {
    1: ((35, 6), (12, 110), (16, 302), (7, 86), (5, 26)),
    3: _SG2_LI,
    4: _SG2_LI,
    5: _SG2_B,
    6: _SG2_B,
    7: ((35, 6), (12, 110), (17, 302), (7, 86), (4, 26)),
    8: ((30, 6), (14, 110), (18, 302), (8, 146), (5, 50)),
    9: _SG2_F,
    11: _SG2_LI,
    12: _SG2_LI,
    13: ((32, 6), (15, 110), (17, 302), (7, 146), (4, 86)),
    14: ((32, 6), (15, 110), (17, 302), (7, 146), (4, 50)),
    15: _SG2_P,
    16: _SG2_P,
    17: _SG2_F,
}

_SG3_LI: Shells = ((46, 6), (16, 110), (22, 590), (9, 146), (6, 50))
_SG3_BE: Shells = ((42, 6), (6, 86), (14, 110), (22, 590), (3, 194), (6, 146), (6, 50))
_SG3_B: Shells = ((42, 6), (6, 86), (14, 110), (22, 590), (9, 194), (6, 50))
_SG3_F: Shells = ((35, 6), (17, 110), (4, 194), (25, 590), (2, 194), (8, 110), (8, 50))
_SG3_P: Shells = (
    (35, 6), (1, 86), (18, 110), (4, 194), (25, 590), (2, 194), (8, 146), (6, 50),
)

_SG3_SPECIAL: dict[int, Shells] = {
    1: ((45, 6), (16, 110), (21, 590), (10, 194), (7, 50)),
    3: _SG3_LI,
    4: _SG3_BE,
    5: _SG3_B,
    6: ((46, 6), (16, 146), (22, 590), (1, 302), (2, 194), (6, 146), (6, 86)),
    7: ((40, 6), (18, 110), (24, 590), (11, 146), (6, 50)),
    8: (
        (40, 6), (14, 110), (2, 194), (2, 302), (24, 590),
        (1, 302), (1, 194), (8, 146), (7, 50),
    ),
    9: _SG3_F,
    11: _SG3_LI,
    12: ((48, 6), (15, 110), (20, 590), (7, 146), (9, 50)),
    13: _SG3_BE,
    14: _SG3_B,
    15: _SG3_P,
    16: _SG3_P,
    17: _SG3_F,
}

_TABLES: dict[GridScheme, tuple[dict[int, Shells], Shells]] = {
    GridScheme.SG2: (_SG2_SPECIAL, _SG2_DEFAULT),
    GridScheme.SG3: (_SG3_SPECIAL, _SG3_DEFAULT),
}


def standard_grid_shells(z: int, scheme: GridScheme) -> Shells:
    """Return the ``(n_radial, n_angular)`` shells of element ``z`` (0 is a placeholder)."""
    scheme = GridScheme(scheme)
    if not 0 <= z <= MAX_ATOMIC_NUMBER:
        raise ValueError(f"atomic number out of range 0..{MAX_ATOMIC_NUMBER}: {z}")
    special, default = _TABLES[scheme]
    return special.get(z, default)


def standard_grid_point_num(z: int, scheme: GridScheme) -> int:
    """Return the total number of grid points for element ``z``."""
    return sum(n_radial * n_angular for n_radial, n_angular in standard_grid_shells(z, scheme))


def standard_grid_radial_point_num(z: int, scheme: GridScheme) -> int:
    """Return the number of radial points for element ``z``."""
    return sum(n_radial for n_radial, _ in standard_grid_shells(z, scheme))


def standard_grid_angular_point_num(z: int, scheme: GridScheme, radial_point_idx: int) -> int:
    """Return the angular grid size used at a radial point, or 0 past the last one."""
    radial_point_count = 0
    for n_radial, n_angular in standard_grid_shells(z, scheme):
        radial_point_count += n_radial
        if radial_point_idx < radial_point_count:
            return n_angular
    return 0
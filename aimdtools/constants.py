"""Physical constants, conversion factors and status codes (CODATA 2018)."""

import math
from enum import IntEnum

# Physical constants
PLANCK_CONSTANT_H = 6.62607015e-34  # exact, J / Hz
PLANCK_CONSTANT_HBAR = 1.0545718176461565e-34  # h / (2 pi)
BOLTZMANN_CONSTANT_K = 1.380649e-23  # exact, J / K
ELEMENTARY_CHARGE_E = 1.602176634e-19  # exact, C
BOLTZMANN_CONSTANT_KB = 8.6173332621451788e-05  # k / e, eV / K
BOHR_RADIUS_A0 = 5.29177210903e-11  # m
ELECTRON_MASS_ME = 9.1093837015e-31  # kg

# Conversion factors
BOHR_TO_ANGSTROM = 5.29177210903e-01
ENERGY_ATOMIC_UNIT_TO_J = 4.3597447222071e-18
ENERGY_J_TO_ATOMIC_UNIT = 2.2937122783963248e17
ENERGY_ATOMIC_UNIT_TO_EV = 27.211386245988
ENERGY_EV_TO_ATOMIC_UNIT = 3.6749322175654991e-02

VELOCITY_ATOMIC_UNIT_TO_M_PER_S = 2.18769126364e06
VELOCITY_ATOMIC_UNIT_TO_ANGSTROM_PER_FS = 2.18769126364e01
VELOCITY_ANGSTROM_PER_FS_TO_ATOMIC_UNIT = 4.5710289043991770e-02

TIME_ATOMIC_UNIT_TO_S = 2.4188843265857e-17
TIME_ATOMIC_UNIT_TO_FS = 2.4188843265857e-02
TIME_FS_TO_ATOMIC_UNIT = 4.1341373335182112e01

FORCE_HARTREE_PER_BOHR_TO_HARTREE_PER_ANGSTROM = 1.8897261246257702

DALTON_TO_AU = 1822.888486209

# Mathematical constants
PI = math.pi
POW_PI_1_DOT_5 = 5.568327996831708
LOG_2PI = 1.8378770664093453
F64_QUASI_INFINITY = 1e300
ONE_THIRD = 3.3333333333333331e-01
SQRT_1_2 = 7.0710678118654757e-01
SQRT_1_3 = 5.7735026918962573e-01
ONE_OVER_LN2 = 1.4426950408889634


class ErrorCode(IntEnum):
    """Status codes shared by the computational routines."""

    FAILURE = -1
    SUCCESS = 0
    ERROR = 1
    WARNING = 2
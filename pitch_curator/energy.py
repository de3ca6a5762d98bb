# region Imports
from .config import EnergyParams
# endregion


# region Step Cost
def step_energy_J(repaired: bool, P: EnergyParams) -> float:
    """Drive cost for one path sample, plus the tamper actuation if it fired."""
    E = P.move_J
    if repaired:
        E += P.repair_J
    return float(E)


def expected_energy_J(steps: int, repairs: int, P: EnergyParams) -> float:
    return (steps - repairs) * P.move_J + repairs * (P.move_J + P.repair_J)
# endregion


# region Unit Conversion
def joule_to_Wh(J):
    return J / 3600.0
# endregion

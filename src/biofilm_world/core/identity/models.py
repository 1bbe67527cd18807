"""Reserved entity names.

Usage:
    if world.contains_bulk(ReservedName.CHEMOSTAT):
        chemostat = world.get_bulk(ReservedName.CHEMOSTAT).unwrap()
"""


class ReservedName:
    """Names with a fixed meaning across the simulation.

    In a chemostat scenario exactly one bulk must be called CHEMOSTAT,
    whatever the computation domain is called. The rule is checked by
    whoever needs the chemostat, not by the World.
    """

    CHEMOSTAT = "chemostat"

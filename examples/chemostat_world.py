"""Build a world from a protocol fragment and query it the way a solver does.

Run:
    python examples/chemostat_world.py
"""

from biofilm_world import (
    ReservedName,
    SimulationContext,
    World,
    XmlSource,
    configure_logging,
)

PROTOCOL = """
<world>
    <bulk name="chemostat">
        <param name="timeConstraint">0.05</param>
        <solute name="glucose"><param name="Sbulk">5.0</param></solute>
        <solute name="oxygen"><param name="Sbulk">8.0</param></solute>
    </bulk>
    <bulk name="feed">
        <solute name="glucose"><param name="Sbulk">20.0</param></solute>
    </bulk>
    <computationDomain name="biofilm">
        <param name="resolution">4</param>
        <param name="nI">33</param>
        <param name="nJ">33</param>
    </computationDomain>
</world>
"""


def main() -> None:
    configure_logging()
    context = SimulationContext(solutes={"glucose": 0, "oxygen": 1}, is_chemostat=True)

    world = World()
    report = world.init(context, XmlSource.from_string(PROTOCOL))
    if not report.ok:
        print(f"Built with failures in: {sorted(report.phases_failed())}")

    if context.is_chemostat and not world.contains_bulk(ReservedName.CHEMOSTAT):
        raise SystemExit("chemostat scenario needs a bulk called 'chemostat'")

    chemostat = world.get_bulk(ReservedName.CHEMOSTAT).unwrap()
    chemostat.update_rates({0: -10.0, 1: -2.0})

    domain = world.get_domain("biofilm").unwrap()
    print(f"Domain {domain.name}: {domain.params}")
    print(f"Glucose per bulk: {world.get_all_bulk_value(0)}")
    print(f"Max oxygen: {world.get_max_bulk_value(1)}")
    print(f"Stable step: {world.get_bulk_time_constraint()}")

    world.get_domain("flow")  # not configured; logged


if __name__ == "__main__":
    main()

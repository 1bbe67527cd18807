"""Tests for Bulk construction and its time constraint."""

import math

import pytest
from conftest import bulk_section

from biofilm_world import Bulk, ConfigurationError, MappingSource, ReservedName, WorldSettings


def test_from_section_reads_solutes_by_dictionary_index(context):
    section = MappingSource(bulk_section("tank", {"oxygen": "8.0", "ammonium": "0.5"}))

    bulk = Bulk.from_section(context, section)

    assert bulk.name == "tank"
    assert bulk.concentrations == {0: 8.0, 2: 0.5}
    assert bulk.contains(2)
    assert not bulk.contains(1)
    assert bulk.get_value(0) == 8.0


def test_from_section_time_constraint_param(context):
    bulk = Bulk.from_section(context, MappingSource(bulk_section("tank", time_constraint="0.5")))

    assert bulk.get_time_constraint() == 0.5


def test_from_section_defaults_time_constraint_from_settings(context):
    context.settings = WorldSettings(default_time_constraint=24.0)

    bulk = Bulk.from_section(context, MappingSource(bulk_section("tank")))

    assert bulk.get_time_constraint() == 24.0


def test_from_section_solute_without_value_starts_empty(context):
    section = MappingSource(
        {"attributes": {"name": "tank"}, "children": {"solute": [{"attributes": {"name": "oxygen"}}]}}
    )

    assert Bulk.from_section(context, section).get_value(0) == 0.0


@pytest.mark.parametrize(
    "section",
    [
        {"attributes": {}},
        {"attributes": {"name": "   "}},
        bulk_section("tank", {"unobtainium": "1"}),
        bulk_section("tank", {"oxygen": "lots"}),
        bulk_section("tank", time_constraint="soon"),
        bulk_section("tank", time_constraint="-1"),
        bulk_section("tank", time_constraint="0"),
        bulk_section("tank", time_constraint="nan"),
        bulk_section("tank", time_constraint="inf"),
        bulk_section("tank", {"oxygen": "-0.5"}),
        bulk_section("tank", {"oxygen": "nan"}),
        bulk_section("tank", {"oxygen": "inf"}),
    ],
)
def test_from_section_rejects_malformed_sections(context, section):
    with pytest.raises(ConfigurationError):
        Bulk.from_section(context, MappingSource(section))


def test_name_equals_is_case_sensitive():
    bulk = Bulk(ReservedName.CHEMOSTAT)

    assert bulk.name_equals("chemostat")
    assert not bulk.name_equals("Chemostat")
    assert bulk.is_chemostat
    assert not Bulk("tank").is_chemostat


def test_get_value_of_untracked_solute_raises():
    with pytest.raises(KeyError):
        Bulk("tank").get_value(3)


def test_update_rates_takes_fastest_full_change():
    bulk = Bulk("tank", concentrations={0: 8.0, 1: 2.0})

    # oxygen empties in 4 time units, glucose doubles in 1
    assert bulk.update_rates({0: -2.0, 1: 2.0}) == 1.0
    assert bulk.get_time_constraint() == 1.0


def test_update_rates_ignores_still_and_untracked_solutes():
    bulk = Bulk("tank", concentrations={0: 8.0}, default_time_constraint=10.0)

    assert bulk.update_rates({0: 0.0, 5: 3.0}) == 10.0


def test_update_rates_without_changes_is_unbounded():
    bulk = Bulk("tank", concentrations={0: 8.0}, time_constraint=1.0)

    assert math.isinf(bulk.update_rates({}))


def test_set_value_starts_tracking_solute():
    bulk = Bulk("tank")

    bulk.set_value(4, 0.75)

    assert bulk.contains(4)
    assert bulk.get_value(4) == 0.75


def test_update_rates_skips_empty_solutes_being_fed():
    bulk = Bulk("tank", concentrations={0: 0.0, 1: 4.0})

    assert bulk.update_rates({0: 1.0}) == math.inf
    assert bulk.update_rates({0: 1.0, 1: -2.0}) == 2.0


def test_from_section_accepts_zero_concentration(context):
    bulk = Bulk.from_section(context, MappingSource(bulk_section("tank", {"oxygen": "0"})))

    assert bulk.get_value(0) == 0.0

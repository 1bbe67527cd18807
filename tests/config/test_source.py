"""Tests for configuration sources."""

from biofilm_world import ConfigSource, MappingSource, XmlSource

PROTOCOL = """
<world>
    <bulk name="tank">
        <param name="timeConstraint">0.5</param>
        <solute name="oxygen"><param name="Sbulk">8.0</param></solute>
    </bulk>
    <bulk name="chemostat"/>
    <computationDomain name="biofilm">
        <param name="resolution">4</param>
    </computationDomain>
</world>
"""


def test_xml_children_in_document_order():
    root = XmlSource.from_string(PROTOCOL)

    bulks = root.get_children_parsers("bulk")

    assert [b.get_attribute("name") for b in bulks] == ["tank", "chemostat"]
    assert bulks[0].get_param("timeConstraint") == "0.5"
    assert bulks[1].get_param("timeConstraint") is None


def test_xml_nested_children_and_missing_sections():
    root = XmlSource.from_string(PROTOCOL)
    tank = root.get_children_parsers("bulk")[0]

    solute = tank.get_children_parsers("solute")[0]

    assert solute.get_param("Sbulk") == "8.0"
    assert root.get_children_parsers("agentGrid") == []
    assert root.get_attribute("name") is None


def test_mapping_source_stringifies_values():
    source = MappingSource({"attributes": {"name": "tank"}, "params": {"Sbulk": 1.5}})

    assert source.get_param("Sbulk") == "1.5"
    assert source.get_param("timeConstraint") is None
    assert source.get_children_parsers("solute") == []


def test_sources_satisfy_protocol():
    assert isinstance(MappingSource(), ConfigSource)
    assert isinstance(XmlSource.from_string("<world/>"), ConfigSource)

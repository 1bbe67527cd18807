"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from loguru import logger

from biofilm_world import MappingSource, SimulationContext, World


class RecordingSink:
    """LogSink that keeps everything it is given."""

    def __init__(self):
        self.errors: list[tuple[BaseException, str]] = []
        self.messages: list[str] = []

    def write_error(self, error, context):
        self.errors.append((error, context))

    def write_log_always(self, message):
        self.messages.append(message)


@pytest.fixture(scope="session", autouse=True)
def silence_loguru():
    logger.remove()
    logger.add(lambda msg: None)
    yield


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def world(sink):
    """Fresh World reporting to a recording sink."""
    return World(sink=sink)


@pytest.fixture
def context():
    return SimulationContext(solutes={"oxygen": 0, "glucose": 1, "ammonium": 2})


def bulk_section(name, solutes=None, time_constraint=None):
    """Dict shape of a bulk section for MappingSource."""
    section = {
        "attributes": {"name": name},
        "children": {
            "solute": [
                {"attributes": {"name": solute}, "params": {"Sbulk": value}}
                for solute, value in (solutes or {}).items()
            ]
        },
    }
    if time_constraint is not None:
        section["params"] = {"timeConstraint": time_constraint}
    return section


def domain_section(name, **params):
    return {"attributes": {"name": name}, "params": params}


def world_root(bulks=(), domains=()):
    return MappingSource(
        {"children": {"bulk": list(bulks), "computationDomain": list(domains)}}
    )

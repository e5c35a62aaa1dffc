import pytest

from blocksynth.index import Index
from blocksynth.manager import ModuleManager
from blocksynth.module import MAX_MODULES_PER_TYPE
from blocksynth.pool import MODULATION_COUNT


@pytest.fixture
def manager():
    return ModuleManager()


def test_add_block_places_and_names(manager):
    block = manager.add_block("osc", Index(0, 0))
    assert manager.get_block(Index(0, 0)) is block
    assert block.index == Index(0, 0)
    assert manager.get_module(block.name) is block
    assert manager.blocks == [block]


def test_add_block_with_number(manager):
    block = manager.add_block("filter", Index(1, 1), 3)
    assert block.id.number == 3
    assert block.name == "filter 3"


def test_add_block_runs_out(manager):
    for column in range(MAX_MODULES_PER_TYPE):
        assert manager.add_block("reverb", Index(0, column)) is not None
    assert manager.add_block("reverb", Index(1, 0)) is None


def test_add_block_outside_grid(manager):
    with pytest.raises(IndexError):
        manager.add_block("osc", Index(100, 0))
    assert len(manager.pool.blocks.available["osc"]) == MAX_MODULES_PER_TYPE


def test_remove_block_returns_it(manager):
    block = manager.add_block("osc", Index(2, 2), 1)
    manager.remove_block(block)
    assert manager.get_block(Index(2, 2)) is None
    assert manager.get_module(block.name) is None
    assert block.index == Index(-1, -1)
    assert manager.add_block("osc", Index(3, 3), 1) is block


def test_remove_unknown_block(manager):
    other = ModuleManager().add_block("osc", Index(0, 0))
    with pytest.raises(ValueError):
        manager.remove_block(other)


def test_reposition_block(manager):
    block = manager.add_block("delay", Index(0, 1))
    manager.reposition_block(Index(0, 1), Index(4, 3))
    assert manager.get_block(Index(4, 3)) is block
    assert manager.get_block(Index(0, 1)) is None
    assert block.index == Index(4, 3)


def test_reposition_empty_cell(manager):
    with pytest.raises(LookupError):
        manager.reposition_block(Index(0, 0), Index(1, 1))


def test_add_modulator(manager):
    lfo = manager.add_modulator("lfo", 2, 4)
    assert lfo.id.number == 2
    assert lfo.colour.id == 4
    assert manager.get_module(lfo.name) is lfo
    assert manager.get_modulator(0) is lfo


def test_add_connection(manager):
    block = manager.add_block("osc", Index(0, 0))
    lfo = manager.add_modulator("lfo", 1, 0)
    connection = manager.add_connection(lfo, block, 2)
    assert connection.source is lfo
    assert connection.target is block
    assert connection.parameter_index == 2
    assert block.parameter(2).connections == [connection]
    assert manager.connection_exists(2, lfo, block)
    assert not manager.connection_exists(3, lfo, block)


def test_duplicate_connection_rejected(manager):
    block = manager.add_block("osc", Index(0, 0))
    lfo = manager.add_modulator("lfo", 1, 0)
    manager.add_connection(lfo, block, 2)
    assert manager.add_connection(lfo, block, 2) is None
    assert len(manager.connections) == 1


def test_connection_to_missing_parameter(manager):
    block = manager.add_block("drive", Index(0, 0))
    lfo = manager.add_modulator("lfo", 1, 0)
    with pytest.raises(IndexError):
        manager.add_connection(lfo, block, 50)
    assert len(manager.pool.connections) == MODULATION_COUNT


def test_connection_number(manager):
    block = manager.add_block("osc", Index(0, 0))
    lfo = manager.add_modulator("lfo", 1, 0)
    connection = manager.add_connection(lfo, block, 1, 7)
    assert connection.number == 7


def test_connections_of_source_and_target(manager):
    osc = manager.add_block("osc", Index(0, 0))
    filt = manager.add_block("filter", Index(0, 1))
    lfo = manager.add_modulator("lfo", 1, 0)
    env = manager.add_modulator("adsr", 1, 1)
    first = manager.add_connection(lfo, osc, 2)
    second = manager.add_connection(lfo, filt, 1)
    third = manager.add_connection(env, osc, 5)
    assert manager.connections_of_source(lfo) == [first, second]
    assert manager.connections_of_target(osc) == [first, third]
    assert third.is_osc_gain_envelope()


def test_remove_connection(manager):
    block = manager.add_block("osc", Index(0, 0))
    lfo = manager.add_modulator("lfo", 1, 0)
    connection = manager.add_connection(lfo, block, 2)
    manager.remove_connection(connection)
    assert manager.connections == []
    assert block.parameter(2).connections == []
    assert connection.source is None
    assert len(manager.pool.connections) == MODULATION_COUNT


def test_remove_connection_twice(manager):
    block = manager.add_block("osc", Index(0, 0))
    lfo = manager.add_modulator("lfo", 1, 0)
    connection = manager.add_connection(lfo, block, 2)
    manager.remove_connection(connection)
    with pytest.raises(ValueError):
        manager.remove_connection(connection)


def test_remove_connection_at(manager):
    block = manager.add_block("osc", Index(0, 0))
    lfo = manager.add_modulator("lfo", 1, 0)
    first = manager.add_connection(lfo, block, 1)
    second = manager.add_connection(lfo, block, 2)
    manager.remove_connection_at(0)
    assert manager.connections == [second]
    assert block.parameter(1).connections == []
    assert first.target is None


def test_remove_block_drops_its_connections(manager):
    block = manager.add_block("osc", Index(0, 0))
    lfo = manager.add_modulator("lfo", 1, 0)
    manager.add_connection(lfo, block, 2)
    manager.remove_block(block)
    assert manager.connections_of_source(lfo) == []


def test_remove_modulator_drops_its_connections(manager):
    block = manager.add_block("osc", Index(0, 0))
    lfo = manager.add_modulator("lfo", 1, 0)
    manager.add_connection(lfo, block, 2)
    manager.remove_modulator(0)
    assert manager.modulators == []
    assert manager.connections == []
    assert block.parameter(2).connections == []
    assert manager.get_module(lfo.name) is None


def test_clear(manager):
    osc = manager.add_block("osc", Index(0, 0))
    manager.add_block("mixer", Index(1, 0))
    lfo = manager.add_modulator("lfo", 1, 0)
    env = manager.add_modulator("adsr", 1, 1)
    manager.add_connection(lfo, osc, 2)
    manager.add_connection(env, osc, 5)
    manager.clear()
    assert manager.blocks == []
    assert manager.modulators == []
    assert manager.connections == []
    assert manager.get_module(osc.name) is None
    assert len(manager.pool.connections) == MODULATION_COUNT
    assert len(manager.pool.blocks.available["osc"]) == MAX_MODULES_PER_TYPE
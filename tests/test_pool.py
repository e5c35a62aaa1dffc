import pytest

from blocksynth.index import Index
from blocksynth.module import (
    ADSR,
    BLOCK_TYPES,
    FILTER,
    LFO,
    MAX_MODULES_PER_TYPE,
    MODULATOR_TYPES,
    OSC,
    ModuleId,
)
from blocksynth.pool import MODULATION_COUNT, ModulePool
from blocksynth.theme import Colour, ModuleColour


class RecordingColours:
    def __init__(self):
        self.given = []
        self.retired = []

    def get(self, colour_id):
        self.given.append(colour_id)
        return ModuleColour(Colour(1, 2, 3), colour_id)

    def retire(self, colour_id):
        self.retired.append(colour_id)


def test_pool_holds_every_module():
    pool = ModulePool()
    assert len(pool.all_modules) == (len(BLOCK_TYPES) + len(MODULATOR_TYPES)) * MAX_MODULES_PER_TYPE
    assert [m.number for m in pool.connections] == list(range(1, MODULATION_COUNT + 1))


def test_get_block_by_number():
    pool = ModulePool()
    assert pool.get_block(FILTER, 2).id == ModuleId(FILTER, 2)


def test_modulator_type_is_not_a_block():
    assert ModulePool().get_block(LFO, 1) is None


def test_get_modulator_takes_colour_from_source():
    colours = RecordingColours()
    pool = ModulePool(colours)
    modulator = pool.get_modulator(LFO, 2, 7)
    assert modulator.id == ModuleId(LFO, 2)
    assert colours.given == [7]
    assert modulator.colour == ModuleColour(Colour(1, 2, 3), 7)


def test_get_modulator_without_colour_source_records_id():
    modulator = ModulePool().get_modulator(ADSR, 1, 4)
    assert modulator.colour.id == 4


def test_retire_modulator_returns_colour():
    colours = RecordingColours()
    pool = ModulePool(colours)
    modulator = pool.get_modulator(LFO, 1, 7)
    pool.retire_modulator(modulator)
    assert colours.retired == [7]
    assert modulator.colour.id == -1
    assert pool.get_modulator(LFO, 1, 2) is modulator


def test_get_modulation_by_number_and_default():
    pool = ModulePool()
    assert pool.get_modulation(5).number == 5
    assert pool.get_modulation().number == 1
    assert len(pool.connections) == MODULATION_COUNT - 2


def test_exhausted_modulations_raise():
    pool = ModulePool()
    for _ in range(MODULATION_COUNT):
        pool.get_modulation()
    with pytest.raises(LookupError):
        pool.get_modulation()


def test_retire_modulation_resets_it():
    pool = ModulePool()
    modulation = pool.get_modulation(3)
    modulation.set_magnitude(0.2)
    modulation.set_polarity(False)
    modulation.source = pool.get_modulator(LFO, 1, 0)
    modulation.target = pool.get_block(OSC, 1)
    pool.retire_modulation(modulation)
    assert modulation.source is None
    assert modulation.target is None
    assert modulation.magnitude == pytest.approx(1.0)
    assert modulation.bipolar is True
    assert pool.get_modulation(3) is modulation


def test_retire_block_resets_index():
    pool = ModulePool()
    block = pool.get_block(OSC, 2)
    block.index = Index(3, 1)
    pool.retire_block(block)
    assert block.index == Index(-1, -1)
    assert pool.get_block(OSC, 2) is block
from blocksynth.factory import create_block, create_modulator
from blocksynth.index import Index
from blocksynth.modulation import Modulation
from blocksynth.preset_info import BlockInfo, ModulatorInfo, PresetInfo
from blocksynth.theme import Colour, ModuleColour


def _setup():
    osc = create_block("osc", 1)
    osc.index = Index(2, 3)
    osc.length = 2
    lfo = create_modulator("lfo", 1)
    lfo.colour = ModuleColour(Colour(1, 2, 3), 6)
    modulation = Modulation(9, source=lfo, target=osc, parameter_index=2, magnitude=0.5, bipolar=True)
    return osc, lfo, modulation


def test_block_snapshot():
    osc, lfo, modulation = _setup()
    info = PresetInfo.create("patch", [osc], [lfo], [modulation])
    assert info.name == "patch"
    [block] = info.blocks
    assert isinstance(block, BlockInfo)
    assert block.id == osc.id
    assert block.index == (2, 3)
    assert block.length == 2
    assert list(block.parameters) == [p.id for p in osc.parameters]
    for parameter in osc.parameters:
        assert block.parameters[parameter.id] == parameter.audio_parameter.value


def test_modulator_snapshot():
    osc, lfo, modulation = _setup()
    info = PresetInfo.create("patch", [osc], [lfo], [modulation])
    [modulator] = info.modulators
    assert isinstance(modulator, ModulatorInfo)
    assert modulator.id == lfo.id
    assert modulator.colour == 6
    assert set(modulator.parameters) == {p.id for p in lfo.parameters}


def test_modulation_snapshot():
    osc, lfo, modulation = _setup()
    info = PresetInfo.create("patch", [osc], [lfo], [modulation])
    [entry] = info.modulations
    assert entry.source == lfo.name
    assert entry.target == osc.name
    assert entry.parameter == osc.parameter(2).id
    assert entry.number == 9
    assert entry.bipolar is True
    assert entry.magnitude == modulation.magnitude_parameter.value


def test_child_blocks_skipped():
    osc, lfo, modulation = _setup()
    child = create_block("filter", 1)
    child.is_child = True
    info = PresetInfo.create("patch", [osc, child], [], [])
    assert [b.id for b in info.blocks] == [osc.id]


def test_changed_value_is_captured():
    osc, _, _ = _setup()
    osc.parameter(5).set_value(0.25)
    info = PresetInfo.create("patch", [osc], [], [])
    assert info.blocks[0].parameters["gain"] == osc.parameter(5).audio_parameter.value


def test_unrouted_modulation_rejected():
    import pytest

    with pytest.raises(ValueError):
        PresetInfo.create("patch", [], [], [Modulation(1)])
"""Reading and writing presets as JSON documents."""

from __future__ import annotations

import json
from typing import Any

from blocksynth.module import ModuleId
from blocksynth.preset_info import (
    BlockInfo,
    ModulationInfo,
    ModulatorInfo,
    ModuleInfo,
    PresetInfo,
)

FORMAT_VERSION = 0


def _encode_module(module: ModuleInfo) -> dict[str, Any]:
    return {
        "name": f"{module.id.type} {module.id.number}",
        "parameters": dict(module.parameters),
    }


def _encode_block(block: BlockInfo) -> dict[str, Any]:
    document = _encode_module(block)
    document["length"] = block.length
    document["index"] = list(block.index)
    return document


def _encode_modulator(modulator: ModulatorInfo) -> dict[str, Any]:
    document = _encode_module(modulator)
    document["color"] = modulator.colour
    return document


def _encode_modulation(modulation: ModulationInfo) -> dict[str, Any]:
    return {
        "source": modulation.source,
        "target": modulation.target,
        "magnitude": modulation.magnitude,
        "bipolar": modulation.bipolar,
        "parameter": modulation.parameter,
        "number": modulation.number,
    }


def encode(preset: PresetInfo) -> str:
    """Return ``preset`` as an indented JSON document."""
    document = {
        "name": preset.name,
        "tabs": [],
        "blocks": [_encode_block(block) for block in preset.blocks],
        "modulators": [_encode_modulator(modulator) for modulator in preset.modulators],
        "modulations": [_encode_modulation(modulation) for modulation in preset.modulations],
        "format_version": FORMAT_VERSION,
    }
    return json.dumps(document, indent=2, sort_keys=True)


def _field(document: Any, key: str) -> Any:
    if not isinstance(document, dict):
        raise ValueError(f"expected an object holding {key!r}")
    if key not in document:
        raise ValueError(f"preset entry is missing {key!r}")
    return document[key]


def _number(value: Any, key: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{key!r} must be a number")
    return value


def _int(document: Any, key: str) -> int:
    return int(_number(_field(document, key), key))


def _list(document: Any, key: str) -> list[Any]:
    value = _field(document, key)
    if not isinstance(value, list):
        raise ValueError(f"{key!r} must be a list")
    return value


def _string(document: Any, key: str) -> str:
    value = _field(document, key)
    if not isinstance(value, str):
        raise ValueError(f"{key!r} must be a string")
    return value


def _decode_module(document: Any) -> tuple[ModuleId, dict[str, float]]:
    name = _string(document, "name")
    module_type, space, number = name.partition(" ")
    if not space:
        raise ValueError(f"module name {name!r} has no number")
    try:
        module_id = ModuleId(module_type, int(number))
    except ValueError:
        raise ValueError(f"module name {name!r} has no number") from None
    raw = _field(document, "parameters")
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ValueError("'parameters' must be an object")
    parameters = {key: float(_number(value, key)) for key, value in raw.items()}
    return module_id, parameters


def _decode_block(document: Any) -> BlockInfo:
    module_id, parameters = _decode_module(document)
    index = _list(document, "index")
    if len(index) != 2:
        raise ValueError("'index' must hold a row and a column")
    row, column = (int(_number(value, "index")) for value in index)
    return BlockInfo(
        id=module_id, parameters=parameters, length=_int(document, "length"), index=(row, column)
    )


def _decode_modulator(document: Any) -> ModulatorInfo:
    module_id, parameters = _decode_module(document)
    return ModulatorInfo(id=module_id, parameters=parameters, colour=_int(document, "color"))


def _decode_modulation(document: Any) -> ModulationInfo:
    bipolar = _field(document, "bipolar")
    if not isinstance(bipolar, (bool, int, float)):
        raise ValueError("'bipolar' must be a boolean")
    return ModulationInfo(
        source=_string(document, "source"),
        target=_string(document, "target"),
        parameter=_string(document, "parameter"),
        magnitude=float(_number(_field(document, "magnitude"), "magnitude")),
        bipolar=bool(bipolar),
        number=_int(document, "number"),
    )


def decode(text: str) -> PresetInfo | None:
    """Read a preset from JSON.

    Returns None when the format version is not a number; raises ValueError
    when the document is malformed. Note-tab entries are not modelled and are
    skipped.
    """
    document = json.loads(text)
    if not isinstance(document, dict):
        return None
    version = _field(document, "format_version")
    if isinstance(version, bool) or not isinstance(version, (int, float)):
        return None

    preset = PresetInfo(name=_string(document, "name"))
    _list(document, "tabs")
    preset.blocks = [_decode_block(entry) for entry in _list(document, "blocks")]
    preset.modulators = [_decode_modulator(entry) for entry in _list(document, "modulators")]
    preset.modulations = [_decode_modulation(entry) for entry in _list(document, "modulations")]
    return preset
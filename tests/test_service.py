import json

import pytest

from hexview import service
from hexview.errors import EmptyInputError, InvalidCharacterError, InvalidRegisterError


def test_convert_hex_fills_only_matching_width():
    result = service.convert_hex("0x11223344")
    assert result.bytes_hex == "11223344"
    assert result.binary == "00010001 00100010 00110011 01000100"
    assert result.ascii == '."3D'

    present = result.present()
    assert set(present) == {
        f"{t}{e}" for t in ("int32", "uint32", "float32") for e in ("BE", "LE", "BADC", "CDAB")
    }
    assert result.fields["int16BE"] is None
    assert result.fields["uint8BE"] is None
    assert present["uint32BE"].value == 0x11223344
    assert present["uint32LE"].value == 0x44332211
    assert present["uint32BADC"].hex == "22114433"
    assert present["uint32CDAB"].hex == "33441122"

def test_convert_hex_single_byte_only_be():
    result = service.convert_hex("ff")
    assert result.present().keys() == {"int8BE", "uint8BE"}
    assert result.fields["int8BE"].value == -1
    assert result.fields["uint8BE"].text == "255"

def test_convert_hex_no_matching_width():
    result = service.convert_hex("48 65 6c")
    assert result.ascii == "Hel"
    assert result.present() == {}

def test_convert_hex_float_text():
    result = service.convert_hex("7fc00000")
    assert result.fields["float32BE"].text == "NaN"
    assert result.fields["float32BE"].hex == "7fc00000"

def test_convert_hex_errors_propagate():
    with pytest.raises(EmptyInputError):
        service.convert_hex("")
    with pytest.raises(InvalidCharacterError):
        service.convert_hex("0xGG")

def test_convert_binary():
    result = service.convert_binary("0000 0001 0000 0000")
    assert result.bytes_hex == "0100"
    assert result.fields["uint16BE"].value == 256
    assert result.fields["uint16LE"].value == 1
    assert result.fields["int16BADC"].value == 256

def test_convert_int_orders():
    result = service.convert_int("0x11223344", "uint32")
    assert result.bytes_hex == "11223344"
    assert result.fields["uint32BE"].hex == "11223344"
    assert result.fields["uint32LE"].hex == "44332211"
    assert result.fields["uint32BADC"].hex == "22114433"
    assert result.fields["uint32CDAB"].hex == "33441122"
    assert all(result.fields[f"uint32{e}"].value == 0x11223344 for e in ("BE", "LE", "BADC", "CDAB"))
    assert result.fields["int32BE"] is None

def test_convert_int_negative():
    result = service.convert_int("-1", "int16")
    assert result.bytes_hex == "ffff"
    assert result.fields["int16BE"].text == "-1"

@pytest.mark.parametrize("value,type_name", [("256", "uint8"), ("-1", "uint32"), ("1", "int128"), ("x", "int8")])
def test_convert_int_errors(value, type_name):
    with pytest.raises(ValueError):
        service.convert_int(value, type_name)

def test_convert_float():
    result = service.convert_float("1.0", "float32")
    assert result.bytes_hex == "3f800000"
    assert result.fields["float32BE"].text == "1"
    assert result.fields["float32LE"].hex == "0000803f"
    assert result.fields["uint32BE"].value == 0x3F800000
    assert result.fields["int32BE"].value == 0x3F800000

def test_convert_float_rounds_to_single():
    result = service.convert_float("0.1", "float32")
    assert result.fields["float32BE"].text == "0.1"
    assert result.fields["float32BE"].value != 0.1

def test_convert_float_specials():
    assert service.convert_float("nan", "float64").bytes_hex == "7ff8000000000000"
    assert service.convert_float("-inf", "float32").fields["float32BE"].text == "-Inf"

@pytest.mark.parametrize("value,type_name", [("", "float32"), ("abc", "float32"), ("1", "float16")])
def test_convert_float_errors(value, type_name):
    with pytest.raises(ValueError):
        service.convert_float(value, type_name)

def test_conversion_result_to_dict_is_json_ready():
    out = service.convert_hex("3ff0000000000000").to_dict()
    assert out["bytes_hex"] == "3ff0000000000000"
    assert out["fields"]["float64BE"] == {"value": 1.0, "text": "1", "hex": "3ff0000000000000"}
    assert "int32BE" not in out["fields"]
    json.dumps(out)

def test_conversion_result_to_dict_nulls_non_finite_floats():
    out = service.convert_hex("ff800000").to_dict()
    assert out["fields"]["float32BE"] == {"value": None, "text": "-Inf", "hex": "ff800000"}
    assert out["fields"]["uint32BE"]["value"] == 0xFF800000
    json.dumps(out, allow_nan=False)

    nan = service.convert_float("nan", "float64").to_dict()
    assert nan["fields"]["float64BE"]["value"] is None
    assert nan["fields"]["float64BE"]["text"] == "NaN"

def test_convert_registers_windows():
    result = service.convert_registers("0x4148 0x0000 d1 d2")
    assert [r.hex for r in result.registers] == ["4148", "0000", "0001", "0002"]
    assert result.raw_hex == "4148 0000 0001 0002"
    assert result.registers[0].index == 1
    assert len(result.combined32) == 3
    assert len(result.combined64) == 1

    first = result.combined32[0]
    assert first.register_start == 1
    assert first.hex == "41480000"
    assert first.values["float32BE"] == "12.5"
    assert first.values["uint32CDAB"] == str(0x00004148)
    assert first.values["int32LE"] == str(0x00004841)

    assert result.combined64[0].hex == "4148000000010002"
    assert set(result.combined64[0].values) >= {"uint64BE", "int64CDAB", "float64BADC"}

def test_convert_registers_signed_column():
    result = service.convert_registers("ffff 8000")
    assert [r.signed for r in result.registers] == [-1, -32768]
    assert [r.unsigned for r in result.registers] == [0xFFFF, 0x8000]
    assert result.combined64 == []

def test_convert_registers_errors():
    with pytest.raises(EmptyInputError):
        service.convert_registers("")
    with pytest.raises(InvalidRegisterError):
        service.convert_registers("12345")

def test_register_result_to_dict():
    out = service.convert_registers("0001 0002").to_dict()
    assert out["registers"][1]["unsigned"] == 2
    assert out["combined32"][0]["values"]["uint32BE"] == "65538"
    json.dumps(out)

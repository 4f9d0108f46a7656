# mipsasm/tests/test_encoder.py
import pytest
from mipsasm.mips_encoder import encode_i, encode_r


def test_encode_r_every_register_and_shift():
    for value in range(32):
        assert encode_r(value, 0, 0, 0, 0) == value << 21
        assert encode_r(0, value, 0, 0, 0) == value << 16
        assert encode_r(0, 0, value, 0, 0) == value << 11
        assert encode_r(0, 0, 0, value, 0) == value << 6

@pytest.mark.parametrize("rs, rt, rd, shamt, funct", [
    (0, 0, 0, 0, 0x00),
    (31, 31, 31, 31, 0x3f),
    (9, 10, 16, 0, 0x20),
    (1, 2, 3, 4, 0x2a),
])
def test_encode_r_layout(rs, rt, rd, shamt, funct):
    assert encode_r(rs, rt, rd, shamt, funct) == rs << 21 | rt << 16 | rd << 11 | shamt << 6 | funct

def test_encode_r_fields_wrap():
    assert encode_r(32, 0, 0, 0, 0) == 0
    assert encode_r(0, 0, 0, 33, 0) == 1 << 6
    assert encode_r(0, 0, 0, 0, 0x40) == 0

@pytest.mark.parametrize("opcode, rs, rt, imm, expected", [
    (0x08, 0, 8, 100, 0x20080064),
    (0x20, 29, 16, -4, 0x83b0fffc),
    (0x2b, 28, 4, 16, 0xae040010),
    (0x3f, 31, 31, 0xffff, 0xffffffff),
    (0x02, 0, 0, 0, 0x08000000),
])
def test_encode_i_layout(opcode, rs, rt, imm, expected):
    assert encode_i(opcode, rs, rt, imm) == expected

def test_encode_i_immediate_is_16_bits():
    for imm in (-32768, -1, 0, 1, 32767, 65535, 0x12345):
        assert encode_i(0x08, 1, 2, imm) == 0x08 << 26 | 1 << 21 | 2 << 16 | (imm & 0xFFFF)

def test_encode_i_register_wraps():
    assert encode_i(0x08, 32, 33, 0) == 0x08 << 26 | 1 << 16

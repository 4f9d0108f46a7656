# mipsasm/mips_encoder.py
#
# Bit packing only. Every field is truncated to its width, so out-of-range
# values wrap instead of spilling into neighbouring fields.

REG_MASK = 0x1F
SHAMT_MASK = 0x1F
CODE_MASK = 0x3F
IMM_MASK = 0xFFFF
WORD_MASK = 0xFFFFFFFF


def encode_r(rs, rt, rd, shamt, funct):
    # Format: opcode(6)=0 rs(5) rt(5) rd(5) shamt(5) funct(6)
    return ((rs & REG_MASK) << 21) | ((rt & REG_MASK) << 16) | ((rd & REG_MASK) << 11) \
        | ((shamt & SHAMT_MASK) << 6) | (funct & CODE_MASK)


def encode_i(opcode, rs, rt, imm):
    # Format: opcode(6) rs(5) rt(5) immediate(16)
    return (((opcode & CODE_MASK) << 26) | ((rs & REG_MASK) << 21) | ((rt & REG_MASK) << 16)
            | (imm & IMM_MASK)) & WORD_MASK

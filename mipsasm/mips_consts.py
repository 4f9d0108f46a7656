# mipsasm/mips_consts.py
from dataclasses import dataclass
from typing import Optional
from enum import Enum
from types import MappingProxyType

# MIPS Register Map (Name to Number). Plain numbers ("8") are handled by the parser.
REGISTER_NAMES = (
    "$zero", "$at", "$v0", "$v1", "$a0", "$a1", "$a2", "$a3",
    "$t0", "$t1", "$t2", "$t3", "$t4", "$t5", "$t6", "$t7",
    "$s0", "$s1", "$s2", "$s3", "$s4", "$s5", "$s6", "$s7",
    "$t8", "$t9", "$k0", "$k1", "$gp", "$sp", "$fp", "$ra",
)

REGISTER_MAP = MappingProxyType({
    **{name: num for num, name in enumerate(REGISTER_NAMES)},
    **{f"${num}": num for num in range(32)},
})


class EncodingKind(Enum):
    OPCODE = "opcode" # I-type, keyed by the 6-bit opcode
    FUNCT = "funct"   # R-type, opcode 0, keyed by the 6-bit funct


class InstructionFormat(Enum):
    """Operand shapes. The value is the field each token fills, in source order."""
    RD = ("rd",)
    RS = ("rs",)
    RS_RT = ("rs", "rt")
    RD_RS = ("rd", "rs")
    RD_RT_SHAMT = ("rd", "rt", "shamt")
    RD_RT_RS = ("rd", "rt", "rs")
    RD_RS_RT = ("rd", "rs", "rt")
    RS_IMM = ("rs", "imm")
    RT_IMM = ("rt", "imm")
    RT_RS_IMM = ("rt", "rs", "imm")
    RT_IMM_RS = ("rt", "imm", "rs")
    ADDR = ("addr",)
    RS_ADDR = ("rs", "addr")
    RS_RT_ADDR = ("rs", "rt", "addr")

    @property
    def fields(self):
        return self.value

    @property
    def arity(self):
        return len(self.value)

    @property
    def has_address(self):
        return "addr" in self.value

    @property
    def is_relative(self):
        # Conditional branches are PC-relative; bare jumps take an absolute index.
        return self in (InstructionFormat.RS_ADDR, InstructionFormat.RS_RT_ADDR)


@dataclass(frozen=True)
class CatalogEntry:
    mnemonic: str
    kind: EncodingKind
    code: int
    format: InstructionFormat
    rt: Optional[int] = None # Fixed rt field (REGIMM variant selector), overrides any decoded rt


def _build_table(kind, rows):
    table = {}
    for mnemonic, code, fmt, *fixed_rt in rows:
        table[mnemonic] = CatalogEntry(mnemonic, kind, code, fmt, *fixed_rt)
    return MappingProxyType(table)


F = InstructionFormat

# --- R-Type: opcode 0, selected by funct ---
R_TYPE_FUNCT = _build_table(EncodingKind.FUNCT, [
    ("ADD",   0x20, F.RD_RS_RT), ("ADDU", 0x21, F.RD_RS_RT),
    ("SUB",   0x22, F.RD_RS_RT), ("SUBU", 0x23, F.RD_RS_RT),
    ("AND",   0x24, F.RD_RS_RT), ("OR",   0x25, F.RD_RS_RT),
    ("XOR",   0x26, F.RD_RS_RT), ("NOR",  0x27, F.RD_RS_RT),
    ("SLT",   0x2a, F.RD_RS_RT), ("SLTU", 0x2b, F.RD_RS_RT),
    ("SLL",   0x00, F.RD_RT_SHAMT), ("SRL", 0x02, F.RD_RT_SHAMT), ("SRA", 0x03, F.RD_RT_SHAMT),
    ("SLLV",  0x04, F.RD_RT_RS), ("SRLV", 0x06, F.RD_RT_RS), ("SRAV", 0x07, F.RD_RT_RS),
    ("JR",    0x08, F.RS), ("JALR", 0x09, F.RD_RS),
    ("MFHI",  0x10, F.RD), ("MTHI", 0x11, F.RS),
    ("MFLO",  0x12, F.RD), ("MTLO", 0x13, F.RS),
    ("MULT",  0x18, F.RS_RT), ("MULTU", 0x19, F.RS_RT),
    ("DIV",   0x1a, F.RS_RT), ("DIVU",  0x1b, F.RS_RT),
])

# --- I-Type (J and JAL share the opcode<<26 layout) ---
I_TYPE_OPCODE = _build_table(EncodingKind.OPCODE, [
    ("ADDI",  0x08, F.RT_RS_IMM), ("ADDIU", 0x09, F.RT_RS_IMM),
    ("SLTI",  0x0a, F.RT_RS_IMM), ("SLTIU", 0x0b, F.RT_RS_IMM),
    ("ANDI",  0x0c, F.RT_RS_IMM), ("ORI",   0x0d, F.RT_RS_IMM),
    ("XORI",  0x0e, F.RT_RS_IMM), ("LUI",   0x0f, F.RT_IMM),
    ("LB",    0x20, F.RT_IMM_RS), ("LH",    0x21, F.RT_IMM_RS),
    ("LW",    0x23, F.RT_IMM_RS), ("LBU",   0x24, F.RT_IMM_RS),
    ("LHU",   0x25, F.RT_IMM_RS), ("SB",    0x28, F.RT_IMM_RS),
    ("SH",    0x29, F.RT_IMM_RS), ("SW",    0x2b, F.RT_IMM_RS),
    ("BEQ",   0x04, F.RS_RT_ADDR), ("BNE",  0x05, F.RS_RT_ADDR),
    ("BLEZ",  0x06, F.RS_ADDR), ("BGTZ",  0x07, F.RS_ADDR),
    # REGIMM (opcode 0x1): rt selects the variant
    ("BLTZ",   0x01, F.RS_ADDR, 0x00), ("BGEZ",   0x01, F.RS_ADDR, 0x01),
    ("BLTZAL", 0x01, F.RS_ADDR, 0x10), ("BGEZAL", 0x01, F.RS_ADDR, 0x11),
    ("TGEI",   0x01, F.RS_IMM, 0x08), ("TGEIU",  0x01, F.RS_IMM, 0x09),
    ("TLTI",   0x01, F.RS_IMM, 0x0a), ("TLTIU",  0x01, F.RS_IMM, 0x0b),
    ("TEQI",   0x01, F.RS_IMM, 0x0c), ("TNEI",   0x01, F.RS_IMM, 0x0e),
    ("J",     0x02, F.ADDR), ("JAL",   0x03, F.ADDR),
])

del F


def lookup(mnemonic):
    """Finds the catalog entry for a mnemonic (any case). Funct table is searched first."""
    key = mnemonic.upper()
    entry = R_TYPE_FUNCT.get(key)
    if entry is None:
        entry = I_TYPE_OPCODE.get(key)
    return entry


def format_arity(fmt):
    return fmt.arity

# mipsasm/mips_parser.py
import re
import logging
from dataclasses import dataclass
from typing import Optional

from mipsasm.mips_consts import REGISTER_MAP, format_arity
from mipsasm.mips_errors import ArityMismatch, MalformedOperand

logger = logging.getLogger(__name__)

COMMENT_MARKER = ";"

_UNSIGNED_RE = re.compile(r'^\+?[0-9]+$')
_SIGNED_RE = re.compile(r'^([+-]?)(0[xX][0-9a-fA-F]+|[0-9]+)$')


@dataclass
class DecodedOperands:
    rs: int = 0
    rt: int = 0
    rd: int = 0
    shamt: int = 0
    imm: int = 0
    label: Optional[str] = None   # Set only for address-bearing formats
    relative: bool = False


def tokenize(line):
    """Splits a source line on whitespace, dropping everything from the first ';' token on."""
    tokens = []
    for token in line.split():
        if token.startswith(COMMENT_MARKER):
            break
        tokens.append(token)
    return tokens


def _parse_register(token, mnemonic):
    """Register operand: '8', '$8' or '$t0'."""
    reg = REGISTER_MAP.get(token.lower())
    if reg is not None:
        return reg
    if not _UNSIGNED_RE.match(token):
        raise MalformedOperand(mnemonic, token)
    return int(token)


def _parse_unsigned(token, mnemonic):
    if not _UNSIGNED_RE.match(token):
        raise MalformedOperand(mnemonic, token)
    return int(token)


def _parse_immediate(token, mnemonic):
    """Signed decimal (or 0x hex) immediate. Range is not checked; the encoder truncates."""
    match = _SIGNED_RE.match(token)
    if not match:
        raise MalformedOperand(mnemonic, token)
    sign, digits = match.groups()
    value = int(digits, 16) if digits[:2].lower() == "0x" else int(digits)
    return -value if sign == "-" else value


def decode_operands(fmt, operands, mnemonic):
    """Assigns operand tokens to instruction fields following the format's token order.

    Raises ArityMismatch before looking at any token, and MalformedOperand on
    the first numeric token that doesn't parse.
    """
    expected = format_arity(fmt)
    if len(operands) != expected:
        raise ArityMismatch(mnemonic, expected, len(operands))

    decoded = DecodedOperands()
    for field, token in zip(fmt.fields, operands):
        if field in ("rs", "rt", "rd"):
            setattr(decoded, field, _parse_register(token, mnemonic))
        elif field == "shamt":
            decoded.shamt = _parse_unsigned(token, mnemonic)
        elif field == "imm":
            decoded.imm = _parse_immediate(token, mnemonic)
        elif field == "addr":
            decoded.label = token
            decoded.relative = fmt.is_relative
    return decoded

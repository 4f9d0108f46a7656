# mipsasm/mips_assembler.py
import logging

from mipsasm.mips_consts import EncodingKind, lookup
from mipsasm.mips_encoder import encode_i, encode_r
from mipsasm.mips_errors import AssemblerError, DuplicateLabel, UnknownMnemonic
from mipsasm.mips_labels import JumpResolver, LabelTable
from mipsasm.mips_output import format_word
from mipsasm.mips_parser import decode_operands, tokenize

logger = logging.getLogger(__name__)


class MipsAssembler:
    def __init__(self):
        self.reset()

    def reset(self):
        self.symbol_table = LabelTable()
        self.resolver = JumpResolver()
        self.machine_code = [] # Stores generated integer machine code words
        self.errors = []
        self.warnings = []

    def _encode_instruction(self, tokens, line_num, original_text):
        """Encodes one instruction line. Registers a pending reference if it names a label."""
        entry = lookup(tokens[0])
        if entry is None:
            raise UnknownMnemonic(tokens[0])

        operands = decode_operands(entry.format, tokens[1:], entry.mnemonic)
        rt = operands.rt if entry.rt is None else entry.rt

        if entry.kind is EncodingKind.FUNCT:
            word = encode_r(operands.rs, rt, operands.rd, operands.shamt, entry.code)
        else:
            word = encode_i(entry.code, operands.rs, rt, operands.imm)

        if operands.label is not None:
            self.resolver.register(len(self.machine_code), operands.label, operands.relative,
                                   line_num, original_text)
        return word

    def first_pass(self, lines):
        """ Pass 1: Bind labels, encode instructions, leave label references pending.

        Stops at the first structural error; nothing after a bad line can be trusted.
        """
        logger.debug("--- Starting First Pass ---")
        for i, line in enumerate(lines):
            line_num = i + 1
            tokens = tokenize(line)
            if not tokens:
                continue # Blank or comment-only

            if len(tokens) == 1:
                label = tokens[0]
                index = len(self.machine_code)
                if self.symbol_table.declare(label, index):
                    logger.debug(f"Pass 1: Label '{label}' bound to instruction {index}")
                else:
                    warning = DuplicateLabel(label, line_num=line_num, text=line.rstrip())
                    logger.warning(str(warning))
                    self.warnings.append(warning)
                continue

            try:
                word = self._encode_instruction(tokens, line_num, line.rstrip())
            except AssemblerError as e:
                self.errors.append(e.at(line_num, line.rstrip()))
                logger.debug(f"Pass 1: Stopping at line {line_num}: {e.message}")
                return
            logger.debug(f"Pass 1: Encoded 0x{word:08x} for '{' '.join(tokens)}' at index {len(self.machine_code)}")
            self.machine_code.append(word)
        logger.debug("--- First Pass Complete ---")

    def second_pass(self):
        """ Pass 2: Patch every pending jump/branch now that all labels are known. """
        logger.debug(f"--- Starting Second Pass ({len(self.resolver.pending)} pending references) ---")
        self.errors.extend(self.resolver.resolve(self.symbol_table, self.machine_code))

    def assemble(self, assembly_code):
        """ Main method to assemble MIPS code (a string or an iterable of lines). """
        logger.info("Starting assembly process...")
        self.reset()
        if isinstance(assembly_code, str):
            # Only "\n" ends a line; form feeds and other separators stay inside it
            lines = [line[:-1] if line.endswith("\r") else line for line in assembly_code.split("\n")]
        else:
            lines = list(assembly_code)

        try:
            self.first_pass(lines)
            if not self.errors:
                self.second_pass()
        except Exception as e:
            logger.error(f"Unexpected exception during assembly: {e}", exc_info=True)
            self.errors.append(AssemblerError(f"An unexpected internal error occurred during assembly: {e}", line_num=0))

        if self.errors:
            logger.warning(f"Assembly failed with {len(self.errors)} errors.")
            self.machine_code = [] # No partial output
        else:
            logger.info(f"Assembly successful: {len(self.machine_code)} words.")

        return {
            "machine_code": [format_word(code) for code in self.machine_code],
            "errors": [e.to_dict() for e in self.errors],
            "warnings": [w.to_dict() for w in self.warnings],
        }

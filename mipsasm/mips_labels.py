# mipsasm/mips_labels.py
import logging
from dataclasses import dataclass

from mipsasm.mips_errors import UnresolvedLabel

logger = logging.getLogger(__name__)

ADDR_MASK = 0x03FFFFFF # 26-bit jump target field
OFFSET_MASK = 0xFFFF   # 16-bit branch offset field


class LabelTable:
    """Label name -> index of the instruction that follows the label."""

    def __init__(self):
        self._labels = {}

    def declare(self, name, index):
        """Binds a label. Returns False (and keeps the old binding) if it was already declared."""
        if name in self._labels:
            return False
        self._labels[name] = index
        return True

    def get(self, name):
        return self._labels.get(name)

    def __contains__(self, name):
        return name in self._labels

    def __len__(self):
        return len(self._labels)

    def as_dict(self):
        return dict(self._labels)


@dataclass(frozen=True)
class PendingReference:
    instruction_index: int
    label: str
    relative: bool
    line_num: int = None
    text: str = ""


class JumpResolver:
    """Second pass: patches words that referenced a label before it was known."""

    def __init__(self):
        self.pending = []

    def register(self, instruction_index, label, relative, line_num=None, text=""):
        self.pending.append(PendingReference(instruction_index, label, relative, line_num, text))

    def resolve(self, labels, words):
        """Patches ``words`` in place. Returns the list of UnresolvedLabel errors (empty on success).

        Every pending reference is checked; a missing label doesn't stop the
        remaining ones from being resolved and reported.
        """
        errors = []
        for ref in self.pending:
            target = labels.get(ref.label)
            if target is None:
                errors.append(UnresolvedLabel(ref.label, ref.instruction_index,
                                              line_num=ref.line_num, text=ref.text))
                continue

            if ref.relative:
                # Offset counts instructions after the delay slot
                offset = target - ref.instruction_index - 1
                words[ref.instruction_index] |= offset & OFFSET_MASK
                logger.debug(f"Pass 2: Branch at {ref.instruction_index} to '{ref.label}' ({target}), offset {offset} -> 0x{offset & OFFSET_MASK:04x}")
            else:
                words[ref.instruction_index] |= target & ADDR_MASK
                logger.debug(f"Pass 2: Jump at {ref.instruction_index} to '{ref.label}' -> {target}")

        self.pending = []
        return errors

# mipsasm/mips_errors.py


class AssemblerError(Exception):
    """Base class for problems found while assembling a program.

    Low-level helpers raise these without line info; the assembler attaches
    ``line_num`` and the offending source text before reporting.
    """

    def __init__(self, message, line_num=None, text=""):
        super().__init__(message)
        self.message = message
        self.line_num = line_num
        self.text = text

    def at(self, line_num, text):
        self.line_num = line_num
        self.text = text
        return self

    def to_dict(self):
        return {
            "kind": type(self).__name__,
            "line": self.line_num,
            "message": self.message,
            "text": self.text,
        }

    def __str__(self):
        if self.line_num is None:
            return self.message
        return f"Line {self.line_num}: {self.message}"


class UnknownMnemonic(AssemblerError):
    def __init__(self, mnemonic, **kwargs):
        super().__init__(f"Unknown instruction: '{mnemonic}'", **kwargs)
        self.mnemonic = mnemonic


class ArityMismatch(AssemblerError):
    def __init__(self, mnemonic, expected, actual, **kwargs):
        super().__init__(
            f"Incorrect operand count for '{mnemonic}'. Expected {expected}, got {actual}.", **kwargs)
        self.mnemonic = mnemonic
        self.expected = expected
        self.actual = actual


class MalformedOperand(AssemblerError):
    def __init__(self, mnemonic, token, **kwargs):
        super().__init__(f"Invalid operand for '{mnemonic}': '{token}'", **kwargs)
        self.mnemonic = mnemonic
        self.token = token


class UnresolvedLabel(AssemblerError):
    def __init__(self, label, instruction_index, **kwargs):
        super().__init__(f"Undefined label: '{label}'", **kwargs)
        self.label = label
        self.instruction_index = instruction_index


class DuplicateLabel(AssemblerError):
    """Reported as a warning only: the first declaration of a label is kept."""

    def __init__(self, label, **kwargs):
        super().__init__(f"Duplicate label definition: {label} (first definition kept)", **kwargs)
        self.label = label

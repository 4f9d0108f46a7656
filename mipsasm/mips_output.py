# mipsasm/mips_output.py
import logging

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("bin", "hex")


def format_word(word):
    """Row used in API results."""
    return {
        "hex": f"0x{word:08x}",
        "bin": f"{word:032b}",
        "dec": str(word) # Unsigned decimal representation
    }


def render_words(words, fmt="bin"):
    if fmt == "bin":
        return [f"{word:032b}" for word in words]
    if fmt == "hex":
        return [f"0x{word:08x}" for word in words]
    raise ValueError(f"Unknown output format: '{fmt}'")


def write_program(path, words, fmt="bin"):
    """Writes one word per line."""
    lines = render_words(words, fmt)
    with open(path, "w", encoding="utf-8") as out_stream:
        for line in lines:
            out_stream.write(line + "\n")
    logger.info(f"Wrote {len(lines)} words to {path}")

# mipsasm/cli.py
import argparse
import logging
import sys

from mipsasm.mips_assembler import MipsAssembler
from mipsasm.mips_output import OUTPUT_FORMATS, write_program

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        prog='mipsasm',
        description='Assemble a reduced MIPS program into 32-bit machine words',
    )
    parser.add_argument('source', type=str, help='input assembly file')
    parser.add_argument('-o', '--output', type=str,
                        help='output file (default: SOURCE with ".bin" appended)')
    parser.add_argument('-f', '--format', choices=OUTPUT_FORMATS, default='bin',
                        help='one word per line as 32 binary digits or as 0x-prefixed hex (default "bin")')
    parser.add_argument('-v', '--verbose', action='store_true', help='log each pass to stderr')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(format='%(levelname)s %(name)s: %(message)s',
                        level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        # Lines end at "\n" only; any trailing "\r" is whitespace to the tokenizer
        with open(args.source, encoding='utf-8', newline='\n') as src_stream:
            source_lines = list(src_stream)
    except UnicodeDecodeError:
        print(f"Could not decode file {args.source} as UTF-8", file=sys.stderr)
        return 1
    except OSError:
        print(f"Could not open file {args.source}", file=sys.stderr)
        return 1

    assembler = MipsAssembler()
    result = assembler.assemble(source_lines)
    if result["errors"]:
        for error in assembler.errors:
            print(f"{args.source}: {error}", file=sys.stderr)
        return 1

    output_path = args.output or args.source + '.bin'
    try:
        write_program(output_path, assembler.machine_code, args.format)
    except OSError:
        print(f"Could not open file {output_path} for writing", file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())

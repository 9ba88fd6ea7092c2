#!/usr/bin/env python3

import argparse
import sys

from .config import ConfigError, EncoderConfig, LINE_WIDTH, OUTPUT_EXTENSION, TOOL_NAME, default_name, default_output
from .encoder import encode


EXAMPLE = f'''
For example:
    {TOOL_NAME} input.txt -n fred -l 120 -o output.blah -b
'''


def printable(text):
    # paths that are not valid UTF-8 arrive with surrogate escapes
    return text.encode(errors='surrogateescape').decode(errors='replace')


def fail(parser, message):
    print(printable(message), file=sys.stderr)
    parser.print_help()
    return 1


def climain(argv=None):
    parser = argparse.ArgumentParser(
        prog=TOOL_NAME,
        description='Take a text file and create from it a C const char array which can be compiled into code.',
        epilog=EXAMPLE,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument('input', nargs='?', metavar='input_file', help='Input text file')
    parser.add_argument('-n', '--name', metavar='name',
                        help='Name for the array (default: input_file without path or extension)')
    parser.add_argument('-l', '--line-length', type=int, default=LINE_WIDTH, metavar='line_length',
                        help=f'Length of each line in the output file (default: {LINE_WIDTH})')
    parser.add_argument('-o', '--output', metavar='output_file',
                        help=f'Output file, overwritten if it exists (default: input_file with extension .{OUTPUT_EXTENSION})')
    parser.add_argument('-b', '--bare', action='store_true',
                        help='Do not add the topping and tailing comment lines')
    args = parser.parse_args(argv)

    if args.input is None:
        parser.print_help()
        return 1

    try:
        fp_in = open(args.input, 'rb')
    except OSError as e:
        return fail(parser, f'Cannot open input file {args.input} ({e.strerror}).')

    with fp_in:
        try:
            name = args.name or default_name(args.input)
            config = EncoderConfig(name, args.line_length, args.bare, source=args.input, tool=parser.prog)
            output = args.output or default_output(args.input)
        except ConfigError as e:
            return fail(parser, str(e))

        if config.clamped:
            print(f'Using line length {config.line_width} as {config.requested_line_width} '
                  'is less than the minimum required to print something.')

        try:
            fp_out = open(output, 'wb', buffering=0)
        except OSError as e:
            return fail(parser, f'Cannot open output file {output} ({e.strerror}).')

        with fp_out:
            ending = ' bare.' if config.bare else '.'
            print(printable(f'Arrayifying file "{args.input}", naming array "{config.name}", '
                            f'using {config.line_width} character lines and writing output to "{output}"{ending}'))
            lines = encode(fp_in, fp_out, config)

    print(f'Done: {lines} line(s) written to file.')
    return 0


if __name__ == '__main__':
    sys.exit(climain())

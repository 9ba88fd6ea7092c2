#!/usr/bin/env python3

import re


LINE_WIDTH = 80
OUTPUT_EXTENSION = 'array'
TOOL_NAME = 'arrayify'
PREFIX_FORMAT = 'const char {}[] = '
# opening quote, a two byte escape, closing quote and newline
MINIMUM_CONTENT = 5

DIR_SEPARATORS = re.compile(r'[\\/]')


class ConfigError(Exception):
    pass


def prefix_length(name):
    return len(PREFIX_FORMAT.format(name))


def minimum_line_width(name):
    return prefix_length(name) + MINIMUM_CONTENT


def default_name(path):
    basename = [p for p in DIR_SEPARATORS.split(path) if p]
    if not basename:
        raise ConfigError(f'Cannot derive an array name from "{path}"')
    tokens = [t for t in basename[-1].split('.') if t]
    if not tokens:
        raise ConfigError(f'Cannot derive an array name from "{path}"')
    return tokens[0]


def default_output(path):
    return f'{default_name(path)}.{OUTPUT_EXTENSION}'


class EncoderConfig:
    def __init__(self, name, line_width=LINE_WIDTH, bare=False, source='', tool=TOOL_NAME):
        if not name or not name.isidentifier() or not name.isascii():
            raise ConfigError(f'"{name}" is not a valid array name, use -n to give one')

        self.name = name
        self.bare = bare
        self.source = source
        self.tool = tool

        self.requested_line_width = line_width
        self.line_width = max(line_width, minimum_line_width(name))

    @property
    def clamped(self):
        return self.line_width != self.requested_line_width

    @property
    def prefix(self):
        return PREFIX_FORMAT.format(self.name).encode('ascii')

    @property
    def header(self):
        return f'/* This file was created from input file {self.source} by {self.tool} */\n\n'.encode(errors='surrogateescape')

    def __repr__(self):
        return f'EncoderConfig({self.name!r}, line_width={self.line_width}, bare={self.bare})'

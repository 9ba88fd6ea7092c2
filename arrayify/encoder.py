#!/usr/bin/env python3

import enum
import functools
import io


CHUNK_SIZE = 120
QUOTE = b'"'
BACKSLASH = b'\\'
NEWLINE = b'\n'
TERMINATOR = b';\n'
FOOTER = b'\n// End of file\n'

ESCAPES = {
    0x07: b'a',     # bell
    0x08: b'b',     # backspace
    0x1b: b'e',     # escape
    0x0c: b'f',     # form feed
    0x0a: b'n',
    0x0d: b'r',
    0x09: b't',
    0x0b: b'v',
    0x5c: b'\\',
    0x27: b"'",
    0x22: b'"',
    0x3f: b'?',     # trigraphs
}


class EscapeState(enum.Enum):
    IDLE = 0
    BACKSLASH_PENDING = 1
    LETTER_PENDING = 2


class LineBuffer:
    def __init__(self, line_width):
        # room for the closing quote and newline
        self.capacity = line_width - len(QUOTE + NEWLINE)
        self.data = bytearray()

    def __len__(self):
        return len(self.data)

    def fits(self, count):
        return len(self.data) + count <= self.capacity

    @property
    def full(self):
        return len(self.data) >= self.capacity

    def append(self, data):
        self.data += data

    def take(self):
        data = bytes(self.data)
        self.data.clear()
        return data


class LiteralEncoder:
    # The most recently closed line is held back until the next one closes
    # or the encoder is closed, so the terminator can follow its quote.

    def __init__(self, fp_out, config):
        self.fp_out = fp_out
        self.config = config
        self.prefix = config.prefix

        self.line = LineBuffer(config.line_width)
        self.state = EscapeState.IDLE
        self.lines_opened = 0
        self.lines_written = 0
        self.last_line = None

    def write(self, data):
        for byte in data:
            self.consume(byte)

    def consume(self, byte):
        letter = ESCAPES.get(byte)
        if letter is None:
            self.emit(bytes((byte,)))
            return

        self.state = EscapeState.BACKSLASH_PENDING
        while self.state is not EscapeState.IDLE:
            if self.state is EscapeState.BACKSLASH_PENDING:
                if self.line and not self.line.fits(len(BACKSLASH + letter)):
                    self.close_line()
                self.emit(BACKSLASH)
                self.state = EscapeState.LETTER_PENDING
            else:
                self.emit(letter)
                self.state = EscapeState.IDLE

    def emit(self, data):
        if not self.line:
            self.open_line()
        self.line.append(data)
        if self.line.full:
            self.close_line()

    def open_line(self):
        if self.lines_opened:
            region = b' ' * len(self.prefix)
        else:
            region = self.prefix
        self.line.append(region + QUOTE)
        self.lines_opened += 1

    def close_line(self):
        self.line.append(QUOTE)
        if self.last_line is not None:
            self.write_line(self.last_line + NEWLINE)
        self.last_line = self.line.take()

    def write_out(self, data):
        try:
            self.fp_out.write(data)
        except OSError:
            # failed writes are not retried, they just go uncounted
            return False
        return True

    def write_header(self):
        self.write_out(self.config.header)

    def write_line(self, data):
        if self.write_out(data):
            self.lines_written += 1

    def close(self):
        if not self.lines_opened:
            self.open_line()
        if self.line:
            self.close_line()

        ending = TERMINATOR if self.config.bare else TERMINATOR + FOOTER
        last_line = self.last_line
        # a full last line leaves no room, so ';' starts a line of its own
        if len(last_line) + len(TERMINATOR) > self.config.line_width:
            self.write_line(last_line + NEWLINE)
            last_line = b''
        self.write_line(last_line + ending)

        return self.lines_written


def encode(fp_in, fp_out, config):
    encoder = LiteralEncoder(fp_out, config)
    if not config.bare:
        encoder.write_header()

    for chunk in iter(functools.partial(fp_in.read, CHUNK_SIZE), b''):
        encoder.write(chunk)

    return encoder.close()


def encode_bytes(data, config):
    fp_out = io.BytesIO()
    encode(io.BytesIO(data), fp_out, config)
    return fp_out.getvalue()

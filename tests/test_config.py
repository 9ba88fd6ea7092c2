import pytest

from arrayify.config import ConfigError, EncoderConfig, default_name, default_output, minimum_line_width


@pytest.mark.parametrize('path, name', [
    ('a/b/file1.txt', 'file1'),
    ('file1.txt', 'file1'),
    ('file1', 'file1'),
    ('archive.tar.gz', 'archive'),
    ('c:\\data\\notes.txt', 'notes'),
    ('dir/.profile', 'profile'),
])
def test_default_name(path, name):
    assert default_name(path) == name


def test_default_output_drops_directory():
    assert default_output('a/b/file1.txt') == 'file1.array'


@pytest.mark.parametrize('path', ['', '/', 'dir/..'])
def test_default_name_rejects_nameless_path(path):
    with pytest.raises(ConfigError):
        default_name(path)


def test_minimum_line_width():
    # 'const char x[] = ' plus quote, escape, quote and newline
    assert minimum_line_width('x') == 17 + 5


def test_line_width_is_clamped():
    config = EncoderConfig('a_rather_long_array_name', line_width=5)
    assert config.clamped
    assert config.requested_line_width == 5
    assert config.line_width == minimum_line_width('a_rather_long_array_name')


def test_negative_line_width_is_clamped():
    config = EncoderConfig('x', line_width=-3)
    assert config.line_width == 22


def test_default_line_width_not_clamped():
    config = EncoderConfig('file1')
    assert not config.clamped
    assert config.line_width == 80


@pytest.mark.parametrize('name', ['', '1abc', 'my-file', 'has space', 'caf\u00e9'])
def test_invalid_names(name):
    with pytest.raises(ConfigError):
        EncoderConfig(name)


def test_prefix_and_header():
    config = EncoderConfig('file1', source='file1.txt')
    assert config.prefix == b'const char file1[] = '
    assert config.header == b'/* This file was created from input file file1.txt by arrayify */\n\n'

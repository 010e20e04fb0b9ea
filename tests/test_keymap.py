import string

import pytest

from pixelkit.keymap import LinuxKey, MacKey, keymap


def test_linux_codes_from_header():
    table = keymap("linux")
    assert table.ESCAPE == 65307
    assert table.SPACE == 32
    assert table.DIGIT_2 == 233
    assert table.CAPS_LOCK == 65509


def test_mac_codes_from_header():
    table = keymap("darwin")
    assert table.ESCAPE == 53
    assert table.A == 0
    assert table.KP_9 == 92
    assert table.CAPS_LOCK == 272


@pytest.mark.parametrize("letter", list(string.ascii_uppercase))
def test_linux_letters_are_lowercase_codes(letter):
    assert keymap("linux")[letter] == ord(letter.lower())


def test_both_tables_name_the_same_keys():
    linux_names = [k.name for k in keymap("linux")]
    mac_names = [k.name for k in keymap("darwin")]
    assert linux_names == mac_names
    assert len(linux_names) == len(LinuxKey.__members__)


@pytest.mark.parametrize("table", [LinuxKey, MacKey])
def test_codes_are_unique(table):
    assert len({int(k) for k in table}) == len(table.__members__)


@pytest.mark.parametrize(
    "platform, expected",
    [("linux", LinuxKey), ("linux2", LinuxKey), ("darwin", MacKey), ("macOS", MacKey)],
)
def test_keymap_selects_table(platform, expected):
    assert keymap(platform) is expected


def test_keymap_unknown_platform():
    with pytest.raises(ValueError):
        keymap("win32")
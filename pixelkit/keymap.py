"""Key codes reported by the window system on Linux (X11) and macOS."""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import Optional, Type, Union


class LinuxKey(IntEnum):
    """X11 key symbols, with digits as found on an AZERTY keyboard."""

    A = 97
    B = 98
    C = 99
    D = 100
    E = 101
    F = 102
    G = 103
    H = 104
    I = 105  # noqa: E741
    J = 106
    K = 107
    L = 108
    M = 109
    N = 110
    O = 111  # noqa: E741
    P = 112
    Q = 113
    R = 114
    S = 115
    T = 116
    U = 117
    V = 118
    W = 119
    X = 120
    Y = 121
    Z = 122
    DIGIT_1 = 38
    DIGIT_2 = 233
    DIGIT_3 = 34
    DIGIT_4 = 39
    DIGIT_5 = 40
    DIGIT_6 = 45
    DIGIT_7 = 232
    DIGIT_8 = 95
    DIGIT_9 = 231
    DIGIT_0 = 224
    KP_0 = 65438
    KP_1 = 65436
    KP_2 = 65433
    KP_3 = 65435
    KP_4 = 65430
    KP_5 = 65437
    KP_6 = 65432
    KP_7 = 65429
    KP_8 = 65431
    KP_9 = 65434
    KP_PLUS = 65451
    KP_MINUS = 65453
    BACKSPACE = 65288
    SPACE = 32
    DELETE = 65535
    ESCAPE = 65307
    LEFT = 65361
    UP = 65362
    RIGHT = 65363
    DOWN = 65364
    LEFT_CTRL = 65507
    LEFT_SHIFT = 65505
    LEFT_ALT = 65513
    CAPS_LOCK = 65509


class MacKey(IntEnum):
    """macOS virtual key codes."""

    A = 0
    B = 11
    C = 8
    D = 2
    E = 14
    F = 3
    G = 5
    H = 4
    I = 34  # noqa: E741
    J = 38
    K = 40
    L = 37
    M = 46
    N = 45
    O = 31  # noqa: E741
    P = 35
    Q = 12
    R = 15
    S = 1
    T = 17
    U = 32
    V = 9
    W = 13
    X = 7
    Y = 16
    Z = 6
    DIGIT_1 = 18
    DIGIT_2 = 19
    DIGIT_3 = 20
    DIGIT_4 = 21
    DIGIT_5 = 23
    DIGIT_6 = 22
    DIGIT_7 = 26
    DIGIT_8 = 28
    DIGIT_9 = 25
    DIGIT_0 = 29
    KP_0 = 82
    KP_1 = 83
    KP_2 = 84
    KP_3 = 85
    KP_4 = 86
    KP_5 = 87
    KP_6 = 88
    KP_7 = 89
    KP_8 = 91
    KP_9 = 92
    KP_PLUS = 69
    KP_MINUS = 78
    BACKSPACE = 51
    SPACE = 49
    DELETE = 117
    ESCAPE = 53
    LEFT = 123
    UP = 126
    RIGHT = 124
    DOWN = 125
    LEFT_CTRL = 256
    LEFT_SHIFT = 257
    LEFT_ALT = 261
    CAPS_LOCK = 272


def keymap(platform: Optional[str] = None) -> Union[Type[LinuxKey], Type[MacKey]]:
    """The key code table for ``platform`` (default: the running one).

    Accepts ``sys.platform`` style names; raises ``ValueError`` for a
    platform without a table.
    """
    name = (sys.platform if platform is None else platform).lower()
    if name.startswith("linux"):
        return LinuxKey
    if name in ("darwin", "macos", "mac", "osx"):
        return MacKey
    raise ValueError(f"no key map for platform {platform!r}")
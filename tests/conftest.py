from __future__ import annotations

import pytest

from minimax_ttt.game import EMPTY


def _parse_board(text: str):
    """Build a board from a compact string such as ``"XX. OO. ..."``."""

    cells = text.replace(" ", "")
    assert len(cells) == 9
    return tuple(EMPTY if cell == "." else cell for cell in cells)


@pytest.fixture
def board():
    return _parse_board

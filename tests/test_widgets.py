import pytest

pytest.importorskip("PySide6.QtWidgets")

from gui.widgets.user_tile import name_markup  # noqa: E402


def test_name_markup_escapes_user_text():
    assert name_markup("<i>Eve</i> & co") == "<b>&lt;i&gt;Eve&lt;/i&gt; &amp; co</b>"


def test_name_markup_plain_name():
    assert name_markup("Alice") == "<b>Alice</b>"

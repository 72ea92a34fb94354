import io

from theme import color_enabled, escape_for


class FakeTTY(io.StringIO):
    def isatty(self):
        return True


def test_color_follows_tty():
    assert color_enabled({}, FakeTTY()) is True
    assert color_enabled({}, io.StringIO()) is False


def test_force_and_no_color():
    assert color_enabled({"FORCE_COLOR": "1"}, io.StringIO()) is True
    assert color_enabled({"NO_COLOR": "", "FORCE_COLOR": "1"}, FakeTTY()) is False


def test_escape_sequences():
    assert escape_for("#476EAE", truecolor=True) == "\033[38;2;71;110;174m"
    assert escape_for("000000", truecolor=False) == "\033[38;5;16m"
    assert escape_for("#FFFFFF", truecolor=False) == "\033[38;5;231m"

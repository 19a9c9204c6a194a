"""Tests for Rich Console factory and themes."""

from io import StringIO

from agecalc.output.console import DARK_THEME, LIGHT_THEME, create_console, get_output


class TestCreateConsole:
    def test_returns_console_with_stringio(self) -> None:
        console = create_console()
        assert isinstance(console.file, StringIO)

    def test_no_color_disables_ansi(self) -> None:
        console = create_console(no_color=True)
        console.print("[age.error]Data inválida.[/age.error]")
        output = get_output(console)
        assert "\x1b" not in output
        assert "Data inválida." in output

    def test_custom_width(self) -> None:
        assert create_console(width=60).width == 60

    def test_default_width(self) -> None:
        assert create_console().width == 100


class TestThemes:
    def test_same_style_names(self) -> None:
        assert set(LIGHT_THEME.styles) == set(DARK_THEME.styles)

    def test_value_style_differs(self) -> None:
        assert LIGHT_THEME.styles["age.value"] != DARK_THEME.styles["age.value"]

    def test_dark_console_resolves_age_styles(self) -> None:
        console = create_console(dark=True)
        assert console.get_style("age.value") == DARK_THEME.styles["age.value"]


class TestGetOutput:
    def test_extracts_printed_text(self) -> None:
        console = create_console(no_color=True)
        console.print("hello world")
        assert "hello world" in get_output(console)

    def test_empty_console(self) -> None:
        assert get_output(create_console()) == ""

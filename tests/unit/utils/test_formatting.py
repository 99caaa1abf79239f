"""Unit tests for console message helpers."""

from mlcp.utils.formatting import console, err_console, print_error, print_success


class TestMessageHelpers:
    """Messages are printed literally, never as Rich markup."""

    def test_error_keeps_brackets(self) -> None:
        with err_console.capture() as capture:
            print_error('Library path "/music/[b-sides]/[red]Live[/red]" does not exist.')

        assert capture.get() == (
            'Error: Library path "/music/[b-sides]/[red]Live[/red]" does not exist.\n'
        )

    def test_success_keeps_brackets(self) -> None:
        with console.capture() as capture:
            print_success("Defaults saved to /cfg/[mlcp]/settings.toml")

        assert capture.get() == "Defaults saved to /cfg/[mlcp]/settings.toml\n"

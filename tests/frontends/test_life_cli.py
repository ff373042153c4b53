"""Tests for the Game of Life CLI frontend."""

from io import BytesIO, StringIO, TextIOWrapper
from unittest.mock import Mock, patch

import pytest
from gridkernels.frontends.life_cli import (
    CLIGameOfLife,
    create_parser,
    main,
    parse_dimension,
)


def run_main(argv, stdin=b""):
    if isinstance(stdin, str):
        stdin = stdin.encode("utf-8")
    stream = TextIOWrapper(BytesIO(stdin), encoding="utf-8")
    with patch("sys.argv", argv), patch("sys.stdin", stream), patch(
        "sys.stdout", new_callable=StringIO
    ) as mock_stdout:
        result = main()
    return result, mock_stdout.getvalue()


class TestCLIGameOfLife:
    """Test cases for the CLI Game of Life."""

    @patch("sys.stdout", new_callable=StringIO)
    def test_run_simulation_prints_grid(self, mock_stdout):
        """Test the final grid is printed with the fixed glyphs."""
        cli = CLIGameOfLife()

        grid = cli.run_simulation(3, 3, 0, "x")

        assert grid.population == 1
        assert mock_stdout.getvalue() == "0  \n   \n   \n"

    @patch("sys.stdout", new_callable=StringIO)
    def test_run_simulation_out_of_range(self, mock_stdout):
        """Test nothing is printed when the run is a no-op."""
        cli = CLIGameOfLife()

        assert cli.run_simulation(3, 3, -1, "x") is None
        assert mock_stdout.getvalue() == ""


class TestArguments:
    """Test cases for argument handling."""

    @pytest.mark.parametrize("value,expected", [("5", 5), ("-2", -2), ("0", 0), ("abc", None), ("", None), (None, None)])
    def test_parse_dimension(self, value, expected):
        assert parse_dimension(value) == expected

    def test_parser_positionals_optional(self):
        args = create_parser().parse_args([])
        assert args.width is None
        assert args.height is None
        assert args.iterations is None

    def test_parser_negative_number_positional(self):
        args = create_parser().parse_args(["-5", "3", "1"])
        assert args.width == "-5"


class TestMainFunction:
    """Test the main CLI function."""

    def test_blinker(self):
        """Test a drawn blinker after one generation."""
        result, output = run_main(["life", "5", "5", "1"], "sdxddx")

        assert result == 0
        assert output == "  0  \n  0  \n  0  \n     \n     \n"

    def test_blinker_period_two(self):
        result, output = run_main(["life", "5", "5", "2"], "sdxddx")

        assert output == "     \n 000 \n     \n     \n     \n"

    def test_single_cell_dies(self):
        """Test an isolated cell disappears after one generation."""
        result, output = run_main(["life", "3", "3", "1"], "dsx")

        assert result == 0
        assert output == "   \n   \n   \n"

    def test_pen_protocol(self):
        """Test 'ddxdds' with zero iterations shows the drawn cells."""
        result, output = run_main(["life", "5", "5", "0"], "ddxdds")

        assert output == "  000\n    0\n     \n     \n     \n"

    @pytest.mark.parametrize(
        "argv",
        [
            ["life"],
            ["life", "5"],
            ["life", "5", "5"],
            ["life", "0", "5", "1"],
            ["life", "5", "0", "1"],
            ["life", "-5", "5", "1"],
            ["life", "5", "5", "-1"],
            ["life", "five", "5", "1"],
        ],
    )
    def test_invalid_arguments_produce_no_output(self, argv):
        """Test missing or out-of-range arguments are a silent no-op."""
        result, output = run_main(argv, "xdd")

        assert result == 0
        assert output == ""

    def test_undecodable_command_bytes_ignored(self):
        """Test bytes that are not valid text are ignored like any unknown command."""
        result, output = run_main(["life", "3", "1", "0"], b"x\xffd")

        assert result == 0
        assert output == "00 \n"

    def test_extra_arguments_ignored(self):
        result, output = run_main(["life", "2", "1", "0", "extra"], "x")

        assert result == 0
        assert output == "0 \n"

    @patch("gridkernels.frontends.life_cli.logging.basicConfig")
    def test_verbose_configures_logging(self, mock_basic_config):
        result, output = run_main(["life", "-v", "1", "1", "0"], "")

        assert result == 0
        assert output == " \n"
        mock_basic_config.assert_called_once()

    @patch("sys.stderr", new_callable=StringIO)
    @patch("gridkernels.frontends.life_cli.CLIGameOfLife")
    def test_keyboard_interrupt(self, mock_cli_class, mock_stderr):
        """Test handling of keyboard interrupt."""
        mock_cli = Mock()
        mock_cli.run_simulation.side_effect = KeyboardInterrupt()
        mock_cli_class.return_value = mock_cli

        result, _ = run_main(["life", "3", "3", "1"], "")

        assert result == 1
        assert "interrupted" in mock_stderr.getvalue()

"""
Unit tests for utils module.
"""

import pytest
from unittest.mock import patch
from io import StringIO

from super_gunzip.errors import CodecError
from super_gunzip.results import Summary
from super_gunzip.utils import (
    print_header,
    print_section,
    print_status,
    print_progress,
    render_bar,
    format_size,
    display_run_summary,
)


class TestPrintFunctions:
    """Test the print utility functions."""

    @patch('sys.stdout', new_callable=StringIO)
    def test_print_header(self, mock_stdout):
        """Test print_header function."""
        print_header("Test Title")
        output = mock_stdout.getvalue()

        assert "[*] Test Title" in output
        assert output.count("=") == 120  # 60 on each line

    @patch('sys.stdout', new_callable=StringIO)
    def test_print_section(self, mock_stdout):
        """Test print_section function."""
        print_section("Test Section")
        output = mock_stdout.getvalue()

        assert "[+] Test Section" in output
        assert "-" * 40 in output

    @patch('sys.stdout', new_callable=StringIO)
    def test_print_status_default(self, mock_stdout):
        """Test print_status with the default indicator."""
        print_status("Test message")

        assert "[i] Test message" in mock_stdout.getvalue()

    @patch('sys.stdout', new_callable=StringIO)
    def test_print_status_custom(self, mock_stdout):
        """Test print_status with a custom indicator."""
        print_status("Test message", "[OK]")

        assert "[OK] Test message" in mock_stdout.getvalue()

    @patch('sys.stdout', new_callable=StringIO)
    def test_print_progress(self, mock_stdout):
        """Test print_progress part way through."""
        print_progress(5, 10, "Test Progress")
        output = mock_stdout.getvalue()

        assert "Test Progress:" in output
        assert "5/10" in output
        assert "50.0%" in output
        assert not output.endswith("\n")

    @patch('sys.stdout', new_callable=StringIO)
    def test_print_progress_complete(self, mock_stdout):
        """Test print_progress ends the line when complete."""
        print_progress(10, 10, "Test Progress")
        output = mock_stdout.getvalue()

        assert "10/10" in output
        assert "100.0%" in output
        assert output.endswith("\n")

    @patch('sys.stdout', new_callable=StringIO)
    def test_print_progress_zero_total(self, mock_stdout):
        """Test print_progress prints nothing when there is no work."""
        print_progress(0, 0)

        assert mock_stdout.getvalue() == ""


class TestRenderBar:
    """Test progress bar rendering."""

    def test_render_bar_half(self):
        assert render_bar(5, 10, width=10) == "█" * 5 + "░" * 5

    def test_render_bar_empty_and_full(self):
        assert render_bar(0, 4, width=8) == "░" * 8
        assert render_bar(4, 4, width=8) == "█" * 8

    def test_render_bar_overflow_clamped(self):
        assert render_bar(7, 4, width=8) == "█" * 8


class TestFormatSize:
    """Test the format_size function."""

    @pytest.mark.parametrize("num_bytes, expected", [
        (0, "0 B"),
        (1023, "1023 B"),
        (1024, "1.00 KB"),
        (3 * 1024 * 1024, "3.00 MB"),
        (2 * 1024 * 1024 * 1024, "2.00 GB"),
    ])
    def test_format_size(self, num_bytes, expected):
        assert format_size(num_bytes) == expected


class TestDisplayRunSummary:
    """Test the display_run_summary function."""

    @patch('sys.stdout', new_callable=StringIO)
    def test_display_run_summary_clean(self, mock_stdout):
        """A run without failures reports success."""
        summary = Summary(total=3, succeeded=3, bytes_in=2048, bytes_out=1024, elapsed_seconds=0.25)

        display_run_summary(summary)
        output = mock_stdout.getvalue()

        assert "Files matched: 3" in output
        assert "Succeeded: 3" in output
        assert "Bytes read: 2.00 KB, written: 1.00 KB" in output
        assert "Elapsed time: 250 ms" in output
        assert "Finished without errors." in output
        assert "[ERROR]" not in output

    @patch('sys.stdout', new_callable=StringIO)
    def test_display_run_summary_lists_every_failure(self, mock_stdout):
        """Each failed path is printed with its cause."""
        failures = [
            (f"/data/f{i}.gz", CodecError(f"/data/f{i}.gz", "Not a gzipped file", CodecError.MALFORMED))
            for i in range(7)
        ]
        summary = Summary(total=8, succeeded=1, failed=7, failures=failures)

        display_run_summary(summary)
        output = mock_stdout.getvalue()

        assert "Failed: 7" in output
        for i in range(7):
            assert f"/data/f{i}.gz" in output
        assert "malformed error: Not a gzipped file" in output
        assert "Finished without errors." not in output

    @patch('sys.stdout', new_callable=StringIO)
    def test_display_run_summary_skipped(self, mock_stdout):
        """Skipped paths are reported separately."""
        summary = Summary(total=2, succeeded=2, skipped=1)

        display_run_summary(summary)

        assert "Skipped (not applicable to mode): 1" in mock_stdout.getvalue()

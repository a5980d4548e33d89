"""
Utility functions for status output and run reporting.
"""


HEADER_WIDTH = 60
SECTION_WIDTH = 40
BAR_WIDTH = 30


def _rule(char: str, width: int) -> str:
    return char * width


def print_header(title: str):
    """Print a title framed by two rules of =."""
    rule = _rule("=", HEADER_WIDTH)
    print(f"\n{rule}\n[*] {title}\n{rule}")


def print_section(title: str):
    """Print a section title underlined with -."""
    print(f"\n[+] {title}\n{_rule('-', SECTION_WIDTH)}")


def print_status(message: str, status: str = "[i]"):
    """
    Print one status line.

    Args:
        message: Text to print
        status: Marker such as [i], [OK], [WARN], [ERROR] or [INFO]
    """
    line = f"{status} {message}"
    print(line)


def render_bar(current: int, total: int, width: int = BAR_WIDTH) -> str:
    """Return a text bar with current/total of its cells filled."""
    filled = min(width, width * current // total)
    return "█" * filled + "░" * (width - filled)


def print_progress(current: int, total: int, prefix: str = "Progress"):
    """
    Redraw a progress bar in place, ending the line once current reaches total.

    Nothing is printed when total is zero.
    """
    if total <= 0:
        return
    line = f"{prefix}: [{render_bar(current, total)}] {current}/{total} ({current / total:.1%})"
    end = "\n" if current >= total else ""
    print(f"\r{line}", end=end, flush=True)


def format_size(num_bytes: int) -> str:
    """Format a byte count as B, KB, MB or GB."""
    if num_bytes < 1024:
        return f"{num_bytes} B"
    size_kb = num_bytes / 1024
    if size_kb < 1024:
        return f"{size_kb:.2f} KB"
    size_mb = size_kb / 1024
    if size_mb < 1024:
        return f"{size_mb:.2f} MB"
    return f"{size_mb / 1024:.2f} GB"


def display_run_summary(summary):
    """
    Display the final counts of a run followed by one line per failure.

    Args:
        summary: A finalized Summary
    """
    print_section("Run Summary")

    print_status(f"Files matched: {summary.total}", "[*]")
    print_status(f"Succeeded: {summary.succeeded}", "[OK]")
    if summary.skipped:
        print_status(f"Skipped (not applicable to mode): {summary.skipped}", "[WARN]")

    if summary.bytes_in:
        print_status(
            f"Bytes read: {format_size(summary.bytes_in)}, "
            f"written: {format_size(summary.bytes_out)}",
            "[*]"
        )
    print_status(f"Elapsed time: {summary.elapsed_seconds * 1000:.0f} ms", "[*]")

    if summary.failed:
        print_status(f"Failed: {summary.failed}", "[ERROR]")
        for path, error in summary.failures:
            print_status(f"  {path}: {error}", "[ERROR]")
    else:
        print_status("Finished without errors.", "[OK]")

"""
Shared test fixtures and configuration for super_gunzip tests.
"""

import gzip
import pytest

from super_gunzip.config import Mode, RunConfig


@pytest.fixture
def sample_files(tmp_path):
    """Create plain text files, one already compressed file and a subdirectory."""
    files = ['file1.txt', 'file2.txt', 'file3.txt', 'app.log', 'data.csv']

    created_files = []
    for filename in files:
        file_path = tmp_path / filename
        file_path.write_text(f"Sample content for {filename}\n" * 50)
        created_files.append(str(file_path))

    compressed = tmp_path / "archive.txt.gz"
    compressed.write_bytes(gzip.compress(b"already compressed\n"))

    (tmp_path / "subdir").mkdir()
    (tmp_path / "subdir" / "nested.txt").write_text("Nested file")

    return {
        'files': created_files,
        'txt_files': [f for f in created_files if f.endswith('.txt')],
        'gz_file': str(compressed),
        'root_dir': str(tmp_path)
    }


@pytest.fixture
def gz_files(tmp_path):
    """Create gzip files with known decompressed content."""
    contents = {
        'a.txt': b"alpha\n" * 100,
        'b.txt': b"bravo\n" * 200,
        'c.bin': bytes(range(256)) * 8,
    }

    paths = {}
    for name, content in contents.items():
        gz_path = tmp_path / f"{name}.gz"
        gz_path.write_bytes(gzip.compress(content))
        paths[str(gz_path)] = content

    return paths


@pytest.fixture
def make_config():
    """Build a RunConfig with test-friendly defaults."""
    def _make(mode=Mode.GZIP, pattern="*", **kwargs):
        kwargs.setdefault('show_progress', False)
        return RunConfig(mode=mode, pattern=pattern, **kwargs)
    return _make


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their names."""
    for item in items:
        if "test_main" in item.name or "test_run_batch" in item.name:
            item.add_marker(pytest.mark.integration)
        elif "test_" in item.name:
            item.add_marker(pytest.mark.unit)

        if any(pattern in item.name for pattern in ["large", "slow", "concurrency"]):
            item.add_marker(pytest.mark.slow)

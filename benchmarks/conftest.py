"""pytest-benchmark configuration for oledframe benchmarks."""

from pathlib import Path

import pytest


@pytest.fixture(scope="session")
def repeat_stream() -> bytes:
    """64 repeat records of the maximum length."""
    return bytes([0x7F, 0xAA]) * 64


@pytest.fixture(scope="session")
def literal_stream() -> bytes:
    """512 literal records of 3 bytes each."""
    return bytes([0x83, 1, 2, 3]) * 512


@pytest.fixture(scope="session")
def frame_stream() -> bytes:
    """A 128x32 frame: mostly blank with a few busy columns."""
    return (bytes([0x78, 0]) + bytes([0x88]) + bytes(range(8))) * 4


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest-benchmark with custom settings."""
    # Set benchmark defaults
    config.option.benchmark_min_rounds = 5
    config.option.benchmark_warmup = True
    config.option.benchmark_warmup_iterations = 3

    # Create benchmarks directory for JSON exports
    benchmark_dir = Path(__file__).parent.parent / ".benchmarks"
    benchmark_dir.mkdir(exist_ok=True)

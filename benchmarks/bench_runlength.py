"""Benchmarks for oledframe.runlength and oledframe.delta."""

from typing import Any

import pytest

from oledframe.delta import undiff
from oledframe.high_level import decode_frame
from oledframe.runlength import rldecode, rldecode_into


class TestRunLengthBenchmarks:
    """Benchmarks for the record decoder."""

    def test_rldecode_repeat_runs(self, benchmark: Any, repeat_stream: bytes) -> None:
        """Long constant runs, the common case for mostly blank frames."""
        result = benchmark(rldecode, repeat_stream)
        assert len(result) == 64 * 127

    def test_rldecode_literal_runs(self, benchmark: Any, literal_stream: bytes) -> None:
        """Short literal runs, the worst case for busy frames."""
        result = benchmark(rldecode, literal_stream)
        assert len(result) == 512 * 3

    def test_rldecode_into(self, benchmark: Any, frame_stream: bytes) -> None:
        output = bytearray(512)

        written = benchmark(rldecode_into, frame_stream, output)
        assert written == 512


class TestDeltaBenchmarks:
    """Benchmarks for delta reversal."""

    @pytest.fixture
    def base(self) -> bytes:
        return bytes((i * 7) % 256 for i in range(512))

    def test_undiff(self, benchmark: Any, base: bytes) -> None:
        encoded = bytearray(512)
        benchmark(undiff, base, encoded)

    def test_decode_frame(self, benchmark: Any, base: bytes, frame_stream: bytes) -> None:
        result = benchmark(decode_frame, frame_stream, base)
        assert len(result) == 512

import sys

import atheris

from fuzzed_data_provider import OledframeFuzzedDataProvider

with atheris.instrument_imports():
    from utils import MAX_OUTPUT_SIZE, prepare_oledframe_fuzzing
    from oledframe.high_level import decode_frame
    from oledframe.runlength import decoded_size, rldecode, rldecode_into

from oledframe.frameexceptions import OutputOverflow, TruncatedInput


def fuzz_one_input(data: bytes) -> None:
    fdp = OledframeFuzzedDataProvider(data)
    size = fdp.ConsumeIntInRange(0, MAX_OUTPUT_SIZE)
    length = fdp.ConsumeOptionalIntInRange(0, len(data))
    use_base = fdp.ConsumeBool()
    stream = fdp.ConsumeRemainingBytes()

    output = bytearray(size)
    try:
        written = rldecode_into(stream, output, length)
    except (TruncatedInput, OutputOverflow):
        pass
    else:
        assert written <= size
        assert written == decoded_size(stream, length)
        if length is None:
            assert bytes(output[:written]) == rldecode(stream)

    if use_base:
        base = bytes(size)
        try:
            decoded = decode_frame(stream, base=base)
        except (TruncatedInput, OutputOverflow):
            return
        assert len(decoded) == size


if __name__ == "__main__":
    prepare_oledframe_fuzzing()
    atheris.Setup(sys.argv, fuzz_one_input)
    atheris.Fuzz()

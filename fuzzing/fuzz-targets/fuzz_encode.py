import sys
from io import BytesIO

import atheris

with atheris.instrument_imports():
    # We instrument `test_utils` as well, so it doesn't block coverage analysis in Fuzz Introspector:
    from test_utils import EnhancedFuzzedDataProvider

    from uleb128 import (
        decode_u32,
        decode_u64,
        encode_u32,
        encode_u64,
        encoded_length_u32,
        encoded_length_u64,
    )


def TestOneInput(data):
    fdp = EnhancedFuzzedDataProvider(data)
    width = fdp.ConsumeWidth()
    value = fdp.ConsumeIntInRange(0, (1 << width) - 1)

    f = BytesIO()
    if width == 32:
        encode_u32(value, f)
        expected_length = encoded_length_u32(value)
    else:
        encode_u64(value, f)
        expected_length = encoded_length_u64(value)

    encoded = f.getvalue()
    assert len(encoded) == expected_length
    assert not encoded[-1] & 0x80
    assert all(b & 0x80 for b in encoded[:-1])

    f.seek(0)
    decoded = decode_u32(f) if width == 32 else decode_u64(f)
    assert decoded == value
    assert f.tell() == len(encoded)


def main():
    atheris.Setup(sys.argv, TestOneInput)
    atheris.Fuzz()


if __name__ == "__main__":
    main()

import sys
from io import BytesIO

import atheris

with atheris.instrument_imports():
    # We instrument `test_utils` as well, so it doesn't block coverage analysis in Fuzz Introspector:
    from test_utils import EnhancedFuzzedDataProvider, is_expected_exception

    from uleb128 import (
        ULEB128_U32_MAX_LENGTH,
        ULEB128_U64_MAX_LENGTH,
        ULeb128Error,
        decode_u32,
        decode_u64,
        encoded_length_u32,
        encoded_length_u64,
    )


def TestOneInput(data):
    fdp = EnhancedFuzzedDataProvider(data)
    width = fdp.ConsumeWidth()
    if width == 32:
        decode, encoded_length, max_length = (
            decode_u32,
            encoded_length_u32,
            ULEB128_U32_MAX_LENGTH,
        )
    else:
        decode, encoded_length, max_length = (
            decode_u64,
            encoded_length_u64,
            ULEB128_U64_MAX_LENGTH,
        )

    f = BytesIO(fdp.ConsumeRemainingBytes())
    try:
        value = decode(f)
    except ULeb128Error as e:
        expected_exceptions = [
            "failed to fill whole buffer",
            f"can not read more than {max_length} bytes",
        ]
        if is_expected_exception(expected_exceptions, e):
            return -1
        else:
            raise e

    consumed = f.tell()
    assert value < (1 << width)
    assert 1 <= consumed <= max_length
    # Non-minimal input is accepted, so the re-encoding can only be shorter
    assert encoded_length(value) <= consumed


def main():
    atheris.Setup(sys.argv, TestOneInput)
    atheris.Fuzz()


if __name__ == "__main__":
    main()

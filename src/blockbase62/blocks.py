"""
Base62 바이트 배열 인코딩/디코딩 (블록 방식)

8바이트 블록 -> 11자. 마지막 블록은 패딩 없이 인코딩하고,
마지막 블록의 바이트 수(0~8)를 나타내는 종료 문자 1자를 붙입니다.
최소 길이는 종료 문자 때문에 2자입니다 (빈 입력 -> "00").
"""

from blockbase62.base62 import ALPHABET, decode_character, decode_uint64, encode_uint64
from blockbase62.errors import EmptyInputError, InvalidCharacterError, MalformedTerminatorError

BLOCK_SIZE = 8
BLOCK_WIDTH = 11


def read_uint64_be(data: bytes, offset: int, length: int) -> int:
    """data[offset:offset+length] 를 빅엔디언 정수로 읽기 (length < 8 이면 하위 자리)"""
    return int.from_bytes(data[offset:offset + length], "big")


def write_uint64_be(value: int, length: int) -> bytes:
    """정수의 하위 length 바이트를 빅엔디언으로 쓰기"""
    return bytes((value >> ((length - i - 1) * 8)) & 0xFF for i in range(length))


def encode_bytes(data) -> str:
    """바이트 배열 -> Base62 문자열"""
    if isinstance(data, (int, str)):
        raise TypeError(f"data must be bytes-like, not {type(data).__name__}")
    data = bytes(data)

    if not data:
        return ALPHABET[0] + ALPHABET[0]

    offset = 0
    parts = []

    while offset < len(data):
        remaining = len(data) - offset

        if remaining <= BLOCK_SIZE:
            # 마지막 블록: 패딩 없음 + 종료 문자
            encoded = encode_uint64(read_uint64_be(data, offset, remaining))
            parts.append(encoded + ALPHABET[remaining])
        else:
            encoded = encode_uint64(read_uint64_be(data, offset, BLOCK_SIZE))
            parts.append(encoded.rjust(BLOCK_WIDTH, ALPHABET[0]))

        offset += BLOCK_SIZE

    return "".join(parts)


def decode_bytes(text: str) -> bytes:
    """Base62 문자열 -> 바이트 배열"""
    if not text or len(text) < 2:
        raise EmptyInputError("encoded byte string needs at least 2 characters")

    # 마지막 문자 = 마지막 블록의 바이트 수
    content_length = len(text) - 1
    terminator = text[content_length]
    try:
        last_block_size = decode_character(terminator)
    except InvalidCharacterError:
        raise InvalidCharacterError(terminator, content_length) from None
    if last_block_size > BLOCK_SIZE:
        raise MalformedTerminatorError(f"Invalid block terminator: {terminator!r}")

    offset = 0
    result = bytearray()

    while offset < content_length:
        remaining = content_length - offset
        if remaining <= BLOCK_WIDTH:
            length, block_size = remaining, last_block_size
        else:
            length, block_size = BLOCK_WIDTH, BLOCK_SIZE

        try:
            value = decode_uint64(text[offset:offset + length])
        except InvalidCharacterError as e:
            raise InvalidCharacterError(e.char, offset + e.position) from None
        result += write_uint64_be(value, block_size)

        offset += BLOCK_WIDTH

    return bytes(result)

"""
Base62 정수 인코딩/디코딩 (URL 단축 ID용)
문자집합: 0-9, A-Z, a-z (62자)

64비트 부호 없는 정수는 최대 11자로 표현됩니다.
"""

from blockbase62.errors import (
    EmptyInputError,
    InvalidCharacterError,
    Uint64OverflowError,
    ValueOutOfRangeError,
)

ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
BASE = len(ALPHABET)

UINT64_MAX = 2**64 - 1
# 62^10, base62 로 "10000000000"
MAX_PLACE_VALUE = 839299365868340224


def decode_character(char: str) -> int:
    """Base62 문자 1개 -> 값 (0~61)"""
    if len(char) != 1:
        raise InvalidCharacterError(char)
    if "0" <= char <= "9":
        return ord(char) - ord("0")
    if "A" <= char <= "Z":
        return ord(char) - ord("A") + 10
    if "a" <= char <= "z":
        return ord(char) - ord("a") + 36
    raise InvalidCharacterError(char)


def encode_uint64(value: int) -> str:
    """
    64비트 정수 -> Base62 문자열.
    가장 큰 자리(62^10)부터 몫을 구해 한 자리씩 내려가며,
    앞쪽의 0은 생략합니다 (10진수 표기와 동일).
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"value must be an int, not {type(value).__name__}")
    if value < 0 or value > UINT64_MAX:
        raise ValueOutOfRangeError(f"value out of uint64 range: {value}")

    if value == 0:
        return ALPHABET[0]

    dividend = value
    divisor = MAX_PLACE_VALUE
    result = []
    started = False

    while divisor > 0:
        quotient = dividend // divisor

        started = started or quotient != 0
        if started:
            result.append(ALPHABET[quotient])

        dividend -= quotient * divisor
        divisor //= BASE

    return "".join(result)


def decode_uint64(text: str) -> int:
    """Base62 문자열 -> 64비트 정수"""
    if not text:
        raise EmptyInputError("base62 string is empty")

    result = 0
    for position, char in enumerate(text):
        try:
            digit = decode_character(char)
        except InvalidCharacterError:
            raise InvalidCharacterError(char, position) from None

        # 11자리 base62 는 64비트를 넘길 수 있음
        result = result * BASE + digit
        if result > UINT64_MAX:
            raise Uint64OverflowError(f"base62 string {text!r} overflows uint64")

    return result


# ID 단축 호출부 호환용
encode = encode_uint64
decode = decode_uint64

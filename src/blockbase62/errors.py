"""
Base62 인코딩/디코딩 예외 정의
모두 ValueError 하위 클래스라서 기존 `except ValueError` 처리와 호환됩니다.
"""


class Base62Error(ValueError):
    """Base62 코덱 공통 예외"""


class EmptyInputError(Base62Error):
    """빈 문자열 (또는 바이트 디코딩 시 2자 미만)"""


class InvalidCharacterError(Base62Error):
    """0-9, A-Z, a-z 범위를 벗어난 문자"""

    def __init__(self, char: str, position: int | None = None):
        self.char = char
        self.position = position
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"Invalid character {char!r} in base62 string{where}")


class Uint64OverflowError(Base62Error, OverflowError):
    """디코딩 결과가 64비트 부호 없는 정수 범위를 초과"""


class MalformedTerminatorError(Base62Error):
    """블록 종료 문자의 값이 8보다 큼"""


class ValueOutOfRangeError(Base62Error):
    """인코딩 대상 정수가 0 ~ 2^64-1 범위를 벗어남"""

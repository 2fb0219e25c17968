"""database.errors: 저장소 계층 예외 분류 모듈.

드라이버(pymysql) 예외를 저장소 계층의 타입 예외로 변환합니다.
UNIQUE 제약 위반은 에러 메시지가 아닌 MySQL 에러 번호로 판별합니다.
"""

from contextlib import contextmanager
from typing import Iterator

from pymysql.err import IntegrityError, MySQLError

# MySQL ER_DUP_ENTRY
MYSQL_DUPLICATE_ENTRY = 1062


class StorageError(Exception):
    """연결 실패, 쿼리 실패 등 저장소 백엔드 오류."""


class DuplicateEntryError(Exception):
    """UNIQUE 제약 위반.

    StorageError와 구분되도록 별도 계층으로 둡니다.
    """


def is_duplicate_entry(exc: MySQLError) -> bool:
    """예외가 UNIQUE 제약 위반(1062)인지 확인합니다."""
    return isinstance(exc, IntegrityError) and bool(exc.args) and exc.args[0] == MYSQL_DUPLICATE_ENTRY


@contextmanager
def translate_errors(operation: str) -> Iterator[None]:
    """범위 내의 드라이버 예외를 저장소 예외로 변환합니다.

    Args:
        operation: 로그/메시지에 사용할 작업 이름 (예: 'category.insert').

    Raises:
        DuplicateEntryError: UNIQUE 제약 위반.
        StorageError: 그 외 모든 백엔드/연결 오류.
    """
    try:
        yield
    except MySQLError as e:
        if is_duplicate_entry(e):
            raise DuplicateEntryError(operation) from e
        raise StorageError(f"{operation} 실패: {e}") from e
    except OSError as e:
        # 소켓 단절 등 드라이버가 감싸지 못한 연결 오류
        raise StorageError(f"{operation} 연결 실패: {e}") from e

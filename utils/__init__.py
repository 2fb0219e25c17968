"""utils: 유틸리티 함수들을 모아놓은 패키지.

Modules:
    exceptions: 서비스 에러 분류
    jwt_utils: Access Token 발급 및 검증
"""

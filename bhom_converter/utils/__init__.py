# bhom_converter/utils/__init__.py
"""
Utilities Package
=================
프로젝트 전반에서 사용되는 공통 보조 기능(Cross-cutting Concerns)을 제공하는 패키지입니다.
변환 로직(Interpreter 등)과는 독립적으로 동작합니다.

포함된 모듈 (Modules):
----------------------
1. file_manager.py
   - JsonHandler: JSON 파일 읽기/쓰기, 주석 및 후행 쉼표(Trailing Comma) 정제.

2. json_document.py
   - JsonNumber / JsonObject: 숫자 리터럴과 객체 멤버 순서를 보존하는 파싱 결과 타입.

3. logger.py
   - Log: ANSI Escape Code를 활용한 컬러 콘솔 로깅 (Info, Success, Error, Warning, Trace 등).

4. decorators.py
   - measure_time: 함수 실행 시간 측정 및 성능 로깅.
   - log_lifecycle: 함수 호출의 시작과 끝을 추적(Trace)하여 로깅.
"""

from .logger import Log
from .json_document import JsonNumber, JsonObject
from .file_manager import JsonHandler
from .decorators import measure_time, log_lifecycle

__all__ = [
    "JsonHandler",
    "JsonNumber",
    "JsonObject",
    "Log",
    "measure_time",
    "log_lifecycle"
]

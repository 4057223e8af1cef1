# bhom_converter/utils/file_manager.py

import json
import re
from pathlib import Path
from typing import Any
from bhom_converter.config import Config
from bhom_converter.errors import DocumentParseError
from bhom_converter.utils.json_document import JsonNumber, JsonObject
from bhom_converter.utils.logger import Log

# 문자열 리터럴은 그대로 두고, 그 밖의 주석/후행 쉼표만 제거
_STRING = r'"(?:\\.|[^"\\])*"'
_COMMENT_RE = re.compile(r'(' + _STRING + r')|//[^\n]*|/\*.*?\*/', re.DOTALL)
_TRAILING_COMMA_RE = re.compile(r'(' + _STRING + r')|,(\s*[}\]])')


def _reject_constant(name: str) -> Any:
    raise DocumentParseError(f"'{name}' is not a valid JSON number")


class JsonHandler:
    @staticmethod
    def clean_content(content: str) -> str:
        """Strip // and /* */ comments and trailing commas outside of strings."""
        content = _COMMENT_RE.sub(
            lambda m: m.group(1) if m.group(1) is not None else " ", content)
        content = _TRAILING_COMMA_RE.sub(
            lambda m: m.group(1) if m.group(1) is not None else m.group(2), content)
        return content

    @staticmethod
    def parse(content: str) -> Any:
        try:
            return json.loads(
                JsonHandler.clean_content(content),
                object_pairs_hook=JsonObject,
                parse_int=JsonNumber,
                parse_float=JsonNumber,
                parse_constant=_reject_constant,
            )
        except json.JSONDecodeError as e:
            raise DocumentParseError(str(e)) from e
        except RecursionError as e:
            raise DocumentParseError("JSON nesting is too deep") from e

    @staticmethod
    def read_json(filepath: Path) -> Any:
        try:
            with open(filepath, 'r', encoding='utf-8-sig') as f:
                content = f.read()
        except UnicodeDecodeError as e:
            raise DocumentParseError(f"not valid {Config.ENCODING} text: {e}") from e
        return JsonHandler.parse(content)

    @staticmethod
    def save_text(filepath: Path, text: str) -> None:
        # newline='' 로 개행 변환 없이, BOM 없는 utf-8 로 저장
        with open(filepath, 'w', encoding=Config.ENCODING, newline='') as f:
            f.write(text)
        Log.success(f"Saved: {filepath.name}")

# bhom_converter/processors/converters/batch_processor.py
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Optional

from bhom_converter.config import Config
from bhom_converter.errors import ConversionError
from bhom_converter.serialization import Serializer
from bhom_converter.utils import JsonHandler, measure_time, Log
from .interpreters import ValueInterpreter


@dataclass
class FileResult:
    """한 입력 파일의 처리 결과"""
    filename: str
    value: Any = None
    output_path: Optional[Path] = None
    error: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.error is None


class BatchProcessor:
    """
    배치 처리 관리자
    입력 폴더의 JSON 파일을 하나씩 파싱 -> 해석 -> 직렬화 -> 저장합니다.
    파일 단위 오류는 기록만 하고 다음 파일로 넘어갑니다.
    """

    def __init__(self, interpreter: ValueInterpreter, serializer: Serializer,
                 input_dir: Path, output_dir: Optional[Path] = None):
        self.io = JsonHandler()
        self.interpreter = interpreter
        self.serializer = serializer
        self.input_dir = Path(input_dir)
        self.output_dir = Path(output_dir) if output_dir else Config.default_output_dir(self.input_dir)

    def list_files(self) -> List[Path]:
        files = [p for p in self.input_dir.glob(Config.FILE_PATTERN) if p.is_file()]
        return sorted(files, key=lambda p: p.name.lower())

    def run(self) -> List[FileResult]:
        if not self.input_dir.is_dir():
            raise FileNotFoundError(f"Directory not found: {self.input_dir}")

        Log.section(f"Batch Processing Started ({self.interpreter.mode})")
        files = self.list_files()

        if not files:
            Log.warning(f"No .json files found in {self.input_dir}")
            return []

        Log.info(f"Found {len(files)} JSON file(s) in {self.input_dir}")
        self.output_dir.mkdir(parents=True, exist_ok=True)

        results = [self._process_single_file(filepath) for filepath in files]

        failed = sum(1 for r in results if not r.success)
        Log.section(f"Processing Complete. Total files: {len(files)} (failed: {failed})")
        return results

    @measure_time
    def _process_single_file(self, filepath: Path) -> FileResult:
        result = FileResult(filename=filepath.name)
        try:
            document = self.io.read_json(filepath)
            result.value = self.interpreter.interpret(document, filepath.stem)
            text = self.serializer(result.value)

            output_path = self.output_dir / filepath.name
            self.io.save_text(output_path, text)
            result.output_path = output_path
        except (ConversionError, OSError) as e:
            result.error = f"{type(e).__name__}: {e}"
            Log.error(f"{filepath.name}: {result.error}")
            return result

        Log.info(
            f"Processed {filepath.name} -> root: {self.interpreter.describe(result.value)}"
            f" -> saved: {result.output_path.name}"
        )
        return result

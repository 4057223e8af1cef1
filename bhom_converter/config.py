# bhom_converter/config.py
from pathlib import Path


class Config:
    """프로젝트 전체에서 사용되는 설정 및 상수 정의"""

    # 프로젝트 루트 경로 계산 (이 파일의 위치 기준)
    BASE_DIR = Path(__file__).resolve().parent.parent

    # 기본 입력 경로 (--dir 로 변경 가능)
    INPUT_DIR = BASE_DIR / "datasets_original"

    # 출력 폴더 이름 규칙: datasets_original -> datasets_BHoM
    INPUT_SUFFIX = "_original"
    OUTPUT_SUFFIX = "_BHoM"

    # 처리 대상 파일 패턴
    FILE_PATTERN = "*.json"

    # 인코딩 설정 (BOM 없음)
    ENCODING = "utf-8"

    # 변환 모드: "generic" | "series"
    DEFAULT_MODE = "series"

    # 출력 JSON 들여쓰기 (None = 한 줄)
    DEFAULT_INDENT = None

    @staticmethod
    def default_output_dir(input_dir: Path) -> Path:
        """Sibling of the input directory, named with the BHoM suffix."""
        name = input_dir.name
        if name.endswith(Config.INPUT_SUFFIX) and len(name) > len(Config.INPUT_SUFFIX):
            name = name[:-len(Config.INPUT_SUFFIX)]
        return input_dir.parent / f"{name}{Config.OUTPUT_SUFFIX}"

# bhom_converter/main.py
"""
Command-line entry point.
Usage:
  python -m bhom_converter [--dir <path>] [--out <path>] [--mode generic|series]
"""
import argparse
import locale
import sys
import traceback
from pathlib import Path
from typing import List, Optional

from bhom_converter.config import Config
from bhom_converter.processors import BatchProcessor
from bhom_converter.processors.converters import INTERPRETERS, get_interpreter
from bhom_converter.serialization import build_serializer
from bhom_converter.utils import Log


# ==========================================
# 1. 글로벌 예외 핸들러 정의
# ==========================================
def _print_traceback(exc_type, exc_value, exc_traceback):
    error_msg = f"{exc_type.__name__}: {exc_value}"
    traceback_details = "".join(traceback.format_tb(exc_traceback))
    print(f"{Log.FAIL}{traceback_details}{error_msg}{Log.RESET}", file=sys.stderr)
    print(f"{'-'*60}", file=sys.stderr)


def global_exception_handler(exc_type, exc_value, exc_traceback):
    """
    프로그램 내에서 잡히지 않은(Uncaught) 모든 예외를 여기서 처리합니다.
    """
    if issubclass(exc_type, KeyboardInterrupt):
        Log.warning("Interrupted by user. (KeyboardInterrupt)")
        sys.exit(0)

    Log.error(f"Unexpected error. Exiting.\n{'-'*60}")
    _print_traceback(exc_type, exc_value, exc_traceback)


# ==========================================
# 2. 인자 파싱
# ==========================================
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bhom-convert",
        description="Convert a folder of JSON files to BHoM JSON (generic value tree or DataSeries)",
    )
    parser.add_argument('--dir', '-d', help=f'Input directory (default: {Config.INPUT_DIR})')
    parser.add_argument('--out', '-o', help='Output directory (default: <input>_BHoM next to the input)')
    parser.add_argument('--mode', '-m', choices=sorted(INTERPRETERS), default=Config.DEFAULT_MODE,
                        help=f'Conversion mode (default: {Config.DEFAULT_MODE})')
    parser.add_argument('--serializer', choices=['bhom', 'none'], default='bhom',
                        help="Output serializer; 'none' = BHoM serializer unavailable (default: bhom)")
    parser.add_argument('--indent', type=int, default=Config.DEFAULT_INDENT,
                        help='Indent output JSON by N spaces (default: single line)')
    parser.add_argument('--visualize', action='store_true', help='Plot the written DataSeries files')
    parser.add_argument('--verbose', '-v', action='store_true', help='Print trace and timing logs')
    return parser


def apply_environment_locale():
    """숫자 문자열의 로케일 fallback 파싱을 위해 LC_NUMERIC 을 환경 설정(LANG/LC_*)으로 맞춥니다."""
    try:
        locale.setlocale(locale.LC_NUMERIC, "")
    except locale.Error as e:
        Log.warning(f"Could not apply environment locale ({e}). Using 'C' number format.")


# ==========================================
# 3. Main 실행
# ==========================================
def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    Log.verbose = args.verbose
    apply_environment_locale()

    input_dir = Path(args.dir).resolve() if args.dir else Config.INPUT_DIR
    output_dir = Path(args.out).resolve() if args.out else Config.default_output_dir(input_dir)

    if not input_dir.is_dir():
        Log.error(f"Directory not found: {input_dir}")
        return 1

    try:
        interpreter = get_interpreter(args.mode)
        serializer = build_serializer(
            use_bhom=args.serializer == 'bhom',
            allow_fallback=interpreter.allow_fallback,
            indent=args.indent,
        )
        processor = BatchProcessor(interpreter, serializer, input_dir, output_dir)
        results = processor.run()

        written = [r.output_path for r in results if r.success]
        if args.visualize and written:
            # matplotlib 은 시각화할 때만 로드
            from bhom_converter.processors.visualizers import BatchVisualizer
            BatchVisualizer(output_dir).run(files=written)
    except Exception:
        Log.error(f"Unexpected error. Exiting.\n{'-'*60}")
        _print_traceback(*sys.exc_info())
        return 1

    Log.success("Conversion complete.")
    return 0


def run():
    sys.excepthook = global_exception_handler
    sys.exit(main())


if __name__ == "__main__":
    run()

"""
bhom_converter
==============
JSON 폴더를 BHoM JSON 으로 변환하는 도구.

- 범용 모드(generic): 임의의 JSON -> 값 트리 -> BHoM 직렬화 (실패 시 표준 JSON)
- 시리즈 모드(series): 점 데이터 JSON -> DataSeries -> BHoM 직렬화
"""

__version__ = "0.1.0"

"""최근 수정 파일 스캐너 패키지./Recently modified file scanner package."""

__version__ = "0.1.0"

"""스캐너 보조 유틸리티./Scanner support utilities."""

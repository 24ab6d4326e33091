# labsvc/core/logging_config.py

"""
애플리케이션 로깅 설정 모듈입니다.
루트 로거에 콘솔 핸들러를 한 번만 연결합니다.
"""

import logging


def setup_logging(level: str = "INFO") -> None:
    """
    루트 로거를 설정합니다. 이미 핸들러가 있으면(테스트 러너, 재호출 등) 레벨만 맞춥니다.
    """
    root = logging.getLogger()
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    root.setLevel(numeric_level)

    if root.handlers:
        return

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

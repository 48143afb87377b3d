"""
패키지 로거 설정 모듈.

라이브러리이므로 import 시점에는 패키지 로거에 NullHandler 만 붙이고, 레벨이나
실제 출력은 호스트 애플리케이션에 맡긴다. 설정(Settings)의 로그 레벨은
configure_logging 을 명시적으로 호출할 때만 적용된다.

Package logger setup. On import only a NullHandler is attached to the package
logger; level and output are left to the host application. The log level
from Settings is applied only when configure_logging is called explicitly.
"""

from typing import Final

import logging

from optional_values.config import Settings, get_settings


PACKAGE_LOGGER_NAME: Final[str] = "optional_values"

logging.getLogger(PACKAGE_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """
    패키지 로거 하위의 로거를 반환한다.
    Return a logger nested under the package logger.
    """
    return logging.getLogger(name)


def configure_logging(settings: Settings | None = None) -> logging.Logger:
    """
    설정의 로그 레벨을 패키지 로거에 적용한다. 호스트가 원할 때만 호출한다.
    Apply the configured log level to the package logger. Called by the host
    on demand; importing the package never does this.
    """
    if settings is None:
        settings = get_settings()

    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    logger.setLevel(settings.effective_log_level)
    return logger

import logging

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"

# 틱마다 쿼리를 찍는 라이브러리 로거는 WARNING 이상만
_NOISY_LOGGERS = ("sqlalchemy.engine", "uvicorn.access")


def setup_logging(level: str = "INFO", quiet_libraries: bool = True):
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    if quiet_libraries:
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)

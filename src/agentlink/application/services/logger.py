import logging
import os
import typing

DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname) - 8s %(name)s:%(lineno)d %(message)s"
DEFAULT_LOG_FILENAME = "logs/agentlink.log"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_LIBRARIES_LIST = ["asyncio", "httpx", "httpcore"]
DEFAULT_LOG_LIBRARIES_LEVEL = "WARN"


def configure_logging(
    log_level: str = DEFAULT_LOG_LEVEL,
    log_format: str = DEFAULT_LOG_FORMAT,
    console: bool = True,
    file: bool = False,
    filename: str = DEFAULT_LOG_FILENAME,
    lib_list: typing.List = DEFAULT_LOG_LIBRARIES_LIST,
    lib_level: str = DEFAULT_LOG_LIBRARIES_LEVEL,
) -> None:
    """Configures the root logger with the given format and handler(s).
       The HTTP libraries (httpx, httpcore) get their own level, separate from the root logger.

    Args:
        log_level (str, optional): The log_level for the root logger. Defaults to DEFAULT_LOG_LEVEL.
        log_format (str, optional): The format of the log records. Defaults to DEFAULT_LOG_FORMAT.
        console (bool, optional): Whether to enable the console handler. Defaults to True.
        file (bool, optional): Whether to enable the file-based handler. Defaults to False.
        filename (str, optional): If file-based handler is enabled, this will set the filename of the log file. Defaults to DEFAULT_LOG_FILENAME.
        lib_list (typing.List, optional): List of libraries/packages name. Defaults to DEFAULT_LOG_LIBRARIES_LIST.
        lib_level (str, optional): The separate log level for the libraries included in the lib_list. Defaults to DEFAULT_LOG_LIBRARIES_LEVEL.
    """
    log_level = log_level.upper()
    lib_level = lib_level.upper()

    # Clear existing handlers so repeated calls do not duplicate output
    root_logger = logging.getLogger()
    if root_logger.handlers:
        root_logger.handlers.clear()

    root_logger.setLevel(log_level)
    formatter = logging.Formatter(log_format)

    if console:
        root_logger.addHandler(_configure_handler(logging.StreamHandler(), log_level, formatter))
    if file:
        _configure_file_based_logging(root_logger, log_level, formatter, filename)

    for lib_name in lib_list:
        logging.getLogger(lib_name).setLevel(lib_level)


def _configure_file_based_logging(
    root_logger: logging.Logger,
    log_level: str,
    formatter: logging.Formatter,
    filename: str,
) -> None:
    directory = os.path.dirname(filename)
    if directory:
        os.makedirs(directory, exist_ok=True)

    file_handler = logging.FileHandler(filename)
    root_logger.addHandler(_configure_handler(file_handler, log_level, formatter))


def _configure_handler(
    handler: logging.Handler,
    log_level: str,
    formatter: logging.Formatter,
) -> logging.Handler:
    handler.setLevel(log_level)
    handler.setFormatter(formatter)
    return handler

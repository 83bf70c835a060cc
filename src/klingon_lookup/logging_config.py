import logging
import sys


def setup_logging(level=logging.WARNING, debug=False, stream=None):
    """
    Set up console logging for the command line tool.

    Args:
        level: Logging level (default: WARNING, so parse issues are shown).
        debug: If True, enables DEBUG level with file/line context.
        stream: Output stream (default: stderr, keeping stdout for results).
    """
    # Clear existing handlers to avoid duplicates
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    if debug:
        level = logging.DEBUG
        format_string = '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s'
    else:
        format_string = '%(asctime)s - %(levelname)s - %(message)s'

    console_handler = logging.StreamHandler(stream or sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(format_string))

    root_logger.setLevel(level)
    root_logger.addHandler(console_handler)

    if debug:
        logging.debug("DEBUG MODE ENABLED - Verbose logging active")

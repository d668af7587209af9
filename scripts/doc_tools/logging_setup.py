import logging
import os
import time

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def setup_logging(name, log_dir=None, log_file=True, level=logging.INFO):
    """
    Creates a logger that writes to a timestamped file and to the console.

    The file is named <name>_<YYYYmmdd-HHMMSS>.log and lands in log_dir
    (the current directory when log_dir is None). Pass log_file=False to
    log to the console only. Returns the path of the log file, or None.
    """
    formatter = logging.Formatter(LOG_FORMAT)
    root = logging.getLogger()
    root.setLevel(level)

    # Scripts call this once, but tests call main() repeatedly.
    for handler in list(root.handlers):
        if getattr(handler, "_doc_tools", False):
            root.removeHandler(handler)
            handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    console_handler._doc_tools = True
    root.addHandler(console_handler)

    log_filename = None
    if log_file:
        timestamp = time.strftime("%Y%m%d-%H%M%S")
        log_filename = f"{name}_{timestamp}.log"
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
            log_filename = os.path.join(log_dir, log_filename)

        file_handler = logging.FileHandler(log_filename, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        file_handler._doc_tools = True
        root.addHandler(file_handler)
        logging.info(f"Logging started. Log file: {log_filename}")

    return log_filename

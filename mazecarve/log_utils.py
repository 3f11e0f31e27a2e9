import logging


class RichLogFormatter(logging.Formatter):
    """Prefixes every line with a fixed-width level and topic column, optionally coloured."""

    def __init__(self, use_color=False):
        super().__init__()
        if use_color:
            self.COLORS = {
                logging.DEBUG: "\033[38;5;252m",  # Light Grey
                logging.INFO: "\033[38;5;111m",  # Pastel Blue
                logging.WARNING: "\033[38;5;229m",  # Pale Yellow
                logging.ERROR: "\033[38;5;210m",  # Soft Red
                logging.CRITICAL: "\033[38;5;217m",  # Light Magenta
            }
            self.BOLD = "\033[1m"
            self.RESET = "\033[0m"
        else:
            self.COLORS = {}
            self.BOLD = ""
            self.RESET = ""

    def format(self, record):
        color = self.COLORS.get(record.levelno, "")
        level_name = record.levelname[:5]
        topic = record.name.split(".")[-1][:8]
        prefix = f"{color}{level_name:<5}{self.RESET}:{self.BOLD}{topic:<8}{self.RESET}: "
        s = super().format(record)
        return "\n".join([f"{prefix}{line}" for line in s.split("\n")])


def setup_logging(level=logging.INFO, color_logs=False, log_file=None):
    """Configures the "mazecarve" logger tree for the command line tools."""
    root_logger = logging.getLogger("mazecarve")
    if root_logger.hasHandlers():
        for h in root_logger.handlers[:]:
            root_logger.removeHandler(h)
            h.close()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(RichLogFormatter(use_color=color_logs))
    root_logger.addHandler(console_handler)
    root_logger.setLevel(level)
    root_logger.propagate = False

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="w")
            file_handler.setFormatter(RichLogFormatter(use_color=False))
            root_logger.addHandler(file_handler)
            logging.getLogger("mazecarve.main").info("Logging to file: %s", log_file)
        except IOError as e:
            root_logger.error("Could not open log file %s: %s", log_file, e)
    return root_logger

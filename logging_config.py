import logging

from config import settings

COLORS = {
    "BLUE": "\033[0;34m",
    "GREEN": "\033[0;32m",
    "YELLOW": "\033[0;33m",
    "RED": "\033[0;31m",
    "BOLD_RED": "\033[1;31m",
    "RESET": "\033[0m",
}

_LEVEL_COLORS = {
    logging.DEBUG: COLORS["BLUE"],
    logging.INFO: COLORS["GREEN"],
    logging.WARNING: COLORS["YELLOW"],
    logging.ERROR: COLORS["RED"],
    logging.CRITICAL: COLORS["BOLD_RED"],
}


class ColoredFormatter(logging.Formatter):
    """Colours the level name by severity."""

    def format(self, record):
        color = _LEVEL_COLORS.get(record.levelno, "")
        fmt = f"%(asctime)s {color}[%(levelname)s]{COLORS['RESET']} %(name)s: %(message)s"
        return logging.Formatter(fmt, datefmt="%H:%M:%S").format(record)


def setup_logging(level: str | None = None) -> None:
    level_name = (level or settings.log_level).upper()
    root = logging.getLogger()
    root.setLevel(getattr(logging, level_name, logging.INFO))

    if not any(getattr(h, "_yui_handler", False) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(ColoredFormatter())
        handler._yui_handler = True
        root.addHandler(handler)

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)

import logging
import sys

LOGGER_NAME = "blogbuild"
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


def setup_logger(log_file=None, level=logging.INFO):
    """
    Configura el logger del paquete.

    Todos los módulos usan logging.getLogger(__name__), así que cuelgan de
    este logger y heredan sus handlers. Llamarlo varias veces no duplica
    la salida.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    formatter = logging.Formatter(LOG_FORMAT)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    # Salida a consola
    ch = logging.StreamHandler(sys.stdout)
    ch.setFormatter(formatter)
    logger.addHandler(ch)

    # Salida a archivo (persistencia, opcional)
    if log_file:
        fh = logging.FileHandler(log_file, encoding='utf-8')
        fh.setFormatter(formatter)
        logger.addHandler(fh)

    return logger

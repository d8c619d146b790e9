"""
Logging del namespace 'imshow'. La librería solo crea loggers con
logging.getLogger(__name__); los handlers los instala quien la usa
(el lanzador de demos llama setup_logging).
"""
import logging
import sys
from typing import Optional, Union

FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATEFMT = '%H:%M:%S'


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Deja el logger 'imshow' con un handler a stdout y, si se pide, otro a
    archivo. Llamarla de nuevo reemplaza los handlers anteriores.

    Args:
        level: nivel numérico o nombre ("DEBUG", "info", ...)
        log_file: ruta opcional; se sobreescribe en cada arranque.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger("imshow")
    logger.setLevel(level)
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

    formatter = logging.Formatter(FORMAT, datefmt=DATEFMT)
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))
    for h in handlers:
        h.setLevel(level)
        h.setFormatter(formatter)
        logger.addHandler(h)

    logger.debug("Logging inicializado (nivel %s)", logging.getLevelName(level))
    return logger

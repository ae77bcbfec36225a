import logging

LOG_LEVELS = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG
}


logger = logging.getLogger('couchview')
request_logger = logging.getLogger('couchview.request')


def set_logging(level, handler=None):
    """
    Set level of logging, and choose where to display/save logs
    (file or standard output).
    """
    if not handler:
        handler = logging.StreamHandler()

    loglevel = LOG_LEVELS.get(level, logging.INFO)
    logger.setLevel(loglevel)
    format = r"%(asctime)s [%(process)d] [%(levelname)s] %(message)s"
    datefmt = r"%Y-%m-%d %H:%M:%S"

    handler.setFormatter(logging.Formatter(format, datefmt))
    logger.addHandler(handler)
    return handler


def log_request(method, url, status_code, duration):
    """Log one round trip to `couchview.request`.

    Extra fields added to the log record:

    - method
    - database
    - path
    - status_code
    - duration
    """
    url_parts = url.split('/', 1)
    if not url_parts[0] or url_parts[0].startswith('_'):
        # server level, e.g. _uuids
        database, path = '<server>', url
    elif len(url_parts) == 2:
        database, path = url_parts
    else:
        database, path = url_parts[0], ''
    info = {
        "method": method,
        "database": database,
        "path": path,
        "status_code": status_code,
        "duration": duration,
    }
    request_logger.debug(
        '%(method)s to %(database)s/%(path)s took %(duration)s',
        info,
        extra=info,
    )

import logging


def configure_logging_from_args(args):
    """Checks args for --silent and --verbose mode and sets the logging level appropriately"""
    if getattr(args, 'verbose', None):
        log_level = logging.DEBUG
    elif getattr(args, 'silent', None):
        log_level = logging.WARNING
    else:
        log_level = logging.INFO
    logging.basicConfig(level=log_level)
    logger = logging.getLogger('kffpy')
    logger.setLevel(log_level)
    logger.debug('Log level is {}'.format(logging.getLevelName(logger.getEffectiveLevel())))


def configure_logging_from_args_and_get_logger(args, logger_name):
    configure_logging_from_args(args)
    return logging.getLogger(logger_name)

import logging


def setup_logger():
    _logger = logging.getLogger('swook')
    # Quiet by default: a successful run must print nothing.
    _logger.setLevel(logging.WARNING)
    _handler = logging.StreamHandler()
    _handler.setFormatter(
        logging.Formatter('%(asctime)s %(name)s %(levelname)s %(message)s')
    )
    _logger.addHandler(_handler)
    return _logger


def set_verbose(verbose: bool):
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


logger = setup_logger()

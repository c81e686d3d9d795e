def log_exception(logger, message):
    """
    Logs the message together with the traceback of the exception being handled. Use it from an except block.
    """
    logger.info(message, exc_info=True)

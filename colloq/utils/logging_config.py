"""Logging configuration for the application."""

import logging
import sys

CONSOLE_HANDLER_NAME = 'colloq-console'

def setup_logging():
    """Configure logging for the application. Safe to call more than once."""
    # Create a formatter
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    
    # Create a console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.set_name(CONSOLE_HANDLER_NAME)
    
    # Configure the root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.INFO)
    if not any(handler.get_name() == CONSOLE_HANDLER_NAME for handler in root_logger.handlers):
        root_logger.addHandler(console_handler)
    
    # Set higher log levels for noisy components
    logging.getLogger('sqlalchemy.engine').setLevel(logging.WARNING)
    logging.getLogger('httpx').setLevel(logging.WARNING)
    
    # Configure specific loggers
    loggers = [
        'colloq.new_event_handler',
        'colloq.accounts',
        'colloq.registrations',
    ]
    
    for logger_name in loggers:
        logger = logging.getLogger(logger_name)
        logger.setLevel(logging.INFO)
        # Don't add handler here since it's already handled by root logger

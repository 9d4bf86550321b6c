"""Logging utility for the waitlist service"""
import logging
import os
import sys

# Configure logging
log_level = os.environ.get('LOG_LEVEL', 'INFO').upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout)
    ]
)

logger = logging.getLogger('interview_lens')

def log_error(message: str, error: Exception = None):
    """Log error with optional exception"""
    if error:
        logger.error(f"{message}: {str(error)}", exc_info=error)
    else:
        logger.error(message)

def log_info(message: str):
    """Log info"""
    logger.info(message)

"""Console logging setup for command-line use."""

import logging
import logging.config

LOG_FORMAT = '%(levelname)s %(name)s: %(message)s'


def configure_logging(level: str = 'WARNING'):
    """Route log records from the converter packages to stderr."""
    level = level.upper()
    logging.config.dictConfig({
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'console': {'format': LOG_FORMAT},
        },
        'handlers': {
            'stderr': {
                'class': 'logging.StreamHandler',
                'formatter': 'console',
                'stream': 'ext://sys.stderr',
            },
        },
        'loggers': {
            name: {'handlers': ['stderr'], 'level': level, 'propagate': False}
            for name in ('core', 'adapters', 'cli')
        },
    })

from typing import Optional
import logging
import logging.config


class UserFilter(logging.Filter):
    def filter(self, record):
        if not hasattr(record, 'user'):
            record.user = 'SYSTEM'  # Set default user if not provided
        return True


def build_logging_config(log_file: Optional[str] = None, level: str = 'INFO') -> dict:
    handlers = ['console']
    config = {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'standard': {
                'format': '%(asctime)s - %(name)s - %(levelname)s - %(user)s - %(message)s'
            },
        },
        'filters': {
            'user_filter': {
                '()': UserFilter,
            },
        },
        'handlers': {
            'console': {
                'level': level,
                'class': 'logging.StreamHandler',
                'formatter': 'standard',
                'filters': ['user_filter']
            },
        },
        'loggers': {},
    }
    if log_file:
        config['handlers']['file'] = {
            'level': level,
            'class': 'logging.FileHandler',
            'filename': log_file,
            'formatter': 'standard',
            'filters': ['user_filter']
        }
        handlers = ['file', 'console']
    for name in ('use_cases', 'infrastructure', 'events', 'runtime'):
        config['loggers'][name] = {
            'handlers': handlers,
            'level': level,
            'propagate': False,
        }
    config['loggers'][''] = {
        'handlers': handlers,
        'level': level,
        'propagate': True,
    }
    return config


def configure_logging(log_file: Optional[str] = None, level: str = 'INFO') -> None:
    # Not applied on import, a library user keeps their own logging setup
    logging.config.dictConfig(build_logging_config(log_file, level))

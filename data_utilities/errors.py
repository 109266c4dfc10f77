class DataUtilitiesError(Exception):
    """Base class for package errors"""
    pass


class ConfigError(DataUtilitiesError):
    """Invalid or unreadable word-exceptions configuration"""
    pass

from src.utils.logger import get_logger


class BaseService:
    """Base service class with a logger named after the concrete service."""

    def __init__(self):
        self.logger = get_logger(self.__class__.__name__)

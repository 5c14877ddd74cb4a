from genetic.utils.logger_setup import setup_logger

__all__ = ["setup_logger"]

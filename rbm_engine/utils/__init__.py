from .logging_utils import setup_logger
from .seed import set_seed

__all__ = ["setup_logger", "set_seed"]

from .command import run_command_line, split_pipeline
from .gateway import CommandConverter, ConversionGateway

__all__ = ["CommandConverter", "ConversionGateway", "run_command_line", "split_pipeline"]

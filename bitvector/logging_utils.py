"""
bitvector Logging Utilities

Initialization of the package logger, JSON-encoded logging of vector
operations, and a timing decorator for performance measurements.
"""

import os
import json
import time
import logging
import functools
from datetime import datetime
from typing import Any, Callable, Dict, Optional

import numpy as np

from .bit import Bit
from .bit_vector import BitVector
from .double_vector import DoubleVector

LEVEL_MAP = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR
}

# Custom JSON encoder to handle NumPy arrays and vector types
class BitVectorJSONEncoder(json.JSONEncoder):
    def default(self, obj):
        if isinstance(obj, np.ndarray):
            if obj.size > 10:  # Only show a few elements for large arrays
                return f"ndarray(shape={obj.shape}, sample=[{', '.join(map(str, obj.flatten()[:3]))}...])"
            return obj.tolist()
        if isinstance(obj, np.generic):
            return obj.item()
        if isinstance(obj, Bit):
            return int(obj)
        if isinstance(obj, BitVector):
            return {
                "dimensionality": obj.dimensionality(),
                "set_bits": obj.set_bits(),
                "identifier": obj.identifier
            }
        if isinstance(obj, DoubleVector):
            return {
                "dimensionality": obj.dimensionality(),
                "values": self.default(obj.get_vector()),
                "identifier": obj.identifier
            }
        if isinstance(obj, datetime):
            return obj.isoformat()
        if isinstance(obj, set):
            return sorted(obj)
        return super().default(obj)

def initialize_logger(log_path: Optional[str] = None, log_level: str = "info") -> logging.Logger:
    """
    Initialize the logging system.

    Args:
        log_path (str, optional): Directory where log files should be stored.
                                  Without it only console output is configured.
        log_level (str): Minimum log level to record. Options include:
                         "debug", "info", "warning", "error".

    Returns:
        logging.Logger: Configured logger object.
    """
    level = LEVEL_MAP.get(log_level.lower(), logging.INFO)

    logger = logging.getLogger("bitvector.main")
    logger.setLevel(level)

    # Clear existing handlers
    if logger.handlers:
        logger.handlers.clear()

    if log_path:
        os.makedirs(log_path, exist_ok=True)
        log_file = os.path.join(log_path, f"bitvector_{datetime.now().strftime('%Y%m%d')}.log")
        file_handler = logging.FileHandler(log_file)
        file_formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                                          datefmt='%Y-%m-%d %H:%M:%S')
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s',
                                         datefmt='%H:%M:%S')
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    logger.info("Logging system initialized with level: %s", logging.getLevelName(level))

    return logger

def log_vector_operation(
    logger: logging.Logger,
    operation_type: str,
    inputs: Dict[str, Any],
    outputs: Dict[str, Any],
    metadata: Optional[Dict[str, Any]] = None
) -> Optional[str]:
    """
    Log a vector operation as a single JSON line at debug level.

    Args:
        logger (logging.Logger): Logger to write to.
        operation_type (str): Type of vector operation (e.g., "combine", "negate").
        inputs (Dict[str, Any]): Input vectors and parameters.
        outputs (Dict[str, Any]): Output vectors and results.
        metadata (Dict[str, Any], optional): Additional information such as timing.

    Returns:
        str: The logged message, or None if debug logging is disabled.
    """
    if not logger.isEnabledFor(logging.DEBUG):
        return None

    log_entry = {
        "timestamp": datetime.now().isoformat(),
        "operation_type": operation_type,
        "inputs": inputs,
        "outputs": outputs,
        "metadata": metadata or {}
    }

    log_message = json.dumps(log_entry, cls=BitVectorJSONEncoder)
    logger.debug(log_message)
    return log_message

def log_performance_metrics(
    logger: logging.Logger,
    operation: str,
    execution_time: float,
    metrics: Dict[str, Any]
) -> None:
    """
    Log performance metrics for an operation.

    Args:
        logger (logging.Logger): Logger to write to.
        operation (str): Name of the operation being measured.
        execution_time (float): Execution time in seconds.
        metrics (Dict[str, Any]): Additional metrics specific to the operation.
    """
    logger.info(
        f"Performance - {operation} - Time: {execution_time:.4f}s - "
        f"Metrics: {json.dumps(metrics, cls=BitVectorJSONEncoder)}"
    )

def timer(logger: logging.Logger, operation_name: str) -> Callable:
    """
    Function decorator to time and log the execution of functions.

    Args:
        logger (logging.Logger): Logger receiving the performance line.
        operation_name (str): Name of the operation to log.

    Returns:
        Callable: Decorator function that times and logs the execution.
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            start_time = time.time()
            result = func(*args, **kwargs)
            execution_time = time.time() - start_time

            log_performance_metrics(
                logger,
                operation_name,
                execution_time,
                {"function": func.__name__}
            )

            return result
        return wrapper
    return decorator

"""Decorators for the editpad application."""

import logging
import time
from functools import wraps
from typing import Callable

logger = logging.getLogger(__name__)


def measure_time(method: Callable):
	"""Decorator to measure the time taken by a function in seconds.

	Time measurement only occurs when debug logging is enabled. If debug logging is disabled, the function is called directly without timing.

	Args:
		method: The function to decorate.

	Returns:
		The decorated function.

	Note:
		When debug logging is enabled, logs the execution time with format:
		"{module_name}.{qualname} took {seconds:.3f} seconds"
	"""

	@wraps(method)
	def wrapper(*args, **kwargs):
		if not logger.isEnabledFor(logging.DEBUG):
			return method(*args, **kwargs)
		start = time.perf_counter()
		module_name = method.__module__
		qualname = method.__qualname__
		result = method(*args, **kwargs)
		logger.debug(
			f"{module_name}.{qualname} took {time.perf_counter() - start:.3f} seconds"
		)
		return result

	return wrapper

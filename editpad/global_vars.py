"""Global variables for the editpad application.

This module contains variables shared between different parts of the application, such as the portable user data directory and the parsed command-line arguments.
"""

import sys
from pathlib import Path

# base directory of the application executable
base_path = Path(
	sys.executable if getattr(sys, "frozen", False) else __file__
).parent

# application configuration inside the base directory (useful for portable installations)
user_data_path = (
	base_path / Path("user_data")
	if (base_path / "user_data").exists()
	else None
)

# command-line arguments parsed by the application
args = None

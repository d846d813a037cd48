"""Running compiled programs (permissions and execution after compilation)."""

from .execution import execute_binary_executable
from .permissions import apply_file_executable_permissions

__all__ = [
    "apply_file_executable_permissions",
    "execute_binary_executable",
]

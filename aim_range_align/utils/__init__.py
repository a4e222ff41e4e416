"""
Utility modules for the Aim & Range alignment command
"""
from .pid_controller import PID
from .helpers import input_modulus

__all__ = ['PID', 'input_modulus']

"""
config.py
Defines the RollConfig dataclass, which centralizes the constants of a die-roll run.
Related modules:
- frequency.py: Uses trials and faces to drive the trial loop.
- entropy.py: Uses entropy_device as the randomness source path.
"""

from dataclasses import dataclass

@dataclass(frozen=True)
class RollConfig:
    """
    Centralizes the fixed parameters of a die-roll simulation.
    Fields:
        trials (int): Number of die rolls to simulate.
        faces (int): Number of faces on the die.
        entropy_device (str): Path of the OS entropy device to read.
    """
    trials: int = 10_000
    faces: int = 6
    entropy_device: str = "/dev/urandom"

"""
dice.py
Defines the face derivation used to turn a random integer into a die roll.
Related modules:
- frequency.py: Calls die_face once per trial.
"""


def die_face(random_int: int, faces: int = 6) -> int:
    """
    Map a non-negative random integer onto a die face.
    Args:
        random_int (int): Random value drawn from the entropy source.
        faces (int): Number of faces on the die.
    Returns:
        int: Die face (1-faces).
    """
    return random_int % faces + 1

"""
Labels for clarity.
"""

from typing import List, Literal

Digit = int  # 0 -> 9
Code = List[Digit]  # 3, 5 or 7 digits
GameStatus = Literal["in_progress", "won", "lost"]

"""
Text-based Mastermind: guess a secret sequence of digits in 10 attempts.
"""

__version__ = "1.0.0"

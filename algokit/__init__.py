"""Functions for classic algorithm exercises on numbers, strings, arrays, linked lists, trees and graphs."""

__version__ = "0.1.0"
__all__ = ["arrays", "graphs", "numbers", "strings", "structures"]
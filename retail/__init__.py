"""
Консольный клиент базы данных розничной сети.
"""

__version__ = "1.0.0"

"""
Main module entry point.

This allows running the worker as: python -m sunrise_alarm.main
"""

from .worker import main

if __name__ == "__main__":
    main()

"""
Shared pytest setup: make ``minilang`` and the ``mini`` runner importable
from a plain checkout, without installing the project first.
"""
import os
import sys

ROOT = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

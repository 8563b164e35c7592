"""contactbook command line: click entry point and interactive menu."""
from __future__ import annotations

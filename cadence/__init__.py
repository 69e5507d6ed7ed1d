# cadence/__init__.py
# Cadence: terminal presentation timer w/ per-section schedule tracking

__version__ = "0.1.0"

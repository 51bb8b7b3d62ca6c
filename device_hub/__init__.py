"""
Device Hub - registry and telemetry sink for networked devices.
"""
__version__ = "1.0.0"

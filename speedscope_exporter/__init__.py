"""
Modules
-------

.. automodule:: speedscope_exporter.exporter
   :members:

"""

from .exporter import SpeedScopeExporter, export_profile
from .model.stack_source import StackSource, MemoryStackSource, CallStackIndex, FrameIndex

__version__ = "1.0.0"

"""Select files in one place, then copy or move them somewhere else."""

__version__ = "0.2.0"
"""Parts for managing multiple installed SDK versions: versions, archives, shells, shims and records."""

__version__ = "0.5.4"
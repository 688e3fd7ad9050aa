"""penalcalc — penal sentence arithmetic and dosimetry memorials."""

__version__ = "0.1.0"

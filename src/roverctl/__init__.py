"""roverctl: rover navigation on an unbounded integer grid."""

__version__ = "0.1.0"

"""Generate strict-style cantus firmi, realize them in a mode and write them as MusicXML."""

__version__ = "0.1.0"
"""Building blocks for chroma-based audio fingerprinting: framing, Bark bands, silence trimming, rectangle filters, simhash and preset configurations."""

__version__ = "1.6.0"
"""Package-wide defaults. Functions take these as keyword defaults, so callers override per call."""

# SegmentFinder search space and alignment tolerance (in position units)
MAX_SEGMENTS = 100
ALIGNMENT_TOLERANCE = 1.0

POSITION_MIN = 0.0
POSITION_MAX = 100.0

BYTE_MAX = 255
ALPHA_MAX = 1.0

# Rec. 709 luma, as used by the grayscale feColorMatrix
LUMINANCE_COEFFS = (0.2126, 0.7152, 0.0722)

SVG_NS = "http://www.w3.org/2000/svg"
DEFAULT_FILTER_ID = "gradient-map"

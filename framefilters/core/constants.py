"""
Constants and default values for the filter family.
"""
import cv2

# Edge filter (Canny)
EDGE_LOW_THRESHOLD = 50.0
EDGE_HIGH_THRESHOLD = 150.0  # hysteresis linking threshold
EDGE_APERTURE_SIZE = 3

# Gray scratch slots used by the edge filter
EDGE_PLANE_SLOTS = (0, 1, 2)
EDGE_RESULT_SLOTS = (3, 4, 5)

# Color map
DEFAULT_COLORMAP = cv2.COLORMAP_JET

# Distortion filter
DISTORTION_COEFF_COUNT = 5  # k1, k2, p1, p2, k3
DISTORTION_CENTER_WIDTH = 0.5
DISTORTION_CENTER_HEIGHT = 0.5
DISTORTION_COEFFICIENT = 0.5  # barrel preset strength
DISTORTION_MAP_TYPE = cv2.CV_32FC1
REMAP_INTERPOLATION = cv2.INTER_LINEAR
REMAP_BORDER_MODE = cv2.BORDER_CONSTANT  # outliers filled with REMAP_BORDER_VALUE
REMAP_BORDER_VALUE = (0, 0, 0)

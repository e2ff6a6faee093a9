# No dependencies
CHANNEL_MAX = 255
BYTE_MASK = 0xFF
HEX_MASK = 0xFFFFFF
ALPHA_OPAQUE = 255

HUE_360 = 360
HUE_SECTOR = 60
HUE_HALF_TURN = 180

WEBSAFE_LEVELS = (0x00, 0x33, 0x66, 0x99, 0xCC, 0xFF)
# Upper bound (inclusive) of the byte range snapping to the matching level
WEBSAFE_THRESHOLDS = (0x19, 0x4C, 0x7F, 0xB2, 0xE5, 0xFF)

# Which of (c, x, 0) lands in (r, g, b) for each 60 degree hue sector
SECTOR_PERMUTATIONS = (
    (0, 1, 2),
    (1, 0, 2),
    (2, 0, 1),
    (2, 1, 0),
    (1, 2, 0),
    (0, 2, 1),
)

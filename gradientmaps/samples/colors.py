# Reference RGBA values as parse_color returns them
RED = (255, 0, 0, 1.0)
GREEN = (0, 128, 0, 1.0)
LIME = (0, 255, 0, 1.0)
BLUE = (0, 0, 255, 1.0)
YELLOW = (255, 255, 0, 1.0)
BLACK = (0, 0, 0, 1.0)
WHITE = (255, 255, 255, 1.0)
GOLD = (255, 215, 0, 1.0)
TRANSPARENT = (0, 0, 0, 0.0)

# Declarations with known resolutions
SCENARIOS = {
    "red, blue, green": [(RED, 0.0), (BLUE, 50.0), (GREEN, 100.0)],
    "red 10%, blue 10%, green": [(RED, 0.0), (RED, 10.0), (BLUE, 10.0), (GREEN, 100.0)],
    "#ff0000 0%, #0000ff 100%": [(RED, 0.0), (BLUE, 100.0)],
    "red, blue 25%, green 75%, yellow": [(RED, 0.0), (BLUE, 25.0), (GREEN, 75.0), (YELLOW, 100.0)],
    "red": [(RED, 0.0), (RED, 100.0)],
}

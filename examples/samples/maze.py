from convchain import *

MAZE = Bitmap.from_chars(
    """
    0000000000000000
    0111111101111110
    0100000101000010
    0101110101011010
    0101000001010010
    0101011111010110
    0100010000010000
    0111010111111110
    0001010100000010
    0111010101111010
    0100010101000010
    0101110101011110
    0101000100010000
    0101111111010110
    0100000000010010
    0111111111110110
    """
)

run_example("maze", [64], sample=MAZE)

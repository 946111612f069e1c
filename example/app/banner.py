PALETTE = [
    [(255, 0, 0), (0, 255, 0), (0, 0, 255)],
    [(255, 255, 255), (0, 0, 0), (128, 128, 128)],
]


def render():
    height = len(PALETTE)
    width = len(PALETTE[0])
    header = "P6\n{} {}\n255\n".format(width, height).encode("ascii")
    pixels = bytes(channel for row in PALETTE for pixel in row for channel in pixel)
    return header + pixels

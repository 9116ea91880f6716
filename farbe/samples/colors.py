from ..colors.rgba import RGBA

RED = RGBA(255, 0, 0)
GREEN = RGBA(0, 255, 0)
BLUE = RGBA(0, 0, 255)
YELLOW = RGBA(255, 255, 0)
CYAN = RGBA(0, 255, 255)
MAGENTA = RGBA(255, 0, 255)
WHITE = RGBA(255, 255, 255)
BLACK = RGBA(0, 0, 0)
GRAY = RGBA(128, 128, 128)

# RGBA bytes -> (h as a fraction of a turn, s, l)
SAMPLES_RGBA_HSLA = {
    (255, 0, 0, 255): (0.0, 1.0, 0.5),
    (0, 255, 0, 255): (120 / 360, 1.0, 0.5),
    (0, 0, 255, 255): (240 / 360, 1.0, 0.5),
    (255, 255, 0, 255): (60 / 360, 1.0, 0.5),
    (0, 255, 255, 255): (180 / 360, 1.0, 0.5),
    (255, 0, 255, 255): (300 / 360, 1.0, 0.5),
    (128, 0, 0, 255): (0.0, 1.0, 128 / 510),
    (255, 128, 0, 255): (30.1176 / 360, 1.0, 0.5),
    (75, 0, 130, 255): (274.6154 / 360, 1.0, 130 / 510),
    (255, 192, 203, 255): (349.5238 / 360, 1.0, 447 / 510),
    (165, 42, 42, 128): (0.0, 123 / 207, 207 / 510),
    (64, 224, 208, 255): (174.0 / 360, 160 / 222, 288 / 510),
}

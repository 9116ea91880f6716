"""Basic farbe usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from farbe import RGBA, HSLA, rgb, from_hex


def demonstrate_rgba() -> None:
    # Create colors using different constructors.
    red = rgb(255, 0, 0)
    blue = from_hex(0x0000FFFF)
    green = RGBA.from_hsla(120 / 360, 1.0, 0.5, 1.0)
    print("Green from HSLA:", green)

    purple = red.blend(blue)
    print("Purple (blended):", purple, purple.to_css_hex())

    red_hsla = red.to_hsla()
    print("Red (converted back):", RGBA.from_hsla(red_hsla.h, red_hsla.s, red_hsla.l, red_hsla.a))


def demonstrate_hsla() -> None:
    blue = HSLA(240 / 360, 1.0, 0.5)
    gray = blue.grayscale()
    faded = blue.opacity(0.5)

    blue.fade_out(0.5)

    print(f"Gray: h={gray.h:.3f}, s={gray.s:.3f}, l={gray.l:.3f}, a={gray.a:.3f}")
    print(f"Faded: h={faded.h:.3f}, s={faded.s:.3f}, l={faded.l:.3f}, a={faded.a:.3f}")
    print(f"Faded out blue: h={blue.h:.3f}, s={blue.s:.3f}, l={blue.l:.3f}, a={blue.a:.3f}")


if __name__ == "__main__":
    demonstrate_rgba()
    demonstrate_hsla()

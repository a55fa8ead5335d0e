from convchain.bitmap import Bitmap
from convchain.patterns import (
    MAX_PATTERN_SIZE,
    build_weights,
    extract_pattern,
    pattern_index,
    reflect,
    rotate,
    symmetries,
)
from convchain.sampler import ConvChain, apply_changes, generate_base_field
import numpy as np
import argparse
import time

# Black and light peach from https://pico-8.fandom.com/wiki/Palette
PALETTE = [(0, 0, 0), (255, 241, 232)]

DEMO_SAMPLE = Bitmap.from_chars(
    """
    1111111111
    1111111111
    1111111111
    1110000111
    0000000000
    0000000000
    1110000111
    1111111111
    1111111111
    1111111111
    """
)


def render_text(bitmap, on="█", off=" "):
    return "\n".join("".join(on if v else off for v in row) for row in bitmap.data)


def save_image(filename, bitmap, palette=PALETTE, scale=1):
    from PIL import Image

    buffer = np.array(palette, dtype=np.uint8)[bitmap.data.astype(np.uint8)]
    if scale > 1:
        buffer = buffer.repeat(scale, axis=0).repeat(scale, axis=1)
    Image.fromarray(buffer).save(filename)


def load_sample(filename):
    if filename.endswith(".txt"):
        with open(filename) as file:
            return Bitmap.from_chars(file.read())

    from PIL import Image

    image = np.asarray(Image.open(filename).convert("L"))
    return Bitmap(image.shape[1], image.shape[0], image >= 128)


def run_example(name, default_dims, sample=DEMO_SAMPLE):
    parser = argparse.ArgumentParser()
    parser.add_argument("-d", "--dims", nargs="+", type=int, default=default_dims)
    parser.add_argument("-n", "--pattern-size", type=int, default=3)
    parser.add_argument("-t", "--temperature", type=float, default=0.5)
    parser.add_argument("-c", "--changes", type=int, default=3000)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--sample", default=None)
    parser.add_argument("-i", "--image", action=argparse.BooleanOptionalAction)
    parser.add_argument("--text", action=argparse.BooleanOptionalAction, default=True)
    parser.add_argument("--scale", type=int, default=4)
    args = parser.parse_args()
    print(args)

    if len(args.dims) > 2:
        parser.error("dims takes a width and an optional height")
    if len(args.dims) == 1:
        args.dims = args.dims * 2
    width, height = args.dims

    if args.sample is not None:
        sample = load_sample(args.sample)

    model = ConvChain(sample, rng=np.random.default_rng(args.seed).random)

    start_time = time.time()
    field = model.generate(
        width, height, args.pattern_size, args.temperature, args.changes
    )
    print(
        "{}x{} sample / {}x{} field / {} iterations => {:.2f}ms".format(
            sample.width,
            sample.height,
            width,
            height,
            args.changes,
            (time.time() - start_time) * 1000.0,
        )
    )

    if args.text:
        print(render_text(field))

    if args.image:
        filename = f"{name}.png"
        print(f"writing {filename}")
        save_image(filename, field, scale=args.scale)

    return field

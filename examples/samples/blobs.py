from convchain import *

BLOBS = Bitmap.from_chars(
    """
    ..........##....
    ...####...##....
    ..######........
    ..######....###.
    ...####....#####
    ...........#####
    .##.........###.
    ####............
    ####.....##.....
    .##.....####....
    ........####....
    .........##.....
    ....###.........
    ...#####.....##.
    ....###.....####
    .............##.
    """
)

run_example("blobs", [64], sample=BLOBS)

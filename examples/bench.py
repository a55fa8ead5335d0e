from convchain import *
import time

sizes = [64, 256, 1024, 2048]
s = True

for size in sizes:
    start_time = time.time()
    model = ConvChain(DEMO_SAMPLE)

    field = model.initialize_field(size, size)
    model.iterate(field, 3, 0.5, 2000)

    print(
        "10x10 sample / {0}x{0} field / 2000 iterations => {1:.2f}ms".format(
            size, (time.time() - start_time) * 1000.0
        )
    )

    # Keep a dependency on the output.
    s = s ^ field[1, 0]

print(s)

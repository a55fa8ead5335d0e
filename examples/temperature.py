import sys
import numpy as np
from convchain import ConvChain, DEMO_SAMPLE, render_text

temperatures = [float(t) for t in sys.argv[1:]] or [0.1, 0.5, 1.0, 2.0]

for temperature in temperatures:
    model = ConvChain(DEMO_SAMPLE, rng=np.random.default_rng(0).random)
    field = model.generate(48, 16, 3, temperature, 3000)
    print(f"temperature {temperature}")
    print(render_text(field))
    print()

from convchain import *

run_example("window", [48, 16])

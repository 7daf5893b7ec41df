# flocksim

An interactive boids flocking simulation. Every boid steers by the three
classic rules (separation, alignment and cohesion) with a limited field of
view and a cap on how many neighbours it considers. Neighbours can be found
with one of three strategies, so their cost can be compared:

- `hash`: a uniform grid of cells (spatial hashing),
- `qtree`: a quadtree rebuilt every frame,
- `brute`: every boid checks every other boid.

The flock can optionally be grouped with k-means clustering, with each
cluster drawn in its own colour. While it runs, the simulation writes timing
statistics (average and minimum FPS, average build, retrieval and check
times in microseconds) to a CSV file named after the method and the number
of boids, adding a row every ten seconds. The file is created in the parent
of the current directory, for example `../HASH_12000.csv`, and is
overwritten on each run.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Running

```
flocksim
```

opens a 1200×800 window with 12 000 boids using the spatial hash. The
world wraps around at the edges.

Hold the left mouse button to pull boids within 200 pixels towards the
cursor, and the right mouse button to push them away. Close the window or
press Escape to quit.

## Options

| Option | Meaning | Default |
| --- | --- | --- |
| `-width N` | window width in pixels | 1200 |
| `-height N` | window height in pixels | 800 |
| `-boids N` | number of boids | 12000 |
| `-method hash\|qtree\|brute` | neighbour search strategy | `hash` |
| `-debug` | draw the grid or tree and highlight the first boid and its neighbours | off |
| `-k_mean` | recolour the flock by k-means clusters about every 180 frames | off |
| `-k_mean_clusters N` | number of clusters | 3 |
| `-k_mean_max_iter N` | k-means iterations per run | 3 |
| `-sep_range R` | separation radius | 10 |
| `-ali_range R` | alignment radius (also sets how many grid cells are scanned) | 60 |
| `-coh_range R` | cohesion radius, and the radius within which neighbours are sought | 60 |
| `-sep_str F` | separation strength | 4.0 |
| `-ali_str F` | alignment strength | 1.5 |
| `-coh_str F` | cohesion strength | 1.5 |
| `-max_vel F` | maximum speed | 2.0 |
| `-max_force F` | maximum steering force per frame | 0.10 |
| `-fov DEG` | field of view in degrees | 120 |
| `-cell_size N` | grid cell size for the spatial hash | 25 |
| `-max_tree N` | accepted and stored, but the quadtree always holds up to 10 boids per node | 30 |
| `-max_neighbors N` | neighbours considered per boid | 10 |

An unknown `-method` value is an error. Any other unrecognised argument, or
an option given without its value, is reported on stderr and ignored. A
value that is not a number raises an error.

Example, comparing the quadtree with a smaller flock in debug view:

```
flocksim -method qtree -boids 3000 -debug
```

## Library use

The building blocks live in their own modules and can be used without a
window:

- `flocksim.geometry`: `Vec2` and `Rect`,
- `flocksim.boid`: the `Boid` record, `apply_boid_behaviors` and
  `fill_boids`,
- `flocksim.hash_table.HashTable` and `flocksim.quad_tree.QuadTree`,
- `flocksim.k_means`: `k_means` and `generate_random_colors`,
- `flocksim.config`: `SimulationConfig`, `parse_args` and `parse_method`,
- `flocksim.logger.PerformanceLogger`, a context manager writing the CSV
  statistics,
- `flocksim.simulation.Simulation`, which advances the flock one frame at a
  time with `step(mouse_position=None, attract=True)`.

```python
import random

from flocksim.config import SimulationConfig
from flocksim.methods import Method
from flocksim.simulation import Simulation

config = SimulationConfig(boid_count=500, method=Method.TREE)
simulation = Simulation(config, random.Random(1))
for _ in range(100):
    simulation.step()
print(simulation.boids[0].position)
```
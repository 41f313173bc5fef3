"""
Microbenchmark: recompute time vs number of charges.
Run:
  python benchmarks/bench_recompute.py
"""
import time
from charge_sim import Bounds, Simulator, SimulatorConfig, VisualizationMode
from charge_sim.profiler import Profiler

def run(n: int, mode: VisualizationMode, reps: int = 5):
    prof = Profiler()
    sim = Simulator(
        SimulatorConfig(bounds=Bounds(800, 500), mode=mode, seed=12345),
        profiler=prof,
    )
    for i in range(n):
        sim.add_charge("positive" if i % 2 == 0 else "negative", 1)

    # warmup
    sim.recompute()

    t0 = time.perf_counter()
    for _ in range(reps):
        sim.recompute()
    t1 = time.perf_counter()
    return (t1 - t0) / reps, prof.stats.summary()

if __name__ == "__main__":
    for mode in VisualizationMode:
        for n in [1, 2, 5, 10, 20]:
            per_call, summary = run(n, mode)
            print(f"{mode.value:14s} N={n:3d}  recompute={1e3*per_call:8.2f} ms")
        print()

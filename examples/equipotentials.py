from charge_sim import Bounds, Simulator, SimulatorConfig, VisualizationMode
from charge_sim.renderer import DebugRenderer

sim = Simulator(SimulatorConfig(bounds=Bounds(600, 400), mode=VisualizationMode.EQUIPOTENTIAL, seed=7))
sim.add_charge("positive", 2)
sim.add_charge("negative", 1)
sim.add_charge("negative", 1)

DebugRenderer().render_snapshot(sim.recompute())

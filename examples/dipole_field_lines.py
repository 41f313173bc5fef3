from charge_sim import Bounds, Simulator, SimulatorConfig
from charge_sim.logging_config import setup_logging
from charge_sim.renderer import SVGPathRenderer

setup_logging()

# Default demo pair: +1 upper left, -1 lower right
sim = Simulator(SimulatorConfig(bounds=Bounds(800, 500), field_strength=0.5), demo=True)
snapshot = sim.recompute()

renderer = SVGPathRenderer()
renderer.render_snapshot(snapshot)

with open("dipole_field_lines.svg", "w", encoding="utf-8") as f:
    f.write(renderer.to_svg())

print("field lines", len(snapshot.field_lines))

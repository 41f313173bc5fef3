from charge_sim.calculator import calculate

# Electron and proton at the Bohr radius
res = calculate("1.6 × 10⁻¹⁹", "-1.6 × 10⁻¹⁹", "5.3 × 10⁻¹¹")
print(res.formatted, "-", res.label)

# Two small positive charges 15 cm apart
res = calculate("2.0e-6", "3.0e-6", "0.15")
print(res.formatted, "-", res.label)

import numpy as np

from mcnemar.plot import plot_power_curve

TABLE = [[101, 59], [121, 33]]

plot_power_curve(TABLE, alphas=np.linspace(0.001, 0.2, 40)).save(
    "img/power-curve.png", width=12, height=8, units="in", dpi=300
)

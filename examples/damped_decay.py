from pendulum_sim import PendulumParameters
from pendulum_sim.core import simulate_trajectory, period
import numpy as np

params = PendulumParameters(length=1.0, gravity=9.81, damping=0.2)
t, X = simulate_trajectory(params, dt=1/60, n_steps=60 * 30)

theta = X[:, 0]
print("small-angle period:", period(params))
for sec in range(0, 31, 5):
    k = sec * 60
    print(f"t={t[k]:5.1f}s  theta={np.degrees(theta[k]):7.2f} deg")

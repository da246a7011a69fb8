import numpy as np
import matplotlib.pyplot as plt
from scipy_polint.interpolate import polint, polyvl, PolynomialInterpolator

# define a function
f = lambda x: np.arctan(x)

# sample points
# x = np.array([-1, 0.25, 1])
# x = np.array([-2, -1, 0.25, 1, 2.5])
num = 5
# num = 20
x = np.linspace(-1, 1, num=num)

# evaluate function values
y = f(x)

# get the divided difference coefficients
c = polint(x, y)

# evaluate on new data points, extrapolating a bit
x_new = np.linspace(1.25 * min(x), 1.25 * max(x), num=100)
y_new = polyvl(x_new, x, c)

# the same polynomial built point by point from noisy, repeated samples
rng = np.random.default_rng(0)
poly = PolynomialInterpolator(abscissa_threshold=0.05)
for xi in np.repeat(x, 3):
    xi = xi + rng.uniform(-0.01, 0.01)
    poly.insert(xi, f(xi))
poly.interpolate()
print(poly)

fig, ax = plt.subplots(2, 1)

ax[0].plot(x_new, f(x_new), "-k", label="f(x)")
ax[0].plot(x, y, "bo", label="f(x_i)")
ax[0].plot(x_new, y_new, label="P(x)")
ax[0].plot(poly.x, poly.y, "rx", label="merged samples")
ax[0].plot(x_new, poly(x_new), "--r", label="P_merged(x)")
ax[0].grid()
ax[0].legend()

ax[1].plot(x_new, y_new - f(x_new), label="P(x) - f(x)")
ax[1].plot(x_new, poly(x_new) - f(x_new), "--r", label="P_merged(x) - f(x)")
ax[1].grid()
ax[1].legend()

plt.show()

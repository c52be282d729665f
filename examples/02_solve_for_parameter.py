# ---
# jupyter:
#   jupytext:
#     text_representation:
#       extension: .py
#       format_name: percent
#       format_version: '1.3'
#   kernelspec:
#     display_name: Python 3
#     language: python
#     name: python3
# ---

# %% [markdown]
# # 02 — Inverse Analysis: Solving for an Unknown Input
#
# Instead of checking a given section, find the value of one input that
# gives a required safety factor:
#
# | Unknown                  | Safety factor | Method       |
# |--------------------------|---------------|--------------|
# | **Water level**          | Overturning   | Bisection    |
# | **Base width**           | Overturning   | Bisection    |
# | **Friction coefficient** | Sliding       | Closed form  |
#
# **Module**: `pydam.solver`

# %%
from pydam import DamInputs, SolveFor, SolveRequest, calculate_stability

base = DamInputs(
    profile="triangle",
    base_width=6.0,
    height=8.0,
    water_level=6.0,
    concrete_density=23.5,
    water_density=1000.0,
    water_density_unit="kg/m³",
    friction_coefficient=0.7,
)

# %% [markdown]
# ## 1. Minimum base width for FS_o = 1.5

# %%
r = calculate_stability(base.replace(solve=SolveRequest(SolveFor.BASE_WIDTH, 1.5)))
print(r.steps[0].explanation)
print(f"b = {r.solved_parameter.value:.3f} m, FS_o = {r.safety_factor_overturning:.3f}")

# %% [markdown]
# ## 2. Maximum water level for FS_o = 2.0

# %%
r = calculate_stability(base.replace(solve=SolveRequest(SolveFor.WATER_LEVEL, 2.0)))
print(r.steps[0].explanation)

# %% [markdown]
# ## 3. Required friction coefficient for FS_s = 1.5
#
# Brent's method can be selected for the iterative cases with
# ``method="brentq"``; the friction case is always solved directly.

# %%
r = calculate_stability(
    base.replace(solve=SolveRequest(SolveFor.FRICTION_COEFFICIENT, 1.5)),
    method="brentq",
)
print(f"μ = {r.solved_parameter.value:.4f}, FS_s = {r.safety_factor_sliding:.3f}")
